from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from ..model import LineRange, ParsedLine
from ..parse.line_classifier import classify_line


@dataclass
class Paragraph:
    contents: List[str] = field(default_factory=list)


@dataclass
class ParagraphBreak:
    content: str = ""


Segment = Union[Paragraph, ParagraphBreak]


def expand_paragraph(
    lines: Sequence[str],
    line_range: LineRange,
    common_leading: str,
    strict: bool = False,
) -> Tuple[LineRange, List[ParsedLine]]:
    """Extend ``line_range`` over the rest of the paragraph that follows it.

    Lines are absorbed while they classify with ``common_leading`` and have
    non-empty content. The buffer's final line is never absorbed.
    Returns the grown range and the parsed lines that were added.
    """
    added: List[ParsedLine] = []
    next_line = line_range.end
    while next_line < len(lines) - 1:
        parsed = classify_line(lines[next_line], strict=strict)
        if parsed is None:
            break
        if parsed.leading != common_leading:
            # end of the comment block
            break
        if parsed.is_blank:
            # paragraph break
            break
        added.append(parsed)
        line_range = line_range.grow()
        next_line += 1
    return line_range, added


def split_segments(parsed: Sequence[ParsedLine]) -> List[Segment]:
    segments: List[Segment] = []
    current: List[str] = []

    def flush():
        nonlocal current
        if current:
            segments.append(Paragraph(current))
        current = []

    for line in parsed:
        if line.is_blank:
            flush()
            segments.append(ParagraphBreak(line.content))
            continue
        current.append(line.content)
    flush()
    return segments
