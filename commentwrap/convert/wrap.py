from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .paragraphs import Paragraph, Segment


def wrap_one_line(text: str, width: int) -> Tuple[str, Optional[str]]:
    """Take one line of at most ``width`` characters off the front of ``text``.

    Returns the line and the remaining text, or ``None`` once everything fits.
    Breaks at the last space that keeps the line within ``width``, and a run
    of spaces at the break is dropped from both sides. A run of non-space
    characters longer than ``width`` is cut at ``width``.
    """
    if len(text) <= width:
        return text, None
    space = text.rfind(" ", 0, width + 1)
    line = text[:space].rstrip(" ") if space > 0 else ""
    if line:
        return line, text[space + 1:].lstrip(" ")
    return text[:width], text[width:].lstrip(" ")


def wrap_text(text: str, width: int) -> List[str]:
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    out: List[str] = []
    remainder: Optional[str] = text
    while remainder:
        line, remainder = wrap_one_line(remainder, width)
        out.append(line)
    return out


def wrap_paragraph(contents: Iterable[str], width: int) -> List[str]:
    return wrap_text(" ".join(c.rstrip(" ") for c in contents), width)


def wrap_segments(segments: Sequence[Segment], width: int) -> List[str]:
    out: List[str] = []
    for segment in segments:
        if isinstance(segment, Paragraph):
            out.extend(wrap_paragraph(segment.contents, width))
        else:
            out.append(segment.content)
    return out
