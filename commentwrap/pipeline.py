from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Callable, List, MutableSequence, Optional, Sequence, Tuple

from .utils.logging import get_logger, log_result
from .utils.io import line_ending, split_lines
from .model import Applied, ParsedLine, ReflowResult, Selection, SkipReason, Skipped
from .parse.line_classifier import classify_line
from .parse.comment_scanner import range_is_within_multiline_comment
from .convert.paragraphs import expand_paragraph, split_segments
from .convert.wrap import wrap_segments


WRAP_WIDTH = 80

Completion = Callable[[Optional[Exception]], None]


@dataclass
class ReflowConfig:
    width: int = WRAP_WIDTH
    strict: bool = False
    min_content_width: int = 1

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.min_content_width < 1:
            raise ValueError(f"min_content_width must be positive, got {self.min_content_width}")

    def content_width(self, leading: str) -> int:
        return max(self.width - len(leading), self.min_content_width)


def _with_endings(lines: List[str], original: Sequence[str], buffer: Sequence[str]) -> List[str]:
    # Every new line but the last takes the terminator used around it; the
    # last keeps the final replaced line's, which may be none at end of file.
    endings = [line_ending(line) for line in original]
    inner = next((e for e in map(line_ending, chain(original, buffer)) if e), "")
    out = [line + inner for line in lines]
    if out:
        out[-1] = lines[-1] + endings[-1]
    return out


def _classify(lines: Sequence[str], strict: bool) -> List[Optional[ParsedLine]]:
    return [classify_line(line, strict=strict) for line in lines]


def plan_selection(
    buffer: Sequence[str],
    selection: Selection,
    config: Optional[ReflowConfig] = None,
) -> ReflowResult:
    """Work out the replacement for one selection without touching ``buffer``."""
    cfg = config or ReflowConfig()
    line_range = selection.line_range()

    if line_range.length < 1:
        return Skipped(SkipReason.EMPTY_SELECTION, line_range)
    if not line_range.within(len(buffer)):
        return Skipped(SkipReason.OUT_OF_BOUNDS, line_range)

    original = list(buffer[line_range.location:line_range.end])
    classified = _classify(original, cfg.strict)
    parsed = [p for p in classified if p is not None]
    if cfg.strict and len(parsed) < len(original):
        return Skipped(SkipReason.UNPARSEABLE, line_range)
    if not parsed:
        return Skipped(SkipReason.EMPTY_SELECTION, line_range)

    leadings = {p.leading for p in parsed}
    if len(leadings) != 1:
        # Comment and code lines, or two comment styles, were selected together.
        return Skipped(SkipReason.MIXED_LEADING, line_range)
    common_leading = parsed[0].leading

    if not common_leading.strip():
        if not range_is_within_multiline_comment(buffer, line_range):
            return Skipped(SkipReason.NOT_IN_COMMENT, line_range)

    line_range, extra = expand_paragraph(buffer, line_range, common_leading, strict=cfg.strict)
    parsed.extend(extra)
    original.extend(buffer[line_range.end - len(extra):line_range.end])

    wrapped = wrap_segments(split_segments(parsed), cfg.content_width(common_leading))
    final_lines = _with_endings([common_leading + line for line in wrapped], original, buffer)
    return Applied(line_range=line_range, original=original, lines=final_lines)


def reflow_selection(
    buffer: MutableSequence[str],
    selection: Selection,
    config: Optional[ReflowConfig] = None,
) -> ReflowResult:
    result = plan_selection(buffer, selection, config)
    log_result(get_logger(), result)
    if isinstance(result, Applied):
        buffer[result.line_range.location:result.line_range.end] = result.lines
    return result


def reflow(
    buffer: MutableSequence[str],
    selections: Sequence[Selection],
    config: Optional[ReflowConfig] = None,
    completion: Optional[Completion] = None,
) -> List[ReflowResult]:
    """Reflow each selection in order, editing ``buffer`` in place.

    Later selections see the buffer as left by earlier ones. Skipped
    selections leave the buffer untouched; ``completion`` is called once
    with ``None`` after all selections are processed.
    """
    results = [reflow_selection(buffer, selection, config) for selection in selections]
    if completion is not None:
        completion(None)
    return results


def reflow_text(
    text: str,
    selections: Optional[Sequence[Selection]] = None,
    config: Optional[ReflowConfig] = None,
) -> Tuple[str, List[ReflowResult]]:
    lines = split_lines(text)
    if selections is None:
        selections = [Selection.lines(0, max(len(lines) - 1, 0))]
    results = reflow(lines, selections, config)
    return "".join(lines), results
