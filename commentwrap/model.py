from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


@dataclass(frozen=True)
class ParsedLine:
    leading: str
    content: str

    @property
    def is_blank(self) -> bool:
        return not self.content

    def render(self) -> str:
        return self.leading + self.content


@dataclass(frozen=True)
class LineRange:
    """Half-open interval ``[location, location + length)`` of buffer lines."""

    location: int
    length: int

    @property
    def end(self) -> int:
        return self.location + self.length

    def grow(self, count: int = 1) -> "LineRange":
        return LineRange(self.location, self.length + count)

    def within(self, line_count: int) -> bool:
        return 0 <= self.location and self.end <= line_count


_select_re = re.compile(r"^\s*(\d+)(?::(\d+))?\s*(?:-\s*(\d+)(?::(\d+))?)?\s*$")


@dataclass(frozen=True)
class Selection:
    """Editor selection; lines and columns are 0-based, end line inclusive."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @classmethod
    def lines(cls, start_line: int, end_line: int) -> "Selection":
        # Whole lines: the end column sits past the start so it is never 0.
        return cls(start_line, 0, end_line, 1)

    @classmethod
    def parse(cls, spec: str) -> "Selection":
        """Parse ``START-END``, ``LINE`` or ``L:C-L:C`` (1-based lines)."""
        m = _select_re.match(spec)
        if not m:
            raise ValueError(f"invalid selection: {spec!r}")
        start, start_col, end, end_col = m.groups()
        start_line = int(start) - 1
        end_line = int(end) - 1 if end is not None else start_line
        if start_line < 0 or end_line < start_line:
            raise ValueError(f"invalid selection: {spec!r}")
        if start_col is None and end_col is None:
            return cls.lines(start_line, end_line)
        return cls(
            start_line,
            int(start_col or 0),
            end_line,
            int(end_col) if end_col is not None else 1,
        )

    def line_range(self) -> LineRange:
        length = self.end_line - self.start_line + 1
        # A selection ending at column 0 of a later line does not include it.
        if self.end_column == 0 and self.end_line > self.start_line:
            length -= 1
        return LineRange(self.start_line, length)


class SkipReason(str, Enum):
    EMPTY_SELECTION = "empty_selection"
    OUT_OF_BOUNDS = "out_of_bounds"
    UNPARSEABLE = "unparseable"
    MIXED_LEADING = "mixed_leading"
    NOT_IN_COMMENT = "not_in_comment"


@dataclass
class Applied:
    line_range: LineRange
    original: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.original != self.lines


@dataclass
class Skipped:
    reason: SkipReason
    line_range: LineRange


ReflowResult = Union[Applied, Skipped]
