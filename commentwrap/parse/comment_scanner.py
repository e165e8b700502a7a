from __future__ import annotations

import re
from typing import Optional, Sequence

from ..model import LineRange


# An opening "/*" with no "*/" after it on the same line.
_open_re = re.compile(r"/\*(?!.*\*/)")
# Nesting is not tracked: the first "*/" found closes the comment.
_close_re = re.compile(r"\*/")


def find_unterminated_open(lines: Sequence[str], before: int) -> Optional[int]:
    """Index of the nearest line above ``before`` that opens a comment and leaves it open."""
    index = before - 1
    while index > -1:
        if _open_re.search(lines[index]):
            return index
        index -= 1
    return None


def find_close(lines: Sequence[str], after: int) -> Optional[int]:
    """Index of the first line at or below ``after`` containing a close marker."""
    index = after
    while index < len(lines):
        if _close_re.search(lines[index]):
            return index
        index += 1
    return None


def range_is_within_multiline_comment(lines: Sequence[str], line_range: LineRange) -> bool:
    opening = find_unterminated_open(lines, line_range.location)
    if opening is None:
        return False
    return find_close(lines, line_range.end) is not None
