from __future__ import annotations

from typing import Optional, Tuple

from ..model import ParsedLine


WHITESPACE = " \t"
COMMENT_MARKERS = "/*"


def _skip(line: str, pos: int, chars: str) -> int:
    while pos < len(line) and line[pos] in chars:
        pos += 1
    return pos


def split_leading(line: str) -> Tuple[str, str]:
    """Split a line into indentation plus comment markers, and the text after.

    The leading is a run of spaces/tabs, then ``/`` and ``*`` markers, then
    spaces/tabs again. Either part may be empty.
    """
    pos = _skip(line, 0, WHITESPACE)
    pos = _skip(line, pos, COMMENT_MARKERS)
    pos = _skip(line, pos, WHITESPACE)
    return line[:pos], line[pos:]


def has_comment_marker(leading: str) -> bool:
    return any(ch in COMMENT_MARKERS for ch in leading)


def classify_line(line: str, strict: bool = False) -> Optional[ParsedLine]:
    """Classify a buffer line as ``(leading, content)``.

    In strict mode the leading must carry at least one comment marker, so
    plain indented text does not classify and ``None`` is returned.
    """
    line = line.rstrip("\r\n")
    leading, content = split_leading(line)
    if strict and not has_comment_marker(leading):
        return None
    return ParsedLine(leading, content)
