from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List


# Only real line terminators; str.splitlines() would also split on form
# feeds, vertical tabs and the Unicode separators.
_newline_re = re.compile(r"(\r\n|\r|\n)")


@dataclass
class WriteResult:
    path: Path
    bytes_written: int
    line_count: int


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines that keep their own terminators."""
    parts = _newline_re.split(text)
    lines = [parts[i] + parts[i + 1] for i in range(0, len(parts) - 1, 2)]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith(("\r", "\n")):
        return line[-1]
    return ""


def read_source(path: Path, encoding: str = "utf-8") -> str:
    # newline="" hands back "\r\n" and "\r" untranslated
    with path.open("r", encoding=encoding, newline="") as fh:
        return fh.read()


def write_source(path: Path, text: str, encoding: str = "utf-8") -> WriteResult:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = text.encode(encoding)
    path.write_bytes(data)
    return WriteResult(path=path, bytes_written=len(data), line_count=len(split_lines(text)))
