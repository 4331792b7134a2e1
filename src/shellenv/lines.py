"""
Splitting environment files into logical lines.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import PathError

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Characters trimmed around names, values and comment markers.
BLANKS = " \t\n\r\0\x0b"


def is_comment(line: str) -> bool:
    return line.lstrip(BLANKS).startswith("#")


def looks_like_assignment(line: str) -> bool:
    return "=" in line


@dataclass(frozen=True)
class RawLine:
    """A single line of source text."""

    text: str

    @property
    def is_comment(self) -> bool:
        return is_comment(self.text)

    @property
    def looks_like_assignment(self) -> bool:
        return looks_like_assignment(self.text)

    @property
    def is_assignment(self) -> bool:
        return not self.is_comment and self.looks_like_assignment


def split_lines(text: str) -> List[str]:
    """Return non-empty lines of ``text`` without their line endings.

    ``\\n``, ``\\r\\n`` and bare ``\\r`` endings are all accepted.
    """

    return [line for line in _LINE_BREAK.split(text) if line]


def ensure_readable(path: str | Path) -> Path:
    file_path = Path(path)
    if not file_path.is_file():
        raise PathError(str(path))
    if not os.access(file_path, os.R_OK):
        raise PathError(str(path), "permission denied")
    return file_path


def read_lines(path: str | Path) -> List[str]:
    """Read ``path`` and return its non-empty lines."""

    file_path = ensure_readable(path)
    try:
        text = file_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise PathError(str(path), str(exc)) from exc
    lines = split_lines(text)
    logger.debug("Read %d lines from %s", len(lines), file_path)
    return lines


__all__ = [
    "BLANKS",
    "RawLine",
    "ensure_readable",
    "is_comment",
    "looks_like_assignment",
    "read_lines",
    "split_lines",
]
