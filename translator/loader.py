"""Line suppliers for word list files.

The parser only needs an ordered sequence of raw lines. Files are decoded the
same tolerant way as the catalogue loader: a UTF-8 file with or without BOM, or a
UTF-16 file with BOM, is accepted without configuration. Missing files and other I/O errors are
passed through to the caller untouched.
"""

from __future__ import annotations

import codecs
import logging
import re
from pathlib import Path
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class LineSource(Protocol):
    """Anything that can hand out the raw lines of a word list."""

    def get_lines(self) -> Sequence[str]: ...


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines without terminators.

    A trailing line break does not produce an extra empty line, so an empty
    string yields ``[]``.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _decode(raw: bytes, path: Path) -> str:
    # UTF-16 only with a BOM; without one almost any even-length input decodes
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass
    logger.warning("Word list %s is not valid UTF-8/UTF-16, replacing bad bytes", path)
    return raw.decode("utf-8", errors="replace")


def read_lines(path: str | Path, encoding: str | None = None) -> List[str]:
    """Return the lines stored at ``path``.

    With ``encoding`` left at ``None`` the encoding is detected; otherwise the
    file is decoded strictly with the given codec.
    """
    p = Path(path)
    raw = p.read_bytes()
    text = raw.decode(encoding) if encoding else _decode(raw, p)
    lines = split_lines(text)
    logger.debug("Read %d lines from %s", len(lines), p)
    return lines


class FileLineSource:
    """Line source reading a file once per :meth:`get_lines` call."""

    def __init__(self, path: str | Path, encoding: str | None = None) -> None:
        self.path = Path(path)
        self.encoding = encoding

    def get_lines(self) -> List[str]:
        return read_lines(self.path, self.encoding)

    def __str__(self) -> str:
        return str(self.path)


class TextLineSource:
    """Line source over an in-memory string."""

    def __init__(self, text: str, label: str = "<text>") -> None:
        self.text = text
        self.label = label

    def get_lines(self) -> List[str]:
        return split_lines(self.text)

    def __str__(self) -> str:
        return self.label
