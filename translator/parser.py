"""Parser for flat word lists.

A word list starts with a name line followed by one ``key = value`` entry per
line::

    en-fr
    against = contre
    against = versus

Keys and values consist of word characters and may contain inner whitespace;
surrounding whitespace is ignored. Any other line makes the whole list
invalid and :class:`FormatError` is raised. Nothing is returned for a list
that fails halfway.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List

from .loader import FileLineSource, LineSource
from .models import ParsedEntries

logger = logging.getLogger(__name__)

_ENTRY_RE = re.compile(r"^\s*(?P<key>\w+(?:\s+\w+)*)\s*=\s*(?P<value>\w+(?:\s+\w+)*)\s*$")


class FormatError(ValueError):
    """A data line does not have the ``key = value`` shape."""

    def __init__(self, source: str, line_number: int, line: str) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"The file is erroneous: line {line_number} of {source}: {line!r}"
        )


class EntryParser:
    """Turn raw word list lines into a name and a translation mapping.

    ``lines`` is copied on construction, so later calls always see the same
    data. With ``skip_blank_lines`` empty and whitespace-only lines after the
    name line are ignored instead of being reported as malformed.
    """

    def __init__(
        self,
        lines: Iterable[str],
        *,
        skip_blank_lines: bool = False,
        source: str = "<lines>",
    ) -> None:
        self._lines = tuple(lines)
        self.skip_blank_lines = skip_blank_lines
        self.source = source

    @classmethod
    def from_source(cls, line_source: LineSource, *, skip_blank_lines: bool = False) -> "EntryParser":
        """Read ``line_source`` once and return a parser over its lines."""
        return cls(
            line_source.get_lines(),
            skip_blank_lines=skip_blank_lines,
            source=str(line_source),
        )

    def get_name(self) -> str:
        return self._lines[0] if self._lines else ""

    def get_translations(self) -> Dict[str, List[str]]:
        """Return ``{word: [translation, ...]}`` for every entry line.

        Raises:
            FormatError: on the first line that is not a valid entry.
        """
        translations: Dict[str, List[str]] = {}
        if len(self._lines) <= 1:
            return translations

        for index in range(1, len(self._lines)):
            line = self._lines[index]
            if self.skip_blank_lines and not line.strip():
                continue
            match = _ENTRY_RE.match(line)
            if match is None:
                raise FormatError(self.source, index + 1, line)
            translations.setdefault(match.group("key"), []).append(match.group("value"))

        logger.debug(
            "Parsed %d words (%d entries) from %s",
            len(translations),
            sum(len(values) for values in translations.values()),
            self.source,
        )
        return translations

    def parse(self) -> ParsedEntries:
        return ParsedEntries(name=self.get_name(), translations=self.get_translations())


def parse_lines(
    lines: Iterable[str],
    *,
    skip_blank_lines: bool = False,
    source: str = "<lines>",
) -> ParsedEntries:
    """Shortcut for ``EntryParser(lines, ...).parse()``."""
    return EntryParser(lines, skip_blank_lines=skip_blank_lines, source=source).parse()


def parse_file(
    path: str | Path,
    encoding: str | None = None,
    *,
    skip_blank_lines: bool = False,
) -> ParsedEntries:
    """Read and parse the word list stored at ``path``."""
    source = FileLineSource(path, encoding)
    return EntryParser.from_source(source, skip_blank_lines=skip_blank_lines).parse()
