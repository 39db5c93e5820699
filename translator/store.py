"""In-memory translation store with forward and reverse lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from .models import ParsedEntries
from .parser import EntryParser
from .loader import FileLineSource

logger = logging.getLogger(__name__)


class Translator:
    """Word list keyed by source word.

    Each word maps to its translations in insertion order; adding the same
    pair twice keeps both copies. Words with no translations are never
    stored, so ``is_empty`` simply reflects whether any word is known.
    """

    def __init__(self, name: str, translations: Mapping[str, Sequence[str]] | None = None) -> None:
        self._name = name
        self._translations: Dict[str, List[str]] = {}
        if translations:
            for word, values in translations.items():
                if isinstance(values, str):
                    raise TypeError(f"translations of {word!r} must be a list of strings, not str")
                if values:
                    self._translations[word] = list(values)

    @classmethod
    def from_name(cls, name: str) -> "Translator":
        """Return an empty store called ``name``."""
        return cls(name)

    @classmethod
    def from_parsed(cls, entries: ParsedEntries) -> "Translator":
        return cls(entries.name, entries.translations)

    @classmethod
    def from_parser(cls, parser: EntryParser) -> "Translator":
        """Build a store from ``parser``.

        :class:`~translator.parser.FormatError` raised while parsing is not
        caught here; no store exists in that case.
        """
        translations = parser.get_translations()
        return cls(parser.get_name(), translations)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str | None = None,
        skip_blank_lines: bool = False,
    ) -> "Translator":
        """Load the word list at ``path``."""
        parser = EntryParser.from_source(
            FileLineSource(path, encoding), skip_blank_lines=skip_blank_lines
        )
        translator = cls.from_parser(parser)
        logger.info("Loaded word list '%s' with %d words from %s", translator.name, len(translator), path)
        return translator

    @property
    def name(self) -> str:
        return self._name

    def add_translation(self, word: str, translation: str) -> None:
        self._translations.setdefault(word, []).append(translation)

    def get_translation(self, word: str) -> List[str]:
        """Return the translations of ``word``.

        Known words return their own list, duplicates included. Otherwise
        ``word`` is treated as a translation and every source word listing it
        is returned once, in the order the source words were first added.
        An unknown word yields ``[]``.
        """
        translations = self._translations.get(word)
        if translations is not None:
            return list(translations)

        # reverse lookup
        return [key for key, values in self._translations.items() if word in values]

    def is_empty(self) -> bool:
        return not self._translations

    def words(self) -> List[str]:
        return list(self._translations)

    def entry_count(self) -> int:
        """Total number of stored translations, duplicates included."""
        return sum(len(values) for values in self._translations.values())

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self) -> str:
        return f"Translator(name={self._name!r}, words={len(self._translations)})"
