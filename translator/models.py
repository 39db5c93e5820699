"""Dataclasses shared between the word list parser and the store."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParsedEntries:
    """Result of parsing a word list.

    Attributes:
        name: First line of the source, or ``""`` when the source is empty.
        translations: Mapping of word to its translations in file order.
            Duplicated lines yield duplicated values.
    """

    name: str = ""
    translations: Dict[str, List[str]] = field(default_factory=dict)
