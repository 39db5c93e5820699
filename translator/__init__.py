"""Bidirectional word lookup backed by a flat ``key = value`` word list."""

# Package exports should be side-effect free.

from . import (
    models,
    loader,
    parser,
    store,
    config,
)
from .parser import EntryParser, FormatError
from .store import Translator

__all__ = [
    "models",
    "loader",
    "parser",
    "store",
    "config",
    "EntryParser",
    "FormatError",
    "Translator",
]
