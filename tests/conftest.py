"""
Pytest configuration: ensure project root is on sys.path for imports.

The tests import the local `translator` package directly. When running tests
from an IDE or a subdirectory without an editable install, the repository root
might not be on the Python module search path. This hook prepends the repo
root so imports work consistently (e.g., `from translator.store import ...`).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_sys_path() -> None:
    # tests/ -> repo root
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_add_repo_root_to_sys_path()


@pytest.fixture
def word_list(tmp_path):
    """Write a word list file and return its path."""

    def _write(*lines: str, name: str = "words.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding=encoding)
        return path

    return _write
