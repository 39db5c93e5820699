"""Settings for loading word lists.

``config.ini`` holds the checked-in defaults. Local adjustments go into
``config.runtime.ini`` next to it, whose values win over the base file.
Environment variables (optionally from a ``.env`` file) override both:

* ``TRANSLATOR_SKIP_BLANK_LINES``: ``true``/``false``
* ``TRANSLATOR_ENCODING``: codec name, empty for auto-detection
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

CONFIG_MAIN_PATH = Path(__file__).resolve().parents[1] / "config.ini"
CONFIG_RUNTIME_PATH = CONFIG_MAIN_PATH.with_name("config.runtime.ini")

SECTION = "TRANSLATOR"
ENV_SKIP_BLANK_LINES = "TRANSLATOR_SKIP_BLANK_LINES"
ENV_ENCODING = "TRANSLATOR_ENCODING"


@dataclass
class TranslatorSettings:
    """Options passed on to the parser and the file loader."""

    skip_blank_lines: bool = False
    encoding: Optional[str] = None


def load_base_config(path: Path = CONFIG_MAIN_PATH) -> configparser.ConfigParser:
    """Load only the static base configuration."""
    cfg = configparser.ConfigParser()
    cfg.read(path, encoding="utf-8-sig")
    return cfg


def load_runtime_config(path: Path = CONFIG_RUNTIME_PATH) -> configparser.ConfigParser:
    """Load only the local runtime overrides."""
    cfg = configparser.ConfigParser()
    if Path(path).exists():
        cfg.read(path, encoding="utf-8-sig")
    return cfg


def load_merged_config(
    base_path: Path = CONFIG_MAIN_PATH,
    runtime_path: Path = CONFIG_RUNTIME_PATH,
) -> configparser.ConfigParser:
    """Combine base and runtime configuration."""
    base = load_base_config(base_path)
    runtime = load_runtime_config(runtime_path)
    for section in runtime.sections():
        if not base.has_section(section):
            base.add_section(section)
        for key, value in runtime.items(section):
            base.set(section, key, value)
    return base


def load_settings(
    base_path: Path = CONFIG_MAIN_PATH,
    runtime_path: Path = CONFIG_RUNTIME_PATH,
    environ: Mapping[str, str] | None = None,
) -> TranslatorSettings:
    """Return the effective :class:`TranslatorSettings`.

    When ``environ`` is ``None`` the process environment is used after
    loading the ``.env`` file found from the current working directory.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    cfg = load_merged_config(base_path, runtime_path)
    if not cfg.has_section(SECTION):
        cfg.add_section(SECTION)
    if ENV_SKIP_BLANK_LINES in environ:
        cfg.set(SECTION, "skip_blank_lines", environ[ENV_SKIP_BLANK_LINES])
    if ENV_ENCODING in environ:
        cfg.set(SECTION, "encoding", environ[ENV_ENCODING])

    encoding = cfg.get(SECTION, "encoding", fallback="").strip()
    return TranslatorSettings(
        skip_blank_lines=cfg.getboolean(SECTION, "skip_blank_lines", fallback=False),
        encoding=encoding or None,
    )
