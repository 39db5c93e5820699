import argparse
import logging
import sys
from pathlib import Path
from typing import List

from . import config
from .parser import FormatError
from .store import Translator


def _load(args: argparse.Namespace) -> Translator:
    try:
        return Translator.from_file(
            args.input,
            encoding=args.encoding,
            skip_blank_lines=args.skip_blank_lines,
        )
    except (FormatError, UnicodeDecodeError, OSError) as e:
        raise SystemExit(f"invalid word list: {e}")


def lookup(args: argparse.Namespace) -> None:
    """Print forward or reverse translations for each word."""

    translator = _load(args)
    for word in args.words:
        found = translator.get_translation(word)
        print(f"{word}: {', '.join(found) if found else '-'}")


def validate(args: argparse.Namespace) -> None:
    """Validate a word list file."""

    translator = _load(args)
    print(f"Word list '{args.input}' OK ({len(translator)} words)")


def stats(args: argparse.Namespace) -> None:
    """Show statistics about a word list."""

    translator = _load(args)
    print(f"Name: {translator.name}")
    print(f"Words: {len(translator)}")
    print(f"Translations: {translator.entry_count()}")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Word list translator")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("lookup", help="translate words in both directions")
    p.add_argument("input", type=Path)
    p.add_argument("words", nargs="+")
    p.set_defaults(func=lookup)

    p = sub.add_parser("validate", help="validate a word list")
    p.add_argument("input", type=Path)
    p.set_defaults(func=validate)

    p = sub.add_parser("stats", help="show statistics")
    p.add_argument("input", type=Path)
    p.set_defaults(func=stats)

    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")
    parser.add_argument(
        "--skip-blank-lines",
        action="store_true",
        default=None,
        help="ignore empty lines between entries",
    )
    parser.add_argument("--encoding", default=None, help="file encoding (default: auto-detect)")
    parser.add_argument(
        "--config",
        type=Path,
        default=config.CONFIG_MAIN_PATH,
        help="base configuration file",
    )

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    settings = config.load_settings(
        base_path=args.config,
        runtime_path=args.config.with_name(config.CONFIG_RUNTIME_PATH.name),
    )
    if args.skip_blank_lines is None:
        args.skip_blank_lines = settings.skip_blank_lines
    if args.encoding is None:
        args.encoding = settings.encoding

    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])
