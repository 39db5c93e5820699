"""Entry point for ``python -m translator``."""

from .cli import main

if __name__ == "__main__":
    main()
