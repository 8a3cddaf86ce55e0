"""Entry point for ``python -m diffall``."""

from diffall.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
