"""Entry point for ``python -m cargolinks``."""

from cargolinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
