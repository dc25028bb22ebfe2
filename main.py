"""Entry point for drawing a string art pattern from the command line."""

from stringart.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
