"""Allow running wtree as `python -m wtree`."""

from wtree.cli import cli_main

if __name__ == "__main__":
    cli_main()
