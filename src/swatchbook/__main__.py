"""Main entry point for swatchbook."""

from swatchbook.cli import cli

if __name__ == "__main__":
    cli()
