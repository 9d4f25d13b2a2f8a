"""CLI commands for swatchbook."""

from .config import config
from .convert import convert
from .palette import add, list_colors, move, remove

__all__ = ["add", "config", "convert", "list_colors", "move", "remove"]
