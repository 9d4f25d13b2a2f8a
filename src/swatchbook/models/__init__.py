"""Data models for swatchbook."""

from swatchbook.colors import HslColor, RgbColor

from .capture import ColorCapture, Position
from .config import AppConfig
from .drag import DragToken, DragTokenAdapter, EndOfListToken, EntryToken, StagingToken
from .entry import PaletteEntry, derive_key
from .enums import InsertPosition
from .palette_file import ColorRecord, PaletteDocument

__all__ = [
    "AppConfig",
    "ColorCapture",
    "ColorRecord",
    # Drag tokens
    "DragToken",
    "DragTokenAdapter",
    "EndOfListToken",
    "EntryToken",
    "HslColor",
    # Enums
    "InsertPosition",
    # Models
    "PaletteDocument",
    "PaletteEntry",
    "Position",
    "RgbColor",
    "StagingToken",
    "derive_key",
]
