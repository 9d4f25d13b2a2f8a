"""Palette state engine services."""

from swatchbook.services.drag_resolver import DragReorderResolver
from swatchbook.services.palette_model import PaletteModel
from swatchbook.services.palette_store import JsonPaletteStore
from swatchbook.services.staging_controller import StagingController
from swatchbook.services.sync_controller import SyncController

__all__ = [
    "DragReorderResolver",
    "JsonPaletteStore",
    "PaletteModel",
    "StagingController",
    "SyncController",
]
