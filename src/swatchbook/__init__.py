"""Swatchbook: color palette state engine for a color-picker utility."""

__version__ = "0.1.0"

from .orchestration import PickerSession
from .services import (
    DragReorderResolver,
    JsonPaletteStore,
    PaletteModel,
    StagingController,
    SyncController,
)

__all__ = [
    "DragReorderResolver",
    "JsonPaletteStore",
    "PaletteModel",
    "PickerSession",
    "StagingController",
    "SyncController",
]
