"""Enumerations for palette operations."""

from enum import Enum


class InsertPosition(Enum):
    """Where merge-insert places a new entry."""

    FRONT = "front"
    END = "end"
