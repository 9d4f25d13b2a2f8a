"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import numpy as np
import pytest

from swatchbook.exceptions import PaletteSaveError, PaletteStoreNotFoundError
from swatchbook.models import AppConfig, PaletteDocument, PaletteEntry


class InMemoryPaletteStore:
    """PaletteStore double that records every save."""

    def __init__(self, document: PaletteDocument | None = None):
        self.document = document
        self.saves: list[list[PaletteEntry]] = []
        self.fail_saves = False

    def load(self) -> PaletteDocument:
        if self.document is None:
            raise PaletteStoreNotFoundError("memory")
        return self.document

    def save(self, entries: list[PaletteEntry]) -> None:
        if self.fail_saves:
            raise PaletteSaveError("memory", "disk full")
        self.saves.append(list(entries))
        self.document = PaletteDocument.from_entries(list(entries))

    @property
    def last_saved_keys(self) -> list[str]:
        return [entry.key for entry in self.saves[-1]]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(temp_dir):
    """Config pointing the palette into the temp directory."""
    return AppConfig(resources_dir=temp_dir / "resources")


@pytest.fixture
def memory_store():
    """Empty in-memory palette store (no palette stored yet)."""
    return InMemoryPaletteStore()


@pytest.fixture
def rgb_entries():
    """Three distinct entries: red, green, blue."""
    return [
        PaletteEntry.create("#ff0000"),
        PaletteEntry.create("#00ff00"),
        PaletteEntry.create("#0000ff"),
    ]


@pytest.fixture
def frame():
    """5x5 black frame with a few known pixels."""
    data = np.zeros((5, 5, 3), dtype=np.uint8)
    data[0, 0] = (255, 255, 255)
    data[1, 2] = (10, 20, 30)
    data[4, 4] = (255, 136, 0)
    return data


@pytest.fixture
def make_memory_store():
    """Factory for in-memory stores preloaded with a document."""
    return InMemoryPaletteStore
