"""JSON file store for the palette."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from swatchbook.exceptions import (
    ConfigurationError,
    PaletteSaveError,
    PaletteStoreCorruptError,
    PaletteStoreNotFoundError,
)
from swatchbook.model_manager import PydanticPersistence
from swatchbook.models import AppConfig, PaletteDocument, PaletteEntry

logger = logging.getLogger(__name__)


class JsonPaletteStore:
    """
    Stores the palette as ``colors.json`` inside the resources directory.

    Each save writes the whole palette (atomic replace, previous file kept
    as ``.bak``). When a schema path is given, the JSON schema of the
    document is written next to it whenever it differs from what is there.
    """

    def __init__(self, path: Path, schema_path: Path | None = None):
        """
        Initialize the store.

        Args:
            path: Palette JSON file
            schema_path: Where to keep the document's JSON schema (optional)
        """
        self.path = path
        self.schema_path = schema_path

    @classmethod
    def from_config(cls, config: AppConfig) -> "JsonPaletteStore":
        """Create a store at the configured palette location."""
        return cls(config.palette_path, config.schema_path if config.write_schema else None)

    def load(self) -> PaletteDocument:
        """
        Read the palette document.

        Raises:
            PaletteStoreNotFoundError: If the palette file does not exist
            PaletteStoreCorruptError: If the file is empty, not JSON, or invalid
        """
        try:
            document = PydanticPersistence.load_json(self.path, PaletteDocument)
        except FileNotFoundError:
            raise PaletteStoreNotFoundError(str(self.path)) from None
        except ConfigurationError as e:
            raise PaletteStoreCorruptError(str(self.path), e.technical_message) from e

        logger.info(f"Loaded {len(document.colors)} colors from {self.path}")
        return document

    def save(self, entries: Iterable[PaletteEntry]) -> None:
        """
        Write the palette, replacing what was stored.

        Raises:
            PaletteSaveError: If the file cannot be written
        """
        document = PaletteDocument.from_entries(list(entries))
        try:
            PydanticPersistence.save_json(document, self.path, by_alias=True, exclude_none=True)
        except (OSError, ConfigurationError) as e:
            raise PaletteSaveError(str(self.path), str(e)) from e

        logger.debug(f"Saved {len(document.colors)} colors to {self.path}")

        if self.schema_path is not None:
            self._write_schema(self.schema_path)

    @staticmethod
    def _write_schema(schema_path: Path) -> None:
        schema = json.dumps(PaletteDocument.model_json_schema(by_alias=True), indent=2)
        try:
            if schema_path.exists() and schema_path.read_text(encoding="utf-8") == schema:
                return
            schema_path.write_text(schema, encoding="utf-8")
            logger.info(f"Wrote palette schema to {schema_path}")
        except OSError as e:
            logger.warning(f"Could not write palette schema {schema_path}: {e}")
