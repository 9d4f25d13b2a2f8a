"""JSON persistence for pydantic models.

Used for both the config file and the palette file. Writes go through a
sibling ``.tmp`` file that is renamed over the target, and the previous
file is copied to ``.bak`` first. A missing file raises FileNotFoundError;
an unreadable one raises ConfigurationError. Callers rely on that split to
tell "start fresh" apart from "do not touch".
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from swatchbook.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PydanticPersistence:
    """Static helpers to read and write pydantic models as JSON files."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read ``path`` and validate it as ``model_type``.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigFileInvalidError: If the file is blank, unreadable or not JSON
            ConfigValidationError: If the JSON does not fit the model
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"Could not read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} does not validate as {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Read {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
        by_alias: bool = False,
        exclude_none: bool = False,
    ) -> None:
        """
        Write ``data`` to ``path`` as JSON.

        Args:
            data: Model to write
            path: Target file
            indent: JSON indentation
            create_parents: Create missing parent directories
            backup: Copy an existing file to ``<name>.bak`` before replacing it
            by_alias: Use field aliases as keys (e.g. "$schema")
            exclude_none: Leave out fields that are None

        Raises:
            OSError: If a directory, the backup or the file cannot be written
            ConfigurationError: If the model cannot be serialized
        """
        try:
            text = data.model_dump_json(indent=indent, by_alias=by_alias, exclude_none=exclude_none)
        except ValueError as e:
            raise ConfigurationError(
                user_message=f"Could not serialize data for {path}",
                technical_message=f"Serializing {type(data).__name__} failed: {e}",
            ) from e

        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Writing {path} failed: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Wrote {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """
        Like load_json, but return a default model when the file is missing.

        The default is not written to disk. Invalid files still raise.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
