"""Helpers for turning library errors into swatchbook errors and back into text."""

from typing import Optional

from pydantic import ValidationError

from .base import SwatchbookError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError


def _location(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "document"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic ValidationError raised while reading ``file_path``.

    JSON syntax errors become ConfigFileInvalidError; anything else becomes
    ConfigValidationError naming the offending field (or all of them).

    Example:
        ```python
        try:
            document = PaletteDocument.model_validate_json(text)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e
        ```
    """
    errors = error.errors()

    json_errors = [err for err in errors if err.get("type") == "json_invalid"]
    if json_errors:
        return ConfigFileInvalidError(file_path, json_errors[0].get("msg", str(error)))

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            field=_location(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    details = "; ".join(f"{_location(err)}: {err.get('msg', 'validation failed')}" for err in errors)
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors ({details})",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, recovery_hint)`` for showing an error to the user."""
    if isinstance(error, SwatchbookError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
