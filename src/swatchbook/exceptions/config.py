"""Errors raised while reading JSON files into models.

Both the config file and the palette file go through these; the palette
store re-raises them as PaletteStoreCorruptError.
"""

from typing import Any

from .base import SwatchbookError


class ConfigurationError(SwatchbookError):
    """A JSON file could not be turned into a valid model."""


class ConfigFileInvalidError(ConfigurationError):
    """File is empty or is not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: File that failed to parse
            parse_error: Parser message
        """
        hint = f"Open {file_path} and fix the JSON syntax"
        if "trailing comma" in parse_error.lower():
            hint += " (JSON does not allow a comma after the last item)"

        super().__init__(
            user_message=f"{file_path} is not valid JSON",
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """File is valid JSON but a value is wrong."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Dotted location of the bad value (e.g. "colors.0.hex_color")
            value: The rejected value
            error_msg: Validator message
            file_path: File the value came from, if any
        """
        hint = f"Correct '{field}'"
        if file_path:
            hint += f" in {file_path}"
        if field.endswith("hotkey"):
            hint += ". Hotkeys are one of: ctrl, shift, alt"
        elif field == "neighborhood_radius":
            hint += ". The radius must be between 0 and 50"

        super().__init__(
            user_message=f"Invalid value for '{field}': {error_msg}",
            technical_message=f"Validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
