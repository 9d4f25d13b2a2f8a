"""Palette store and sampling exceptions.

The store distinguishes a missing palette (safe to start empty) from a
corrupt one (never silently discarded, since overwriting it loses data).
"""

from typing import Optional

from .base import SwatchbookError


class PaletteError(SwatchbookError):
    """Palette could not be read from or written to its store."""
    pass


class PaletteStoreNotFoundError(PaletteError):
    """No stored palette exists yet."""

    def __init__(self, location: str):
        """
        Initialize store-not-found error.

        Args:
            location: Where the palette was expected (file path or store name)
        """
        super().__init__(
            user_message=f"No palette found at {location}",
            recoverable=True,
            recovery_hint="An empty palette will be created on the first change.",
        )
        self.location = location


class PaletteStoreCorruptError(PaletteError):
    """Stored palette exists but cannot be parsed or validated."""

    def __init__(self, location: str, reason: str):
        """
        Initialize corrupt-store error.

        Args:
            location: Where the palette was read from
            reason: The parse or validation failure
        """
        super().__init__(
            user_message=f"Palette file is corrupt: {location}",
            technical_message=f"Failed to parse palette at {location}: {reason}",
            recoverable=False,
            recovery_hint=(
                f"Fix or remove {location} by hand. "
                "A backup (.bak) from the previous save may be available."
            ),
        )
        self.location = location
        self.reason = reason


class PaletteSaveError(PaletteError):
    """Palette could not be written to its store."""

    def __init__(self, location: str, original_error: Optional[str] = None):
        """
        Initialize save error.

        Args:
            location: Where the palette was being written
            original_error: The underlying I/O error message
        """
        tech_msg = f"Failed to write palette to {location}"
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=f"Could not save palette to {location}",
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint="Check file permissions and disk space, then retry the save.",
        )
        self.location = location


class SamplingError(SwatchbookError):
    """Screen color sampling or pointer lookup failed."""

    def __init__(self, user_message: str, **kwargs):
        """
        Initialize sampling error.

        Args:
            user_message: What went wrong while sampling
        """
        kwargs.setdefault("recoverable", True)
        kwargs.setdefault("recovery_hint", "Move the pointer and press the sample key again.")
        super().__init__(user_message, **kwargs)
