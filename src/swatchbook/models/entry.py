"""Palette entry model and its derived identity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from swatchbook.colors import normalize_hex


def derive_key(hex_color: str, name: str | None = None) -> str:
    """
    Derive the identity key of a palette entry.

    Entries with the same hex but different names are distinct; an empty
    name counts as absent.

    Example:
        >>> derive_key("#ff0000")
        '#ff0000'
        >>> derive_key("#ff0000", "Red")
        '#ff0000_Red'
    """
    if name:
        return f"{hex_color}_{name}"
    return hex_color


class PaletteEntry(BaseModel):
    """A color in the palette.

    The key is derived once, at construction, from the normalized hex and
    the name. Any key passed in is ignored. The model is frozen so the key
    can never drift from the values it was derived from.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="", description="Derived identity (hex, optionally suffixed by name)")
    hex_color: str = Field(description="Canonical #rrggbb color")
    name: str | None = Field(default=None, description="Optional display name")

    @model_validator(mode="before")
    @classmethod
    def _derive_key(cls, data: Any) -> Any:
        if isinstance(data, dict):
            hex_color = normalize_hex(data.get("hex_color", ""))
            if hex_color is not None:
                data = {**data, "key": derive_key(hex_color, data.get("name"))}
        return data

    @field_validator("hex_color")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Normalize to lowercase #rrggbb."""
        normalized = normalize_hex(v)
        if normalized is None:
            raise ValueError(f"Invalid hex color: {v!r}")
        return normalized

    @classmethod
    def create(cls, hex_color: str, name: str | None = None) -> "PaletteEntry":
        """Create an entry, deriving its key."""
        return cls(hex_color=hex_color, name=name)
