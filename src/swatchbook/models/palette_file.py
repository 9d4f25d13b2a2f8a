"""On-disk palette document.

Shape of ``colors.json``:

```json
{
  "$schema": "./colors.schema.json",
  "colors": [
    {"hex_color": "#ff0000", "name": "Red"},
    {"hex_color": "#00ff00"}
  ]
}
```

Records carry no key; it is always re-derived when entries are built.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swatchbook.colors import normalize_hex

from .entry import PaletteEntry

SCHEMA_REFERENCE = "./colors.schema.json"


class ColorRecord(BaseModel):
    """One stored palette color."""

    hex_color: str = Field(description="Color as #rrggbb")
    name: str | None = Field(default=None, description="Optional display name")

    @field_validator("hex_color")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Reject anything that is not a 6-digit hex color."""
        normalized = normalize_hex(v)
        if normalized is None:
            raise ValueError(f"Invalid hex color: {v!r}")
        return normalized

    @classmethod
    def from_entry(cls, entry: PaletteEntry) -> "ColorRecord":
        """Strip the derived key from an entry."""
        return cls(hex_color=entry.hex_color, name=entry.name)

    def to_entry(self) -> PaletteEntry:
        """Build a palette entry, deriving its key."""
        return PaletteEntry.create(self.hex_color, self.name)


class PaletteDocument(BaseModel):
    """The stored palette: an ordered list of color records."""

    model_config = ConfigDict(populate_by_name=True)

    schema_ref: str | None = Field(
        default=None,
        alias="$schema",
        description="Relative path to the JSON schema of this document",
    )
    colors: list[ColorRecord] = Field(default_factory=list, description="Palette in display order")

    @classmethod
    def from_entries(cls, entries: list[PaletteEntry]) -> "PaletteDocument":
        """Build a document for saving, referencing the schema file."""
        return cls(
            schema_ref=SCHEMA_REFERENCE,
            colors=[ColorRecord.from_entry(entry) for entry in entries],
        )

    def to_entries(self) -> list[PaletteEntry]:
        """Build palette entries in stored order."""
        return [record.to_entry() for record in self.colors]
