"""Application configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_serializer

from swatchbook.model_manager.persistence import PydanticPersistence

Hotkey = Literal["ctrl", "shift", "alt"]

DEFAULT_CONFIG_PATH = Path.home() / ".swatchbook" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Paths
    resources_dir: Path = Field(
        default_factory=lambda: Path.home() / ".swatchbook" / "resources",
        description="Directory holding the palette file and its schema",
    )
    palette_filename: str = Field(default="colors.json", description="Palette file name")
    schema_filename: str = Field(
        default="colors.schema.json", description="JSON schema file written next to the palette"
    )

    # Palette store behaviour
    create_missing_palette: bool = Field(
        default=True,
        description=(
            "Start with an empty palette when no palette file exists. "
            "When disabled, a missing palette is reported as an error."
        ),
    )
    write_schema: bool = Field(
        default=True, description="Keep the palette JSON schema file up to date on save"
    )

    # Sampling
    neighborhood_radius: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Half-width of the sampled neighborhood (10 gives a 21x21 window)",
    )

    # Hotkeys
    sample_hotkey: Hotkey = Field(
        default="ctrl", description="Key that samples the color under the pointer"
    )
    refresh_hotkey: Hotkey = Field(
        default="shift", description="Key that resamples the stored position"
    )

    @field_serializer("resources_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @property
    def palette_path(self) -> Path:
        """Full path of the palette file."""
        return self.resources_dir / self.palette_filename

    @property
    def schema_path(self) -> Path:
        """Full path of the palette schema file."""
        return self.resources_dir / self.schema_filename

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.swatchbook/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
