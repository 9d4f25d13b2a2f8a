"""Color space value models."""

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """Standard 8-bit RGB color.

    This is the canonical interchange form for sampled and manually entered
    colors. The model is frozen so values can be compared, hashed and shared
    between the staging entry and sampling results.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def black(cls) -> "RgbColor":
        """Create black."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)


class HslColor(BaseModel):
    """Integer HSL color used for display and editing.

    Derived from RGB with rounding, so HSL -> RGB -> HSL is not guaranteed
    to be the identity.
    """

    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, le=360, description="Hue in degrees (0-360)")
    s: int = Field(ge=0, le=100, description="Saturation percent (0-100)")
    l: int = Field(ge=0, le=100, description="Lightness percent (0-100)")  # noqa: E741
