"""Screen sampling value models."""

from pydantic import BaseModel, ConfigDict, Field

from swatchbook.colors import RgbColor


class Position(BaseModel):
    """A screen coordinate in pixels."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(description="Horizontal pixel coordinate")
    y: int = Field(description="Vertical pixel coordinate")


class ColorCapture(BaseModel):
    """Result of sampling the screen at one position."""

    model_config = ConfigDict(frozen=True)

    center: RgbColor = Field(description="Color under the sampled position")
    neighborhood: list[RgbColor] = Field(
        default_factory=list,
        description="Square window of colors around the position, row-major",
    )
