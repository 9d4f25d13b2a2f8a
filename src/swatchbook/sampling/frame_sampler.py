"""Screen sampler backed by an in-memory RGB frame."""

import logging

import numpy as np

from swatchbook.colors import RgbColor
from swatchbook.exceptions import SamplingError
from swatchbook.models import ColorCapture, Position

logger = logging.getLogger(__name__)


class FrameSampler:
    """
    Samples colors from a captured frame instead of the live screen.

    The frame is a ``(height, width, 3)`` uint8 array in RGB order, indexed
    ``frame[y, x]``. The neighborhood is the square window of side
    ``2 * radius + 1`` centered on the position, row-major; cells outside
    the frame are black.

    Example:
        ```python
        frame = np.zeros((1080, 1920, 3), dtype=np.uint8)
        sampler = FrameSampler(frame, pointer=Position(x=100, y=200))
        capture = await sampler.sample(Position(x=100, y=200))
        len(capture.neighborhood)  # 441
        ```
    """

    def __init__(self, frame: np.ndarray, pointer: Position | None = None, radius: int = 10):
        """
        Initialize the sampler.

        Args:
            frame: RGB frame, shape (height, width, 3)
            pointer: Position reported by locate_pointer() (None = unavailable)
            radius: Neighborhood half-width in pixels

        Raises:
            ValueError: If the frame is not an (H, W, 3) array or radius is negative
        """
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"Frame must have shape (height, width, 3), got {frame.shape}")
        if radius < 0:
            raise ValueError(f"Radius must be non-negative, got {radius}")

        self._frame = frame.astype(np.uint8, copy=False)
        self._radius = radius
        self.pointer = pointer

    @property
    def width(self) -> int:
        return int(self._frame.shape[1])

    @property
    def height(self) -> int:
        return int(self._frame.shape[0])

    def update_frame(self, frame: np.ndarray) -> None:
        """Replace the frame (e.g. after a new capture)."""
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"Frame must have shape (height, width, 3), got {frame.shape}")
        self._frame = frame.astype(np.uint8, copy=False)

    async def locate_pointer(self) -> Position:
        if self.pointer is None:
            raise SamplingError("Pointer position is unavailable")
        return self.pointer

    async def sample(self, position: Position) -> ColorCapture:
        if not (0 <= position.x < self.width and 0 <= position.y < self.height):
            raise SamplingError(
                f"Position ({position.x}, {position.y}) is outside the screen",
                technical_message=(
                    f"Position ({position.x}, {position.y}) outside frame "
                    f"{self.width}x{self.height}"
                ),
            )

        r = self._radius
        padded = np.pad(self._frame, ((r, r), (r, r), (0, 0)), mode="constant", constant_values=0)
        # Shifted by r in the padded frame, so the window starts at the original position.
        window = padded[position.y:position.y + 2 * r + 1, position.x:position.x + 2 * r + 1]

        center = _to_rgb(self._frame[position.y, position.x])
        neighborhood = [_to_rgb(pixel) for pixel in window.reshape(-1, 3)]

        logger.debug(f"Sampled {center.to_rgb_tuple()} at ({position.x}, {position.y})")
        return ColorCapture(center=center, neighborhood=neighborhood)


def _to_rgb(pixel: np.ndarray) -> RgbColor:
    return RgbColor(r=int(pixel[0]), g=int(pixel[1]), b=int(pixel[2]))
