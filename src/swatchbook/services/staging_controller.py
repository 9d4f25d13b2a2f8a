"""Staging color: the color under edit that is not yet in the palette."""

import logging

from pydantic import ValidationError

from swatchbook.colors import (
    HslColor,
    RgbColor,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from swatchbook.exceptions import SamplingError
from swatchbook.model_manager import ObserverManager
from swatchbook.models import ColorCapture, PaletteEntry, Position
from swatchbook.protocols import ScreenSampler, StagingEvent, StagingObserver

logger = logging.getLogger(__name__)


class StagingController:
    """
    Owns the staging entry and the in-progress name.

    Every input (hex, RGB, HSL, a sampled screen position, a neighborhood
    cell, an existing entry) funnels into one recompute pass that derives
    hex -> rgb -> hsl -> staging entry together, so derived fields can never
    disagree or re-trigger each other.

    Rejected input (malformed hex, missing or out-of-range channels, failed
    sampling) leaves every field untouched and returns False.
    """

    def __init__(self, sampler: ScreenSampler | None = None):
        """
        Initialize the staging controller.

        Args:
            sampler: Screen sampling collaborator (optional; sampling
                     operations fail softly without one)
        """
        self._sampler = sampler
        self._name: str | None = None
        self._position = Position(x=0, y=0)
        self._neighborhood: list[str] = []
        self._observers = ObserverManager[StagingObserver](observer_type_name="staging")
        self._recompute(rgb_to_hex(RgbColor.black()), None)

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: StagingObserver) -> None:
        """Register an observer to receive staging events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: StagingObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # Derived state
    # =================================================================

    @property
    def hex_color(self) -> str:
        return self._hex

    @property
    def rgb(self) -> RgbColor:
        return self._rgb

    @property
    def hsl(self) -> HslColor:
        return self._hsl

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def position(self) -> Position:
        return self._position

    @property
    def neighborhood(self) -> list[str]:
        """Hex colors of the last sampled neighborhood, row-major."""
        return list(self._neighborhood)

    @property
    def current_entry(self) -> PaletteEntry:
        """The staging entry offered to the palette on commit."""
        return self._entry

    def _recompute(self, hex_color: str, name: str | None) -> None:
        rgb = hex_to_rgb(hex_color)
        self._hex = hex_color
        self._name = name
        self._rgb = rgb
        self._hsl = rgb_to_hsl(rgb)
        self._entry = PaletteEntry.create(hex_color, name)

    def _apply(self, hex_color: str, name: str | None) -> None:
        self._recompute(hex_color, name)
        logger.debug(f"Staging entry is now '{self._entry.key}'")
        self._observers.notify("on_staging_event", StagingEvent.CHANGED, self._entry)

    # =================================================================
    # Color input
    # =================================================================

    def set_from_hex(self, hex_color: str | None) -> bool:
        """
        Set the staging color from a hex string.

        Returns:
            True if accepted, False if the string is not a 6-digit hex color
        """
        normalized = normalize_hex(hex_color) if hex_color is not None else None
        if normalized is None:
            logger.debug(f"Rejected hex input {hex_color!r}")
            return False
        self._apply(normalized, self._name)
        return True

    def set_from_rgb(self, r: int | None, g: int | None, b: int | None) -> bool:
        """
        Set the staging color from RGB channels.

        Returns:
            True if accepted, False if a channel is missing or outside 0-255
        """
        if r is None or g is None or b is None:
            logger.debug("Rejected RGB input with missing channel")
            return False
        try:
            rgb = RgbColor(r=r, g=g, b=b)
        except ValidationError:
            logger.debug(f"Rejected RGB input ({r}, {g}, {b})")
            return False
        self._apply(rgb_to_hex(rgb), self._name)
        return True

    def set_from_hsl(self, h: int | None, s: int | None, l: int | None) -> bool:  # noqa: E741
        """
        Set the staging color from HSL values.

        Returns:
            True if accepted, False if a value is missing or out of range
        """
        if h is None or s is None or l is None:
            logger.debug("Rejected HSL input with missing value")
            return False
        try:
            hsl = HslColor(h=h, s=s, l=l)
        except ValidationError:
            logger.debug(f"Rejected HSL input ({h}, {s}, {l})")
            return False
        self._apply(rgb_to_hex(hsl_to_rgb(hsl)), self._name)
        return True

    def set_name(self, name: str | None) -> None:
        """Change the in-progress name; the color is left untouched."""
        self._apply(self._hex, name)

    def load_entry(self, entry: PaletteEntry) -> None:
        """Take both color and name from an existing palette entry."""
        self._apply(entry.hex_color, entry.name)

    def pick_neighbor(self, index: int) -> bool:
        """
        Set the staging color from one cell of the sampled neighborhood.

        Returns:
            True if accepted, False if the index is outside the neighborhood
        """
        if not 0 <= index < len(self._neighborhood):
            return False
        self._apply(self._neighborhood[index], self._name)
        return True

    # =================================================================
    # Screen sampling
    # =================================================================

    def set_position(self, x: int, y: int) -> None:
        """Store the position used by refresh_position()."""
        self._position = Position(x=x, y=y)

    async def set_from_sampled_position(self, position: Position) -> bool:
        """
        Sample the screen at a position and use the result as the new input.

        A response that arrives after newer input still overwrites it; the
        latest response observed wins.

        Returns:
            True if the sample was applied, False if sampling failed
        """
        if self._sampler is None:
            logger.warning("No screen sampler configured, cannot sample")
            return False

        try:
            capture = await self._sampler.sample(position)
        except SamplingError as e:
            logger.warning(f"Sampling at ({position.x}, {position.y}) failed: {e.technical_message}")
            return False

        self._apply_capture(capture)
        return True

    async def sample_at_pointer(self) -> bool:
        """
        Locate the pointer, remember its position and sample there.

        Returns:
            True if the sample was applied, False if locating or sampling failed
        """
        if self._sampler is None:
            logger.warning("No screen sampler configured, cannot locate pointer")
            return False

        try:
            position = await self._sampler.locate_pointer()
        except SamplingError as e:
            logger.warning(f"Locating pointer failed: {e.technical_message}")
            return False

        self._position = position
        return await self.set_from_sampled_position(position)

    async def refresh_position(self) -> bool:
        """Resample at the stored position."""
        return await self.set_from_sampled_position(self._position)

    def _apply_capture(self, capture: ColorCapture) -> None:
        self._neighborhood = [rgb_to_hex(rgb) for rgb in capture.neighborhood]
        self._apply(rgb_to_hex(capture.center), self._name)
        self._observers.notify("on_staging_event", StagingEvent.NEIGHBORHOOD_CHANGED, self._entry)
