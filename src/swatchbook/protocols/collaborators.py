"""Interfaces of the external collaborators.

The screen sampler and the palette store live outside the core; these
protocols are all the core knows about them.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from swatchbook.models import ColorCapture, PaletteDocument, PaletteEntry, Position


@runtime_checkable
class ScreenSampler(Protocol):
    """
    Reads colors from the screen.

    Both methods are awaited. A request cannot be cancelled; when two
    requests overlap, whichever response is observed last wins.
    """

    async def sample(self, position: "Position") -> "ColorCapture":
        """
        Sample the color at a position and the colors around it.

        Raises:
            SamplingError: If the position cannot be sampled
        """
        ...

    async def locate_pointer(self) -> "Position":
        """
        Return the current pointer position.

        Raises:
            SamplingError: If the pointer position is unavailable
        """
        ...


@runtime_checkable
class PaletteStore(Protocol):
    """Reads and writes the whole palette."""

    def load(self) -> "PaletteDocument":
        """
        Read the stored palette.

        Raises:
            PaletteStoreNotFoundError: If no palette has been stored yet
            PaletteStoreCorruptError: If the stored palette cannot be read
        """
        ...

    def save(self, entries: "list[PaletteEntry]") -> None:
        """
        Replace the stored palette with these entries, in order.

        Raises:
            PaletteSaveError: If the palette cannot be written
        """
        ...
