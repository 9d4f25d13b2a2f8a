"""Observer protocol definitions for domain events."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import PaletteEvent, StagingEvent, SyncEvent

if TYPE_CHECKING:
    from swatchbook.models import PaletteEntry


@runtime_checkable
class PaletteObserver(Protocol):
    """
    Observer that receives committed palette mutations.

    SyncController implements this to write the palette back after every
    mutation. Renderers can implement it to refresh their view.
    """

    def on_palette_event(
        self, event: "PaletteEvent", entries: tuple["PaletteEntry", ...]
    ) -> None:
        """
        Handle a palette mutation.

        Args:
            event: The type of palette event
            entries: Snapshot of the whole palette after the mutation

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            ObserverManager. They never roll back the mutation.
        """
        ...


@runtime_checkable
class StagingObserver(Protocol):
    """Observer that receives staging entry changes."""

    def on_staging_event(self, event: "StagingEvent", entry: "PaletteEntry") -> None:
        """
        Handle a staging change.

        Args:
            event: The type of staging event
            entry: The staging entry after the change
        """
        ...


@runtime_checkable
class SyncObserver(Protocol):
    """Observer that receives palette store outcomes."""

    def on_sync_event(self, event: "SyncEvent", error: Exception | None = None) -> None:
        """
        Handle a load/save outcome.

        Args:
            event: The type of sync event
            error: The failure for SAVE_FAILED, otherwise None
        """
        ...
