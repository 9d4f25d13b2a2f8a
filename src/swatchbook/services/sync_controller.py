"""Bridge between the in-memory palette and its store."""

import logging
from collections.abc import Sequence

from swatchbook.exceptions import PaletteSaveError, PaletteStoreNotFoundError
from swatchbook.model_manager import ObserverManager
from swatchbook.models import PaletteEntry
from swatchbook.protocols import PaletteEvent, PaletteStore, SyncEvent, SyncObserver

from .palette_model import PaletteModel

logger = logging.getLogger(__name__)


class SyncController:
    """
    Loads the palette once and writes it back after every committed mutation.

    SyncController only observes PaletteModel; it never mutates it except
    for the initial load. Writes are neither batched nor debounced: one
    mutation, one full write.

    Failure policy:
        - Missing store: start with an empty palette (if create_missing)
        - Corrupt store: the error propagates from load() and no observer is
          registered, so the corrupt file is never overwritten
        - Failed write: reported via SyncEvent.SAVE_FAILED and last_error;
          the in-memory palette stays as it is and flush() retries
    """

    def __init__(self, model: PaletteModel, store: PaletteStore, create_missing: bool = True):
        """
        Initialize the sync controller.

        Args:
            model: The palette to keep in sync
            store: Persistence collaborator
            create_missing: Start empty when the store has no palette yet
        """
        self._model = model
        self._store = store
        self._create_missing = create_missing
        self._loaded = False
        self._last_error: PaletteSaveError | None = None
        self._observers = ObserverManager[SyncObserver](observer_type_name="sync")

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def last_error(self) -> PaletteSaveError | None:
        """The most recent write failure, cleared by the next successful write."""
        return self._last_error

    def register_observer(self, observer: SyncObserver) -> None:
        """Register an observer to receive sync events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: SyncObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def load(self) -> None:
        """
        Load the palette from the store and start writing back mutations.

        Raises:
            PaletteStoreNotFoundError: If no palette is stored and create_missing is False
            PaletteStoreCorruptError: If the stored palette cannot be read
        """
        if self._loaded:
            logger.debug("Palette already loaded, ignoring load()")
            return

        try:
            entries = self._store.load().to_entries()
        except PaletteStoreNotFoundError as e:
            if not self._create_missing:
                raise
            logger.info(f"{e.user_message}, starting with an empty palette")
            entries = []

        self._model.replace_all(entries)
        self._model.register_observer(self)
        self._loaded = True
        self._observers.notify("on_sync_event", SyncEvent.LOADED, None)

    def on_palette_event(self, event: PaletteEvent, entries: tuple[PaletteEntry, ...]) -> None:
        """Write the palette back after a committed mutation."""
        if event is PaletteEvent.PALETTE_LOADED:
            return
        self._write(entries)

    def flush(self) -> bool:
        """
        Write the current palette now.

        Returns:
            True if the write succeeded
        """
        return self._write(self._model.snapshot())

    def _write(self, entries: Sequence[PaletteEntry]) -> bool:
        try:
            self._store.save(list(entries))
        except PaletteSaveError as e:
            self._last_error = e
            logger.error(f"Palette write failed: {e.technical_message}")
            self._observers.notify("on_sync_event", SyncEvent.SAVE_FAILED, e)
            return False

        self._last_error = None
        self._observers.notify("on_sync_event", SyncEvent.SAVED, None)
        return True
