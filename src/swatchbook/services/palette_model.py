"""Ordered palette collection and its mutations."""

import logging
from collections.abc import Iterable, Iterator

from swatchbook.model_manager import ObserverManager
from swatchbook.models import InsertPosition, PaletteEntry
from swatchbook.protocols import PaletteEvent, PaletteObserver

logger = logging.getLogger(__name__)


class PaletteModel:
    """
    Owns the ordered palette and is the only component that mutates it.

    Every operation is synchronous and total: operations that cannot apply
    (duplicate key, unknown key) are no-ops that return False rather than
    raising. Keys are unique by construction since merge_insert is the only
    way entries get added.

    Event-Driven Architecture:
        Each committed mutation emits a PaletteEvent carrying a snapshot of
        the whole palette. SyncController listens to write it back; no-ops
        emit nothing.
    """

    def __init__(self, entries: Iterable[PaletteEntry] = ()):
        """
        Initialize the palette.

        Args:
            entries: Initial entries in display order (duplicates by key dropped)
        """
        self._entries: list[PaletteEntry] = _dedupe(entries)
        self._observers = ObserverManager[PaletteObserver](observer_type_name="palette")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: PaletteObserver) -> None:
        """Register an observer to receive palette events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: PaletteObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify_observers(self, event: PaletteEvent) -> None:
        self._observers.notify("on_palette_event", event, self.snapshot())

    # =================================================================
    # Queries
    # =================================================================

    def contains(self, key: str) -> bool:
        """Check whether an entry with this key is in the palette."""
        return self.index_of(key) is not None

    def index_of(self, key: str) -> int | None:
        """Return the current index of a key, or None if absent."""
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                return index
        return None

    def get(self, key: str) -> PaletteEntry | None:
        """Return the entry with this key, or None if absent."""
        index = self.index_of(key)
        return None if index is None else self._entries[index]

    def last_key(self) -> str | None:
        """Key of the last entry, or None if the palette is empty."""
        return self._entries[-1].key if self._entries else None

    def snapshot(self) -> tuple[PaletteEntry, ...]:
        """Read-only view of the palette in display order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.snapshot())

    # =================================================================
    # Mutations
    # =================================================================

    def merge_insert(self, entry: PaletteEntry, position: InsertPosition = InsertPosition.FRONT) -> bool:
        """
        Insert an entry unless one with the same key already exists.

        Args:
            entry: Entry to add
            position: FRONT or END of the palette

        Returns:
            True if the entry was inserted, False if its key was already present
        """
        if self.contains(entry.key):
            logger.debug(f"Entry '{entry.key}' already in palette, not inserting")
            return False

        if position is InsertPosition.FRONT:
            self._entries.insert(0, entry)
        else:
            self._entries.append(entry)

        logger.info(f"Added '{entry.key}' at {position.value} ({len(self._entries)} entries)")
        self._notify_observers(PaletteEvent.ENTRY_ADDED)
        return True

    def remove(self, key: str) -> bool:
        """
        Remove the entry with this key.

        Returns:
            True if an entry was removed, False if the key was absent
        """
        index = self.index_of(key)
        if index is None:
            logger.debug(f"Entry '{key}' not in palette, nothing to remove")
            return False

        del self._entries[index]
        logger.info(f"Removed '{key}' ({len(self._entries)} entries)")
        self._notify_observers(PaletteEvent.ENTRY_REMOVED)
        return True

    def move_to_index(self, source_key: str, destination_key: str) -> bool:
        """
        Move an entry to the position currently held by another entry.

        The source is taken out and re-inserted at the destination's index,
        so it ends up exactly where the destination was; everything between
        shifts by one and all other entries keep their relative order.
        Moving an entry onto itself leaves the palette unchanged.

        Args:
            source_key: Key of the entry to move
            destination_key: Key of the entry whose slot it moves into

        Returns:
            True if the palette order changed, False if either key is
            unknown or source and destination are the same entry
        """
        source_index = self.index_of(source_key)
        destination_index = self.index_of(destination_key)
        if source_index is None or destination_index is None:
            logger.debug(f"Ignoring move '{source_key}' -> '{destination_key}': key not in palette")
            return False
        if source_index == destination_index:
            return False

        entry = self._entries.pop(source_index)
        self._entries.insert(destination_index, entry)

        logger.info(f"Moved '{source_key}' from {source_index} to {destination_index}")
        self._notify_observers(PaletteEvent.ENTRY_MOVED)
        return True

    def replace_all(self, entries: Iterable[PaletteEntry]) -> None:
        """
        Replace the whole palette with loaded entries.

        Only used when the palette is loaded from its store, so the resulting
        PALETTE_LOADED event does not trigger a write-back.
        """
        self._entries = _dedupe(entries)
        logger.info(f"Palette loaded with {len(self._entries)} entries")
        self._notify_observers(PaletteEvent.PALETTE_LOADED)


def _dedupe(entries: Iterable[PaletteEntry]) -> list[PaletteEntry]:
    """Keep the first entry for each key."""
    seen: set[str] = set()
    result = []
    for entry in entries:
        if entry.key in seen:
            logger.warning(f"Dropping duplicate palette entry '{entry.key}'")
            continue
        seen.add(entry.key)
        result.append(entry)
    return result
