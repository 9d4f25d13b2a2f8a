"""Turns drag gestures into palette inserts and moves."""

import logging

from swatchbook.models import DragToken, EndOfListToken, EntryToken, InsertPosition, StagingToken

from .palette_model import PaletteModel
from .staging_controller import StagingController

logger = logging.getLogger(__name__)


class DragReorderResolver:
    """
    Resolves one drag gesture at a time against the palette.

    Gesture lifecycle:
        drag_start(source)  ->  drag_end(source, destination)

    - Starting a drag on a palette entry loads it into the staging
      controller for editing; nothing in the palette changes.
    - Dropping the staging slot first merge-inserts the staging entry at
      the front, then moves it like any other entry.
    - Dropping on the end-of-list slot is the same as dropping on the
      current last entry.
    - Anything that does not resolve (no destination, stale key, empty
      palette) is a silent no-op.
    """

    def __init__(self, model: PaletteModel, staging: StagingController):
        self._model = model
        self._staging = staging
        self._active: DragToken | None = None

    @property
    def is_dragging(self) -> bool:
        return self._active is not None

    @property
    def active_source(self) -> DragToken | None:
        return self._active

    def drag_start(self, source: DragToken) -> None:
        """Begin a gesture; an entry source becomes the color under edit."""
        self._active = source

        if not isinstance(source, EntryToken):
            return

        entry = self._model.get(source.key)
        if entry is None:
            logger.debug(f"Drag started on unknown entry '{source.key}'")
            return
        self._staging.load_entry(entry)

    def drag_end(self, source: DragToken, destination: DragToken | None) -> bool:
        """
        Finish a gesture.

        Args:
            source: What was dragged
            destination: Where it was dropped, or None if dropped nowhere

        Returns:
            True if the palette changed
        """
        self._active = None

        if destination is None:
            logger.debug("Drag cancelled: no drop target")
            return False

        inserted = False
        if isinstance(source, StagingToken):
            staged = self._staging.current_entry
            inserted = self._model.merge_insert(staged, InsertPosition.FRONT)
            source_key: str | None = staged.key
        elif isinstance(source, EntryToken):
            source_key = source.key
        else:
            source_key = None

        if isinstance(destination, EndOfListToken):
            destination_key = self._model.last_key()
        elif isinstance(destination, EntryToken):
            destination_key = destination.key
        else:
            destination_key = None

        if source_key is None or destination_key is None:
            logger.debug(f"Drop ignored: {source!r} -> {destination!r} does not resolve")
            return inserted

        moved = self._model.move_to_index(source_key, destination_key)
        return inserted or moved
