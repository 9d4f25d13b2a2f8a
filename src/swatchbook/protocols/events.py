"""Domain events for observer pattern.

- Palette events: committed mutations of the palette (persisted)
- Staging events: changes to the not-yet-saved color (ephemeral)
- Sync events: outcome of loading and saving the palette store
"""

from enum import Enum


class PaletteEvent(Enum):
    """
    Events for committed palette mutations.

    Every event except PALETTE_LOADED triggers a full write-back.
    """

    ENTRY_ADDED = "entry_added"          # Entry merge-inserted
    ENTRY_REMOVED = "entry_removed"      # Entry removed by key
    ENTRY_MOVED = "entry_moved"          # Entry moved to a new index
    PALETTE_LOADED = "palette_loaded"    # Palette replaced from the store


class StagingEvent(Enum):
    """Events for the staging entry (never persisted)."""

    CHANGED = "changed"                            # Color or name changed
    NEIGHBORHOOD_CHANGED = "neighborhood_changed"  # New sampled neighborhood


class SyncEvent(Enum):
    """Events from the palette store bridge."""

    LOADED = "loaded"            # Palette loaded (or initialized empty)
    SAVED = "saved"              # Full palette written
    SAVE_FAILED = "save_failed"  # Write failed; in-memory palette kept
