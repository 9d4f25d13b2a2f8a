"""Protocol definitions for observer patterns and external collaborators.

- Events: palette, staging and sync events
- Observers: protocols for components that react to these events
- Collaborators: the screen sampler and palette store interfaces
"""

from .collaborators import PaletteStore, ScreenSampler
from .events import PaletteEvent, StagingEvent, SyncEvent
from .observers import PaletteObserver, StagingObserver, SyncObserver

__all__ = [
    # Events
    "PaletteEvent",
    # Observers
    "PaletteObserver",
    # Collaborators
    "PaletteStore",
    "ScreenSampler",
    "StagingEvent",
    "StagingObserver",
    "SyncEvent",
    "SyncObserver",
]
