"""
Picker session wiring the palette state engine together.

The session owns one instance of each component and connects them to the
external collaborators. Renderers and input adapters (window, terminal,
CLI) talk to the session rather than constructing components themselves.
"""

import logging

from swatchbook.models import AppConfig, InsertPosition, PaletteEntry
from swatchbook.protocols import PaletteStore, ScreenSampler
from swatchbook.services import (
    DragReorderResolver,
    JsonPaletteStore,
    PaletteModel,
    StagingController,
    SyncController,
)

logger = logging.getLogger(__name__)

KEY_ALIASES = {
    "control": "ctrl",
    "ctrl": "ctrl",
    "shift": "shift",
    "alt": "alt",
    "option": "alt",
}


class PickerSession:
    """
    One editing session over a palette.

    Architecture:
        PickerSession (this class)
        ├── palette: PaletteModel (ordered entries)
        ├── staging: StagingController (color under edit)
        ├── sync: SyncController (store bridge)
        └── drag: DragReorderResolver (gesture -> insert/move)
    """

    def __init__(
        self,
        config: AppConfig,
        store: PaletteStore | None = None,
        sampler: ScreenSampler | None = None,
    ):
        """
        Initialize the session.

        Args:
            config: Application configuration
            store: Palette store (defaults to the configured JSON file)
            sampler: Screen sampler (optional; sampling keys do nothing without it)
        """
        self.config = config
        self.store = store or JsonPaletteStore.from_config(config)

        self.palette = PaletteModel()
        self.staging = StagingController(sampler)
        self.sync = SyncController(
            self.palette, self.store, create_missing=config.create_missing_palette
        )
        self.drag = DragReorderResolver(self.palette, self.staging)

    def start(self) -> None:
        """
        Load the palette from the store.

        Raises:
            PaletteStoreNotFoundError: If no palette exists and creating one is disabled
            PaletteStoreCorruptError: If the stored palette cannot be read
        """
        self.sync.load()
        logger.info(f"Session started with {len(self.palette)} colors")

    def add_current(self, position: InsertPosition = InsertPosition.FRONT) -> bool:
        """Commit the staging entry to the palette."""
        return self.palette.merge_insert(self.staging.current_entry, position)

    def remove(self, key: str) -> bool:
        """Remove a palette entry by key."""
        return self.palette.remove(key)

    def entries(self) -> tuple[PaletteEntry, ...]:
        """Current palette in display order."""
        return self.palette.snapshot()

    async def handle_key(self, key: str) -> bool:
        """
        React to a key press.

        The sample hotkey samples under the pointer; the refresh hotkey
        resamples the stored position. Other keys are ignored.

        Returns:
            True if the key triggered a successful sample
        """
        action = KEY_ALIASES.get(key.lower())
        if action is None:
            return False

        if action == self.config.sample_hotkey:
            return await self.staging.sample_at_pointer()
        if action == self.config.refresh_hotkey:
            return await self.staging.refresh_position()
        return False
