"""Observer registry shared by the palette, staging and sync components."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Keeps a list of observers and calls one named callback on each of them.

    Observers are notified in registration order. A callback that raises is
    logged and skipped; the remaining observers are still called.

    Example:
        ```python
        observers = ObserverManager[PaletteObserver](observer_type_name="palette")
        observers.register(sync_controller)
        observers.notify("on_palette_event", PaletteEvent.ENTRY_ADDED, entries)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        self._observers: list[T] = []
        self._lock = Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering the same observer twice has no effect."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"Registered {self._kind} observer {observer!r}")

    def unregister(self, observer: T) -> None:
        """Remove an observer if it is registered."""
        with self._lock:
            if observer not in self._observers:
                logger.debug(f"{self._kind} observer {observer!r} was not registered")
                return
            self._observers.remove(observer)
        logger.debug(f"Unregistered {self._kind} observer {observer!r}")

    def notify(self, callback_name: str, *args: Any) -> None:
        """
        Call ``callback_name(*args)`` on every observer.

        Callbacks run outside the lock on a copy of the list, so an observer
        may unregister itself from inside its callback.
        """
        with self._lock:
            targets = tuple(self._observers)

        for observer in targets:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer!r} has no '{callback_name}' method")
                continue
            try:
                callback(*args)
            except Exception as e:
                logger.error(
                    f"{self._kind} observer {observer!r} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
