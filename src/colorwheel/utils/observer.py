"""Observer lists for the drag controller, the card and the bindings.

Each publisher owns one ``ObserverManager`` typed by its observer protocol.
Callbacks run outside the lock, so an observer may unregister itself from
inside a notification. A failing observer is logged and the remaining ones
are still called.
"""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered, duplicate-free list of observers of one kind.

    An empty manager is falsy, which lets publishers skip building an
    expensive payload nobody will receive.

    Example:
        ```python
        self._observers = ObserverManager[DragObserver]("drag")
        self._observers.register(card)
        self._observers.notify("on_drag_event", DragEvent.STARTED, session)
        ```
    """

    def __init__(self, kind: str = "observer"):
        """
        Args:
            kind: Observer kind used in log messages ("drag", "card", "state")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._kind = kind

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def register(self, observer: T) -> bool:
        """Add an observer. Returns False if it was already registered."""
        with self._lock:
            if observer in self._observers:
                return False
            self._observers.append(observer)
        logger.debug(f"Registered {self._kind} observer: {observer}")
        return True

    def unregister(self, observer: T) -> bool:
        """Remove an observer. Returns False if it was not registered."""
        with self._lock:
            if observer not in self._observers:
                return False
            self._observers.remove(observer)
        logger.debug(f"Unregistered {self._kind} observer: {observer}")
        return True

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> int:
        """
        Call ``callback_name`` on every registered observer.

        Returns:
            Number of observers whose callback was missing or raised
        """
        with self._lock:
            observers = tuple(self._observers)

        failures = 0
        for observer in observers:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer} has no method '{callback_name}'")
                failures += 1
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._kind} observer {observer} failed in {callback_name}: {e}",
                    exc_info=True,
                )
                failures += 1
        return failures
