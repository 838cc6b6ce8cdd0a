"""Interfaces the card needs from its host."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ExternalBinding(Protocol):
    """
    Read and write access to host entities.

    The write path is modelled after dashboard service calls: a
    ``domain.service`` name plus a data mapping. The primary write uses
    ``input_text.set_value`` with the value under ``value``; the fallback
    uses ``homeassistant.update_entity`` with the value under ``new_state``.
    """

    def get_state(self, entity_id: str) -> str | None:
        """
        Return the raw value of an entity.

        Returns:
            The value string, or None if the entity is unknown
        """
        ...

    async def call_service(self, domain: str, service: str, data: dict[str, Any]) -> None:
        """
        Call a host service.

        Raises:
            Exception: Any failure; callers treat every exception as a rejected write
        """
        ...


@runtime_checkable
class PointerCapture(Protocol):
    """
    The set of listeners that feed move/release events during a drag.

    Acquired on press and released on release or teardown. Listeners are
    scoped to the whole document/window because the pointer may leave the
    wheel mid-drag.
    """

    def acquire(self) -> None:
        """Start routing pointer move/release events to the drag."""
        ...

    def release(self) -> None:
        """Stop routing pointer events to the drag."""
        ...


FrameScheduler = Callable[[Callable[[], None]], None]
"""Runs a callback once before the next frame is drawn."""

Committer = Callable[[str], None]
"""Hands a formatted value to the write path (fire-and-forget)."""
