"""Write path for committed colors, with a single fallback attempt."""

import logging

from colorwheel.protocols import ExternalBinding

logger = logging.getLogger(__name__)

PRIMARY_SERVICE = ("input_text", "set_value")
FALLBACK_SERVICE = ("homeassistant", "update_entity")


class CommitService:
    """
    Writes a value to an entity through the host's services.

    The primary write calls ``input_text.set_value`` with the value under
    ``value``. If it fails, exactly one fallback call is made to
    ``homeassistant.update_entity`` with the same value under ``new_state``.
    If the fallback fails too, the failure is logged and reported through the
    return value; nothing is retried and nothing is raised.

    Commits are independent: overlapping calls are neither queued nor
    cancelled, and no ordering is guaranteed between them.

    Usage:
        ```python
        service = CommitService(binding)
        ok = await service.commit("input_text.lamp_color", "#FF8800")
        ```
    """

    def __init__(self, binding: ExternalBinding) -> None:
        """
        Initialize the commit service.

        Args:
            binding: Host binding whose services perform the writes
        """
        self._binding = binding
        self._attempts = 0
        self._failures = 0

    @property
    def attempts(self) -> int:
        """Number of service calls made, primary and fallback."""
        return self._attempts

    @property
    def failures(self) -> int:
        """Number of commits that failed after the fallback."""
        return self._failures

    async def commit(self, entity_id: str, value: str) -> bool:
        """
        Write a value to an entity.

        Args:
            entity_id: Entity to write
            value: Encoded color value

        Returns:
            True if either the primary or the fallback write succeeded
        """
        domain, service = PRIMARY_SERVICE
        try:
            self._attempts += 1
            await self._binding.call_service(domain, service, {"entity_id": entity_id, "value": value})
            logger.info(f"Updated {entity_id} to {value}")
            return True
        except Exception as e:
            logger.error(f"Failed to update entity {entity_id}: {e}")

        domain, service = FALLBACK_SERVICE
        try:
            self._attempts += 1
            await self._binding.call_service(domain, service, {"entity_id": entity_id, "new_state": value})
            logger.info(f"Updated {entity_id} to {value} with {domain}.{service}")
            return True
        except Exception as e:
            self._failures += 1
            logger.error(f"Failed to update entity {entity_id} with alternative method: {e}")
            return False
