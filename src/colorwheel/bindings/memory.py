"""In-process host binding.

Holds entity values in a dict and implements the two write services the card
uses. Useful for demos, the CLI and tests; failures can be injected per
service to exercise the fallback path.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from colorwheel.exceptions import EntityNotFoundError, EntityWriteError
from colorwheel.protocols import StateObserver
from colorwheel.utils import ObserverManager

logger = logging.getLogger(__name__)


@dataclass
class ServiceCall:
    """A recorded service call."""

    domain: str
    service: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Service name as 'domain.service'."""
        return f"{self.domain}.{self.service}"


class InMemoryBinding:
    """
    Dict-backed implementation of ExternalBinding.

    Supported services:
        - ``input_text.set_value`` with ``entity_id`` and ``value``
        - ``homeassistant.update_entity`` with ``entity_id`` and ``new_state``

    Example:
        ```python
        binding = InMemoryBinding({"input_text.lamp": "#FF0000"})
        binding.fail_service("input_text.set_value")   # force the fallback
        ```
    """

    def __init__(self, states: dict[str, str] | None = None) -> None:
        """
        Initialize the binding.

        Args:
            states: Initial entity values keyed by entity id
        """
        self._states: dict[str, str] = dict(states or {})
        self._failing: set[str] = set()
        self.calls: list[ServiceCall] = []
        self._observers = ObserverManager[StateObserver]("state")

    def register_observer(self, observer: StateObserver) -> None:
        """Register an observer to receive entity changes."""
        self._observers.register(observer)

    def unregister_observer(self, observer: StateObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def fail_service(self, service_name: str, failing: bool = True) -> None:
        """
        Make a service reject calls (or accept them again).

        Args:
            service_name: Service as 'domain.service'
            failing: True to reject calls
        """
        if failing:
            self._failing.add(service_name)
        else:
            self._failing.discard(service_name)

    def get_state(self, entity_id: str) -> str | None:
        """Return the raw value of an entity, or None if unknown."""
        return self._states.get(entity_id)

    def set_state(self, entity_id: str, value: str | None) -> None:
        """Change an entity as the host would, notifying observers."""
        if value is None:
            self._states.pop(entity_id, None)
        else:
            self._states[entity_id] = value
        self._observers.notify("on_state_changed", entity_id, value)

    async def call_service(self, domain: str, service: str, data: dict[str, Any]) -> None:
        """
        Perform a write service call.

        Raises:
            EntityWriteError: If the service is failing or unsupported
            EntityNotFoundError: If the entity doesn't exist
        """
        call = ServiceCall(domain, service, dict(data))
        self.calls.append(call)
        entity_id = str(data.get("entity_id", ""))

        if call.name in self._failing:
            raise EntityWriteError(entity_id, call.name, "service unavailable")

        if call.name == "input_text.set_value":
            value = data["value"]
        elif call.name == "homeassistant.update_entity":
            value = data["new_state"]
        else:
            raise EntityWriteError(entity_id, call.name, "unsupported service")

        if entity_id not in self._states:
            raise EntityNotFoundError(entity_id)

        logger.debug(f"{call.name}: {entity_id} = {value}")
        self.set_state(entity_id, str(value))
