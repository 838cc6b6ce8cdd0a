"""Home Assistant REST API binding.

Reads entity states with ``GET /api/states/<entity_id>`` and writes through
``POST /api/services/<domain>/<service>``, authenticated with a long-lived
access token. HTTP calls are blocking (requests), so service calls run in a
worker thread to keep the event loop responsive.
"""

import asyncio
import logging
from typing import Any

import requests

from colorwheel.exceptions import BindingConnectionError, EntityWriteError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HomeAssistantBinding:
    """
    ExternalBinding backed by a Home Assistant instance.

    Usage:
        ```python
        binding = HomeAssistantBinding("http://homeassistant.local:8123", token)
        binding.get_state("input_text.lamp_color")   # '#FF8800' or None
        await binding.call_service("input_text", "set_value",
                                   {"entity_id": "input_text.lamp_color", "value": "#00FF00"})
        ```
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the binding.

        Args:
            base_url: Root URL of the instance (e.g. http://homeassistant.local:8123)
            token: Long-lived access token
            timeout: Request timeout in seconds
            session: Optional requests session (for connection reuse or testing)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

    @property
    def base_url(self) -> str:
        """Root URL of the instance."""
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def get_state(self, entity_id: str) -> str | None:
        """
        Return the raw state of an entity.

        Returns:
            The state string, or None if the entity doesn't exist

        Raises:
            BindingConnectionError: If the instance can't be reached or errors
        """
        url = f"{self._base_url}/api/states/{entity_id}"
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise BindingConnectionError(url, str(e)) from e

        if response.status_code == 404:
            logger.info(f"Entity {entity_id} not found on {self._base_url}")
            return None

        try:
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise BindingConnectionError(url, str(e)) from e

        state = payload.get("state")
        if state is None or state in ("unknown", "unavailable"):
            return None
        return str(state)

    async def call_service(self, domain: str, service: str, data: dict[str, Any]) -> None:
        """
        Call a service without blocking the event loop.

        Raises:
            EntityWriteError: If the call is rejected or the request fails
        """
        await asyncio.to_thread(self._post_service, domain, service, data)

    def _post_service(self, domain: str, service: str, data: dict[str, Any]) -> None:
        url = f"{self._base_url}/api/services/{domain}/{service}"
        entity_id = str(data.get("entity_id", ""))
        try:
            response = self._session.post(url, json=data, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise EntityWriteError(entity_id, f"{domain}.{service}", str(e)) from e
        logger.debug(f"{domain}.{service} accepted for {entity_id}")
