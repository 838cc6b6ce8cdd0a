"""External binding exceptions.

Raised by the bindings that connect a card to its host:
- EntityNotFoundError: The host does not know the entity
- EntityWriteError: A service call writing the entity failed
- BindingConnectionError: The host could not be reached at all
"""

from .base import ColorWheelError


class BindingError(ColorWheelError):
    """Communication with the host failed."""

    recoverable = True


class EntityNotFoundError(BindingError):
    """The host has no state for the requested entity."""

    def __init__(self, entity_id: str):
        super().__init__(
            user_message="Entity not found or not specified",
            technical_message=f"Host returned no state for entity {entity_id!r}",
            recovery_hint=f"Check that '{entity_id}' exists on the host",
        )
        self.entity_id = entity_id


class EntityWriteError(BindingError):
    """A service call that writes an entity was rejected."""

    def __init__(self, entity_id: str, service: str, original_error: str):
        """
        Initialize entity write error.

        Args:
            entity_id: The entity being written
            service: Service called, as 'domain.service'
            original_error: Error reported by the host or transport
        """
        super().__init__(
            user_message=f"Failed to update {entity_id}",
            technical_message=f"{service} for {entity_id} failed: {original_error}",
        )
        self.entity_id = entity_id
        self.service = service
        self.original_error = original_error


class BindingConnectionError(BindingError):
    """The host could not be reached."""

    def __init__(self, url: str, original_error: str):
        super().__init__(
            user_message="Unable to reach the dashboard host",
            technical_message=f"Connection to {url} failed: {original_error}",
            recovery_hint="Check the host URL and access token, then retry",
        )
        self.url = url
        self.original_error = original_error
