"""Host bindings implementing the ExternalBinding protocol."""

from .home_assistant import HomeAssistantBinding
from .memory import InMemoryBinding, ServiceCall

__all__ = ["HomeAssistantBinding", "InMemoryBinding", "ServiceCall"]
