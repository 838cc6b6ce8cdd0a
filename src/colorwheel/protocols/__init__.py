"""Protocol definitions for observers and host interfaces.

- Events: drag and card events
- Observers: protocols for components that react to these events
- Binding: what the card needs from its host (state, service calls,
  pointer capture, frame scheduling)
"""

from .binding import Committer, ExternalBinding, FrameScheduler, PointerCapture
from .events import CardEvent, DragEvent
from .observers import CardObserver, DragObserver, StateObserver

__all__ = [
    "CardEvent",
    "CardObserver",
    "Committer",
    # Events
    "DragEvent",
    # Observers
    "DragObserver",
    # Binding
    "ExternalBinding",
    "FrameScheduler",
    "PointerCapture",
    "StateObserver",
]
