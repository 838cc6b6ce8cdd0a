"""Observer protocol definitions.

- Drag observers: React to preview changes during a drag
- Card observers: React to anything that changes the card's render
- State observers: React to entity values changing on the host
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colorwheel.models import CardView, DragSession

from .events import CardEvent, DragEvent


@runtime_checkable
class DragObserver(Protocol):
    """
    Observer that receives drag preview events.

    The card registers itself here to turn previews into render updates.
    """

    def on_drag_event(self, event: "DragEvent", session: "DragSession") -> None:
        """
        Handle a drag event.

        Args:
            event: The type of drag event
            session: The drag session after the event was applied

        Note:
            Called on the UI event path for every coalesced move, so
            implementations must not block or do I/O.
        """
        ...


@runtime_checkable
class CardObserver(Protocol):
    """
    Observer that receives card render events.

    Renderers (e.g. the Textual widget) implement this to repaint.
    """

    def on_card_event(self, event: "CardEvent", view: "CardView") -> None:
        """
        Handle a card event.

        Args:
            event: What changed
            view: Fresh render description of the card
        """
        ...


@runtime_checkable
class StateObserver(Protocol):
    """
    Observer that receives entity value changes from a binding.
    """

    def on_state_changed(self, entity_id: str, value: str | None) -> None:
        """
        Handle an entity value change.

        Args:
            entity_id: The entity that changed
            value: New raw value, or None if the entity disappeared
        """
        ...
