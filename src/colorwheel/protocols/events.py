"""Domain events for observer pattern.

- Drag events: preview updates from the drag controller
- Card events: render-relevant changes of the card
"""

from enum import Enum


class DragEvent(Enum):
    """Events from the drag controller."""

    STARTED = "started"        # Press on the wheel, preview shows the pressed color
    MOVED = "moved"            # Preview follows the pointer (coalesced per frame)
    RELEASED = "released"      # Final preview, commit has been handed off
    CANCELLED = "cancelled"    # Drag dropped without writing (teardown, invalid state)


class CardEvent(Enum):
    """Events from the card that require re-rendering."""

    CONFIGURED = "configured"        # New configuration applied
    STATE_CHANGED = "state_changed"  # New external value observed
    PREVIEW = "preview"              # Drag preview changed
    COMMITTED = "committed"          # Commit finished (successfully or not)
