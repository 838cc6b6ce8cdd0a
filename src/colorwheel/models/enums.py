"""Enumerations for the color wheel card."""

from enum import Enum


class ColorFormat(str, Enum):
    """Textual encodings of an entity color value."""

    AUTO = "auto"  # Use whatever encoding the current entity value uses
    HEX = "hex"  # "#1A2B3C"
    RGB = "rgb"  # "rgb(26, 43, 60)"
    ARRAY = "array"  # "[26, 43, 60]"


class PointerKind(str, Enum):
    """Input device that started a drag."""

    MOUSE = "mouse"
    TOUCH = "touch"


class DragState(str, Enum):
    """States of the drag controller."""

    IDLE = "idle"
    DRAGGING = "dragging"


class CardStatus(str, Enum):
    """Whether the card currently shows a color or an error."""

    OK = "ok"
    ERROR = "error"
