"""Data models for the color wheel card."""

from .color import HSV, Color
from .config import DEFAULT_TITLE, CardConfig
from .enums import CardStatus, ColorFormat, DragState, PointerKind
from .session import DragSession
from .view import CardView
from .wheel import Offset, WheelConfig

__all__ = [
    "DEFAULT_TITLE",
    "HSV",
    "CardConfig",
    # Enums
    "CardStatus",
    # Models
    "CardView",
    "Color",
    "ColorFormat",
    "DragSession",
    "DragState",
    "Offset",
    "PointerKind",
    "WheelConfig",
]
