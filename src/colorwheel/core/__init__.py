"""Core engine: wheel geometry, drag state machine and the card."""

from .card import ENTITY_NOT_FOUND, ColorWheelCard
from .drag_controller import DragController
from .geometry import WheelGeometry, WheelRegion

__all__ = [
    "ENTITY_NOT_FOUND",
    "ColorWheelCard",
    "DragController",
    "WheelGeometry",
    "WheelRegion",
]
