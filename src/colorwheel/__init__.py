"""colorwheel: circular color picker card for dashboard entities."""

__version__ = "0.1.0"

from .core import ColorWheelCard, DragController, WheelGeometry

__all__ = [
    "ColorWheelCard",
    "DragController",
    "WheelGeometry",
]
