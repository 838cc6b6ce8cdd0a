"""Textual widgets."""

from .color_wheel import ColorWheelWidget, MouseCapture

__all__ = ["ColorWheelWidget", "MouseCapture"]
