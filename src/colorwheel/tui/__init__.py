"""Textual user interface."""

from .app import ColorWheelApp

__all__ = ["ColorWheelApp"]
