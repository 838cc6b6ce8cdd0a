"""Transient state of one press/move/release cycle."""

from pydantic import BaseModel, Field

from .color import HSV, Color
from .enums import PointerKind
from .wheel import Offset


class DragSession(BaseModel):
    """A single drag, alive between a press and its matching release.

    Only the latest pointer position and the color derived from it are
    kept; intermediate positions are discarded.
    """

    active: bool = Field(default=True, description="False once released or cancelled")
    pointer: PointerKind = Field(default=PointerKind.MOUSE, description="Device that started the drag")
    position: Offset = Field(description="Latest pointer offset from the wheel center")
    hsv: HSV = Field(description="Hue/saturation under the latest position")
    color: Color = Field(description="RGB color under the latest position")
    marker: Offset = Field(description="Marker offset for the latest color")
    moves: int = Field(default=0, ge=0, description="Number of move events received")
