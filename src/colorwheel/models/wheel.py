"""Wheel dimensions and pointer offsets."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Offset(NamedTuple):
    """Pixel offset from the wheel center in screen coordinates (x right, y down)."""

    x: float
    y: float


class WheelConfig(BaseModel):
    """Immutable dimensions of one wheel.

    The hue/saturation gradient fills the disc inside ``radius - padding``;
    ``padding`` is the white border between the gradient and the rim, and
    ``outer_thickness`` is the ring outside the rim that shows the current color.
    """

    model_config = ConfigDict(frozen=True)

    radius: float = Field(default=150.0, gt=0, description="Wheel radius in px")
    padding: float = Field(default=5.0, ge=0, description="White border padding in px")
    outer_thickness: float = Field(default=15.0, ge=0, description="Outer ring thickness in px")

    @model_validator(mode="after")
    def check_padding(self) -> "WheelConfig":
        """The border must leave some gradient to pick from."""
        if self.padding >= self.radius:
            raise ValueError("padding must be smaller than the wheel radius")
        return self

    @property
    def effective_radius(self) -> float:
        """Usable interactive radius (radius minus border padding)."""
        return self.radius - self.padding

    @property
    def outer_radius(self) -> float:
        """Radius including the outer color ring."""
        return self.radius + self.outer_thickness

    @property
    def diameter(self) -> float:
        """Diameter of the wheel itself."""
        return self.radius * 2

    @property
    def outer_diameter(self) -> float:
        """Diameter of the wheel plus its outer ring."""
        return self.outer_radius * 2
