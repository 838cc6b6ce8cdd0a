"""Mapping between pointer offsets, hue/saturation and marker positions.

Angle convention
----------------
Pointer offsets are screen coordinates relative to the wheel center, x to
the right and y downwards. Hue is measured clockwise from the top of the
wheel (12 o'clock), the same way a conic gradient sweeps::

                 0° red
                   |
    270° violet ---+--- 90° yellow-green
                   |
               180° cyan

    hue = atan2(x, -y) in degrees, wrapped into [0, 360)
    x   =  sin(hue) * s * effective_radius
    y   = -cos(hue) * s * effective_radius

The two directions are exact inverses for every offset inside the
effective radius. Offsets beyond it are clamped to the rim, so saturation
is exactly 1.0 at and beyond the rim and exactly 0.0 at the center (where
hue is reported as 0).
"""

import math
from enum import Enum

from colorwheel.colors import hsv_to_rgb, normalize_hue
from colorwheel.models import HSV, Color, Offset, WheelConfig


class WheelRegion(Enum):
    """Area of the card a pixel offset falls in."""

    WHEEL = "wheel"      # Inside the gradient (pickable)
    BORDER = "border"    # White padding between gradient and rim
    RING = "ring"        # Outer ring showing the current color
    OUTSIDE = "outside"  # Beyond the outer ring


class WheelGeometry:
    """
    Pointer/color/marker math for one wheel configuration.

    Example:
        ```python
        geometry = WheelGeometry(WheelConfig(radius=150, padding=5))
        hsv, distance = geometry.point_to_color(Offset(0, -145))  # top rim -> red
        geometry.color_to_marker_position(hsv)                   # Offset(0, -145)
        ```
    """

    def __init__(self, config: WheelConfig | None = None) -> None:
        self._config = config or WheelConfig()

    @property
    def config(self) -> WheelConfig:
        """The wheel dimensions."""
        return self._config

    @property
    def effective_radius(self) -> float:
        """Radius of the pickable gradient."""
        return self._config.effective_radius

    def point_to_color(self, offset: Offset) -> tuple[HSV, float]:
        """
        Map a pointer offset to the hue/saturation under it.

        Args:
            offset: Pointer offset from the wheel center

        Returns:
            Tuple of (HSV with value 1.0, distance clamped to the effective radius)
        """
        x, y = offset
        raw_distance = math.hypot(x, y)
        distance = min(raw_distance, self.effective_radius)
        saturation = distance / self.effective_radius

        # atan2(0, -0.0) is 180 degrees; pin the center to hue 0
        hue = normalize_hue(math.degrees(math.atan2(x, -y))) if raw_distance > 0 else 0.0
        return HSV(h=hue, s=min(saturation, 1.0), v=1.0), distance

    def color_to_marker_position(self, hsv: HSV) -> Offset:
        """
        Place the marker for a hue/saturation.

        Value is ignored; the marker only encodes hue and saturation.
        """
        radians = math.radians(hsv.h)
        distance = hsv.s * self.effective_radius
        return Offset(math.sin(radians) * distance, -math.cos(radians) * distance)

    def color_at(self, offset: Offset) -> Color:
        """RGB color under a pointer offset."""
        hsv, _ = self.point_to_color(offset)
        return hsv_to_rgb(hsv.h, hsv.s, hsv.v)

    def classify(self, offset: Offset) -> WheelRegion:
        """Tell which part of the card an offset falls in."""
        distance = math.hypot(*offset)
        if distance <= self.effective_radius:
            return WheelRegion.WHEEL
        if distance <= self._config.radius:
            return WheelRegion.BORDER
        if distance <= self._config.outer_radius:
            return WheelRegion.RING
        return WheelRegion.OUTSIDE
