"""RGB <-> HSV conversion.

Both directions are pure functions over plain numbers. Channels are 8-bit
integers; hue is in degrees and saturation/value are fractions.

Round-trip guarantee: for every integral RGB triple,
``hsv_to_rgb(*rgb_to_hsv(r, g, b).to_tuple())`` returns the same triple.
Hue is therefore never rounded on the way in.
"""

import math

from colorwheel.models import HSV, Color


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % 360.0
    # -1e-15 % 360.0 == 360.0 in floating point
    if h >= 360.0:
        h = 0.0
    return h


def _clamp_unit(x: float) -> float:
    return min(max(x, 0.0), 1.0)


def _to_channel(x: float) -> int:
    """Scale a [0, 1] fraction to a 0-255 channel, rounding half up."""
    return min(max(math.floor(x * 255 + 0.5), 0), 255)


def rgb_to_hsv(r: int, g: int, b: int) -> HSV:
    """
    Convert 8-bit RGB to HSV.

    Args:
        r: Red (0-255)
        g: Green (0-255)
        b: Blue (0-255)

    Returns:
        HSV with hue in [0, 360) and saturation/value in [0, 1]

    Example:
        >>> rgb_to_hsv(255, 0, 0)
        HSV(h=0.0, s=1.0, v=1.0)
    """
    rf, gf, bf = r / 255, g / 255, b / 255

    c_max = max(rf, gf, bf)
    c_min = min(rf, gf, bf)
    delta = c_max - c_min

    v = c_max
    s = 0.0 if c_max == 0 else delta / c_max

    if delta == 0:
        h = 0.0  # achromatic
    elif c_max == rf:
        h = ((gf - bf) / delta) % 6
    elif c_max == gf:
        h = (bf - rf) / delta + 2
    else:
        h = (rf - gf) / delta + 4

    h *= 60
    if h < 0:
        h += 360

    return HSV(h=normalize_hue(h), s=_clamp_unit(s), v=_clamp_unit(v))


def hsv_to_rgb(h: float, s: float, v: float = 1.0) -> Color:
    """
    Convert HSV to 8-bit RGB.

    Hue is wrapped into [0, 360) first, so 360 and 0 give the same color.
    Saturation and value are clamped to [0, 1].

    Args:
        h: Hue in degrees
        s: Saturation (0.0-1.0)
        v: Value (0.0-1.0)

    Returns:
        Color with each channel rounded to the nearest integer
    """
    h = normalize_hue(h)
    s = _clamp_unit(s)
    v = _clamp_unit(v)

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return Color(r=_to_channel(r + m), g=_to_channel(g + m), b=_to_channel(b + m))


def color_to_hsv(color: Color) -> HSV:
    """Convert a Color model to HSV."""
    return rgb_to_hsv(color.r, color.g, color.b)


def hsv_model_to_color(hsv: HSV) -> Color:
    """Convert an HSV model to a Color."""
    return hsv_to_rgb(hsv.h, hsv.s, hsv.v)
