"""Textual color encodings of entity values.

Three grammars are understood:

| Format | Grammar | Example |
|---|---|---|
| hex | ``#`` + 6 hex digits | ``#1A2B3C`` |
| rgb | ``rgb(R, G, B)``, decimal 0-255 | ``rgb(26, 43, 60)`` |
| array | JSON array, >= 3 numbers, first three used | ``[26, 43, 60]`` |

``ColorFormat.AUTO`` resolves to one of these by looking at the value's
leading (and, for arrays, trailing) characters. Values are matched as
given; surrounding whitespace makes a value unrecognized.
"""

import json
import logging
import re

from colorwheel.exceptions import ColorParseError, UnrecognizedFormatError
from colorwheel.models import Color, ColorFormat

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")
_RGB_RE = re.compile(r"rgb\(([0-9]{1,3}),\s*([0-9]{1,3}),\s*([0-9]{1,3})\)")


class ColorCodec:
    """
    Stateless parse/format helpers for entity color values.

    Example Usage:
        ```python
        fmt = ColorCodec.detect_format("rgb(26, 43, 60)")   # ColorFormat.RGB
        color = ColorCodec.decode("#1A2B3C")                # Color(r=26, g=43, b=60)
        ColorCodec.encode(color, ColorFormat.ARRAY)         # "[26, 43, 60]"
        ```
    """

    @staticmethod
    def detect_format(value: str) -> ColorFormat | None:
        """
        Work out which encoding a value uses.

        Returns:
            The concrete format, or None if the value is unrecognized
        """
        if value.startswith("#"):
            return ColorFormat.HEX
        if value.startswith("rgb"):
            return ColorFormat.RGB
        if value.startswith("[") and value.endswith("]"):
            return ColorFormat.ARRAY
        return None

    @staticmethod
    def resolve_format(fmt: ColorFormat, current_value: str | None = None) -> ColorFormat:
        """
        Resolve the format used for writing.

        ``AUTO`` follows the currently loaded entity value and falls back
        to hex if that value is missing or unrecognized.
        """
        if fmt != ColorFormat.AUTO:
            return fmt
        if current_value is not None:
            detected = ColorCodec.detect_format(current_value)
            if detected is not None:
                return detected
        return ColorFormat.HEX

    @staticmethod
    def decode(value: str, fmt: ColorFormat = ColorFormat.AUTO) -> Color:
        """
        Parse an entity value into a Color.

        Args:
            value: Raw entity value
            fmt: Encoding to parse as; AUTO detects it from the value

        Raises:
            UnrecognizedFormatError: If fmt is AUTO and no encoding matches
            ColorParseError: If the value doesn't follow the grammar
        """
        if fmt == ColorFormat.AUTO:
            detected = ColorCodec.detect_format(value)
            if detected is None:
                raise UnrecognizedFormatError(value)
            fmt = detected

        if fmt == ColorFormat.HEX:
            return ColorCodec._decode_hex(value)
        if fmt == ColorFormat.RGB:
            return ColorCodec._decode_rgb(value)
        return ColorCodec._decode_array(value)

    @staticmethod
    def encode(color: Color, fmt: ColorFormat, current_value: str | None = None) -> str:
        """
        Format a Color for writing back to the entity.

        Args:
            color: Color to encode
            fmt: Target encoding
            current_value: Currently loaded entity value, consulted for AUTO
        """
        fmt = ColorCodec.resolve_format(fmt, current_value)
        r, g, b = color.to_rgb_tuple()

        if fmt == ColorFormat.RGB:
            return f"rgb({r}, {g}, {b})"
        if fmt == ColorFormat.ARRAY:
            return f"[{r}, {g}, {b}]"
        return color.to_hex()

    @staticmethod
    def _decode_hex(value: str) -> Color:
        digits = value[1:] if value.startswith("#") else value
        if not _HEX_RE.fullmatch(digits):
            raise ColorParseError(value, "expected exactly 6 hex digits", fmt="hex")
        return Color(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    @staticmethod
    def _decode_rgb(value: str) -> Color:
        match = _RGB_RE.fullmatch(value)
        if not match:
            raise ColorParseError(value, "expected 'rgb(R, G, B)'", fmt="rgb")

        channels = [int(group) for group in match.groups()]
        if any(channel > 255 for channel in channels):
            raise ColorParseError(value, "channels must be between 0 and 255", fmt="rgb")
        r, g, b = channels
        return Color(r=r, g=g, b=b)

    @staticmethod
    def _decode_array(value: str) -> Color:
        try:
            items = json.loads(value)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and integers past the digit limit
            raise ColorParseError(value, f"invalid JSON: {e}", fmt="array") from e

        if not isinstance(items, list) or len(items) < 3:
            raise ColorParseError(value, "expected an array of at least 3 numbers", fmt="array")

        channels = []
        for item in items[:3]:
            # bool is an int subclass; reject true/false explicitly
            if isinstance(item, bool) or not isinstance(item, (int, float)):
                raise ColorParseError(value, f"{item!r} is not a number", fmt="array")
            if isinstance(item, float) and not item.is_integer():
                raise ColorParseError(value, f"{item!r} is not a whole number", fmt="array")
            if not 0 <= item <= 255:
                raise ColorParseError(value, "channels must be between 0 and 255", fmt="array")
            channels.append(int(item))

        if len(items) > 3:
            logger.debug(f"Ignoring {len(items) - 3} extra array elements in {value!r}")

        r, g, b = channels
        return Color(r=r, g=g, b=b)
