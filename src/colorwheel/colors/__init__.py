"""Color encodings and color-space conversion.

Colors travel through the card in three shapes:

1. **Entity value** (``str``) - what the host stores, in one of the
   ``hex`` / ``rgb`` / ``array`` encodings. Handled by ``ColorCodec``.
2. **Color** (8-bit RGB) - the canonical internal representation used for
   rendering and for formatting the value written back.
3. **HSV** - hue/saturation used to place the marker on the wheel and to
   turn a pointer position back into a color. Handled by ``rgb_to_hsv`` /
   ``hsv_to_rgb``.

```
entity value --decode--> Color --rgb_to_hsv--> HSV --> marker position
pointer --> HSV --hsv_to_rgb--> Color --encode--> entity value
```
"""

from .codec import ColorCodec
from .conversion import color_to_hsv, hsv_model_to_color, hsv_to_rgb, normalize_hue, rgb_to_hsv

__all__ = [
    "ColorCodec",
    "color_to_hsv",
    "hsv_model_to_color",
    "hsv_to_rgb",
    "normalize_hue",
    "rgb_to_hsv",
]
