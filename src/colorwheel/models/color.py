"""Color models for the wheel: 8-bit RGB and cylindrical HSV."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    This is the canonical representation used for rendering and for
    formatting the value written back to the entity. The model is frozen
    so colors can be shared between the drag session and render views.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int) -> int:
        """Ensure RGB values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("RGB values must be between 0 and 255")
        return v

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def white(cls) -> "Color":
        """Create white color (the wheel border)."""
        return cls(r=255, g=255, b=255)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_css_rgb(self) -> str:
        """Convert to CSS functional notation (e.g., 'rgb(255, 0, 0)')."""
        return f"rgb({self.r}, {self.g}, {self.b})"


class HSV(BaseModel):
    """Hue/saturation/value color.

    Hue is in degrees and always normalized to [0, 360); saturation and
    value are fractions in [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
    s: float = Field(ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    v: float = Field(default=1.0, ge=0.0, le=1.0, description="Value (0.0-1.0)")

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (h, s, v) tuple."""
        return (self.h, self.s, self.v)
