"""Render description produced by the card."""

from pydantic import BaseModel, ConfigDict, Field

from .color import Color
from .enums import CardStatus, ColorFormat
from .wheel import Offset, WheelConfig


class CardView(BaseModel):
    """Everything a renderer needs to draw the card.

    Produced by ``ColorWheelCard.render()`` as a pure function of the
    configuration, the last external value and the active drag.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Card header")
    status: CardStatus = Field(description="OK or ERROR")
    message: str | None = Field(default=None, description="Error text in the ERROR state")
    wheel: WheelConfig | None = Field(default=None, description="Wheel dimensions")
    color: Color | None = Field(default=None, description="Selected or previewed color")
    marker: Offset | None = Field(default=None, description="Marker offset from the wheel center")
    display_value: str | None = Field(default=None, description="Value text shown under the wheel")
    output_format: ColorFormat | None = Field(default=None, description="Format used when writing")
    interactive: bool = Field(default=False, description="Whether the wheel accepts pointer input")
    dragging: bool = Field(default=False, description="Whether a drag preview is showing")

    @property
    def is_error(self) -> bool:
        """Check if the card is showing an error state."""
        return self.status == CardStatus.ERROR
