"""Card configuration model."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from colorwheel.utils.persistence import PydanticPersistence

from .enums import ColorFormat
from .wheel import WheelConfig

DEFAULT_TITLE = "Color Wheel"


class CardConfig(BaseModel):
    """Configuration of one color wheel card.

    Accepts both the camelCase keys used in dashboard YAML (``wheelSize``,
    ``outerThickness``) and their snake_case names. Unknown keys such as the
    dashboard's ``type`` are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    entity: str = Field(min_length=1, description="Entity to read the color from and write it to")
    title: str | None = Field(default=None, description="Card header (defaults to 'Color Wheel')")
    format: ColorFormat = Field(default=ColorFormat.AUTO, description="Encoding used when writing")
    wheel_size: int = Field(
        default=150, ge=50, le=300, alias="wheelSize", description="Wheel radius in px"
    )
    padding: int = Field(default=5, ge=0, le=20, description="White padding inside the rim in px")
    outer_thickness: int = Field(
        default=15, ge=0, le=30, alias="outerThickness", description="Outer ring thickness in px"
    )

    @model_validator(mode="after")
    def check_padding(self) -> "CardConfig":
        """Padding has to stay inside the wheel."""
        if self.padding >= self.wheel_size:
            raise ValueError("padding must be smaller than wheelSize")
        return self

    @property
    def display_title(self) -> str:
        """Title to render in the card header."""
        return self.title or DEFAULT_TITLE

    def wheel_config(self) -> WheelConfig:
        """Build the wheel dimensions for this card."""
        return WheelConfig(
            radius=self.wheel_size,
            padding=self.padding,
            outer_thickness=self.outer_thickness,
        )

    @staticmethod
    def stub() -> dict[str, Any]:
        """Starting configuration offered when a card is first added."""
        return {"entity": "", "format": ColorFormat.AUTO.value}

    @classmethod
    def load(cls, path: Path) -> "CardConfig":
        """
        Load a card configuration from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid
            MissingEntityError: If the file names no entity
            ConfigValidationError: If other values fail validation
        """
        return PydanticPersistence.load_json(path, cls)

    def save(self, path: Path) -> None:
        """Save the configuration using the dashboard's camelCase keys."""
        PydanticPersistence.save_json(self, path, by_alias=True)
