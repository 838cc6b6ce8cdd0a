"""Terminal rendering of the wheel and mouse input for the card."""

import logging
import math

from rich.style import Style
from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from colorwheel.core import ColorWheelCard, WheelRegion
from colorwheel.models import CardConfig, CardView, Color, Offset
from colorwheel.protocols import CardEvent, ExternalBinding

logger = logging.getLogger(__name__)

MARKER = "●"


class MouseCapture:
    """PointerCapture that routes all mouse events to one widget while dragging."""

    def __init__(self, widget: Widget) -> None:
        self._widget = widget

    def acquire(self) -> None:
        self._widget.capture_mouse()

    def release(self) -> None:
        self._widget.release_mouse()


class ColorWheelWidget(Widget):
    """
    Color wheel drawn with terminal cells.

    Each cell is sampled at its center in wheel pixel space, so the terminal
    only changes resolution, not the geometry. Terminal cells are about twice
    as tall as they are wide, hence twice as many columns as rows.

    Implements CardObserver via structural subtyping.
    """

    DEFAULT_CSS = """
    ColorWheelWidget {
        width: auto;
        height: auto;
    }
    """

    class ValueChanged(Message):
        """Posted when the card's displayed value changes."""

        def __init__(self, view: CardView) -> None:
            super().__init__()
            self.view = view

    def __init__(
        self,
        config: CardConfig,
        binding: ExternalBinding | None = None,
        rows: int = 21,
        *,
        id: str | None = None,
    ) -> None:
        """
        Initialize the widget.

        Args:
            config: Card configuration
            binding: Host binding for reads and writes
            rows: Terminal rows used for the wheel including its outer ring
        """
        super().__init__(id=id)
        self.rows = rows
        self.cols = rows * 2
        self.card = ColorWheelCard(
            binding,
            capture=MouseCapture(self),
            frame_scheduler=self.call_after_refresh,
        )
        self.card.set_config(config)
        self.card.register_observer(self)

    def on_unmount(self) -> None:
        """Widget removed: drop any drag without writing."""
        self.card.teardown()
        self.card.unregister_observer(self)

    def get_content_width(self, container, viewport) -> int:
        return self.cols

    def get_content_height(self, container, viewport, width) -> int:
        return self.rows

    # =================================================================
    # Cell <-> wheel pixel mapping
    # =================================================================

    def _scale(self) -> tuple[float, float, float]:
        """Pixels per column, pixels per row and outer radius."""
        outer_radius = self.card.geometry.config.outer_radius
        return (2 * outer_radius / self.cols, 2 * outer_radius / self.rows, outer_radius)

    def cell_to_offset(self, col: float, row: float) -> Offset:
        """Offset from the wheel center of a cell's midpoint."""
        px_col, px_row, radius = self._scale()
        return Offset((col + 0.5) * px_col - radius, (row + 0.5) * px_row - radius)

    def offset_to_cell(self, offset: Offset) -> tuple[int, int]:
        """Cell containing a wheel offset."""
        px_col, px_row, radius = self._scale()
        return (math.floor((offset.x + radius) / px_col), math.floor((offset.y + radius) / px_row))

    # =================================================================
    # Mouse input
    # =================================================================

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        self.card.press(self.cell_to_offset(event.x, event.y))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.card.is_dragging:
            self.card.move(self.cell_to_offset(event.x, event.y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.card.is_dragging:
            self.card.release(self.cell_to_offset(event.x, event.y))

    def on_card_event(self, event: CardEvent, view: CardView) -> None:
        """Repaint on any card change."""
        self.refresh()
        self.post_message(self.ValueChanged(view))

    # =================================================================
    # Rendering
    # =================================================================

    def render(self) -> Text:
        view = self.card.render()
        if view.is_error:
            return Text(view.message or "", style="bold red")

        geometry = self.card.geometry
        ring = view.color or Color.white()
        marker_cell = self.offset_to_cell(view.marker) if view.marker is not None else None

        text = Text()
        for row in range(self.rows):
            for col in range(self.cols):
                offset = self.cell_to_offset(col, row)
                region = geometry.classify(offset)

                if region == WheelRegion.WHEEL:
                    background = geometry.color_at(offset).to_hex()
                elif region == WheelRegion.BORDER:
                    background = Color.white().to_hex()
                elif region == WheelRegion.RING:
                    background = ring.to_hex()
                else:
                    text.append(" ")
                    continue

                if (col, row) == marker_cell:
                    text.append(MARKER, Style(color="white", bgcolor=ring.to_hex(), bold=True))
                else:
                    text.append(" ", Style(bgcolor=background))
            if row < self.rows - 1:
                text.append("\n")
        return text
