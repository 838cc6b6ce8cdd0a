"""Textual host for a single color wheel card."""

import asyncio
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from colorwheel.exceptions import BindingError
from colorwheel.models import CardConfig, CardView
from colorwheel.protocols import ExternalBinding

from .widgets import ColorWheelWidget

logger = logging.getLogger(__name__)


class ColorWheelApp(App):
    """
    Dashboard-style host showing one card.

    The app owns the host lifecycle: it mounts the card widget, feeds it the
    entity value (pushed by bindings that support observers, polled
    otherwise) and removes it on exit, which tears down any drag in progress.
    """

    TITLE = "Color Wheel"

    CSS = """
    Screen {
        align: center middle;
    }
    #card {
        width: auto;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }
    #value {
        width: 100%;
        content-align: center middle;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("r", "refresh_state", "Refresh", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: CardConfig,
        binding: ExternalBinding,
        poll_interval: float = 0.0,
        rows: int = 21,
    ) -> None:
        """
        Initialize the host.

        Args:
            config: Card configuration
            binding: Host binding used by the card
            poll_interval: Seconds between state polls (0 disables polling)
            rows: Terminal rows for the wheel
        """
        super().__init__()
        self.config = config
        self.binding = binding
        self.poll_interval = poll_interval
        self.rows = rows
        self.wheel: ColorWheelWidget | None = None

    def compose(self) -> ComposeResult:
        self.wheel = ColorWheelWidget(self.config, self.binding, rows=self.rows, id="wheel")
        yield Header()
        with Vertical(id="card"):
            yield self.wheel
            yield Static("", id="value")
        yield Footer()

    async def on_mount(self) -> None:
        self.title = self.config.display_title
        register = getattr(self.binding, "register_observer", None)
        if register is not None and self.wheel is not None:
            register(self.wheel.card)

        await self.action_refresh_state()

        if self.poll_interval > 0:
            self.set_interval(self.poll_interval, self.action_refresh_state)

    async def on_unmount(self) -> None:
        unregister = getattr(self.binding, "unregister_observer", None)
        if unregister is not None and self.wheel is not None:
            unregister(self.wheel.card)

    async def action_refresh_state(self) -> None:
        """Read the entity value from the host."""
        if self.wheel is None:
            return
        try:
            value = await asyncio.to_thread(self.binding.get_state, self.config.entity)
        except BindingError as e:
            logger.error(f"Failed to read {self.config.entity}: {e.technical_message}")
            self.notify(e.user_message, severity=e.severity)
            return

        if self.wheel.card.is_dragging:
            logger.debug("Skipping state refresh during a drag")
            return
        self.wheel.card.set_state(value)

    def on_color_wheel_widget_value_changed(self, message: ColorWheelWidget.ValueChanged) -> None:
        self._show_value(message.view)

    def _show_value(self, view: CardView) -> None:
        label = self.query_one("#value", Static)
        if view.is_error:
            label.update("")
        else:
            label.update(view.display_value or "")
