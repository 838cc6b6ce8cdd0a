"""Host-facing color wheel card.

The card has two inputs, each set explicitly by the host:

- ``set_config()`` - the card configuration (fatal if it names no entity)
- ``set_state()`` - the raw entity value (``None`` when the entity is absent)

Both feed one derivation step that decodes the value under the configured
format. ``render()`` is a pure function of the derived state and the active
drag preview. Pointer input is forwarded to a ``DragController`` while the
card is interactive, and the value it produces on release is written through
the ``CommitService`` as a fire-and-forget asyncio task.
"""

import asyncio
import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from pydantic import ValidationError

from colorwheel.colors import ColorCodec, color_to_hsv
from colorwheel.exceptions import ColorParseError, ConfigurationError, wrap_pydantic_error
from colorwheel.models import (
    DEFAULT_TITLE,
    HSV,
    CardConfig,
    CardStatus,
    CardView,
    Color,
    DragSession,
    Offset,
    PointerKind,
)
from colorwheel.protocols import (
    CardEvent,
    CardObserver,
    DragEvent,
    ExternalBinding,
    FrameScheduler,
    PointerCapture,
)
from colorwheel.services import CommitService
from colorwheel.utils import ObserverManager

from .drag_controller import DragController
from .geometry import WheelGeometry

logger = logging.getLogger(__name__)

ENTITY_NOT_FOUND = "Entity not found or not specified"
NOT_CONFIGURED = "Card is not configured"
CARD_SIZE = 4


class ColorWheelCard:
    """
    A color wheel bound to one host entity.

    Implements DragObserver (to receive previews) and StateObserver (to
    follow entity changes pushed by a binding) via structural subtyping.

    Error states:
        - Entity absent: display-only error, wheel not interactive
        - Value unparseable: display-only error, wheel not interactive
        - Write failure: one fallback write, then logged only; the preview
          stays at the attempted color until the next valid read

    Concurrency:
        Commits are independent asyncio tasks. A press may start before an
        earlier commit resolves; overlapping commits are not queued, not
        cancelled and not ordered.

    Usage:
        ```python
        card = ColorWheelCard(binding)
        card.set_config({"entity": "input_text.lamp_color"})
        card.refresh()

        card.press(Offset(40, -20))
        card.move(Offset(60, -10))
        card.release(Offset(60, -10))   # one write
        await card.drain_commits()
        ```
    """

    def __init__(
        self,
        binding: ExternalBinding | None = None,
        capture: PointerCapture | None = None,
        frame_scheduler: FrameScheduler | None = None,
    ) -> None:
        """
        Initialize an unconfigured card.

        Args:
            binding: Host binding used for reads and writes (optional; without
                one, commits are dropped with a warning)
            capture: Pointer listener set acquired during drags
            frame_scheduler: Coalesces drag previews to one per frame
        """
        self._binding = binding
        self._commit_service = CommitService(binding) if binding is not None else None
        self._capture = capture
        self._frame_scheduler = frame_scheduler

        self._config: CardConfig | None = None
        self._geometry: WheelGeometry | None = None
        self._controller: DragController | None = None

        self._raw_value: str | None = None
        self._color: Color | None = None
        self._hsv: HSV | None = None
        self._error: str | None = ENTITY_NOT_FOUND
        self._preview: DragSession | None = None

        self._commits: set[asyncio.Task] = set()
        self._observers = ObserverManager[CardObserver]("card")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: CardObserver) -> None:
        """Register an observer to receive card events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: CardObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify_observers(self, event: CardEvent) -> None:
        if self._observers:
            self._observers.notify("on_card_event", event, self.render())

    # =================================================================
    # Inputs
    # =================================================================

    @property
    def config(self) -> CardConfig | None:
        """Current configuration."""
        return self._config

    @property
    def geometry(self) -> WheelGeometry | None:
        """Wheel math for the current configuration."""
        return self._geometry

    @property
    def controller(self) -> DragController | None:
        """Drag controller for the current configuration."""
        return self._controller

    @property
    def raw_value(self) -> str | None:
        """Last external value observed."""
        return self._raw_value

    def set_config(self, config: CardConfig | Mapping[str, Any]) -> CardConfig:
        """
        Apply a card configuration.

        Args:
            config: CardConfig or a mapping with dashboard keys

        Returns:
            The validated configuration

        Raises:
            MissingEntityError: If the configuration names no entity
            ConfigValidationError: If other values are invalid
        """
        if not isinstance(config, CardConfig):
            try:
                config = CardConfig.model_validate(config)
            except ValidationError as e:
                raise wrap_pydantic_error(e) from e

        if self._controller is not None:
            self._controller.teardown()
            self._controller.unregister_observer(self)

        self._config = config
        self._geometry = WheelGeometry(config.wheel_config())
        self._controller = DragController(
            self._geometry,
            committer=self.commit,
            formatter=self._format,
            capture=self._capture,
            frame_scheduler=self._frame_scheduler,
        )
        self._controller.register_observer(self)
        self._preview = None

        logger.info(f"Card configured for {config.entity} (format={config.format.value})")
        self._derive()
        self._notify_observers(CardEvent.CONFIGURED)
        return config

    def set_state(self, raw_value: str | None) -> None:
        """
        Record the current external value of the entity.

        Args:
            raw_value: Entity value, or None if the entity is absent
        """
        self._raw_value = raw_value
        self._derive()

        if self._controller is not None and self._controller.is_dragging and self._error is not None:
            self._controller.teardown()

        self._notify_observers(CardEvent.STATE_CHANGED)

    def refresh(self, source: ExternalBinding | None = None) -> None:
        """
        Read the entity value from a binding and apply it.

        Args:
            source: Binding to read from (defaults to the card's binding)

        Raises:
            ConfigurationError: If the card is unconfigured or has no binding
        """
        source = source or self._binding
        if self._config is None:
            raise ConfigurationError(user_message=NOT_CONFIGURED)
        if source is None:
            raise ConfigurationError(
                user_message="Card has no binding to read from",
                recovery_hint="Pass a binding to the card or to refresh()",
            )
        self.set_state(source.get_state(self._config.entity))

    def on_state_changed(self, entity_id: str, value: str | None) -> None:
        """Follow entity updates pushed by a binding."""
        if self._config is not None and entity_id == self._config.entity:
            self.set_state(value)

    def _derive(self) -> None:
        """Decode the external value under the current configuration."""
        self._color = None
        self._hsv = None

        if self._config is None:
            self._error = NOT_CONFIGURED
            return

        if self._raw_value is None:
            self._error = ENTITY_NOT_FOUND
            return

        try:
            color = ColorCodec.decode(self._raw_value, self._config.format)
        except ColorParseError as e:
            logger.warning(e.technical_message)
            self._error = e.user_message
            self._preview = None
            return

        self._error = None
        self._color = color
        self._hsv = color_to_hsv(color)
        if self._controller is None or not self._controller.is_dragging:
            self._preview = None

    # =================================================================
    # Pointer input
    # =================================================================

    @property
    def interactive(self) -> bool:
        """Whether the wheel accepts pointer input."""
        return self._controller is not None and self._error is None

    @property
    def is_dragging(self) -> bool:
        """Whether a drag is in progress."""
        return self._controller is not None and self._controller.is_dragging

    def press(self, offset: Offset, pointer: PointerKind = PointerKind.MOUSE) -> DragSession | None:
        """Start a drag; ignored while the card shows an error."""
        if not self.interactive or self._controller is None:
            logger.debug("Ignoring press on a non-interactive card")
            return None
        return self._controller.press(offset, pointer)

    def move(self, offset: Offset) -> None:
        """Forward a pointer move to the active drag."""
        if self._controller is not None:
            self._controller.move(offset)

    def release(self, offset: Offset | None = None) -> str | None:
        """Finish the active drag; returns the committed value."""
        if self._controller is None:
            return None
        return self._controller.release(offset)

    def teardown(self) -> None:
        """Card removed from the host: cancel any drag and release listeners."""
        if self._controller is not None:
            self._controller.teardown()

    def on_drag_event(self, event: DragEvent, session: DragSession) -> None:
        """Turn drag events into render updates."""
        self._preview = None if event == DragEvent.CANCELLED else session
        self._notify_observers(CardEvent.PREVIEW)

    # =================================================================
    # Commits
    # =================================================================

    @property
    def pending_commits(self) -> int:
        """Number of commits still in flight."""
        return len(self._commits)

    def _format(self, color: Color) -> str:
        fmt = self._config.format if self._config is not None else None
        if fmt is None:
            return color.to_hex()
        return ColorCodec.encode(color, fmt, self._raw_value)

    def commit(self, value: str) -> None:
        """Start an asynchronous write of a value (fire-and-forget)."""
        if self._config is None:
            return
        if self._commit_service is None:
            logger.warning(f"No binding configured; dropping commit of {value}")
            return

        coro = self._commit_service.commit(self._config.entity, value)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Called outside an event loop (scripts, CLI): write synchronously
            ok = asyncio.run(coro)
            self._commit_finished(value, ok)
            return

        task = loop.create_task(coro)
        self._commits.add(task)
        task.add_done_callback(partial(self._task_done, value))

    def _task_done(self, value: str, task: asyncio.Task) -> None:
        self._commits.discard(task)
        if task.cancelled():
            logger.warning(f"Commit of {value} was cancelled")
            return
        self._commit_finished(value, task.result())

    def _commit_finished(self, value: str, ok: bool) -> None:
        if not ok:
            logger.error(f"Could not write {value}; preview left uncommitted")
        self._notify_observers(CardEvent.COMMITTED)

    async def drain_commits(self) -> None:
        """Wait for every commit in flight to finish."""
        while self._commits:
            await asyncio.gather(*list(self._commits), return_exceptions=True)

    # =================================================================
    # Rendering
    # =================================================================

    @staticmethod
    def card_size() -> int:
        """Height of the card in dashboard rows."""
        return CARD_SIZE

    def render(self) -> CardView:
        """Describe what the card should show right now."""
        if self._config is None:
            return CardView(title=DEFAULT_TITLE, status=CardStatus.ERROR, message=NOT_CONFIGURED)

        title = self._config.display_title
        wheel = self._config.wheel_config()

        if self._error is not None or self._color is None or self._hsv is None or self._geometry is None:
            return CardView(
                title=title,
                status=CardStatus.ERROR,
                message=self._error or ENTITY_NOT_FOUND,
                wheel=wheel,
            )

        output_format = ColorCodec.resolve_format(self._config.format, self._raw_value)

        if self._preview is not None:
            return CardView(
                title=title,
                status=CardStatus.OK,
                wheel=wheel,
                color=self._preview.color,
                marker=self._preview.marker,
                display_value=self._format(self._preview.color),
                output_format=output_format,
                interactive=True,
                dragging=self.is_dragging,
            )

        return CardView(
            title=title,
            status=CardStatus.OK,
            wheel=wheel,
            color=self._color,
            marker=self._geometry.color_to_marker_position(self._hsv),
            display_value=self._raw_value,
            output_format=output_format,
            interactive=True,
            dragging=False,
        )
