"""State machine turning press/move/release into previews and one commit."""

import logging
from collections.abc import Callable

from colorwheel.colors import hsv_to_rgb
from colorwheel.models import Color, DragSession, DragState, Offset, PointerKind
from colorwheel.protocols import Committer, DragEvent, DragObserver, FrameScheduler, PointerCapture
from colorwheel.utils import ObserverManager

from .geometry import WheelGeometry

logger = logging.getLogger(__name__)


class DragController:
    """
    Drives a wheel from pointer input.

    States and transitions::

        IDLE --press--> DRAGGING --move--> DRAGGING --release--> IDLE (commit)
                                  \\------------teardown------> IDLE (no commit)

    - ``press`` starts a session (replacing any active one without writing),
      acquires pointer capture and previews the pressed color.
    - ``move`` only updates the preview. With a frame scheduler, moves are
      coalesced to at most one preview per frame.
    - ``release`` recomputes from the final position, flushes the preview,
      releases capture and hands exactly one formatted value to the committer.
    - ``teardown`` drops the session without writing and releases capture.

    Pointer capture is acquired at most once per session and is always
    released before the controller returns to IDLE, so repeated press cycles
    never stack listeners.
    """

    def __init__(
        self,
        geometry: WheelGeometry,
        committer: Committer,
        formatter: Callable[[Color], str],
        capture: PointerCapture | None = None,
        frame_scheduler: FrameScheduler | None = None,
    ) -> None:
        """
        Initialize the drag controller.

        Args:
            geometry: Wheel math for the current configuration
            committer: Receives the formatted value on release (fire-and-forget)
            formatter: Encodes a color in the configured output format
            capture: Listener set to acquire while dragging (optional)
            frame_scheduler: Runs a callback before the next frame; None
                applies every move immediately
        """
        self._geometry = geometry
        self._committer = committer
        self._formatter = formatter
        self._capture = capture
        self._frame_scheduler = frame_scheduler

        self._session: DragSession | None = None
        self._captured = False
        self._preview_pending = False

        self._observers = ObserverManager[DragObserver]("drag")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: DragObserver) -> None:
        """Register an observer to receive drag events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: DragObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # State
    # =================================================================

    @property
    def state(self) -> DragState:
        """Current state of the machine."""
        return DragState.DRAGGING if self._session is not None else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        """Check if a drag session is active."""
        return self._session is not None

    @property
    def session(self) -> DragSession | None:
        """The active drag session, if any."""
        return self._session

    @property
    def is_captured(self) -> bool:
        """Check if pointer capture is currently held."""
        return self._captured

    # =================================================================
    # Pointer Events
    # =================================================================

    def press(self, offset: Offset, pointer: PointerKind = PointerKind.MOUSE) -> DragSession:
        """
        Start a drag at a pointer offset.

        Args:
            offset: Pointer offset from the wheel center
            pointer: Device that pressed

        Returns:
            The new drag session
        """
        if self._session is not None:
            logger.debug("Press during an active drag; replacing the session without writing")

        self._preview_pending = False
        self._session = self._build_session(Offset(*offset), pointer, moves=0)
        self._acquire_capture()

        logger.debug(f"Drag started at {self._session.position}: {self._session.color.to_hex()}")
        self._observers.notify("on_drag_event", DragEvent.STARTED, self._session)
        return self._session

    def move(self, offset: Offset) -> None:
        """
        Update the preview for a new pointer offset.

        Ignored when no drag is active.
        """
        if self._session is None:
            return

        self._session = self._session.model_copy(
            update={"position": Offset(*offset), "moves": self._session.moves + 1}
        )

        if self._frame_scheduler is None:
            self._apply_preview()
        elif not self._preview_pending:
            self._preview_pending = True
            self._frame_scheduler(self._on_frame)

    def release(self, offset: Offset | None = None) -> str | None:
        """
        Finish the drag and commit the selected color.

        Args:
            offset: Final pointer offset; None reuses the last known position
                (touch-end events carry no coordinates)

        Returns:
            The committed value, or None if no drag was active
        """
        if self._session is None:
            return None

        position = Offset(*offset) if offset is not None else self._session.position
        session = self._build_session(
            position, self._session.pointer, moves=self._session.moves, active=False
        )

        self._session = None
        self._preview_pending = False
        self._release_capture()

        value = self._formatter(session.color)
        logger.info(f"Drag released at {position}; committing {value}")
        self._observers.notify("on_drag_event", DragEvent.RELEASED, session)

        try:
            self._committer(value)
        except Exception as e:
            logger.error(f"Commit of {value} could not be started: {e}", exc_info=True)

        return value

    def teardown(self) -> None:
        """Drop any active drag without writing and release pointer capture."""
        session = self._session
        self._session = None
        self._preview_pending = False
        self._release_capture()

        if session is not None:
            logger.debug("Drag cancelled without committing")
            self._observers.notify(
                "on_drag_event", DragEvent.CANCELLED, session.model_copy(update={"active": False})
            )

    # =================================================================
    # Internals
    # =================================================================

    def _build_session(
        self, position: Offset, pointer: PointerKind, moves: int, active: bool = True
    ) -> DragSession:
        hsv, _ = self._geometry.point_to_color(position)
        return DragSession(
            active=active,
            pointer=pointer,
            position=position,
            hsv=hsv,
            color=hsv_to_rgb(hsv.h, hsv.s, hsv.v),
            marker=self._geometry.color_to_marker_position(hsv),
            moves=moves,
        )

    def _on_frame(self) -> None:
        """Apply the pending preview, if it still matters."""
        if not self._preview_pending or self._session is None:
            return
        self._preview_pending = False
        self._apply_preview()

    def _apply_preview(self) -> None:
        if self._session is None:
            return
        self._session = self._build_session(
            self._session.position, self._session.pointer, moves=self._session.moves
        )
        self._observers.notify("on_drag_event", DragEvent.MOVED, self._session)

    def _acquire_capture(self) -> None:
        if self._capture is not None and not self._captured:
            self._capture.acquire()
            self._captured = True

    def _release_capture(self) -> None:
        if self._capture is not None and self._captured:
            self._capture.release()
        self._captured = False
