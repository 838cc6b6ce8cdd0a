"""Tests for the drag state machine."""

import unittest
from unittest.mock import Mock

from colorwheel.core import DragController, WheelGeometry
from colorwheel.models import DragState, Offset, PointerKind
from colorwheel.protocols import DragEvent, DragObserver, PointerCapture

TOP = Offset(0.0, -145.0)      # red
RIGHT = Offset(145.0, 0.0)     # hue 90
BOTTOM = Offset(0.0, 145.0)    # cyan


class FakeFrames:
    """Frame scheduler that runs callbacks only when told to."""

    def __init__(self):
        self.callbacks = []

    def __call__(self, callback):
        self.callbacks.append(callback)

    def run(self):
        callbacks, self.callbacks = self.callbacks, []
        for callback in callbacks:
            callback()


class TestDragController(unittest.TestCase):
    """Test press/move/release handling."""

    def setUp(self):
        self.committer = Mock()
        self.capture = Mock(spec=PointerCapture)
        self.observer = Mock(spec=DragObserver)
        self.controller = DragController(
            WheelGeometry(),
            committer=self.committer,
            formatter=lambda color: color.to_hex(),
            capture=self.capture,
        )
        self.controller.register_observer(self.observer)

    def events(self):
        return [call.args[0] for call in self.observer.on_drag_event.call_args_list]

    def test_starts_idle(self):
        """A new controller has no session."""
        assert self.controller.state == DragState.IDLE
        assert not self.controller.is_dragging
        assert self.controller.session is None

    def test_drag_commits_final_position_once(self):
        """Press, two moves and a release write exactly once, from the release point."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.move(BOTTOM)
        value = self.controller.release(BOTTOM)

        assert value == "#00FFFF"
        self.committer.assert_called_once_with("#00FFFF")
        assert self.controller.state == DragState.IDLE

    def test_moves_never_commit(self):
        """Moves only update the preview."""
        self.controller.press(TOP)
        for x in range(0, 140, 10):
            self.controller.move(Offset(float(x), 0.0))

        self.committer.assert_not_called()
        assert self.controller.session.moves == 14

    def test_click_commits_once(self):
        """Press and release without moving is a commit too."""
        self.controller.press(RIGHT)
        self.controller.release(RIGHT)

        self.committer.assert_called_once_with("#80FF00")

    def test_release_uses_final_offset(self):
        """The committed color comes from the release position, not the last move."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.release(BOTTOM)

        self.committer.assert_called_once_with("#00FFFF")

    def test_release_without_offset_uses_last_position(self):
        """Touch-end carries no coordinates; the last move is used."""
        self.controller.press(TOP, PointerKind.TOUCH)
        self.controller.move(BOTTOM)
        self.controller.release()

        self.committer.assert_called_once_with("#00FFFF")

    def test_release_when_idle(self):
        """Release without a press does nothing."""
        assert self.controller.release(TOP) is None
        self.committer.assert_not_called()

    def test_move_when_idle(self):
        """Moves without a press are ignored."""
        self.controller.move(TOP)
        self.observer.on_drag_event.assert_not_called()

    def test_event_sequence(self):
        """Observers see start, previews and release."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.release(RIGHT)

        assert self.events() == [DragEvent.STARTED, DragEvent.MOVED, DragEvent.RELEASED]

        released = self.observer.on_drag_event.call_args.args[1]
        assert not released.active
        assert released.color.to_hex() == "#80FF00"

    def test_preview_follows_pointer(self):
        """Each move previews the color under the pointer."""
        session = self.controller.press(TOP)
        assert session.color.to_hex() == "#FF0000"

        self.controller.move(BOTTOM)

        assert self.controller.session.color.to_hex() == "#00FFFF"
        assert self.controller.session.hsv.v == 1.0

    def test_capture_acquired_and_released(self):
        """Capture is held exactly for the duration of the drag."""
        self.controller.press(TOP)
        assert self.controller.is_captured
        self.capture.acquire.assert_called_once()

        self.controller.release(TOP)
        assert not self.controller.is_captured
        self.capture.release.assert_called_once()

    def test_capture_does_not_stack(self):
        """Repeated cycles acquire and release once per cycle."""
        for _ in range(3):
            self.controller.press(TOP)
            self.controller.move(RIGHT)
            self.controller.release(RIGHT)

        assert self.capture.acquire.call_count == 3
        assert self.capture.release.call_count == 3
        assert self.committer.call_count == 3

    def test_press_during_drag_replaces_session(self):
        """A second press restarts the drag without writing or re-capturing."""
        self.controller.press(TOP)
        self.controller.press(RIGHT)

        self.committer.assert_not_called()
        self.capture.acquire.assert_called_once()
        assert self.controller.session.moves == 0

        self.controller.release()
        self.committer.assert_called_once_with("#80FF00")

    def test_teardown_during_drag(self):
        """Teardown drops the drag without writing and releases capture."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.teardown()

        self.committer.assert_not_called()
        self.capture.release.assert_called_once()
        assert self.events()[-1] == DragEvent.CANCELLED
        assert self.controller.state == DragState.IDLE

    def test_teardown_when_idle(self):
        """Teardown without a drag is a no-op."""
        self.controller.teardown()

        self.capture.release.assert_not_called()
        self.observer.on_drag_event.assert_not_called()

    def test_committer_failure_does_not_escape(self):
        """A failing committer is logged; release still completes."""
        self.committer.side_effect = RuntimeError("host gone")

        self.controller.press(TOP)
        value = self.controller.release(TOP)

        assert value == "#FF0000"
        assert self.controller.state == DragState.IDLE
        assert not self.controller.is_captured

    def test_without_capture(self):
        """Capture is optional."""
        controller = DragController(
            WheelGeometry(), committer=self.committer, formatter=lambda color: color.to_hex()
        )
        controller.press(TOP)
        controller.release(TOP)

        self.committer.assert_called_once_with("#FF0000")


class TestFrameCoalescing(unittest.TestCase):
    """Test preview coalescing with a frame scheduler."""

    def setUp(self):
        self.frames = FakeFrames()
        self.committer = Mock()
        self.observer = Mock(spec=DragObserver)
        self.controller = DragController(
            WheelGeometry(),
            committer=self.committer,
            formatter=lambda color: color.to_hex(),
            frame_scheduler=self.frames,
        )
        self.controller.register_observer(self.observer)

    def moved_sessions(self):
        return [
            call.args[1]
            for call in self.observer.on_drag_event.call_args_list
            if call.args[0] == DragEvent.MOVED
        ]

    def test_one_preview_per_frame(self):
        """Several moves in one frame produce one preview of the latest position."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.move(BOTTOM)

        assert len(self.frames.callbacks) == 1
        assert self.moved_sessions() == []

        self.frames.run()

        moved = self.moved_sessions()
        assert len(moved) == 1
        assert moved[0].color.to_hex() == "#00FFFF"

    def test_next_frame_schedules_again(self):
        """After a frame runs, the next move schedules a new one."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.frames.run()
        self.controller.move(BOTTOM)

        assert len(self.frames.callbacks) == 1

    def test_release_flushes_pending_preview(self):
        """Release uses the final position even if no frame has run."""
        self.controller.press(TOP)
        self.controller.move(RIGHT)
        self.controller.release(BOTTOM)

        self.committer.assert_called_once_with("#00FFFF")

        # The stale frame callback must not resurrect a preview
        self.frames.run()
        assert self.moved_sessions() == []
