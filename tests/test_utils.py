"""Unit tests for utilities and error handling."""

import json
from unittest.mock import Mock

import pytest
from pydantic import BaseModel, ValidationError

from colorwheel.exceptions import (
    ColorParseError,
    ColorWheelError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    EntityNotFoundError,
    EntityWriteError,
    MissingEntityError,
    format_error_for_display,
    wrap_pydantic_error,
)
from colorwheel.models import CardConfig
from colorwheel.utils import ObserverManager, PydanticPersistence


class TestObserverManager:
    """Test ObserverManager."""

    @pytest.mark.unit
    def test_register_is_idempotent(self):
        """Registering twice keeps one entry."""
        manager = ObserverManager[Mock]("drag")
        observer = Mock()

        assert manager.register(observer) is True
        assert manager.register(observer) is False
        manager.notify("on_drag_event", "started")

        observer.on_drag_event.assert_called_once_with("started")

    @pytest.mark.unit
    def test_empty_manager_is_falsy(self):
        """Publishers can skip building a payload nobody receives."""
        manager = ObserverManager[Mock]("card")
        assert not manager

        manager.register(Mock())
        assert len(manager) == 1

    @pytest.mark.unit
    def test_notify(self):
        """Observers receive the callback with its arguments."""
        manager = ObserverManager[Mock]("drag")
        observer = Mock()
        manager.register(observer)

        assert manager.notify("on_drag_event", "started", moves=0) == 0

        observer.on_drag_event.assert_called_once_with("started", moves=0)

    @pytest.mark.unit
    def test_failing_observer_does_not_block_others(self):
        """An exception in one observer is logged and the rest are still notified."""
        manager = ObserverManager[Mock]("card")
        failing = Mock()
        failing.on_card_event.side_effect = RuntimeError("boom")
        healthy = Mock()
        missing = Mock(spec=[])
        manager.register(failing)
        manager.register(missing)
        manager.register(healthy)

        assert manager.notify("on_card_event", "preview") == 2

        healthy.on_card_event.assert_called_once_with("preview")

    @pytest.mark.unit
    def test_unregister(self):
        """Removed observers are no longer notified; unknown ones are ignored."""
        manager = ObserverManager[Mock]("state")
        first, second = Mock(), Mock()
        manager.register(first)
        manager.register(second)

        assert manager.unregister(first) is True
        assert manager.unregister(first) is False
        manager.notify("on_state_changed", "input_text.lamp", "#FF0000")

        first.on_state_changed.assert_not_called()
        second.on_state_changed.assert_called_once_with("input_text.lamp", "#FF0000")

    @pytest.mark.unit
    def test_observer_may_unregister_while_notified(self):
        """Callbacks run outside the lock."""
        manager = ObserverManager[Mock]("drag")
        observer = Mock()
        observer.on_drag_event.side_effect = lambda *_: manager.unregister(observer)
        manager.register(observer)

        assert manager.notify("on_drag_event", "released") == 0
        assert not manager


class TestPydanticPersistence:
    """Test JSON persistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, temp_dir):
        """Overwriting keeps the previous file as .bak."""
        path = temp_dir / "card.json"
        CardConfig(entity="input_text.first").save(path)
        CardConfig(entity="input_text.second").save(path)

        backup = temp_dir / "card.json.bak"
        assert backup.exists()
        assert json.loads(backup.read_text())["entity"] == "input_text.first"
        assert CardConfig.load(path).entity == "input_text.second"
        assert not (temp_dir / "card.json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_file(self, temp_dir):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(temp_dir / "missing.json", CardConfig)

    @pytest.mark.unit
    def test_load_empty_file(self, temp_dir):
        """Empty files are invalid."""
        path = temp_dir / "card.json"
        path.write_text("  ")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(path, CardConfig)

    @pytest.mark.unit
    def test_load_invalid_json(self, temp_dir):
        """Syntax errors raise ConfigFileInvalidError."""
        path = temp_dir / "card.json"
        path.write_text('{"entity": ')

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(path, CardConfig)

    @pytest.mark.unit
    def test_validate_json(self, temp_dir):
        """validate_json reports instead of raising."""
        path = temp_dir / "card.json"
        path.write_text('{"entity": "input_text.lamp", "wheelSize": 1000}')

        is_valid, error = PydanticPersistence.validate_json(path, CardConfig)

        assert not is_valid
        assert "wheelSize" in error

        assert PydanticPersistence.validate_json(temp_dir / "missing.json", CardConfig) == (
            False,
            f"File not found: {temp_dir / 'missing.json'}",
        )


class TestErrorHandling:
    """Test exception translation."""

    @pytest.mark.unit
    def test_missing_entity_wins(self):
        """A missing entity is reported even with other errors present."""
        with pytest.raises(ValidationError) as exc_info:
            CardConfig.model_validate({"wheelSize": 1000})

        error = wrap_pydantic_error(exc_info.value)

        assert isinstance(error, MissingEntityError)

    @pytest.mark.unit
    def test_single_field_error(self):
        """One bad field names that field."""
        with pytest.raises(ValidationError) as exc_info:
            CardConfig.model_validate({"entity": "input_text.lamp", "format": "hsl"})

        error = wrap_pydantic_error(exc_info.value, "card.json")

        assert isinstance(error, ConfigValidationError)
        assert error.field == "format"
        assert "auto, hex, rgb, array" in error.recovery_hint
        assert "card.json" in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_field_errors(self):
        """Several bad fields are summarized."""
        with pytest.raises(ValidationError) as exc_info:
            CardConfig.model_validate({"entity": "input_text.lamp", "format": "hsl", "padding": 50})

        error = wrap_pydantic_error(exc_info.value)

        assert isinstance(error, ConfigValidationError)
        assert error.field == "multiple fields"

    @pytest.mark.unit
    def test_invalid_json(self):
        """JSON syntax errors become ConfigFileInvalidError."""

        class Model(BaseModel):
            value: int

        with pytest.raises(ValidationError) as exc_info:
            Model.model_validate_json("{")

        assert isinstance(wrap_pydantic_error(exc_info.value, "x.json"), ConfigFileInvalidError)

    @pytest.mark.unit
    def test_format_error_for_display(self):
        """App errors show their user message and hint; others their type."""
        message, hint = format_error_for_display(ColorParseError("nope", "bad"))
        assert message == "Unable to parse color: nope"
        assert hint is not None

        message, hint = format_error_for_display(ValueError("broken"))
        assert message == "ValueError: broken"
        assert hint is None

    @pytest.mark.unit
    def test_error_hierarchy(self):
        """All app errors share one base class."""
        error = EntityNotFoundError("input_text.lamp")

        assert isinstance(error, ColorWheelError)
        assert str(error) == error.user_message
        assert "Suggestion:" in error.get_full_message()

    @pytest.mark.unit
    def test_recoverable_defaults(self):
        """Parse and binding errors keep the card running; configuration errors don't."""
        assert ColorParseError("nope", "bad").recoverable
        assert EntityNotFoundError("input_text.lamp").severity == "warning"
        assert EntityWriteError("input_text.lamp", "input_text.set_value", "500").recoverable

        assert not MissingEntityError().recoverable
        assert MissingEntityError().severity == "error"
        assert not ConfigurationError(user_message="Card is not configured").recoverable

        # File-level configuration errors can be fixed and reloaded
        assert ConfigFileInvalidError("card.json", "Expecting value").recoverable
        assert ConfigValidationError("padding", 50, "too large").recoverable

    @pytest.mark.unit
    def test_recoverable_override(self):
        """A single error can override its family default."""
        error = ColorWheelError("Host went away", recoverable=True, recovery_hint="Retry")

        assert error.recoverable
        assert error.technical_message == "Host went away"
        assert ColorWheelError("Broken").recoverable is False
