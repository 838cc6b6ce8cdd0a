"""Tests for the commit write path."""

from unittest.mock import AsyncMock, Mock, call

import pytest

from colorwheel.bindings import InMemoryBinding
from colorwheel.exceptions import EntityWriteError
from colorwheel.protocols import ExternalBinding
from colorwheel.services import CommitService

ENTITY = "input_text.lamp_color"


@pytest.fixture
def mock_binding():
    """Binding whose service calls are recorded."""
    binding = Mock(spec=ExternalBinding)
    binding.call_service = AsyncMock(return_value=None)
    return binding


@pytest.mark.unit
@pytest.mark.asyncio
class TestCommitService:
    """Test primary and fallback writes."""

    async def test_primary_write(self, mock_binding):
        """A successful primary write makes one call."""
        service = CommitService(mock_binding)

        ok = await service.commit(ENTITY, "#00FFFF")

        assert ok
        mock_binding.call_service.assert_awaited_once_with(
            "input_text", "set_value", {"entity_id": ENTITY, "value": "#00FFFF"}
        )
        assert service.attempts == 1
        assert service.failures == 0

    async def test_fallback_after_primary_failure(self, mock_binding):
        """A failed primary write is retried once through update_entity."""
        mock_binding.call_service.side_effect = [RuntimeError("service not found"), None]
        service = CommitService(mock_binding)

        ok = await service.commit(ENTITY, "rgb(0, 255, 255)")

        assert ok
        assert mock_binding.call_service.await_args_list == [
            call("input_text", "set_value", {"entity_id": ENTITY, "value": "rgb(0, 255, 255)"}),
            call("homeassistant", "update_entity", {"entity_id": ENTITY, "new_state": "rgb(0, 255, 255)"}),
        ]
        assert service.attempts == 2

    async def test_both_writes_fail(self, mock_binding):
        """When the fallback fails too, nothing is raised and nothing is retried."""
        mock_binding.call_service.side_effect = RuntimeError("offline")
        service = CommitService(mock_binding)

        ok = await service.commit(ENTITY, "#00FFFF")

        assert not ok
        assert mock_binding.call_service.await_count == 2
        assert service.failures == 1

    async def test_in_memory_fallback(self):
        """The in-memory binding accepts the fallback write."""
        binding = InMemoryBinding({ENTITY: "#FF0000"})
        binding.fail_service("input_text.set_value")
        service = CommitService(binding)

        ok = await service.commit(ENTITY, "#00FFFF")

        assert ok
        assert [c.name for c in binding.calls] == ["input_text.set_value", "homeassistant.update_entity"]
        assert binding.calls[1].data == {"entity_id": ENTITY, "new_state": "#00FFFF"}
        assert binding.get_state(ENTITY) == "#00FFFF"

    async def test_in_memory_write_error(self):
        """Failing services raise EntityWriteError from the binding itself."""
        binding = InMemoryBinding({ENTITY: "#FF0000"})
        binding.fail_service("input_text.set_value")

        with pytest.raises(EntityWriteError):
            await binding.call_service("input_text", "set_value", {"entity_id": ENTITY, "value": "#000000"})
