"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorwheel.core import WheelGeometry
from colorwheel.models import WheelConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def wheel_config():
    """Default wheel dimensions."""
    return WheelConfig()


@pytest.fixture
def geometry(wheel_config):
    """Wheel math for the default dimensions."""
    return WheelGeometry(wheel_config)

