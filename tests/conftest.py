# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from hstate.core.configuration import StateMachineConfig
from tests.utils import CallRecorder


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def config():
    """An empty state machine configuration."""
    return StateMachineConfig()


@pytest.fixture
def recorder():
    """Records callback invocations in order."""
    return CallRecorder()


@pytest.fixture
def mock_action():
    """A mock action; receives the Transition when used as an entry or exit action."""
    return MagicMock()



