"""
Tests for dewdrop/exceptions.py.
"""

import pytest

from dewdrop import CommandError, ConfigError, DewdropError, LoggingError
from dewdrop.cli import CommandRegistrationError, MisconfiguredCommandError
from dewdrop.log import InvalidLogLevelError


@pytest.mark.unit
class TestDewdropError:
    """Test the base exception."""

    def test_message_only(self):
        error = DewdropError("failed")

        assert str(error) == "failed"
        assert error.context == {}

    def test_message_with_context(self):
        error = DewdropError("failed", path="/tmp/x", size=3)

        assert str(error) == "failed (path=/tmp/x, size=3)"
        assert error.message == "failed"
        assert error.context == {"path": "/tmp/x", "size": 3}


@pytest.mark.unit
@pytest.mark.parametrize(
    "error_cls,base",
    [
        (ConfigError, DewdropError),
        (LoggingError, DewdropError),
        (CommandError, DewdropError),
        (InvalidLogLevelError, LoggingError),
        (MisconfiguredCommandError, CommandError),
        (CommandRegistrationError, CommandError),
    ],
)
def test_hierarchy(error_cls, base):
    assert issubclass(error_cls, base)
