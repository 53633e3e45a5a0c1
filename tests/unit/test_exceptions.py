"""Unit tests for the exception hierarchy."""
from osdetect_core.exceptions import (
    ConfigError,
    DetectionError,
    DetectionException,
    OSDetectError,
    UnknownOSError,
    ValidationError,
)


class TestDetectionError:
    """Tests for DetectionError."""

    def test_message(self):
        exception = DetectionError("Test error message")
        assert str(exception) == "Test error message"
        assert exception.message == "Test error message"
        assert exception.cause is None

    def test_message_and_cause(self):
        cause = RuntimeError("Root cause")
        exception = DetectionError("Test error message", cause)
        assert str(exception) == "Test error message"
        assert exception.cause is cause
        assert exception.__cause__ is cause

    def test_alias(self):
        assert DetectionException is DetectionError

    def test_unknown_os(self):
        exception = UnknownOSError("FooOS")
        assert str(exception) == "unknown os.name: FooOS"
        assert exception.raw_name == "FooOS"
        assert isinstance(exception, DetectionError)


class TestHierarchy:
    """All errors share a base class."""

    def test_subclasses(self):
        for cls in (DetectionError, ConfigError, ValidationError):
            assert issubclass(cls, OSDetectError)

    def test_config_error_message(self):
        assert str(ConfigError("/tmp/c.json", "denied")) == "Invalid configuration: /tmp/c.json (denied)"
