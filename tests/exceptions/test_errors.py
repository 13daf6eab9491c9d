"""Tests for the flamefold exception hierarchy."""

from pathlib import Path

from flamefold.exceptions import (
    ConfigurationError,
    FileAccessError,
    FlamefoldError,
    InvalidConfigError,
    SerializationError,
)


class TestFlamefoldError:
    def test_message_only(self):
        assert str(FlamefoldError("boom")) == "boom"

    def test_details_rendered(self):
        err = FlamefoldError("boom", details={"a": "1", "b": "2"})
        assert str(err) == "boom (a=1, b=2)"


class TestSubclasses:
    def test_serialization_error(self):
        err = SerializationError("bad text")
        assert isinstance(err, FlamefoldError)
        assert err.reason == "bad text"
        assert "bad text" in str(err)

    def test_file_access_error(self):
        err = FileAccessError(Path("/tmp/x.folded"), "No such file or directory")
        assert isinstance(err, FlamefoldError)
        assert err.filepath == Path("/tmp/x.folded")
        assert "x.folded" in str(err)
        assert "No such file" in str(err)

    def test_invalid_config_error(self):
        err = InvalidConfigError("width", 0, "must be at least 1")
        assert isinstance(err, ConfigurationError)
        assert isinstance(err, FlamefoldError)
        assert err.key == "width"
        assert err.value == 0
        assert "must be at least 1" in str(err)
