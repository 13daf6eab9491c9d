"""Conversion exceptions: JSON encoding and file access."""

from pathlib import Path

from .base import FlamefoldError


class SerializationError(FlamefoldError):
    """Raised when a stack tree cannot be rendered as JSON text.

    This is the only hard failure of the conversion core.  Malformed counts
    and empty frame paths are absorbed while parsing and never raised.
    """

    def __init__(self, reason: str):
        super().__init__("Failed to serialize stack tree", details={"reason": reason})
        self.reason = reason


class FileAccessError(FlamefoldError):
    """Raised when an input file cannot be read or an output cannot be written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
