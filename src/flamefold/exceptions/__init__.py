"""Exception hierarchy for flamefold."""

from .base import FlamefoldError
from .collapse import FileAccessError, SerializationError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "FlamefoldError",
    "SerializationError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
]
