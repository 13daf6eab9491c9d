"""Logging setup for flamefold.

Handlers are attached to the ``flamefold`` logger only, never to the root
logger, so embedding applications keep their own logging configuration.
Records go to stderr; stdout stays free for JSON written to a pipe.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

LOGGER_NAME = "flamefold"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """Route flamefold log records to a rich stderr handler.

    Calling this again replaces the handlers installed by the previous
    call, so each CLI invocation gets the level its configuration asks for.

    Args:
        verbosity: ``quiet``, ``normal`` or ``verbose`` (``FlameConfig.verbosity``)
        log_file: Optional file that also receives every record at the
            chosen level, with timestamps and logger names

    Raises:
        InvalidConfigError: If *verbosity* is not a known level name
    """
    if verbosity not in LEVELS:
        raise InvalidConfigError("verbosity", verbosity, "expected quiet, normal or verbose")
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # frame names may contain [brackets], so rich markup stays off
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            level=level,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
        )
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``flamefold`` namespace.

    ``get_logger("collapse.builder")`` and
    ``get_logger("flamefold.collapse.builder")`` name the same logger.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
