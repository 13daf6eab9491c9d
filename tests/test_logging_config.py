"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from flamefold.exceptions import InvalidConfigError
from flamefold.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_flamefold_logger():
    yield
    setup_logging()


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_level_from_verbosity(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_unknown_verbosity_rejected(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            setup_logging("chatty")
        assert exc_info.value.key == "verbosity"

    def test_single_rich_handler_after_repeated_setup(self):
        setup_logging()
        logger = setup_logging("verbose")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging("verbose")
        assert logging.getLogger().handlers == root_handlers
        assert get_logger().propagate is False

    def test_log_file_receives_module_records(self, tmp_path):
        log_file = tmp_path / "flamefold.log"
        setup_logging("verbose", log_file=str(log_file))
        get_logger("collapse.builder").debug("folded 3 samples")
        for handler in get_logger().handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "folded 3 samples" in text
        assert "flamefold.collapse.builder" in text


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "flamefold"

    def test_prefixes_bare_names(self):
        assert get_logger("collapse.builder").name == "flamefold.collapse.builder"

    def test_keeps_qualified_names(self):
        assert get_logger("flamefold.cli").name == "flamefold.cli"
