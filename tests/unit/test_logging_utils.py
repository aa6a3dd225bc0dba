#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging configuration."""

import logging

import pytest

from md2pub.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
    )
    def test_known_levels(self, value, expected):
        assert resolve_log_level(value) == expected

    @pytest.mark.parametrize("value", ["chatty", "basicConfig"])
    def test_unknown_names_fall_back_to_info(self, value):
        assert resolve_log_level(value) == logging.INFO

    def test_trace_forces_debug(self):
        assert resolve_log_level("ERROR", trace_mode=True) == logging.DEBUG


@pytest.mark.unit
@pytest.mark.usefixtures("restore_package_logger")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger_only(self):
        root = logging.getLogger()
        root_handlers = list(root.handlers)
        root_level = root.level

        package_logger = configure_logging("debug")

        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        assert root.handlers == root_handlers
        assert root.level == root_level

    def test_reconfiguring_replaces_own_handlers(self):
        foreign = logging.NullHandler()
        logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(foreign)

        configure_logging(logging.INFO)
        package_logger = configure_logging(logging.WARNING)

        assert foreign in package_logger.handlers
        assert len(package_logger.handlers) == 2
        assert package_logger.level == logging.WARNING

    def test_trace_format(self):
        package_logger = configure_logging(logging.INFO, trace_mode=True)

        assert package_logger.level == logging.DEBUG
        assert "%(name)s" in package_logger.handlers[-1].formatter._fmt

    def test_module_loggers_reach_log_file(self, tmp_path):
        log_file = tmp_path / "md2pub.log"

        package_logger = configure_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("md2pub.transforms.pipeline").info("hello file")
        for handler in package_logger.handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path):
        package_logger = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "md2pub.log"))

        assert not any(isinstance(handler, logging.FileHandler) for handler in package_logger.handlers)
