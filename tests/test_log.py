"""
Tests for logging setup.
"""
import json
import logging

import pytest

from stripe_decline_codes.log import ROOT_LOGGER, JSONFormatter, configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestJSONFormatter:
    """Tests for structured log output."""

    def test_fields(self):
        record = logging.LogRecord(
            name="stripe_decline_codes.docs.generator",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Generated %s",
            args=("metadata.json",),
            exc_info=None,
        )
        record.artifact = "metadata"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "stripe_decline_codes.docs.generator"
        assert entry["message"] == "Generated metadata.json"
        assert entry["artifact"] == "metadata"
        assert "path" not in entry


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self, package_logger):
        configure_logging("debug")
        assert package_logger.level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, package_logger):
        configure_logging("chatty")
        assert package_logger.level == logging.INFO

    @pytest.mark.parametrize("name", ["basic_format", "root", "getLogger", "handlers"])
    def test_non_level_module_attributes_default_to_info(self, package_logger, name):
        configure_logging(name)
        assert package_logger.level == logging.INFO

    def test_repeated_calls_replace_handler(self, package_logger):
        configure_logging("INFO")
        configure_logging("INFO", json_output=True)
        ours = [h for h in package_logger.handlers if getattr(h, "_sdc_handler", False)]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
