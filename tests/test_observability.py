"""Tests for structured logging setup."""

import json
import logging

import pytest

from dayline.observability import HumanFormatter, JSONFormatter, configure_logging, get_logger


def _record(msg="Entry %s moved to unscheduled", args=("e1",), **extra):
    record = logging.LogRecord("dayline.timeline.layout", logging.WARNING, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestFormatters:
    def test_json_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "dayline.timeline.layout"
        assert payload["message"] == "Entry e1 moved to unscheduled"
        assert payload["timestamp"].endswith("Z")

    def test_json_extra_fields(self):
        payload = json.loads(JSONFormatter().format(_record(block="evening")))
        assert payload["block"] == "evening"

    def test_human_line(self):
        line = HumanFormatter().format(_record())
        assert "[WARNING] dayline.timeline.layout: Entry e1 moved to unscheduled" in line


class TestConfigure:
    def test_installs_single_json_handler(self, restore_root_logger):
        configure_logging("DEBUG", json_format=True)
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self, restore_root_logger):
        configure_logging("warning", json_format=False)
        assert restore_root_logger.level == logging.WARNING
        assert isinstance(restore_root_logger.handlers[0].formatter, HumanFormatter)

    def test_get_logger(self):
        assert get_logger("dayline.test").name == "dayline.test"
