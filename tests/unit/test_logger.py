"""
Unit tests for src/common/logger.py
"""

import io
import logging

import pytest

from src.common import logger as logger_module
from src.common.logger import (
    ComponentLogger,
    get_logger,
    is_debug_mode,
    set_global_debug_mode,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """setup_logging replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def restore_debug_mode(monkeypatch):
    monkeypatch.setattr(logger_module, "_debug_mode", False)


class TestComponentLogger:
    """Message prefixes."""

    def test_prefix_with_request_and_component(self):
        log = get_logger("x", request_id="abcdef123456", component="extractor")
        assert log._format_message("hi") == "[req:abcdef12] [extractor] hi"

    def test_no_context_no_prefix(self):
        assert get_logger("x")._format_message("hi") == "hi"

    def test_bind_adds_request_id(self):
        log = get_logger("x", component="assembler").bind(request_id="1234567890")

        assert isinstance(log, ComponentLogger)
        assert log._format_message("done") == "[req:12345678] [assembler] done"

    def test_bind_keeps_existing_context(self):
        log = get_logger("x", request_id="aaaaaaaa", component="workflow").bind()
        assert log._format_message("m") == "[req:aaaaaaaa] [workflow] m"

    def test_messages_reach_stdlib_logging(self, caplog):
        log = get_logger("tests.logger", component="export")
        with caplog.at_level(logging.INFO, logger="tests.logger"):
            log.info("saved")
        assert "[export] saved" in caplog.text


class TestDebugMode:
    def test_global_switch(self, restore_debug_mode):
        assert is_debug_mode() is False
        set_global_debug_mode(True)
        assert is_debug_mode() is True

    def test_debug_mode_sets_debug_level(self):
        log = get_logger("tests.logger.debug", debug_mode=True)
        assert log.logger.level == logging.DEBUG


class TestSetupLogging:
    def test_single_stderr_handler(self, restore_root_logger):
        setup_logging("WARNING")

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.WARNING

    def test_json_format(self, restore_root_logger):
        setup_logging("INFO", format="json")

        formatter = restore_root_logger.handlers[0].formatter
        assert formatter._fmt.startswith('{"time"')

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("CHATTY")
        assert restore_root_logger.level == logging.INFO

    def test_writes_to_given_stream(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        get_logger("tests.logger.stream", component="export").info("saved")

        assert "[export] saved" in stream.getvalue()
