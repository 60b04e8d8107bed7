"""
Tests for util_logger: component loggers and the LOG_LEVEL override.
"""

import json
import logging

import pytest

from util_logger import ComponentType, JSONFormatter, LoggerFactory, LogLevel


@pytest.fixture
def restore_levels():
    saved = {ct: cfg.log_level for ct, cfg in LoggerFactory.DEFAULT_CONFIGS.items()}
    yield
    LoggerFactory.set_default_level(saved[ComponentType.SERVICE])
    for ct, level in saved.items():
        LoggerFactory.DEFAULT_CONFIGS[ct].log_level = level


class TestCreateLogger:

    def test_logger_name_is_component_prefixed(self):
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "NameCheck")
        assert logger.name == "service.NameCheck"

    def test_json_handler_added_once(self):
        LoggerFactory.create_logger(ComponentType.CONSOLE, "HandlerCheck")
        logger = LoggerFactory.create_logger(ComponentType.CONSOLE, "HandlerCheck")
        json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1

    def test_repository_logs_at_debug(self):
        logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "DebugCheck")
        assert logger.level == logging.DEBUG


class TestJSONFormatter:

    def test_custom_dimensions_carry_component(self):
        logger = LoggerFactory.create_logger(ComponentType.TRIGGER, "FormatCheck")
        records = []

        class Capture(logging.Handler):
            def emit(self, record):
                records.append(record)

        capture = Capture()
        logger.addHandler(capture)
        try:
            logger.info("hello %s", "grid")
        finally:
            logger.removeHandler(capture)

        payload = json.loads(JSONFormatter().format(records[0]))
        assert payload["message"] == "hello grid"
        assert payload["customDimensions"]["component_type"] == "trigger"
        assert payload["customDimensions"]["component_name"] == "FormatCheck"


class TestSetDefaultLevel:

    def test_existing_loggers_follow_new_level(self, restore_levels):
        logger = LoggerFactory.create_logger(ComponentType.SERVICE, "LevelCheck")
        LoggerFactory.set_default_level(LogLevel.WARNING)
        assert logger.level == logging.WARNING
        assert LoggerFactory.create_logger(ComponentType.SERVICE, "LevelCheckLate").level == logging.WARNING

    def test_repository_level_untouched(self, restore_levels):
        logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "LevelCheck")
        LoggerFactory.set_default_level(LogLevel.ERROR)
        assert logger.level == logging.DEBUG

    def test_level_parsed_case_insensitively(self):
        assert LogLevel.from_string("warning") is LogLevel.WARNING
