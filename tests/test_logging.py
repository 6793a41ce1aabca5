"""Tests for structured log formatting."""

import logging

from gradeidea.core.logging import StructuredFormatter, get_logger, log_with_context


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


def test_log_with_context_promotes_idea_id():
    logger = logging.getLogger("gradeidea.tests.capture")
    handler = _Capture()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        log_with_context(logger, logging.INFO, "Synced idea scores", idea_id="idea-1", overall_score=72)
    finally:
        logger.removeHandler(handler)

    line = StructuredFormatter().format(handler.records[0])

    assert "message=Synced idea scores" in line
    assert "idea_id=idea-1" in line
    assert "overall_score=72" in line
    assert "level=INFO" in line


def test_get_logger_configures_once():
    logger = get_logger("gradeidea.tests.once")
    get_logger("gradeidea.tests.once")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)


def test_formatter_emits_key_value_pairs_not_json():
    record = logging.LogRecord("gradeidea.tests", logging.WARNING, __file__, 1, "Score sync failed", None, None)
    record.extra_data = {"error": "timeout"}

    line = StructuredFormatter().format(record)

    assert not line.startswith("{")
    assert "\n" not in line
    assert line.endswith("message=Score sync failed error=timeout")
    assert line.split(" ", 1)[0].startswith("timestamp=")
