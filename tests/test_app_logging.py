"""Tests for logging configuration."""

import logging

from fitness_tracker.app_logging import ExtraFieldsFormatter, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("fitness_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_formatter_appends_extra_fields() -> None:
    formatter = ExtraFieldsFormatter("%(levelname)s: %(message)s")
    record = logging.makeLogRecord(
        {"levelname": "INFO", "msg": "Foods imported", "added": 2, "received": 3}
    )

    assert formatter.format(record) == "INFO: Foods imported [added=2 received=3]"


def test_formatter_without_extras() -> None:
    formatter = ExtraFieldsFormatter("%(message)s")

    assert formatter.format(logging.makeLogRecord({"msg": "ready"})) == "ready"
