from __future__ import annotations

from collections.abc import Iterator

import pytest

from cashpot_attachments.utils import LoggingOptions, configure_logging, get_logger


@pytest.fixture
def file_log(tmp_path) -> Iterator:
    log_path = tmp_path / "cashpot.log"
    configure_logging(LoggingOptions(level="DEBUG", log_path=log_path))
    yield log_path
    configure_logging(LoggingOptions(level="DEBUG", file_sink=False))


def test_exception_traceback_reaches_log_file(file_log) -> None:
    logger = get_logger("tests.logging")

    try:
        raise ValueError("snapshot exploded")
    except ValueError:
        logger.exception("Attachment listener failed", key="companies-5")

    content = file_log.read_text(encoding="utf-8")
    assert "Attachment listener failed" in content
    assert "companies-5" in content
    assert "Traceback" in content
    assert "ValueError: snapshot exploded" in content


def test_structured_context_is_bound(file_log) -> None:
    get_logger("tests.logging").info("Attachment snapshot restored", entries=3)

    content = file_log.read_text(encoding="utf-8")
    assert "Attachment snapshot restored" in content
    assert "'entries': 3" in content
