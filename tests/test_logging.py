"""
Tests for logging setup.
"""

import json
import logging

import pytest

from textmapper.core.logging import get_logger, request_id_var, setup_logging


@pytest.mark.usefixtures("restore_root_logger")
def test_json_format(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(level="DEBUG", log_format="json")
    get_logger("textmapper.test").debug("Batch mapped", extra={"published": 2})

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    record = lines[-1]
    assert record["level"] == "DEBUG"
    assert record["logger"] == "textmapper.test"
    assert record["message"] == "Batch mapped"
    assert record["published"] == 2
    assert "timestamp" in record


@pytest.mark.usefixtures("restore_root_logger")
def test_console_format_carries_request_id(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(level="INFO", log_format="console")
    root = logging.getLogger()
    assert root.level == logging.INFO

    token = request_id_var.set("req-7")
    try:
        records: list[logging.LogRecord] = []
        capture = logging.Handler()
        capture.emit = records.append  # type: ignore[method-assign]
        capture.addFilter(root.handlers[0].filters[0])
        root.addHandler(capture)
        get_logger("textmapper.test").info("Mapper ready")
    finally:
        request_id_var.reset(token)

    assert records[-1].request_id == "req-7"  # type: ignore[attr-defined]
    assert "| INFO     | textmapper.test | Mapper ready" in capsys.readouterr().out
