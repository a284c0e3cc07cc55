"""JSON logging tests."""

import json
import logging

from src.logging_config import setup_logging


def test_emits_json_lines_with_extra_fields(capsys):
    setup_logging("DEBUG")
    logging.getLogger("src.complaints.client").info("batch started", extra={"url_count": 2})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "batch started"
    assert record["level"] == "INFO"
    assert record["logger"] == "src.complaints.client"
    assert record["url_count"] == 2
    assert record["service"] == "complaint-scraper"
    assert "timestamp" in record


def test_unknown_level_falls_back_to_info():
    setup_logging("nonsense")
    assert logging.getLogger().level == logging.INFO


def test_uvicorn_loggers_do_not_propagate():
    setup_logging("INFO")
    assert logging.getLogger("uvicorn.access").propagate is False
