from __future__ import annotations

import json
import logging
import sys

from app.core.logging import JsonFormatter, RequestIdFilter, get_api_logger, request_id_var


def _record(msg: str, *args, **extra) -> logging.LogRecord:
    record = logging.LogRecord("xuankong.test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields() -> None:
    out = json.loads(JsonFormatter().format(_record("chart %s", "ty")))
    assert out["level"] == "INFO"
    assert out["logger"] == "xuankong.test"
    assert out["message"] == "chart ty"
    assert "timestamp" in out


def test_extra_fields_are_included_and_unicode_kept() -> None:
    line = JsonFormatter().format(_record("Vượng tinh", system="XuanKong"))
    out = json.loads(line)
    assert out["system"] == "XuanKong"
    assert "Vượng tinh" in line
    assert "args" not in out


def test_exception_is_serialized() -> None:
    try:
        raise ValueError("bad config")
    except ValueError:
        record = logging.LogRecord(
            "xuankong.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    out = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad config" in out["exception"]


def test_api_logger_carries_layer_fields() -> None:
    adapter = get_api_logger("flying_star")
    assert adapter.logger.name == "xuankong.api.flying_star"
    assert adapter.extra == {"layer": "api", "type": "endpoint"}


def test_request_id_filter_stamps_records() -> None:
    record = _record("outside")
    RequestIdFilter().filter(record)
    assert record.request_id == "-"

    token = request_id_var.set("abc123")
    try:
        inside = _record("inside")
        RequestIdFilter().filter(inside)
    finally:
        request_id_var.reset(token)
    assert json.loads(JsonFormatter().format(inside))["request_id"] == "abc123"
