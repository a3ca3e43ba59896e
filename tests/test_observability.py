import json

import structlog
from fastapi.testclient import TestClient

from roll_pricing.config import settings
from roll_pricing.main import app
from roll_pricing.observability import configure_logging


def _json_events(output):
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_json_logs(capsys):
    configure_logging("INFO", json_logs=True)

    structlog.get_logger("roll_pricing.tests").info("rate_derived", width_inches=63)

    events = _json_events(capsys.readouterr().out)
    assert len(events) == 1
    assert events[0]["event"] == "rate_derived"
    assert events[0]["level"] == "info"
    assert events[0]["width_inches"] == 63
    assert "timestamp" in events[0]


def test_console_logs(capsys):
    configure_logging("INFO")

    structlog.get_logger("roll_pricing.tests").info("rate_derived")

    output = capsys.readouterr().out
    assert "rate_derived" in output
    assert _json_events(output) == []


def test_level_filters_events(capsys):
    configure_logging("WARNING", json_logs=True)

    logger = structlog.get_logger("roll_pricing.tests")
    logger.info("skipped")
    logger.warning("kept")

    assert [e["event"] for e in _json_events(capsys.readouterr().out)] == ["kept"]


def test_order_request_logs_one_event(capsys, monkeypatch):
    monkeypatch.setattr(settings, "LOG_JSON", True)
    payload = {
        "baseRate44": 4400,
        "lines": [{"widthInches": 63, "qtyRolls": 10}, {"widthInches": 44, "qtyRolls": 1}],
    }

    with TestClient(app) as client:
        response = client.post("/pricing/order", json=payload)

    assert response.status_code == 200
    priced = [e for e in _json_events(capsys.readouterr().out) if e["event"] == "order_priced"]
    assert len(priced) == 1
    assert priced[0]["line_count"] == 2


def test_line_request_logs_one_event(capsys, monkeypatch):
    monkeypatch.setattr(settings, "LOG_JSON", True)
    payload = {"baseRate44": 4400, "line": {"skuId": "a", "widthInches": 44, "qtyRolls": 1}}

    with TestClient(app) as client:
        client.post("/pricing/line", json=payload)

    priced = [e for e in _json_events(capsys.readouterr().out) if e["event"] == "line_priced"]
    assert len(priced) == 1
    assert priced[0]["sku_id"] == "a"
    assert priced[0]["override"] is False
