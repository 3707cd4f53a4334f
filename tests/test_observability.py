from __future__ import annotations

import json
import logging

from boxdefaults.common import observability


def test_logger_names_and_service_are_scoped_to_boxdefaults(caplog, monkeypatch):
    monkeypatch.setattr(observability, "_logging_configured", False)
    observability.configure_logging(level="INFO")
    logger = observability.get_logger("test")

    with caplog.at_level(logging.INFO):
        logger.info("box_checked", box="v419_SERVER")

    payload = json.loads(caplog.records[-1].message)
    assert payload["message"] == "box_checked"
    assert payload["box"] == "v419_SERVER"
    assert payload["logger"] == "boxdefaults.test"
    assert payload["service"] == "boxdefaults"
    assert payload["level"] == "info"


def test_default_level_drops_info_events(caplog, monkeypatch):
    monkeypatch.setattr(observability, "_logging_configured", False)
    observability.configure_logging()
    logger = observability.get_logger("quiet")

    with caplog.at_level(logging.DEBUG):
        logger.info("box_defaults_loaded")
        logger.warning("box_key_unknown", key="v510_SERVER_BOX")

    messages = [json.loads(record.message)["message"] for record in caplog.records]
    assert messages == ["box_key_unknown"]


def test_resolve_log_level_falls_back_to_warning():
    assert observability.resolve_log_level("debug") == logging.DEBUG
    assert observability.resolve_log_level(logging.ERROR) == logging.ERROR
    assert observability.resolve_log_level("not-a-level") == logging.WARNING
    assert observability.resolve_log_level("") == logging.WARNING
    assert observability.resolve_log_level(None) == logging.WARNING
