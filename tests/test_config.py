from __future__ import annotations

import json
import logging

from sonar_installations.core.config import get_settings
from sonar_installations.core.logging import JsonFormatter, configure_logging


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("SONAR_ENVIRONMENT", "staging")
    monkeypatch.setenv("SONAR_LOG_LEVEL", "warning")
    monkeypatch.setenv("SONAR_SERVICE_NAME", "")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.environment == "staging"
    assert settings.log_level == "WARNING"
    assert settings.service_name == "sonar-installations"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_json_formatter_includes_extra() -> None:
    formatter = JsonFormatter("svc")
    record = logging.LogRecord("sonar_installations.test", logging.INFO, __file__, 1, "event", None, None)
    record.installation_name = "e1"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "event"
    assert payload["service"] == "svc"
    assert payload["extra"]["installation_name"] == "e1"


def test_configure_logging_sets_package_level(monkeypatch) -> None:
    monkeypatch.setenv("SONAR_LOG_LEVEL", "error")
    monkeypatch.setenv("SONAR_LOG_JSON", "false")
    get_settings.cache_clear()

    package_logger = logging.getLogger("sonar_installations")
    try:
        configure_logging(get_settings())

        assert package_logger.level == logging.ERROR
        assert len(package_logger.handlers) == 1
        assert not isinstance(package_logger.handlers[0].formatter, JsonFormatter)
    finally:
        package_logger.handlers.clear()
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True
