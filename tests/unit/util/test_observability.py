"""Unit tests for logging and observability helpers."""

import logging

from hive.config import ObservabilitySettings, Settings
from hive.util.logging import log_level
from hive.util.observability import redact_request_attributes


class TestRedactRequestAttributes:
    """The WebSocket token must not be recorded on spans."""

    def test_token_is_redacted(self):
        attributes = {"values": {"token": "eyJhbGciOi", "limit": 5}, "errors": []}

        redacted = redact_request_attributes(None, attributes)

        assert redacted["values"] == {"token": "[redacted]", "limit": 5}
        assert redacted["errors"] == []
        assert attributes["values"]["token"] == "eyJhbGciOi"

    def test_attributes_without_secrets_pass_through(self):
        attributes = {"values": {"limit": 5}}

        assert redact_request_attributes(None, attributes) is attributes


class TestExportDecision:
    """When telemetry leaves the process."""

    def test_token_enables_export(self):
        assert ObservabilitySettings(logfire_token="pylf_v1_x").exports

    def test_no_token_stays_local(self):
        assert not ObservabilitySettings().exports

    def test_explicit_setting_wins(self):
        settings = ObservabilitySettings(logfire_token="pylf_v1_x", send_to_logfire=False)

        assert not settings.exports


class TestLogLevel:
    """Root log level per environment."""

    def test_levels(self):
        assert log_level(Settings(environment="development")) == logging.INFO
        assert log_level(Settings(environment="production")) == logging.WARNING
        assert log_level(Settings(environment="production", debug=True)) == logging.DEBUG
