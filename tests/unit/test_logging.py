"""Tests for logging setup."""

import logging

import structlog

from timeline.logging import NOISY_LOGGERS, setup_logging


class TestSetupLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_http_client_loggers_quieted(self):
        setup_logging(debug=True)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_json_renderer_outside_debug(self):
        setup_logging(debug=False)

        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_debug(self):
        setup_logging(debug=True)

        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
