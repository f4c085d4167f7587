"""
Tests for settings and logging setup.
"""

import json
import logging

import pytest

from rental_model.config import Settings, get_settings
from rental_model.logging_config import JSONFormatter, setup_logging


class TestSettings:
    def test_calculation_defaults(self):
        settings = Settings()
        assert settings.projection_years == 30
        assert settings.default_discount_rate == 0.10
        assert settings.default_refinance_months == 1
        assert settings.default_cash_out_ltv == 75.0

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_DISCOUNT_RATE", "0.08")
        assert Settings().default_discount_rate == 0.08

    def test_settings_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_setup_logging_level(self):
        setup_logging("debug")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_json_format(self):
        setup_logging("INFO", json_format=True)
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

        record = logging.LogRecord(
            "rental_model.test", logging.INFO, __file__, 1, "IRR %s", ("ok",), None
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "rental_model.test"
        assert entry["message"] == "IRR ok"
