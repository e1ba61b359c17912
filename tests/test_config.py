"""
Tests de configuración y logging.
"""

import logging

import structlog

from propmatch.config import Settings, get_settings
from propmatch.log import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.weights.budget == 25
        assert settings.weights.total == 100
        assert settings.scoring.neutral_score == 100
        assert settings.scoring.optional_neutral_score == 80
        assert settings.default_min_match_score == 50
        assert settings.import_batch_size == 50

    def test_nested_overrides_from_env(self, monkeypatch):
        monkeypatch.setenv("WEIGHTS__BUDGET", "40")
        monkeypatch.setenv("SCORING__UNKNOWN_DATA_SCORE", "30")
        monkeypatch.setenv("import_batch_size", "10")

        settings = get_settings()

        assert settings.weights.budget == 40
        assert settings.weights.location == 20
        assert settings.scoring.unknown_data_score == 30
        assert settings.import_batch_size == 10

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:

    def test_configure_logging(self):
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

        logger = structlog.get_logger("propmatch.test")
        logger.info("evento de prueba", key="value")

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO
