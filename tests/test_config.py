"""Tests for configuration module."""

import os
from unittest.mock import patch

from backoffice.core.config import Settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_loads_from_env(self):
        env_vars = {
            "DATABASE_URL": "sqlite+aiosqlite:///./other.db",
            "SEED_SAMPLE_DATA": "false",
            "STRICT_DECISIONS": "true",
            "LOG_LEVEL": "DEBUG",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

        assert settings.database_url == "sqlite+aiosqlite:///./other.db"
        assert settings.seed_sample_data is False
        assert settings.strict_decisions is True
        assert settings.log_level == "DEBUG"

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./database.db"
        assert settings.init_db_on_startup is True
        assert settings.seed_sample_data is True
        assert settings.strict_decisions is False
        assert settings.cors_origins == "*"

    def test_cors_origin_list(self):
        settings = Settings(cors_origins="http://localhost:5173, https://ecole.fr,")
        assert settings.cors_origin_list == ["http://localhost:5173", "https://ecole.fr"]
