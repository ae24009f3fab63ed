"""Tests for shared/config.py."""

from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "RecycleMe API"
        assert settings.debug is False
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expiry_hours == 12
        assert settings.points_per_kg == 100
        assert settings.coupon_max_attempts == 3

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {"RECYCLEME_DEBUG": "true", "RECYCLEME_PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"PORT": "9999"}):
            settings = Settings(_env_file=None)
            assert settings.port == 3000

    def test_loads_rewards_config_from_env(self):
        """Reward tuning should be configurable."""
        with patch.dict(os.environ, {
            "RECYCLEME_POINTS_PER_KG": "150",
            "RECYCLEME_COUPON_MAX_ATTEMPTS": "5",
        }):
            settings = Settings(_env_file=None)
            assert settings.points_per_kg == 150
            assert settings.coupon_max_attempts == 5

    def test_cors_origins_default(self):
        """CORS origins should include the local frontend."""
        settings = Settings(_env_file=None)
        assert "http://localhost:5173" in settings.cors_origins


class TestGetSettings:
    def test_returns_cached_instance(self):
        """get_settings should return the same instance until cleared."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Clearing the cache should pick up new environment values."""
        with patch.dict(os.environ, {"RECYCLEME_JWT_EXPIRY_HOURS": "2"}):
            get_settings.cache_clear()
            assert get_settings().jwt_expiry_hours == 2
        get_settings.cache_clear()
