"""
Test centralized configuration management.
"""
import pytest
import os
from unittest.mock import patch


class TestConfigurationManagement:
    """Test centralized configuration system."""

    def test_settings_loading_with_defaults(self):
        """Test that settings load with appropriate defaults."""
        from backend.config.settings import Settings, DEFAULT_API_BASE_URL

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "Careers Admin Console"
        assert settings.environment == "development"
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.page_size == 20
        assert settings.log_level == "INFO"
        assert settings.session_cookie_name == "careers_admin_session"

    def test_settings_with_environment_variables(self):
        """Test settings loading from environment variables."""
        from backend.config.settings import Settings

        test_env = {
            "API_BASE_URL": "https://api.example.org/",
            "LOG_LEVEL": "DEBUG",
            "ENVIRONMENT": "testing",
            "REQUEST_TIMEOUT_SECONDS": "5",
            "SESSION_TTL_MINUTES": "15",
        }

        with patch.dict(os.environ, test_env):
            settings = Settings()

            assert settings.api_base_url == "https://api.example.org"
            assert settings.log_level == "DEBUG"
            assert settings.environment == "testing"
            assert settings.request_timeout_seconds == 5
            assert settings.session_ttl_minutes == 15

    def test_blank_base_url_falls_back_to_default(self):
        from backend.config.settings import Settings, DEFAULT_API_BASE_URL

        with patch.dict(os.environ, {"API_BASE_URL": "  "}):
            settings = Settings()
            assert settings.api_base_url == DEFAULT_API_BASE_URL

    def test_environment_detection_methods(self):
        """Test environment detection helper methods."""
        from backend.config.settings import Settings

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            settings = Settings()
            assert settings.is_development()
            assert not settings.is_production()
            assert not settings.is_testing()

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            settings = Settings()
            assert settings.is_production()
            assert not settings.is_development()

        with patch.dict(os.environ, {"ENVIRONMENT": "development", "TESTING": "true"}):
            settings = Settings()
            assert settings.is_testing()

    def test_configuration_validation_development(self):
        from backend.config.settings import Settings

        with patch.dict(os.environ, {"ENVIRONMENT": "development", "LOG_LEVEL": "INFO"}):
            settings = Settings()
            assert settings.validate_required_settings() == []

    def test_configuration_validation_production(self):
        """Test configuration validation in production."""
        from backend.config.settings import Settings

        with patch.dict(os.environ, {
            "ENVIRONMENT": "production",
            "DEBUG": "true",
            "API_BASE_URL": "http://insecure.example.com",
            "SESSION_COOKIE_SECURE": "false",
        }):
            settings = Settings()
            issues = settings.validate_required_settings()

            assert any("DEBUG must be False" in issue for issue in issues)
            assert any("API_BASE_URL must use https" in issue for issue in issues)
            assert any("SESSION_COOKIE_SECURE" in issue for issue in issues)

    def test_invalid_log_level_reported(self):
        from backend.config.settings import Settings

        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            issues = Settings().validate_required_settings()
            assert "Invalid LOG_LEVEL: CHATTY" in issues


class TestApiConfiguration:
    """Test the endpoint map built from the base URL."""

    def test_endpoints_built_from_base_url(self):
        from backend.config.api import build_api_config

        config = build_api_config("https://careers.example.com/")

        assert config.BASE_URL == "https://careers.example.com"
        assert config.ENDPOINTS.HEALTH == "https://careers.example.com/api/health"
        assert config.ENDPOINTS.APPLICATIONS == "https://careers.example.com/api/v1/applications"
        assert config.ENDPOINTS.USERS.LOGIN == "https://careers.example.com/api/v1/users/login"
        assert config.ENDPOINTS.USERS.PROFILE == "https://careers.example.com/api/v1/users/profile"

    def test_endpoint_map_is_immutable(self):
        from dataclasses import FrozenInstanceError
        from backend.config.api import build_api_config

        config = build_api_config("https://careers.example.com")
        with pytest.raises(FrozenInstanceError):
            config.ENDPOINTS.APPLICATIONS = "https://elsewhere.example.com"

    def test_api_config_computed_once(self):
        from backend.config.api import get_api_config

        assert get_api_config() is get_api_config()
