"""
Centralized configuration management for the Careers Admin Console.
All environment variables and runtime settings are managed here.
"""
from typing import Optional, List
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


DEFAULT_API_BASE_URL = "https://trizencareersbackend.llp.trizenventures.com"


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    # =============================================================================
    # APPLICATION SETTINGS
    # =============================================================================
    app_name: str = "Careers Admin Console"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    testing: bool = False

    # =============================================================================
    # CAREERS BACKEND SETTINGS
    # =============================================================================
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: int = 30
    page_size: int = 20

    @field_validator('api_base_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        v = (v or "").strip()
        if not v:
            return DEFAULT_API_BASE_URL
        return v.rstrip("/")

    # =============================================================================
    # SESSION SETTINGS
    # =============================================================================
    session_cookie_name: str = "careers_admin_session"
    session_ttl_minutes: int = 8 * 60  # 8 hours
    session_cookie_secure: bool = False

    # =============================================================================
    # LOGGING SETTINGS
    # =============================================================================
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # =============================================================================
    # DEVELOPMENT SETTINGS
    # =============================================================================
    api_docs_enabled: bool = True

    # =============================================================================
    # CONFIGURATION LOADING
    # =============================================================================
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.testing or self.environment.lower() == "testing"

    def validate_required_settings(self) -> List[str]:
        """Validate that all required settings are properly configured."""
        missing = []

        if self.is_production():
            if not self.api_base_url.startswith("https://"):
                missing.append("API_BASE_URL must use https in production")

            if not self.session_cookie_secure:
                missing.append("SESSION_COOKIE_SECURE must be True in production")

            if self.debug:
                missing.append("DEBUG must be False in production")

        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            missing.append(f"Invalid LOG_LEVEL: {self.log_level}")

        if self.session_ttl_minutes <= 0:
            missing.append("SESSION_TTL_MINUTES must be positive")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    This function is cached to avoid recreating the settings object multiple times.
    """
    return Settings()
