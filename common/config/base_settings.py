"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        SITE_LANGUAGE_LOG_CONSTRUCTION: bool = False

    settings = Settings()
    print(settings.LOG_LEVEL)
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # ==========================================================================
    # Logging Settings
    # ==========================================================================
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def get_log_level(self) -> int:
        """
        Resolve LOG_LEVEL into a numeric logging level.

        DEBUG=True always wins over LOG_LEVEL.

        Raises:
            ValueError: If LOG_LEVEL is not a known level name
        """
        if self.DEBUG:
            return logging.DEBUG

        level = logging.getLevelName(self.LOG_LEVEL.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.LOG_LEVEL}")
        return level

    def validate_required(self) -> None:
        """
        Validate that settings are usable.

        Raises:
            ValueError: If any setting is invalid
        """
        errors = []

        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            errors.append(f"LOG_LEVEL '{self.LOG_LEVEL}' is not a valid log level")

        if not self.LOG_FORMAT:
            errors.append("LOG_FORMAT must not be empty")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
