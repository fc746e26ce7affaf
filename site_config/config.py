"""
Site configuration settings.

Extends the base settings with site-language specific configuration.
"""

import logging

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Site-config specific settings."""

    # ==========================================================================
    # Site Language Settings
    # ==========================================================================
    # Log every SiteLanguage construction at INFO instead of DEBUG
    SITE_LANGUAGE_LOG_CONSTRUCTION: bool = False

    def get_construction_log_level(self) -> int:
        """Get the level used when logging SiteLanguage construction."""
        return logging.INFO if self.SITE_LANGUAGE_LOG_CONSTRUCTION else logging.DEBUG


# Global settings instance
settings = Settings()
