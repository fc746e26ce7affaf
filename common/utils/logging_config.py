"""
Logging setup shared by entry points and scripts.

Example:
    from common.utils import configure_logging
    from site_config.config import settings

    configure_logging(settings)
"""

import logging
from typing import Optional

from common.config.base_settings import BaseAppSettings


def configure_logging(settings: Optional[BaseAppSettings] = None) -> int:
    """
    Configure the root logger from settings.

    Args:
        settings: Settings to read LOG_LEVEL/LOG_FORMAT/DEBUG from.
            A fresh BaseAppSettings (environment only) is used when omitted.

    Returns:
        The numeric log level that was applied
    """
    settings = settings or BaseAppSettings()
    level = settings.get_log_level()

    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        force=True,
    )
    logging.getLogger(__name__).debug(
        "Logging configured (level=%s, environment=%s)",
        logging.getLevelName(level),
        settings.ENVIRONMENT,
    )
    return level
