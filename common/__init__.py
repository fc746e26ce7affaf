"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used
across multiple projects:

- config: Base settings class
- utils: Logging setup
"""

from common.config import BaseAppSettings
from common.utils import configure_logging

__all__ = [
    # Config
    "BaseAppSettings",
    # Utils
    "configure_logging",
]
