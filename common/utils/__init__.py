"""
Utilities module - Common helpers for logging setup.
"""

from common.utils.logging_config import configure_logging

__all__ = [
    "configure_logging",
]
