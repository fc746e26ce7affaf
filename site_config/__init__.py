"""
Site Configuration

Entities describing the language configuration of a site: locale, base URL,
labels, ISO codes and the language fallback chain.
"""

from site_config.entity import SiteLanguage, SiteLanguageAttributes

__all__ = [
    "SiteLanguage",
    "SiteLanguageAttributes",
]
