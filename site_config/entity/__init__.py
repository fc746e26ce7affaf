"""Site entities."""

from site_config.entity.attributes import SiteLanguageAttributes
from site_config.entity.site_language import SiteLanguage

__all__ = [
    "SiteLanguage",
    "SiteLanguageAttributes",
]
