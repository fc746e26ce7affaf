"""
Site language entity.

A SiteLanguage is one language configuration of a site: the pairing of a
locale and a base URL, plus the labels, ISO codes and fallback order used
when rendering that language.

Instances are created by the site configuration loader and are never
modified afterwards.

Example:
    language = SiteLanguage(
        site,
        1,
        "de_CH",
        "https://example.com/de/",
        {"title": "Deutsch", "flag": "ch", "iso-639-1": "de", "fallbacks": [0]},
    )

    language.get_navigation_title()  # "Deutsch"
    language.to_array()["flagIdentifier"]  # "ch"
"""

import copy
import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from site_config.config import settings
from site_config.entity.attributes import SiteLanguageAttributes

logger = logging.getLogger(__name__)


class SiteLanguage:
    """
    Entity representing a language configuration of a site object.

    The site, language id, locale and base URL are required. Every other
    field has a default that is replaced only by a non-empty attribute value.
    """

    DEFAULT_TITLE = "Default"
    DEFAULT_NAVIGATION_TITLE = ""
    DEFAULT_FLAG_IDENTIFIER = "us"
    DEFAULT_TWO_LETTER_ISO_CODE = "en"
    DEFAULT_HREFLANG = "en-US"
    DEFAULT_DIRECTION = ""
    DEFAULT_TYPO3_LANGUAGE = "default"
    DEFAULT_FALLBACK_TYPE = "strict"

    def __init__(
        self,
        site: Any,
        language_id: int,
        locale: str,
        base: str,
        attributes: Optional[Mapping[str, Any]],
        log_level: Optional[int] = None,
    ):
        """
        Initialize SiteLanguage.

        Args:
            site: The owning site object (not owned by this language)
            language_id: Id of the language record this configuration maps to
            locale: Locale like 'de_CH' or 'en_GB'
            base: Base URL for this language
            attributes: Raw language configuration, kept as given
            log_level: Level for the construction log record.
                Defaults to the level from settings.
        """
        self._site = site
        self._language_id = language_id
        self._locale = locale
        self._base = base
        self._attributes = attributes if attributes is not None else {}

        decoded = SiteLanguageAttributes.from_mapping(self._attributes)

        # Label used to identify the language in the backend
        self._title = decoded.title or self.DEFAULT_TITLE
        # Label used within language menus
        self._navigation_title = decoded.navigation_title or self.DEFAULT_NAVIGATION_TITLE
        self._flag_identifier = decoded.flag_identifier or self.DEFAULT_FLAG_IDENTIFIER
        # Prefix for translation files, "default" for english
        self._typo3_language = decoded.typo3_language or self.DEFAULT_TYPO3_LANGUAGE
        # ISO-639-1
        self._two_letter_iso_code = decoded.two_letter_iso_code or self.DEFAULT_TWO_LETTER_ISO_CODE
        # RFC 1766 / 3066 tag for "lang" and "hreflang" attributes
        self._hreflang = decoded.hreflang or self.DEFAULT_HREFLANG
        self._direction = decoded.direction or self.DEFAULT_DIRECTION
        self._fallback_type = decoded.fallback_type or self.DEFAULT_FALLBACK_TYPE
        # Owned copy of the configured sequence
        self._fallback_language_ids = copy.copy(decoded.fallback_language_ids or [])

        if log_level is None:
            log_level = settings.get_construction_log_level()

        logger.log(
            log_level,
            f"Created site language {language_id} ({locale}) "
            f"with attributes {sorted(decoded.as_dict())}",
        )

    def __repr__(self) -> str:
        return (
            f"SiteLanguage(language_id={self._language_id!r}, "
            f"locale={self._locale!r}, base={self._base!r})"
        )

    def to_array(self) -> Dict[str, Any]:
        """
        Get the SiteLanguage as a plain dict, e.g. for template rendering.

        Keys and their order are fixed; consumers rely on both.

        Returns:
            Dict with languageId, locale, base, title, navigationTitle,
            twoLetterIsoCode, hreflang, direction, typo3Language,
            flagIdentifier, fallbackType and fallbackLanguageIds
        """
        return {
            "languageId": self.get_language_id(),
            "locale": self.get_locale(),
            "base": self.get_base(),
            "title": self.get_title(),
            "navigationTitle": self.get_navigation_title(),
            "twoLetterIsoCode": self.get_two_letter_iso_code(),
            "hreflang": self.get_hreflang(),
            "direction": self.get_direction(),
            "typo3Language": self.get_typo3_language(),
            "flagIdentifier": self.get_flag_identifier(),
            "fallbackType": self.get_fallback_type(),
            "fallbackLanguageIds": self.get_fallback_language_ids(),
        }

    def get_site(self) -> Any:
        """Get the owning site."""
        return self._site

    def get_language_id(self) -> int:
        """Get the id of the language record."""
        return self._language_id

    def get_locale(self) -> str:
        """Get the locale, e.g. 'de_CH'."""
        return self._locale

    def get_base(self) -> str:
        """Get the base URL for this language."""
        return self._base

    def get_title(self) -> str:
        """Get the label identifying the language."""
        return self._title

    def get_navigation_title(self) -> str:
        """Get the menu label, falling back to the title when none is set."""
        return self._navigation_title or self.get_title()

    def get_flag_identifier(self) -> str:
        """Get the flag icon key, e.g. 'de'."""
        return self._flag_identifier

    def get_typo3_language(self) -> str:
        """Get the translation file prefix, 'default' for english."""
        return self._typo3_language

    def get_fallback_type(self) -> str:
        """Get the name of the fallback policy."""
        return self._fallback_type

    def get_two_letter_iso_code(self) -> str:
        """Get the ISO-639-1 language code."""
        return self._two_letter_iso_code if self._two_letter_iso_code is not None else ""

    def get_hreflang(self) -> str:
        """Get the RFC 1766 / 3066 language tag."""
        return self._hreflang if self._hreflang is not None else ""

    def get_direction(self) -> str:
        """Get the text direction, empty when unspecified."""
        return self._direction if self._direction is not None else ""

    def get_fallback_language_ids(self) -> List[int]:
        """
        Get the language ids to fall back to, in order of precedence.

        Returns:
            A copy of the stored sequence; changing it does not affect
            this language
        """
        return copy.copy(self._fallback_language_ids)

    def get_attributes(self) -> Mapping[str, Any]:
        """
        Get the raw attributes this language was created from.

        Keys without a dedicated getter are only reachable here.

        Returns:
            Read-only view of the attribute mapping
        """
        return MappingProxyType(self._attributes)
