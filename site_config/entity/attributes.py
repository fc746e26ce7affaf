"""
Typed view over the raw attribute mapping of a site language.

The site configuration hands every language over as a loose mapping with
configuration-file key names ("flag", "iso-639-1", "fallbacks", ...).
SiteLanguageAttributes decodes that mapping once, field by field, into
named optional values. A key that is missing and a key whose value is
empty are treated the same: the field stays None. Besides falsy values,
the string "0" counts as empty.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


# Raw configuration key -> SiteLanguageAttributes field
ATTRIBUTE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("title", "title"),
    ("navigationTitle", "navigation_title"),
    ("flag", "flag_identifier"),
    ("typo3Language", "typo3_language"),
    ("iso-639-1", "two_letter_iso_code"),
    ("hreflang", "hreflang"),
    ("direction", "direction"),
    ("fallbackType", "fallback_type"),
    ("fallbacks", "fallback_language_ids"),
)


def is_empty(value: Any) -> bool:
    """Check if a raw value counts as unset (falsy, or the string "0")."""
    return not value or (isinstance(value, str) and value == "0")


@dataclass(frozen=True)
class SiteLanguageAttributes:
    """Optional named attributes of a site language, None when unset."""
    title: Optional[str] = None
    navigation_title: Optional[str] = None
    flag_identifier: Optional[str] = None
    typo3_language: Optional[str] = None
    two_letter_iso_code: Optional[str] = None
    hreflang: Optional[str] = None
    direction: Optional[str] = None
    fallback_type: Optional[str] = None
    fallback_language_ids: Optional[Sequence[int]] = None

    @classmethod
    def from_mapping(
        cls,
        attributes: Optional[Mapping[str, Any]],
    ) -> "SiteLanguageAttributes":
        """
        Decode a raw attribute mapping.

        Values are taken over unchanged. Nothing is validated, so this
        never fails for any mapping.

        Args:
            attributes: Raw site language configuration (may be None)

        Returns:
            SiteLanguageAttributes with every empty or missing value left as None
        """
        attributes = attributes or {}
        values: Dict[str, Any] = {}

        for key, field_name in ATTRIBUTE_FIELDS:
            if key not in attributes:
                continue
            value = attributes[key]
            if is_empty(value):
                logger.debug(f"Ignoring empty site language attribute '{key}'")
                continue
            values[field_name] = value

        return cls(**values)

    def as_dict(self) -> Dict[str, Any]:
        """Return only the fields that were set, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
