"""Unit tests for decoding raw site language attributes."""

import logging

import pytest

from site_config.entity.attributes import ATTRIBUTE_FIELDS, SiteLanguageAttributes, is_empty


class TestFromMapping:
    def test_empty_mapping_leaves_everything_unset(self):
        decoded = SiteLanguageAttributes.from_mapping({})

        assert decoded == SiteLanguageAttributes()
        assert decoded.as_dict() == {}

    def test_none_is_treated_as_empty(self):
        assert SiteLanguageAttributes.from_mapping(None) == SiteLanguageAttributes()

    def test_configuration_keys_map_to_fields(self, full_attributes):
        decoded = SiteLanguageAttributes.from_mapping(full_attributes)

        assert decoded.title == "Schweizerdeutsch"
        assert decoded.navigation_title == "Deutsch (CH)"
        assert decoded.flag_identifier == "ch"
        assert decoded.typo3_language == "de"
        assert decoded.two_letter_iso_code == "de"
        assert decoded.hreflang == "de-CH"
        assert decoded.direction == "ltr"
        assert decoded.fallback_type == "fallback"
        assert decoded.fallback_language_ids == [2, 0]

    def test_unmapped_keys_are_ignored(self):
        decoded = SiteLanguageAttributes.from_mapping({"websiteTitle": "Beispiel"})
        assert decoded.as_dict() == {}

    @pytest.mark.parametrize("empty", ["", "0", None, 0, False, [], ()])
    def test_empty_values_are_unset(self, empty):
        raw = {key: empty for key, _ in ATTRIBUTE_FIELDS}
        assert SiteLanguageAttributes.from_mapping(raw).as_dict() == {}

    def test_values_are_not_transformed(self):
        fallbacks = (3, 1)
        decoded = SiteLanguageAttributes.from_mapping({"fallbacks": fallbacks, "title": 42})

        assert decoded.fallback_language_ids is fallbacks
        assert decoded.title == 42

    def test_logs_ignored_empty_values(self, caplog):
        caplog.set_level(logging.DEBUG, logger="site_config.entity.attributes")

        SiteLanguageAttributes.from_mapping({"flag": ""})

        assert "Ignoring empty site language attribute 'flag'" in caplog.text


class TestAsDict:
    def test_contains_only_set_fields(self, german_attributes):
        decoded = SiteLanguageAttributes.from_mapping(german_attributes)

        assert decoded.as_dict() == {
            "title": "Deutsch",
            "flag_identifier": "de",
            "two_letter_iso_code": "de",
            "fallback_language_ids": [1, 3],
        }

    def test_is_frozen(self):
        decoded = SiteLanguageAttributes(title="Deutsch")
        with pytest.raises(AttributeError):
            decoded.title = "English"


class TestIsEmpty:
    @pytest.mark.parametrize("value", ["", "0", None, 0, 0.0, False, [], {}])
    def test_empty_values(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", ["00", "0.0", " ", "de", 1, [0], True])
    def test_non_empty_values(self, value):
        assert not is_empty(value)
