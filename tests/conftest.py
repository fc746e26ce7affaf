"""Shared test fixtures for site-config tests."""

import logging

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def mock_site():
    site = MagicMock()
    site.get_identifier = MagicMock(return_value="main")
    return site


@pytest.fixture
def german_attributes():
    return {
        "title": "Deutsch",
        "flag": "de",
        "iso-639-1": "de",
        "fallbacks": [1, 3],
    }


@pytest.fixture
def full_attributes():
    """Every mapped attribute set, plus one key without a getter."""
    return {
        "title": "Schweizerdeutsch",
        "navigationTitle": "Deutsch (CH)",
        "flag": "ch",
        "typo3Language": "de",
        "iso-639-1": "de",
        "hreflang": "de-CH",
        "direction": "ltr",
        "fallbackType": "fallback",
        "fallbacks": [2, 0],
        "websiteTitle": "Beispiel",
    }


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by logging.basicConfig(force=True)."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
