"""Shared fixtures for the ClipTranslate tests."""

import pytest

from cliptranslate.languages import Language, get_language


@pytest.fixture
def turkish() -> Language:
    """Return the Turkish language entry."""
    return get_language("Turkish")
