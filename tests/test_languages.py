"""Tests for the language table and the result models."""

import pytest

from cliptranslate.errors import UnknownLanguageError
from cliptranslate.languages import LANGUAGE_MAPPING, all_languages, get_language
from cliptranslate.models import OrganizedResult, ProviderId


@pytest.mark.parametrize("key", ["Turkish", "turkish", " TR ", "tr"])
def test_get_language_by_name_or_extension(key: str) -> None:
    """Names and extensions resolve case-insensitively."""
    language = get_language(key)
    assert language.name == "Turkish"
    assert language.extension == "tr"
    assert language.is_turkish


def test_get_language_keeps_mixed_case_extension() -> None:
    """Extensions like 'zh-CN' are stored as the providers expect them."""
    assert get_language("zh-cn").extension == "zh-CN"
    assert str(get_language("Chinese")) == "Chinese"


def test_unknown_language() -> None:
    """An unknown key raises UnknownLanguageError, which is also a KeyError."""
    with pytest.raises(UnknownLanguageError, match="Unknown language: 'Klingon'"):
        get_language("Klingon")
    with pytest.raises(KeyError):
        get_language("xx")


def test_all_languages_sorted() -> None:
    """Every table entry is listed once, sorted by name."""
    languages = all_languages()
    names = [lang.name for lang in languages]
    assert names == sorted(names)
    assert len(languages) == len(LANGUAGE_MAPPING)
    assert not get_language("German").is_turkish


def test_provider_display_names() -> None:
    """Display names are used to tag failures."""
    assert ProviderId.SESLISOZLUK.display_name == "SesliSozluk"
    assert ProviderId("prompt") is ProviderId.PROMPT


def test_organized_result_texts() -> None:
    """Merged and failure texts join lines with newlines."""
    result = OrganizedResult("hello", ("merhaba", "selam"), ("Prompt: timeout",), "en")
    assert result.merged_text == "merhaba\nselam"
    assert result.failure_text == "Prompt: timeout"
    assert not result.is_empty
    assert OrganizedResult.empty("hello").is_empty
