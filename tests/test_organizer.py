"""Tests for the ResultOrganizer."""

import pytest

from cliptranslate.models import OrganizedResult, ProviderId, TranslateResult
from cliptranslate.organizer import ResultOrganizer, normalize_translation


def _ok(provider_id: ProviderId, text: str) -> TranslateResult:
    return TranslateResult.success(provider_id, "hello", text)


def _fail(provider_id: ProviderId, diagnostic: str) -> TranslateResult:
    return TranslateResult.failure(provider_id, "hello", diagnostic)


@pytest.fixture
def organizer() -> ResultOrganizer:
    """Return a fresh organizer."""
    return ResultOrganizer()


def test_empty_input_gives_empty_result(organizer: ResultOrganizer) -> None:
    """No results is a valid outcome without failures."""
    result = organizer.organize([], "hello")
    assert result == OrganizedResult.empty("hello")
    assert result.is_empty


def test_dedup_is_case_and_whitespace_insensitive(organizer: ResultOrganizer) -> None:
    """Translations that differ only by case or surrounding spaces are merged."""
    results = [
        _ok(ProviderId.GOOGLE, "Merhaba"),
        _ok(ProviderId.YANDEX, "  merhaba "),
        _ok(ProviderId.PROMPT, "MERHABA"),
        _ok(ProviderId.TURENG, "selam"),
    ]
    result = organizer.organize(results, "hello")
    assert result.translations == ("Merhaba", "selam")
    assert result.merged_text == "Merhaba\nselam"


def test_merged_text_has_no_equivalent_duplicates(organizer: ResultOrganizer) -> None:
    """Organizing is idempotent on its own output."""
    texts = ["a", "A ", "b", " b", "c", "a"]
    results = [_ok(ProviderId.GOOGLE, t) for t in texts]
    first = organizer.organize(results, "hello")
    keys = [normalize_translation(t) for t in first.translations]
    assert len(keys) == len(set(keys))

    again = organizer.organize([_ok(ProviderId.GOOGLE, t) for t in first.translations], "hello")
    assert again.translations == first.translations


def test_failures_are_tagged_with_provider(organizer: ResultOrganizer) -> None:
    """Each failed result becomes one '<Provider>: <diagnostic>' line."""
    results = [_ok(ProviderId.GOOGLE, "merhaba"), _fail(ProviderId.TURENG, "timeout"), _fail(ProviderId.PROMPT, "HTTP 500")]
    result = organizer.organize(results, "hello")
    assert result.failures == ("Tureng: timeout", "Prompt: HTTP 500")
    assert result.failure_text == "Tureng: timeout\nPrompt: HTTP 500"


def test_all_failed(organizer: ResultOrganizer) -> None:
    """When every provider fails the merged text is empty."""
    results = [_fail(ProviderId.GOOGLE, "down"), _fail(ProviderId.YANDEX, "down")]
    result = organizer.organize(results, "hello", "en")
    assert result.merged_text == ""
    assert len(result.failures) == len(results)
    assert result.source_language == "en"


def test_order_is_input_order(organizer: ResultOrganizer) -> None:
    """The first occurrence wins and input order is kept."""
    results = [_ok(ProviderId.PROMPT, "b"), _ok(ProviderId.GOOGLE, "a"), _ok(ProviderId.YANDEX, "B")]
    assert organizer.organize(results, "hello").translations == ("b", "a")


def test_failure_without_diagnostic(organizer: ResultOrganizer) -> None:
    """A failed result without a message is still reported."""
    result = organizer.organize([TranslateResult(ProviderId.GOOGLE, "hello")], "hello")
    assert result.failures == ("Google: unknown error",)
