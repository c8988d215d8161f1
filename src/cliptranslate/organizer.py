"""Merges the raw per-provider outcomes of a run into one presentable result."""

import logging
from collections.abc import Iterable

from .models import OrganizedResult, TranslateResult

logger = logging.getLogger(__name__)


def normalize_translation(text: str) -> str:
    """Return the key two translations are compared by: trimmed and case-folded."""
    return text.strip().casefold()


class ResultOrganizer:
    """
    Builds an `OrganizedResult` from a list of `TranslateResult`.

    Results are consumed in the order given, which is the provider priority
    order. The order providers happened to finish in plays no part.
    """

    def organize(
        self,
        results: Iterable[TranslateResult],
        original_text: str,
        source_language: str | None = None,
        target_language: str | None = None,
    ) -> OrganizedResult:
        """
        Deduplicate successful translations and collect failure diagnostics.

        Args:
            results: One result per invoked provider, in priority order.
            original_text: The text that was translated.
            source_language: The detected source language, kept for reporting.
            target_language: The extension of the language translated into.

        Returns:
            The organized result. It is empty, without failures, when no
            provider was invoked.

        """
        translations: list[str] = []
        failures: list[str] = []
        seen: set[str] = set()

        for result in results:
            if result.succeeded and result.translated_text:
                key = normalize_translation(result.translated_text)
                if not key or key in seen:
                    continue
                seen.add(key)
                translations.append(result.translated_text.strip())
            else:
                diagnostic = result.diagnostic or "unknown error"
                failures.append(f"{result.provider_id.display_name}: {diagnostic}")

        logger.debug("Organized %d translation(s) and %d failure(s) for '%s'", len(translations), len(failures), original_text)
        return OrganizedResult(
            original_text=original_text,
            translations=tuple(translations),
            failures=tuple(failures),
            source_language=source_language,
            target_language=target_language,
        )
