"""The translation pipeline: one input fanned out to every eligible provider."""

import asyncio
import logging
import threading
from collections.abc import Callable

from .detection import LanguageDetector
from .languages import Language
from .models import OrganizedResult, TranslateRequest
from .organizer import ResultOrganizer
from .registry import ActiveProviderRegistry

logger = logging.getLogger(__name__)


class LastTextGuard:
    """
    Remembers the most recently accepted text.

    `claim` is the single-flight gate of the pipeline: it accepts a text only
    if it differs from the previous one, and records it in the same locked
    step. Only one value is remembered; this is not a cache.
    """

    def __init__(self) -> None:
        """Start with no remembered text."""
        self._last: str | None = None
        self._lock = threading.Lock()

    @property
    def last(self) -> str | None:
        """The most recently accepted text."""
        with self._lock:
            return self._last

    def claim(self, text: str) -> bool:
        """Accept `text` unless it equals the last accepted text."""
        with self._lock:
            if text == self._last:
                return False
            self._last = text
            return True

    def reset(self) -> None:
        """Forget the remembered text."""
        with self._lock:
            self._last = None


class Aggregator:
    """
    Runs one translation pipeline per distinct input.

    Steps: dedup guard, source language detection, snapshot of the eligible
    providers, concurrent `find` on all of them, organization of the results.
    All providers are awaited; a slow provider delays the result rather than
    being dropped from it.
    """

    def __init__(
        self,
        registry: ActiveProviderRegistry,
        detector: LanguageDetector,
        target_language: Language | Callable[[], Language],
        *,
        organizer: ResultOrganizer | None = None,
        guard: LastTextGuard | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            registry: The providers and their active state.
            detector: Detects the source language of each input.
            target_language: The language to translate into, or a callable
                returning the current one.
            organizer: Merges the per-provider results.
            guard: The last-seen-text gate.

        """
        self.registry = registry
        self.detector = detector
        self._target_language = target_language
        self.organizer = organizer or ResultOrganizer()
        self.guard = guard or LastTextGuard()

    @property
    def target_language(self) -> Language:
        """The language results are translated into."""
        if callable(self._target_language):
            return self._target_language()
        return self._target_language

    async def translate(self, text: str) -> OrganizedResult | None:
        """
        Translate `text` with every eligible provider.

        Returns:
            The organized result, or None when `text` is blank or equal to the
            previous input.

        Raises:
            LanguageDetectionError: If the source language cannot be detected.
                The guard keeps `text`, so it is not retried automatically.

        """
        if not text or not text.strip():
            return None

        if not self.guard.claim(text):
            logger.debug("Ignoring repeated input '%s'", text)
            return None

        source_language = await self.detector.detect(text)
        target_language = self.target_language
        translators = self.registry.snapshot(target_language)

        if not translators:
            logger.info("No provider supports translating into %s.", target_language.name)
            return OrganizedResult.empty(text, source_language, target_language.extension)

        request = TranslateRequest(text=text, source_language=source_language, target_language=target_language)
        logger.info(
            "Translating '%s' (%s -> %s) with %s",
            text,
            source_language,
            target_language.extension,
            ", ".join(t.name for t in translators),
        )

        # gather keeps argument order, so results stay in priority order.
        results = await asyncio.gather(*(translator.find(request) for translator in translators))
        return self.organizer.organize(results, text, source_language, target_language.extension)
