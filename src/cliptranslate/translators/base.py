"""Defines the base class for all translators."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from cliptranslate.config import DEFAULT_PROVIDER_TIMEOUT, ProviderSettings
from cliptranslate.languages import Language
from cliptranslate.models import ProviderId, TranslateRequest, TranslateResult

logger = logging.getLogger(__name__)

TIMEOUT_DIAGNOSTIC = "timeout"
NO_RESULT_DIAGNOSTIC = "No translation found"


class BaseTranslator(ABC):
    """
    Abstract base class for all translator implementations.

    Subclasses implement `_translate`, which may raise freely. `find` wraps it
    so that every failure, including a timeout, comes back as a failed
    `TranslateResult` instead of an exception.
    """

    provider_id: ClassVar[ProviderId]

    def __init__(self, settings: ProviderSettings | None = None, *, timeout: float | None = DEFAULT_PROVIDER_TIMEOUT) -> None:
        """
        Initialize the translator with provider-specific settings.

        Args:
            settings: The provider's settings from the configuration file.
            timeout: Seconds allowed for one `find` call, or None for no limit.

        """
        self.settings = settings or ProviderSettings()
        self.timeout = timeout

    @property
    def name(self) -> str:
        """Human-readable name of the translator."""
        return self.provider_id.display_name

    def can_support(self, target_language: Language) -> bool:
        """
        Check whether this provider can translate into `target_language`.

        Evaluated before invocation so that ineligible providers cost no
        network call. Subclasses narrow this further and call super().
        """
        supported = self.settings.supported_languages
        if supported is None:
            return True
        return target_language.extension.lower() in {code.lower() for code in supported}

    async def find(self, request: TranslateRequest) -> TranslateResult:
        """
        Translate a request and report the outcome.

        Never raises for provider errors. Cancellation of the calling task is
        propagated unchanged.
        """
        try:
            if self.timeout is None:
                translated = await self._translate(request)
            else:
                translated = await asyncio.wait_for(self._translate(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("%s timed out after %ss.", self.name, self.timeout)
            return TranslateResult.failure(self.provider_id, request.text, TIMEOUT_DIAGNOSTIC)
        except Exception as e:
            logger.warning("%s failed: %s", self.name, e)
            logger.debug("%s failure details", self.name, exc_info=True)
            return TranslateResult.failure(self.provider_id, request.text, str(e) or e.__class__.__name__)

        if not translated or not translated.strip():
            return TranslateResult.failure(self.provider_id, request.text, NO_RESULT_DIAGNOSTIC)

        logger.debug("%s translated '%s' -> '%s'", self.name, request.text, translated)
        return TranslateResult.success(self.provider_id, request.text, translated.strip())

    @abstractmethod
    async def _translate(self, request: TranslateRequest) -> str:
        """
        Translate one request.

        Args:
            request: The text, its detected source language and the target language.

        Returns:
            The translated text. An empty string means "nothing found".

        Raises:
            Exception: Any error; `find` turns it into a failed result.

        """
        raise NotImplementedError

    async def close(self) -> None:  # noqa: B027
        """Release network resources. Nothing to release by default."""
