"""A mock translator for offline use and testing."""

import asyncio
import logging

from cliptranslate.config import DEFAULT_PROVIDER_TIMEOUT, ProviderSettings
from cliptranslate.models import ProviderId, TranslateRequest

from .base import BaseTranslator

logger = logging.getLogger(__name__)


class MockTranslatorError(Exception):
    """Custom exception for mock translator errors."""


class MockTranslator(BaseTranslator):
    """
    A mock translator that prepends a '[MOCK]' prefix.

    The answer, an artificial delay and a forced failure can be set through
    keyword arguments or the provider's `extra` settings
    (`response`, `delay`, `error`).
    """

    provider_id = ProviderId.MOCK

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        *,
        timeout: float | None = DEFAULT_PROVIDER_TIMEOUT,
        response: str | None = None,
        delay: float | None = None,
        error: str | None = None,
    ) -> None:
        """
        Initialize the Mock Translator.

        Args:
            settings: Provider settings; `extra` may hold defaults for the options below.
            timeout: Seconds allowed for one call.
            response: A fixed translation to return instead of the '[MOCK]' text.
            delay: Seconds to sleep before answering.
            error: If set, every call fails with this message.

        """
        super().__init__(settings, timeout=timeout)
        extra = self.settings.extra or {}
        self.response = response if response is not None else extra.get("response")
        self.delay = float(delay if delay is not None else extra.get("delay", 0.0))
        self.error = error if error is not None else extra.get("error")
        self.calls: list[TranslateRequest] = []

    async def _translate(self, request: TranslateRequest) -> str:
        self.calls.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise MockTranslatorError(self.error)
        logger.debug("MockTranslator answering '%s' for target '%s'.", request.text, request.target_language.extension)
        if self.response is not None:
            return self.response
        return f"[MOCK] {request.text}"
