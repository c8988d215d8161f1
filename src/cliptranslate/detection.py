"""Source language detection."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import aiohttp

from .errors import LanguageDetectionError

logger = logging.getLogger(__name__)

GOOGLE_DETECT_URL = "https://translate.googleapis.com/translate_a/single"


class LanguageDetector(ABC):
    """Returns a best-guess language code for a text."""

    @abstractmethod
    async def detect(self, text: str) -> str:
        """
        Detect the language of `text`.

        Raises:
            LanguageDetectionError: If no language could be determined.

        """
        raise NotImplementedError

    async def close(self) -> None:  # noqa: B027
        """Release network resources."""


class GoogleLanguageDetector(LanguageDetector):
    """
    Detects languages with the public Google Translate endpoint.

    The endpoint is asked to translate with `sl=auto`; the third element of
    the JSON answer is the detected source language.
    """

    def __init__(self, url: str = GOOGLE_DETECT_URL, *, timeout: float | None = 10.0) -> None:
        """Initialize the detector with the endpoint and a request timeout."""
        self.url = url
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _fetch(self, text: str) -> Any:  # noqa: ANN401
        params = {"client": "gtx", "sl": "auto", "tl": "en", "dt": "t", "q": text}
        session = await self._get_session()
        async with session.get(self.url, params=params) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    @staticmethod
    def parse_response(data: Any) -> str:  # noqa: ANN401
        """
        Extract the detected language code.

        Raises:
            LanguageDetectionError: If the answer has no language code.

        """
        code = data[2] if isinstance(data, list) and len(data) > 2 else None  # noqa: PLR2004
        if not isinstance(code, str) or not code:
            msg = "Language detection returned no language."
            raise LanguageDetectionError(msg)
        return code

    async def detect(self, text: str) -> str:
        """Detect the language of `text` over the network."""
        try:
            data = await self._fetch(text)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            msg = f"Language detection failed: {e}"
            raise LanguageDetectionError(msg) from e
        code = self.parse_response(data)
        logger.debug("Detected language '%s' for '%s'", code, text)
        return code


class FixedLanguageDetector(LanguageDetector):
    """Always reports the same language. Used when detection is turned off."""

    def __init__(self, language_code: str = "auto") -> None:
        """Initialize the detector with the code to report."""
        self.language_code = language_code

    async def detect(self, text: str) -> str:
        """Return the configured code."""
        _ = text
        return self.language_code
