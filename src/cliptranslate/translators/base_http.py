"""Shared aiohttp plumbing for translators that talk to a web endpoint directly."""

import logging
from typing import Any, ClassVar

import aiohttp

from cliptranslate.errors import ProviderError

from .base import BaseTranslator

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"


class BaseHTTPTranslator(BaseTranslator):
    """
    A translator backed by a single lazily created `aiohttp.ClientSession`.

    The session is bound to the running event loop, so it is created on first
    use and closed with `close()`.
    """

    default_url: ClassVar[str]

    _session: aiohttp.ClientSession | None = None

    @property
    def url(self) -> str:
        """The endpoint, overridable with the provider's `url` setting."""
        return self.settings.url or self.default_url

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers={"User-Agent": USER_AGENT})
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get_text(self, url: str, **kwargs: Any) -> str:  # noqa: ANN401
        """GET a URL and return the body, raising ProviderError on HTTP errors."""
        session = await self._get_session()
        async with session.get(url, **kwargs) as response:
            if response.status >= 400:  # noqa: PLR2004
                msg = f"HTTP {response.status}"
                raise ProviderError(msg)
            return await response.text()

    async def _post_json(self, url: str, payload: dict[str, Any], **kwargs: Any) -> Any:  # noqa: ANN401
        """POST a JSON payload and return the decoded JSON answer."""
        session = await self._get_session()
        async with session.post(url, json=payload, **kwargs) as response:
            if response.status >= 400:  # noqa: PLR2004
                msg = f"HTTP {response.status}"
                raise ProviderError(msg)
            return await response.json(content_type=None)
