"""Scraping translators for the English-Turkish online dictionaries Tureng and SesliSozluk."""

import logging
from typing import ClassVar
from urllib.parse import quote

from bs4 import BeautifulSoup

from cliptranslate.languages import Language
from cliptranslate.models import ProviderId, TranslateRequest

from .base_http import BaseHTTPTranslator

logger = logging.getLogger(__name__)

_DEFAULT_MAX_RESULTS = 5


class BaseDictionaryTranslator(BaseHTTPTranslator):
    """
    A dictionary site queried with one GET per lookup.

    Meanings are the texts of the elements matched by `result_selector`,
    deduplicated and limited to `max_results`, joined with ", ".
    """

    result_selector: ClassVar[str]

    def can_support(self, target_language: Language) -> bool:
        """Only English to Turkish lookups are offered by these dictionaries."""
        return target_language.is_turkish and super().can_support(target_language)

    def _build_url(self, text: str) -> str:
        return self.url.format(text=quote(text.strip().lower()))

    def parse_meanings(self, html: str) -> list[str]:
        """Extract the distinct meanings from a result page."""
        limit = self.settings.max_results or _DEFAULT_MAX_RESULTS
        soup = BeautifulSoup(html, "html.parser")
        meanings: list[str] = []
        seen: set[str] = set()
        for element in soup.select(self.result_selector):
            meaning = element.get_text(" ", strip=True)
            key = meaning.casefold()
            if not meaning or key in seen:
                continue
            seen.add(key)
            meanings.append(meaning)
            if len(meanings) >= limit:
                break
        return meanings

    async def _translate(self, request: TranslateRequest) -> str:
        html = await self._get_text(self._build_url(request.text))
        meanings = self.parse_meanings(html)
        logger.debug("%s found %d meaning(s) for '%s'", self.name, len(meanings), request.text)
        return ", ".join(meanings)


class TurengTranslator(BaseDictionaryTranslator):
    """Looks words up on tureng.com."""

    provider_id = ProviderId.TURENG
    default_url = "https://tureng.com/en/turkish-english/{text}"
    result_selector = "table.searchResultsTable td.tr a"


class SesliSozlukTranslator(BaseDictionaryTranslator):
    """Looks words up on seslisozluk.net."""

    provider_id = ProviderId.SESLISOZLUK
    default_url = "https://www.seslisozluk.net/{text}-nedir-ne-demek/"
    result_selector = "dl.ordered-list dd"
