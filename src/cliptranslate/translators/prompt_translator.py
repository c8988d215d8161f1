"""Translator implementation for the PROMT online translator."""

from typing import Any, Final

from cliptranslate.errors import ProviderError
from cliptranslate.languages import Language
from cliptranslate.models import ProviderId, TranslateRequest

from .base_http import BaseHTTPTranslator

# Language extensions PROMT accepts as a translation target.
PROMPT_LANGUAGES: Final[frozenset[str]] = frozenset(
    {"ar", "ca", "de", "el", "en", "es", "fi", "fr", "he", "hi", "it", "ja", "kk", "ko", "nl", "pt", "ru", "tr", "uk", "zh-cn"},
)


class PromptTranslator(BaseHTTPTranslator):
    """Queries PROMT's public translation service with a JSON POST."""

    provider_id = ProviderId.PROMPT
    default_url = "https://www.online-translator.com/services/soap.asmx/GetTranslation"

    def can_support(self, target_language: Language) -> bool:
        """PROMT only translates into its own set of languages."""
        return target_language.extension.lower() in PROMPT_LANGUAGES and super().can_support(target_language)

    def build_payload(self, request: TranslateRequest) -> dict[str, Any]:
        """Build the request body PROMT expects."""
        source = request.source_language.lower() if request.source_language else "auto"
        target = request.target_language.extension.lower()
        return {
            "dirCode": f"{source}-{target}",
            "template": "General",
            "text": request.text,
            "lang": source,
            "limit": 3000,
            "useAutoDetect": True,
            "key": self.settings.api_key or "",
            "ts": "MainSite",
            "tid": "",
            "IsMobile": False,
        }

    @staticmethod
    def parse_response(data: Any) -> str:  # noqa: ANN401
        """
        Read the translation out of PROMT's `{"d": {"result": ...}}` envelope.

        Raises:
            ProviderError: If the envelope is malformed or reports an error.

        """
        body = data.get("d") if isinstance(data, dict) else None
        if not isinstance(body, dict):
            msg = "Malformed response from PROMT."
            raise ProviderError(msg)
        error = body.get("errCode")
        if error not in (None, 0):
            msg = f"PROMT error {error}: {body.get('errMessage') or 'unknown'}"
            raise ProviderError(msg)
        result = body.get("result")
        return result if isinstance(result, str) else ""

    async def _translate(self, request: TranslateRequest) -> str:
        data = await self._post_json(self.url, self.build_payload(request))
        return self.parse_response(data)
