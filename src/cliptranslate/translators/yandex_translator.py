"""Translator implementation using the Yandex Translate API via deep-translator."""

import asyncio

from deep_translator import YandexTranslator as DeepYandexTranslator  # type: ignore[import-untyped]

from cliptranslate.languages import Language
from cliptranslate.models import ProviderId, TranslateRequest

from .base import BaseTranslator


class YandexTranslator(BaseTranslator):
    """A translator for the Yandex Translate API. Requires an `api_key`."""

    provider_id = ProviderId.YANDEX

    def can_support(self, target_language: Language) -> bool:
        """Yandex is only eligible when an API key is configured."""
        return bool(self.settings.api_key) and super().can_support(target_language)

    async def _translate(self, request: TranslateRequest) -> str:
        def _call() -> str:
            translator = DeepYandexTranslator(
                api_key=self.settings.api_key,
                source=request.source_language or "auto",
                target=request.target_language.extension,
            )
            return translator.translate(request.text) or ""

        try:
            return await asyncio.to_thread(_call)
        except Exception as e:
            msg = f"deep-translator (Yandex) request failed: {e}"
            raise ConnectionError(msg) from e
