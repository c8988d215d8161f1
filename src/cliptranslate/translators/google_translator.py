"""Translator implementation using Google Translate via deep-translator."""

import asyncio

from deep_translator import GoogleTranslator as DeepGoogleTranslator  # type: ignore[import-untyped]

from cliptranslate.models import ProviderId, TranslateRequest

from .base import BaseTranslator


class GoogleTranslator(BaseTranslator):
    """A translator using the Google Translate web API through the 'deep-translator' library."""

    provider_id = ProviderId.GOOGLE

    async def _translate(self, request: TranslateRequest) -> str:
        """Run the blocking deep-translator call in a worker thread."""

        def _call() -> str:
            translator = DeepGoogleTranslator(source=request.source_language or "auto", target=request.target_language.extension)
            return translator.translate(request.text) or ""

        try:
            return await asyncio.to_thread(_call)
        except Exception as e:
            msg = f"deep-translator (Google) request failed: {e}"
            raise ConnectionError(msg) from e
