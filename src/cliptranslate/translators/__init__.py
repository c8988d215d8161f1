"""
Translation provider implementations.

Each translator adheres to the `BaseTranslator` interface and is created from
the user's configuration through `TRANSLATOR_MAPPING`.
"""

from cliptranslate.models import ProviderId

from .base import BaseTranslator
from .base_http import BaseHTTPTranslator
from .dictionary import SesliSozlukTranslator, TurengTranslator
from .google_translator import GoogleTranslator
from .mock_translator import MockTranslator
from .prompt_translator import PromptTranslator
from .yandex_translator import YandexTranslator

# Central mapping from provider id to translator class.
TRANSLATOR_MAPPING: dict[ProviderId, type[BaseTranslator]] = {
    ProviderId.GOOGLE: GoogleTranslator,
    ProviderId.YANDEX: YandexTranslator,
    ProviderId.TURENG: TurengTranslator,
    ProviderId.SESLISOZLUK: SesliSozlukTranslator,
    ProviderId.PROMPT: PromptTranslator,
    ProviderId.MOCK: MockTranslator,
}

__all__ = [
    "TRANSLATOR_MAPPING",
    "BaseHTTPTranslator",
    "BaseTranslator",
    "GoogleTranslator",
    "MockTranslator",
    "PromptTranslator",
    "SesliSozlukTranslator",
    "TurengTranslator",
    "YandexTranslator",
]
