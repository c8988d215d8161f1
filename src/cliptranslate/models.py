"""Defines the data models that flow through the translation pipeline."""

from dataclasses import dataclass, field
from enum import Enum

from .languages import Language


class ProviderId(str, Enum):
    """Enumeration of the supported translation providers."""

    GOOGLE = "google"
    YANDEX = "yandex"
    TURENG = "tureng"
    SESLISOZLUK = "seslisozluk"
    PROMPT = "prompt"
    MOCK = "mock"

    @property
    def display_name(self) -> str:
        """Return the human-readable provider name used in notifications."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ProviderId.GOOGLE: "Google",
    ProviderId.YANDEX: "Yandex",
    ProviderId.TURENG: "Tureng",
    ProviderId.SESLISOZLUK: "SesliSozluk",
    ProviderId.PROMPT: "Prompt",
    ProviderId.MOCK: "Mock",
}


@dataclass(frozen=True)
class TranslateRequest:
    """A normalized request handed to every eligible provider."""

    text: str
    source_language: str
    target_language: Language

    def __post_init__(self) -> None:
        """Validate that there is something to translate."""
        if not self.text or not self.text.strip():
            msg = "TranslateRequest.text must not be empty."
            raise ValueError(msg)


@dataclass(frozen=True)
class TranslateResult:
    """
    The outcome of one provider invocation.

    Attributes:
        provider_id: The provider that produced this outcome.
        source_text: The text that was sent for translation.
        translated_text: The translation, or None when the provider failed.
        succeeded: Whether the provider produced a usable translation.
        diagnostic: The failure message when `succeeded` is False.

    """

    provider_id: ProviderId
    source_text: str
    translated_text: str | None = None
    succeeded: bool = False
    diagnostic: str | None = None

    @classmethod
    def success(cls, provider_id: ProviderId, source_text: str, translated_text: str) -> "TranslateResult":
        """Build a successful result."""
        return cls(provider_id=provider_id, source_text=source_text, translated_text=translated_text, succeeded=True)

    @classmethod
    def failure(cls, provider_id: ProviderId, source_text: str, diagnostic: str) -> "TranslateResult":
        """Build a failed result carrying a diagnostic message."""
        return cls(provider_id=provider_id, source_text=source_text, succeeded=False, diagnostic=diagnostic)


@dataclass(frozen=True)
class OrganizedResult:
    """The merged, deduplicated outcome of one pipeline run."""

    original_text: str
    translations: tuple[str, ...] = field(default_factory=tuple)
    failures: tuple[str, ...] = field(default_factory=tuple)
    source_language: str | None = None
    target_language: str | None = None

    @classmethod
    def empty(cls, original_text: str, source_language: str | None = None, target_language: str | None = None) -> "OrganizedResult":
        """Return a result with neither translations nor failures."""
        return cls(original_text=original_text, source_language=source_language, target_language=target_language)

    @property
    def merged_text(self) -> str:
        """All distinct translations, one per line."""
        return "\n".join(self.translations)

    @property
    def failure_text(self) -> str:
        """All provider diagnostics, one per line."""
        return "\n".join(self.failures)

    @property
    def is_empty(self) -> bool:
        """Check whether the run produced nothing at all."""
        return not self.translations and not self.failures
