"""The closed table of languages ClipTranslate can translate into."""

from dataclasses import dataclass
from typing import Final

from .errors import UnknownLanguageError

# Display name -> language extension (ISO 639-1 style codes used by the providers).
LANGUAGE_MAPPING: Final[dict[str, str]] = {
    "Afrikaans": "af",
    "Albanian": "sq",
    "Arabic": "ar",
    "Armenian": "hy",
    "Azerbaijani": "az",
    "Basque": "eu",
    "Belarusian": "be",
    "Bengali": "bn",
    "Bosnian": "bs",
    "Bulgarian": "bg",
    "Catalan": "ca",
    "Chinese": "zh-CN",
    "Croatian": "hr",
    "Czech": "cs",
    "Danish": "da",
    "Dutch": "nl",
    "English": "en",
    "Estonian": "et",
    "Finnish": "fi",
    "French": "fr",
    "Galician": "gl",
    "Georgian": "ka",
    "German": "de",
    "Greek": "el",
    "Hebrew": "iw",
    "Hindi": "hi",
    "Hungarian": "hu",
    "Icelandic": "is",
    "Indonesian": "id",
    "Irish": "ga",
    "Italian": "it",
    "Japanese": "ja",
    "Kazakh": "kk",
    "Korean": "ko",
    "Latvian": "lv",
    "Lithuanian": "lt",
    "Macedonian": "mk",
    "Malay": "ms",
    "Norwegian": "no",
    "Persian": "fa",
    "Polish": "pl",
    "Portuguese": "pt",
    "Romanian": "ro",
    "Russian": "ru",
    "Serbian": "sr",
    "Slovak": "sk",
    "Slovenian": "sl",
    "Spanish": "es",
    "Swedish": "sv",
    "Thai": "th",
    "Turkish": "tr",
    "Ukrainian": "uk",
    "Urdu": "ur",
    "Vietnamese": "vi",
    "Welsh": "cy",
}


@dataclass(frozen=True)
class Language:
    """A target language: its display name and the code sent to providers."""

    name: str
    extension: str

    @property
    def is_turkish(self) -> bool:
        """Check whether this is Turkish, which some dictionary providers require."""
        return self.extension == "tr"

    def __str__(self) -> str:
        """Return the display name."""
        return self.name


_LANGUAGES: Final[dict[str, Language]] = {name: Language(name, ext) for name, ext in LANGUAGE_MAPPING.items()}
_BY_EXTENSION: Final[dict[str, Language]] = {lang.extension.lower(): lang for lang in _LANGUAGES.values()}
_BY_NAME: Final[dict[str, Language]] = {name.lower(): lang for name, lang in _LANGUAGES.items()}


def get_language(key: str) -> Language:
    """
    Look up a language by display name or extension, case-insensitively.

    Raises:
        UnknownLanguageError: If the key matches no entry of the table.

    """
    normalized = key.strip().lower()
    language = _BY_NAME.get(normalized) or _BY_EXTENSION.get(normalized)
    if language is None:
        msg = f"Unknown language: '{key}'"
        raise UnknownLanguageError(msg)
    return language


def all_languages() -> list[Language]:
    """Return every language of the table, sorted by display name."""
    return sorted(_LANGUAGES.values(), key=lambda lang: lang.name)
