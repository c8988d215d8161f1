"""Exception types raised by ClipTranslate."""


class ClipTranslateError(Exception):
    """Base class for all ClipTranslate errors."""


class ProviderError(ClipTranslateError):
    """A translation provider could not produce a translation."""


class LanguageDetectionError(ClipTranslateError):
    """The source language of a text could not be detected."""


class UnknownLanguageError(ClipTranslateError, KeyError):
    """A language name or code is not part of the language table."""

    def __str__(self) -> str:
        """Return the plain message instead of KeyError's quoted repr."""
        return str(self.args[0]) if self.args else ""


class UnknownProviderError(ClipTranslateError, KeyError):
    """A provider id is not registered."""

    def __str__(self) -> str:
        """Return the plain message instead of KeyError's quoted repr."""
        return str(self.args[0]) if self.args else ""


class ConfigError(ClipTranslateError, ValueError):
    """The configuration file is invalid."""
