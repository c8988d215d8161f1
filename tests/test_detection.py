"""Tests for the language detectors."""

import asyncio
import unittest
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from cliptranslate.detection import FixedLanguageDetector, GoogleLanguageDetector
from cliptranslate.errors import LanguageDetectionError


class TestGoogleLanguageDetector(unittest.TestCase):
    """Test suite for GoogleLanguageDetector."""

    def test_parse_response(self) -> None:
        """1. Parsing: The third element of the answer is the language code."""
        data = [[["merhaba", "hello", None, None, 1]], None, "en"]
        assert GoogleLanguageDetector.parse_response(data) == "en"

    def test_parse_response_without_language(self) -> None:
        """2. Parsing: An answer without a language raises LanguageDetectionError."""
        for data in ([[["x"]], None, None], {"unexpected": True}, []):
            with pytest.raises(LanguageDetectionError, match="no language"):
                GoogleLanguageDetector.parse_response(data)

    def test_detect(self) -> None:
        """3. Detect: The fetched answer is parsed."""
        detector = GoogleLanguageDetector()
        with patch.object(GoogleLanguageDetector, "_fetch", new=AsyncMock(return_value=[[], None, "de"])) as mock_fetch:
            assert asyncio.run(detector.detect("Hallo")) == "de"
        mock_fetch.assert_awaited_once_with("Hallo")

    def test_detect_wraps_network_errors(self) -> None:
        """4. Failure: Network errors become LanguageDetectionError."""
        detector = GoogleLanguageDetector()
        fetch = AsyncMock(side_effect=aiohttp.ClientConnectionError("offline"))
        with patch.object(GoogleLanguageDetector, "_fetch", new=fetch), pytest.raises(LanguageDetectionError, match="offline"):
            asyncio.run(detector.detect("hello"))

    def test_detect_wraps_timeouts(self) -> None:
        """5. Failure: A timeout becomes LanguageDetectionError."""
        detector = GoogleLanguageDetector()
        fetch = AsyncMock(side_effect=asyncio.TimeoutError())
        with patch.object(GoogleLanguageDetector, "_fetch", new=fetch), pytest.raises(LanguageDetectionError, match="Language detection failed"):
            asyncio.run(detector.detect("hello"))

    def test_close_without_session(self) -> None:
        """6. Close: Closing an unused detector is a no-op."""
        asyncio.run(GoogleLanguageDetector().close())


def test_fixed_detector_returns_configured_code() -> None:
    """The fixed detector ignores the text."""
    assert asyncio.run(FixedLanguageDetector("fr").detect("hello")) == "fr"
    assert asyncio.run(FixedLanguageDetector().detect("hello")) == "auto"
