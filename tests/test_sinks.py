"""Tests for the notification and analytics sinks."""

import asyncio
import unittest

from rich.console import Console

from cliptranslate.sinks import ERROR_TITLE, ConsoleNotifier, GoogleAnalytics, LoggingAnalytics, spawn_detached


class TestConsoleNotifier(unittest.TestCase):
    """Test suite for ConsoleNotifier."""

    def test_notification_shows_title_and_body(self) -> None:
        """1. Render: The panel carries the original text and the translations."""
        console = Console(record=True, width=80)
        ConsoleNotifier(console).notify("hello", "merhaba\nselam")

        output = console.export_text()
        assert "hello" in output
        assert "merhaba" in output
        assert "selam" in output

    def test_error_notification(self) -> None:
        """2. Error: Failure lines are shown under the 'Error' title."""
        console = Console(record=True, width=80)
        ConsoleNotifier(console).notify(ERROR_TITLE, "Prompt: timeout")

        output = console.export_text()
        assert "Error" in output
        assert "Prompt: timeout" in output


class TestAnalytics(unittest.TestCase):
    """Test suite for the analytics sinks."""

    def test_google_analytics_payload(self) -> None:
        """1. Payload: An event hit with category, action and label."""
        tracker = GoogleAnalytics("UA-123", "client-1")
        assert tracker.build_payload("ClipTranslate", "Translate", "hello | en - tr | v1.0.0") == {
            "v": "1",
            "tid": "UA-123",
            "cid": "client-1",
            "t": "event",
            "ec": "ClipTranslate",
            "ea": "Translate",
            "el": "hello | en - tr | v1.0.0",
        }

    def test_google_analytics_screen_payload(self) -> None:
        """2. Screen: A screen view hit names the app, its version and the screen."""
        tracker = GoogleAnalytics("UA-123", "client-1")
        assert tracker.build_screen_payload("ClipTranslate", "1.0.0", "notification") == {
            "v": "1",
            "tid": "UA-123",
            "cid": "client-1",
            "t": "screenview",
            "an": "ClipTranslate",
            "av": "1.0.0",
            "aid": "cliptranslate",
            "aiid": "cliptranslate",
            "cd": "notification",
        }

    def test_google_analytics_generates_client_id(self) -> None:
        """3. Client: Without a client id an anonymous one is generated."""
        assert GoogleAnalytics("UA-123").client_id

    def test_logging_analytics(self) -> None:
        """4. Logging: Events and screen views go to the debug log."""
        with self.assertLogs("cliptranslate.sinks", level="DEBUG") as logs:
            asyncio.run(LoggingAnalytics().track_event("ClipTranslate", "Translate", "hello"))
            asyncio.run(LoggingAnalytics().track_screen("ClipTranslate", "1.0.0", "notification"))
        assert "hello" in logs.output[0]
        assert "notification" in logs.output[1]


class TestSpawnDetached(unittest.TestCase):
    """Test suite for spawn_detached."""

    def test_result_is_available(self) -> None:
        """1. Success: The detached task runs to completion."""

        async def _work() -> str:
            return "done"

        async def _run() -> str:
            return await spawn_detached(_work(), name="work")

        assert asyncio.run(_run()) == "done"

    def test_failure_is_logged_not_raised(self) -> None:
        """2. Failure: The exception is logged with the task name."""

        async def _fail() -> None:
            msg = "tracker down"
            raise ConnectionError(msg)

        async def _run() -> None:
            spawn_detached(_fail(), name="analytics-trace")
            for _ in range(3):
                await asyncio.sleep(0)

        with self.assertLogs("cliptranslate.sinks", level="WARNING") as logs:
            asyncio.run(_run())
        assert "analytics-trace" in logs.output[0]
        assert "tracker down" in logs.output[0]
