"""Notification and analytics sinks, and the helper that runs them detached."""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from collections.abc import Coroutine
from typing import Any

import aiohttp
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error"
GOOGLE_ANALYTICS_URL = "https://www.google-analytics.com/collect"

_background_tasks: set[asyncio.Task[Any]] = set()


def _log_task_failure(task: asyncio.Task[Any]) -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Background task '%s' failed: %s", task.get_name(), exc, exc_info=exc)


def spawn_detached(coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task[Any]:
    """
    Run a coroutine as a fire-and-forget task.

    A reference is kept until the task finishes, and its exception, if any,
    is logged instead of propagated.
    """
    task = asyncio.create_task(coro, name=name)
    _background_tasks.add(task)
    task.add_done_callback(_log_task_failure)
    return task


class Notifier(ABC):
    """Shows a title and a body to the user."""

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Display a notification. Must return quickly."""
        raise NotImplementedError


class ConsoleNotifier(Notifier):
    """Renders notifications as rich panels in the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the notifier, printing to stdout by default."""
        self.console = console or Console()

    def notify(self, title: str, body: str) -> None:
        """Print a panel; errors get a red border."""
        style = "red" if title == ERROR_TITLE else "cyan"
        self.console.print(Panel(Text(body), title=Text(title, style="bold"), border_style=style, expand=False))


class AnalyticsSink(ABC):
    """Records usage events. Best effort: callers ignore its failures."""

    @abstractmethod
    async def track_event(self, category: str, action: str, label: str) -> None:
        """Record one event."""
        raise NotImplementedError

    @abstractmethod
    async def track_screen(self, app_name: str, app_version: str, screen_name: str) -> None:
        """Record one screen view."""
        raise NotImplementedError

    async def close(self) -> None:  # noqa: B027
        """Release network resources."""


class LoggingAnalytics(AnalyticsSink):
    """Writes events to the debug log. The default when no tracking id is configured."""

    async def track_event(self, category: str, action: str, label: str) -> None:
        """Log the event."""
        logger.debug("Event %s/%s: %s", category, action, label)

    async def track_screen(self, app_name: str, app_version: str, screen_name: str) -> None:
        """Log the screen view."""
        logger.debug("Screen %s v%s: %s", app_name, app_version, screen_name)


class GoogleAnalytics(AnalyticsSink):
    """Sends events and screen views with the Google Analytics measurement protocol."""

    def __init__(self, tracking_id: str, client_id: str | None = None, url: str = GOOGLE_ANALYTICS_URL) -> None:
        """Initialize the tracker for a property and an anonymous client id."""
        self.tracking_id = tracking_id
        self.client_id = client_id or str(uuid.uuid4())
        self.url = url
        self._session: aiohttp.ClientSession | None = None

    def _base_payload(self, hit_type: str) -> dict[str, str]:
        return {"v": "1", "tid": self.tracking_id, "cid": self.client_id, "t": hit_type}

    def build_payload(self, category: str, action: str, label: str) -> dict[str, str]:
        """Return the form fields of one event hit."""
        return {**self._base_payload("event"), "ec": category, "ea": action, "el": label}

    def build_screen_payload(self, app_name: str, app_version: str, screen_name: str) -> dict[str, str]:
        """Return the form fields of one screen view hit."""
        return {
            **self._base_payload("screenview"),
            "an": app_name,
            "av": app_version,
            "aid": app_name.lower(),
            "aiid": app_name.lower(),
            "cd": screen_name,
        }

    async def _send(self, payload: dict[str, str]) -> None:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=10))
        async with self._session.post(self.url, data=payload) as response:
            response.raise_for_status()

    async def track_event(self, category: str, action: str, label: str) -> None:
        """POST the event hit."""
        await self._send(self.build_payload(category, action, label))

    async def track_screen(self, app_name: str, app_version: str, screen_name: str) -> None:
        """POST the screen view hit."""
        await self._send(self.build_screen_payload(app_name, app_version, screen_name))

    async def close(self) -> None:
        """Close the HTTP session if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
