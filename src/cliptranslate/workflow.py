"""Wires the pipeline to its collaborators and runs it for clipboard events."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from . import __version__
from .aggregator import Aggregator
from .clipboard import ClipboardWatcher
from .config import AppConfig
from .detection import FixedLanguageDetector, GoogleLanguageDetector, LanguageDetector
from .models import OrganizedResult
from .registry import ActiveProviderRegistry, build_registry
from .sinks import ERROR_TITLE, AnalyticsSink, ConsoleNotifier, GoogleAnalytics, LoggingAnalytics, Notifier, spawn_detached

logger = logging.getLogger(__name__)

ANALYTICS_CATEGORY = "ClipTranslate"
ANALYTICS_ACTION = "Translate"
ANALYTICS_SCREEN = "notification"


class ClipboardTranslator:
    """
    Handles text events: runs the pipeline, notifies, then traces.

    `handle_text` is the top-level error boundary. Nothing it does raises;
    failures become an "Error" notification.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        notifier: Notifier,
        analytics: AnalyticsSink | None = None,
        *,
        version: str = __version__,
    ) -> None:
        """Initialize the handler with its pipeline and sinks."""
        self.aggregator = aggregator
        self.notifier = notifier
        self.analytics = analytics or LoggingAnalytics()
        self.version = version
        self._runs: set[asyncio.Task[Any]] = set()
        self._traces: set[asyncio.Task[Any]] = set()

    def _notify(self, title: str, body: str) -> None:
        try:
            self.notifier.notify(title, body)
        except Exception:
            logger.exception("Failed to show notification '%s'", title)

    def _publish(self, result: OrganizedResult) -> None:
        if result.translations:
            self._notify(result.original_text, result.merged_text)
        if result.failures:
            self._notify(ERROR_TITLE, result.failure_text)
        if result.is_empty:
            logger.info("Nothing to show for '%s'.", result.original_text)

    async def _trace(self, result: OrganizedResult) -> None:
        label = f"{result.original_text} | {result.source_language} - {result.target_language} | v{self.version}"
        await self.analytics.track_event(ANALYTICS_CATEGORY, ANALYTICS_ACTION, label)
        await self.analytics.track_screen(ANALYTICS_CATEGORY, self.version, ANALYTICS_SCREEN)

    async def handle_text(self, text: str) -> OrganizedResult | None:
        """
        Run the pipeline for one text and deliver the outcome.

        Returns:
            The organized result, or None if the text was skipped or the run failed.

        """
        try:
            result = await self.aggregator.translate(text)
        except Exception as e:
            logger.exception("Translating '%s' failed", text)
            self._notify(ERROR_TITLE, str(e) or e.__class__.__name__)
            return None

        if result is None:
            return None

        self._publish(result)
        trace = spawn_detached(self._trace(result), name="analytics-trace")
        self._traces.add(trace)
        trace.add_done_callback(self._traces.discard)
        return result

    async def dispatch(self, queue: "asyncio.Queue[str | None]") -> None:
        """
        Consume texts from `queue`, one task per text, until a None arrives.

        A new text does not wait for the previous run to finish.
        """
        while True:
            text = await queue.get()
            if text is None:
                break
            task = asyncio.create_task(self.handle_text(text), name="translate")
            self._runs.add(task)
            task.add_done_callback(self._runs.discard)

    async def drain(self) -> None:
        """Wait for every in-flight run, then for the traces those runs started."""
        if self._runs:
            await asyncio.gather(*tuple(self._runs), return_exceptions=True)
        if self._traces:
            await asyncio.gather(*tuple(self._traces), return_exceptions=True)


@dataclass
class Application:
    """Everything a running ClipTranslate needs, built from the configuration."""

    config: AppConfig
    registry: ActiveProviderRegistry
    detector: LanguageDetector
    analytics: AnalyticsSink
    handler: ClipboardTranslator
    queue: "asyncio.Queue[str | None]" = field(default_factory=asyncio.Queue)

    async def close(self) -> None:
        """Release every network resource."""
        await self.registry.close()
        await self.detector.close()
        await self.analytics.close()


def build_application(
    config: AppConfig,
    *,
    notifier: Notifier | None = None,
    source_language: str | None = None,
    registry: ActiveProviderRegistry | None = None,
) -> Application:
    """
    Assemble the pipeline and its collaborators.

    Args:
        config: The loaded configuration.
        notifier: Where notifications go; the console by default.
        source_language: A fixed source language code that disables detection.
        registry: A prebuilt registry; built from `config` otherwise.

    """
    registry = registry or build_registry(config)
    detector: LanguageDetector = FixedLanguageDetector(source_language) if source_language else GoogleLanguageDetector()
    analytics: AnalyticsSink = (
        GoogleAnalytics(config.analytics.tracking_id, config.analytics.client_id) if config.analytics.tracking_id else LoggingAnalytics()
    )
    aggregator = Aggregator(registry, detector, lambda: config.language)
    handler = ClipboardTranslator(aggregator, notifier or ConsoleNotifier(), analytics)
    return Application(config=config, registry=registry, detector=detector, analytics=analytics, handler=handler)


async def translate_once(app: Application, text: str) -> OrganizedResult | None:
    """Run the pipeline for a single text, wait for its trace, then release resources."""
    try:
        return await app.handler.handle_text(text)
    finally:
        await app.handler.drain()
        await app.close()


async def run_clipboard_loop(app: Application, watcher: ClipboardWatcher | None = None) -> None:
    """
    Translate clipboard changes until cancelled.

    The watcher feeds the queue, the dispatcher drains it. On cancellation
    both stop, in-flight runs finish, and resources are released.
    """
    watcher = watcher or ClipboardWatcher(app.queue, poll_interval=app.config.clipboard.poll_interval)
    dispatcher = asyncio.create_task(app.handler.dispatch(app.queue), name="dispatcher")
    logger.info(
        "ClipTranslate started: translating into %s with %s.",
        app.config.language.name,
        ", ".join(p.display_name for p in app.registry.active_providers) or "all providers",
    )
    try:
        await watcher.watch()
    finally:
        watcher.stop()
        await app.queue.put(None)
        await dispatcher
        await app.handler.drain()
        await app.close()
