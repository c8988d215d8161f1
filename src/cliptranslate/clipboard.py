"""Polls the system clipboard and publishes text changes to a queue."""

import asyncio
import logging
from collections.abc import Callable

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardWatcher:
    """
    Turns clipboard changes into `str` events on an `asyncio.Queue`.

    The clipboard is read with pyperclip in a worker thread every
    `poll_interval` seconds. The content present when watching starts is not
    published; only later changes are.
    """

    def __init__(
        self,
        queue: "asyncio.Queue[str | None]",
        *,
        poll_interval: float = 0.5,
        paste: Callable[[], str] = pyperclip.paste,
    ) -> None:
        """
        Initialize the watcher.

        Args:
            queue: Where changed texts are put.
            poll_interval: Seconds between two clipboard reads.
            paste: The clipboard reader.

        """
        self.queue = queue
        self.poll_interval = poll_interval
        self._paste = paste
        self._stop = asyncio.Event()

    async def _read(self) -> str | None:
        try:
            text = await asyncio.to_thread(self._paste)
        except pyperclip.PyperclipException as e:
            logger.warning("Could not read the clipboard: %s", e)
            return None
        return text if isinstance(text, str) else None

    def stop(self) -> None:
        """Ask `watch` to return after the current poll."""
        self._stop.set()

    async def watch(self) -> None:
        """Poll until `stop` is called."""
        last = await self._read()
        logger.info("Watching the clipboard every %.2fs.", self.poll_interval)
        while not self._stop.is_set():
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self.poll_interval)
            except asyncio.TimeoutError:
                pass
            if self._stop.is_set():
                break

            text = await self._read()
            if text is None or text == last:
                continue
            last = text
            if text.strip():
                logger.debug("Clipboard changed: '%s'", text)
                await self.queue.put(text)
        logger.info("Stopped watching the clipboard.")
