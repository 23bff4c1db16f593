# -*- coding: utf-8 -*-
"""Multi-producer, single-consumer message channel."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from gameimage_wizard.constants import HEARTBEAT_INTERVAL_MS
from gameimage_wizard.core.messages import Message, Msg

logger = logging.getLogger(__name__)

Waker = Callable[[], None]


class Sender:
    """Handle given to screens and workers; safe to use from any thread."""

    def __init__(self, bus: MessageBus) -> None:
        self._bus = bus

    def send(self, message: Message) -> None:
        """Enqueue without waking the UI thread; the next heartbeat delivers it."""
        self._bus.put(message)

    def send_awake(self, message: Message) -> None:
        """Enqueue and make the UI thread process the queue promptly."""
        self._bus.put(message)
        self._bus.wake()

    def send_activate(self, message: Message) -> None:
        """Re-enable the window, then deliver ``message``."""
        self._bus.put(Message(Msg.WIND_ACTIVATE))
        self.send_awake(message)


class MessageBus:
    """FIFO queue; only the UI thread may consume from it."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Message] = queue.SimpleQueue()
        self._waker: Waker | None = None

    def sender(self) -> Sender:
        return Sender(self)

    def set_waker(self, waker: Waker | None) -> None:
        self._waker = waker

    def put(self, message: Message) -> None:
        self._queue.put(message)

    def wake(self) -> None:
        waker = self._waker
        if waker is not None:
            waker()

    def receive(self, timeout: float | None = None) -> Message | None:
        """Block until a message arrives; ``None`` when ``timeout`` expires."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> list[Message]:
        """Return every queued message in arrival order without blocking."""
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages

    def empty(self) -> bool:
        return self._queue.empty()


class Heartbeat:
    """Periodically enqueue ``WIND_UPDATE`` so the UI flushes without user input."""

    def __init__(self, sender: Sender, interval_ms: int = HEARTBEAT_INTERVAL_MS) -> None:
        self._sender = sender
        self._interval = max(1, int(interval_ms)) / 1000.0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="heartbeat", daemon=True)
        self._thread.start()
        logger.debug("Heartbeat started (%.3fs)", self._interval)

    def stop(self, timeout: float | None = 1.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop.is_set():
            self._sender.send_awake(Message(Msg.WIND_UPDATE))
            self._stop.wait(self._interval)
