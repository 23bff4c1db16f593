# -*- coding: utf-8 -*-
"""Single consumer of the message bus."""

from __future__ import annotations

import logging

from gameimage_wizard.core.bus import MessageBus
from gameimage_wizard.core.dispatcher import Dispatcher
from gameimage_wizard.core.messages import Message

logger = logging.getLogger(__name__)


class EventLoop:
    """Dequeue messages on the UI thread and dispatch them one at a time."""

    def __init__(self, bus: MessageBus, dispatcher: Dispatcher) -> None:
        self._bus = bus
        self._dispatcher = dispatcher
        self._dispatching = False
        self.processed = 0

    @property
    def running(self) -> bool:
        return not self._dispatcher.quit_requested

    def _dispatch(self, message: Message) -> None:
        self._dispatching = True
        try:
            self._dispatcher.dispatch(message)
        finally:
            self._dispatching = False
        self.processed += 1

    def process_pending(self) -> int:
        """Dispatch everything queued so far; used by the toolkit's wake slot.

        A modal dialog opened by a handler spins a nested toolkit loop which
        can call back in here; such nested calls leave the queue alone.
        """
        if self._dispatching:
            return 0
        count = 0
        while self.running:
            batch = self._bus.drain()
            if not batch:
                break
            for message in batch:
                if not self.running:
                    break
                self._dispatch(message)
                count += 1
        return count

    def run(self, timeout: float | None = None) -> None:
        """Block on the bus until ``QUIT`` (or until ``timeout`` passes idle)."""
        while self.running:
            message = self._bus.receive(timeout=timeout)
            if message is None:
                logger.debug("Event loop idle for %ss, stopping", timeout)
                return
            self._dispatch(message)
