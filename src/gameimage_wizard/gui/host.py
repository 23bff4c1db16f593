# -*- coding: utf-8 -*-
"""Glue between Qt widgets and the message bus."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, Qt, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QAbstractButton

from gameimage_wizard.core.bus import Sender
from gameimage_wizard.core.messages import Message

logger = logging.getLogger(__name__)


def emit(button: QAbstractButton, sender: Sender, message: Message) -> None:
    """Send a fixed message whenever ``button`` is clicked."""
    button.clicked.connect(lambda *_: sender.send_awake(message))


def disconnect_all(signal) -> None:
    """Drop every slot connected to ``signal``."""
    try:
        signal.disconnect()
    except TypeError:
        # Nothing was connected
        pass


def log_status(ui, fmt: str, *args) -> None:
    """Log a line and show it in the footer status field."""
    text = fmt % args if args else fmt
    logger.info("%s", text)
    ui.status.setText(text)


class QtWaker(QObject):
    """Deliver bus wake-ups on the thread that owns this object.

    ``wake()`` may be called from any thread; Qt queues the signal to the UI
    thread, where the slot drains the bus.
    """

    woken = pyqtSignal()

    def __init__(self, on_wake: Callable[[], object], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._on_wake = on_wake
        self.woken.connect(self._handle, type=Qt.ConnectionType.QueuedConnection)

    def wake(self) -> None:
        self.woken.emit()

    @pyqtSlot()
    def _handle(self) -> None:
        self._on_wake()
