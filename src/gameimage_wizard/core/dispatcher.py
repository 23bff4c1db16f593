# -*- coding: utf-8 -*-
"""Table-driven handling of every message variant."""

from __future__ import annotations

import logging
from collections.abc import Callable

from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.router import Host, Router
from gameimage_wizard.core.tasks import WindowLock

logger = logging.getLogger(__name__)

Handler = Callable[[Message], None]


class Dispatcher:
    """Route control messages to the host and draw messages to the router."""

    def __init__(self, host: Host, router: Router, lock: WindowLock | None = None) -> None:
        self._host = host
        self._router = router
        self.lock = lock or WindowLock()
        self.quit_requested = False
        self._table: dict[Msg, Handler] = {
            Msg.WIND_UPDATE: self._on_update,
            Msg.WIND_ACTIVATE: self._on_activate,
            Msg.WIND_DEACTIVATE: self._on_deactivate,
            Msg.STATUS: self._on_status,
            Msg.ALERT: self._on_alert,
            Msg.QUIT: self._on_quit,
        }
        for kind in Msg:
            if not kind.is_control and router.handles(kind):
                self._table[kind] = router.build

    def handles(self, kind: Msg) -> bool:
        return kind in self._table

    def dispatch(self, message: Message) -> None:
        handler = self._table.get(message.kind)
        if handler is None:
            logger.debug("Ignoring unhandled message %s", message)
            return
        handler(message)
        self._host.flush()

    def _on_update(self, message: Message) -> None:
        # Flush happens after every dispatch
        pass

    def _on_activate(self, message: Message) -> None:
        self.lock.activate()
        self._host.set_active(True)

    def _on_deactivate(self, message: Message) -> None:
        self.lock.deactivate()
        self._host.set_active(False)

    def _on_status(self, message: Message) -> None:
        text = str(message.payload or "")
        logger.info("Status: %s", text)
        self._host.set_status(text)

    def _on_alert(self, message: Message) -> None:
        self._host.alert(str(message.payload or ""))

    def _on_quit(self, message: Message) -> None:
        logger.info("Quit requested")
        self.quit_requested = True
        self._host.quit()
