# -*- coding: utf-8 -*-
"""Map draw messages to the screen builders that render them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NamedTuple, Protocol

from gameimage_wizard.core.messages import Message, Msg

logger = logging.getLogger(__name__)


class Host(Protocol):
    """Operations the UI layer offers to the controller."""

    def set_active(self, active: bool) -> None: ...

    def flush(self) -> None: ...

    def set_status(self, text: str) -> None: ...

    def alert(self, text: str) -> None: ...

    def clear_content(self) -> None: ...

    def quit(self) -> None: ...


Builder = Callable[..., None]


class Route(NamedTuple):
    builder: Builder
    title: str


class Router:
    """Tear down the content area, then let the screen builder fill it."""

    def __init__(self, routes: dict[Msg, Route], host: Host, context: Any) -> None:
        self._routes = dict(routes)
        self._host = host
        self._context = context
        self.current: Msg | None = None

    def routes(self) -> dict[Msg, Route]:
        return dict(self._routes)

    def handles(self, kind: Msg) -> bool:
        return kind in self._routes

    def build(self, message: Message) -> None:
        route = self._routes.get(message.kind)
        if route is None:
            logger.debug("No screen registered for %s", message)
            return

        self._host.clear_content()
        logger.info("Drawing %s: %s", message, route.title)
        args: tuple[Any, ...] = () if message.payload is None else (message.payload,)
        try:
            route.builder(self._context, route.title, *args)
        except Exception as exc:
            logger.exception("Failed to build screen %s", message.kind.name)
            self._host.set_status(f"Could not draw screen: {exc}")
        self.current = message.kind
