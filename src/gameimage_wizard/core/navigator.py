# -*- coding: utf-8 -*-
"""Directed graph of wizard screens."""

from __future__ import annotations

from gameimage_wizard.core.messages import Msg
from gameimage_wizard.core.session import Platform


_WINE_FLOW = (
    Msg.DRAW_WINE_NAME,
    Msg.DRAW_WINE_ICON,
    Msg.DRAW_WINE_CONFIGURE,
    Msg.DRAW_WINE_TRICKS,
    Msg.DRAW_WINE_ROM,
    Msg.DRAW_WINE_COMPRESS,
)

FLOWS: dict[Platform, tuple[Msg, ...]] = {
    Platform.LINUX: (
        Msg.DRAW_LINUX_NAME,
        Msg.DRAW_LINUX_ICON,
        Msg.DRAW_LINUX_METHOD,
        Msg.DRAW_LINUX_ROM,
        Msg.DRAW_LINUX_DEFAULT,
        Msg.DRAW_LINUX_COMPRESS,
    ),
    Platform.WINE: _WINE_FLOW,
    Platform.WINE_URL: _WINE_FLOW,
    Platform.RETROARCH: (
        Msg.DRAW_RETROARCH_NAME,
        Msg.DRAW_RETROARCH_ICON,
        Msg.DRAW_RETROARCH_ROM,
        Msg.DRAW_RETROARCH_CORE,
        Msg.DRAW_RETROARCH_BIOS,
        Msg.DRAW_RETROARCH_TEST,
        Msg.DRAW_RETROARCH_COMPRESS,
    ),
    Platform.PCSX2: (
        Msg.DRAW_PCSX2_NAME,
        Msg.DRAW_PCSX2_ICON,
        Msg.DRAW_PCSX2_ROM,
        Msg.DRAW_PCSX2_BIOS,
        Msg.DRAW_PCSX2_TEST,
        Msg.DRAW_PCSX2_COMPRESS,
    ),
    Platform.RPCS3: (
        Msg.DRAW_RPCS3_NAME,
        Msg.DRAW_RPCS3_ICON,
        Msg.DRAW_RPCS3_ROM,
        Msg.DRAW_RPCS3_BIOS,
        Msg.DRAW_RPCS3_TEST,
        Msg.DRAW_RPCS3_COMPRESS,
    ),
}

# Screens outside the platform flows: previous, next
SHARED_EDGES: dict[Msg, tuple[Msg | None, Msg | None]] = {
    Msg.DRAW_WELCOME: (None, Msg.DRAW_PLATFORM),
    Msg.DRAW_PLATFORM: (Msg.DRAW_WELCOME, Msg.DRAW_FETCH),
    Msg.DRAW_FETCH: (Msg.DRAW_PLATFORM, None),
    Msg.DRAW_CREATOR: (Msg.DRAW_WELCOME, Msg.DRAW_DESKTOP),
    Msg.DRAW_DESKTOP: (Msg.DRAW_CREATOR, Msg.DRAW_FINISH),
    Msg.DRAW_FINISH: (None, None),
    Msg.DRAW_WINE_ENVIRONMENT: (Msg.DRAW_WINE_CONFIGURE, None),
}


class WizardNavigator:
    """Answer which screen comes before or after another one."""

    def __init__(self, flows: dict[Platform, tuple[Msg, ...]] | None = None) -> None:
        self._flows = flows or FLOWS
        self._next: dict[Msg, Msg | None] = {}
        self._previous: dict[Msg, Msg | None] = {}
        self._platform: dict[Msg, Platform] = {}
        for msg, (previous, following) in SHARED_EDGES.items():
            self._previous[msg] = previous
            self._next[msg] = following
        for platform, flow in self._flows.items():
            for index, msg in enumerate(flow):
                self._platform.setdefault(msg, platform)
                self._previous[msg] = flow[index - 1] if index > 0 else Msg.DRAW_PLATFORM
                self._next[msg] = flow[index + 1] if index < len(flow) - 1 else Msg.DRAW_CREATOR

    def first(self, platform: Platform) -> Msg:
        flow = self._flows.get(platform)
        if not flow:
            raise KeyError(f"No flow for platform {platform.value}")
        return flow[0]

    def flow(self, platform: Platform) -> tuple[Msg, ...]:
        return self._flows[platform]

    def next_of(self, msg: Msg) -> Msg | None:
        if msg not in self._next:
            raise KeyError(f"Screen {msg.name} is not part of the wizard")
        return self._next[msg]

    def previous_of(self, msg: Msg) -> Msg | None:
        if msg not in self._previous:
            raise KeyError(f"Screen {msg.name} is not part of the wizard")
        return self._previous[msg]

    def platform_of(self, msg: Msg) -> Platform | None:
        return self._platform.get(msg)

    def screens(self) -> set[Msg]:
        return set(self._next) | set(self._previous)

    def reachable(self, platform: Platform) -> list[Msg]:
        """Walk the happy path from the welcome screen to the finish screen."""
        path = [Msg.DRAW_WELCOME, Msg.DRAW_PLATFORM, Msg.DRAW_FETCH]
        current: Msg | None = self.first(platform)
        while current is not None and current not in path:
            path.append(current)
            current = self._next.get(current)
        return path
