# -*- coding: utf-8 -*-
"""Messages exchanged between workers, callbacks and the UI thread."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Msg(Enum):
    # Control
    WIND_UPDATE = auto()
    WIND_ACTIVATE = auto()
    WIND_DEACTIVATE = auto()
    STATUS = auto()
    ALERT = auto()
    QUIT = auto()
    # Common
    DRAW_WELCOME = auto()
    DRAW_PLATFORM = auto()
    DRAW_FETCH = auto()
    DRAW_CREATOR = auto()
    DRAW_DESKTOP = auto()
    DRAW_FINISH = auto()
    # Linux
    DRAW_LINUX_NAME = auto()
    DRAW_LINUX_ICON = auto()
    DRAW_LINUX_METHOD = auto()
    DRAW_LINUX_ROM = auto()
    DRAW_LINUX_DEFAULT = auto()
    DRAW_LINUX_COMPRESS = auto()
    # Wine
    DRAW_WINE_NAME = auto()
    DRAW_WINE_ICON = auto()
    DRAW_WINE_CONFIGURE = auto()
    DRAW_WINE_TRICKS = auto()
    DRAW_WINE_ENVIRONMENT = auto()
    DRAW_WINE_ROM = auto()
    DRAW_WINE_COMPRESS = auto()
    # Retroarch
    DRAW_RETROARCH_NAME = auto()
    DRAW_RETROARCH_ICON = auto()
    DRAW_RETROARCH_ROM = auto()
    DRAW_RETROARCH_CORE = auto()
    DRAW_RETROARCH_BIOS = auto()
    DRAW_RETROARCH_TEST = auto()
    DRAW_RETROARCH_COMPRESS = auto()
    # Pcsx2
    DRAW_PCSX2_NAME = auto()
    DRAW_PCSX2_ICON = auto()
    DRAW_PCSX2_ROM = auto()
    DRAW_PCSX2_BIOS = auto()
    DRAW_PCSX2_TEST = auto()
    DRAW_PCSX2_COMPRESS = auto()
    # Rpcs3
    DRAW_RPCS3_NAME = auto()
    DRAW_RPCS3_ICON = auto()
    DRAW_RPCS3_ROM = auto()
    DRAW_RPCS3_BIOS = auto()
    DRAW_RPCS3_TEST = auto()
    DRAW_RPCS3_COMPRESS = auto()

    @property
    def is_control(self) -> bool:
        return not self.name.startswith("DRAW_")


@dataclass(frozen=True)
class Message:
    """One entry on the bus; ``payload`` carries data produced by the sender."""

    kind: Msg
    payload: Any = None

    def __str__(self) -> str:
        if self.payload is None:
            return self.kind.name
        return f"{self.kind.name}({self.payload!r})"
