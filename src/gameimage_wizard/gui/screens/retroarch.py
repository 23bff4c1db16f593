# -*- coding: utf-8 -*-
"""Retroarch flow: roms, a core and optional bios files."""

from __future__ import annotations

from gameimage_wizard.core.messages import Msg
from gameimage_wizard.gui.screens import steps
from gameimage_wizard.gui.screens.context import ScreenContext


def name(ctx: ScreenContext, title: str) -> None:
    steps.name(ctx, title, Msg.DRAW_RETROARCH_NAME)


def icon(ctx: ScreenContext, title: str) -> None:
    steps.icon(ctx, title, Msg.DRAW_RETROARCH_ICON)


def rom(ctx: ScreenContext, title: str) -> None:
    steps.files(ctx, title, Msg.DRAW_RETROARCH_ROM, "rom")


def core(ctx: ScreenContext, title: str) -> None:
    steps.files(ctx, title, Msg.DRAW_RETROARCH_CORE, "core")


def bios(ctx: ScreenContext, title: str) -> None:
    steps.files(ctx, title, Msg.DRAW_RETROARCH_BIOS, "bios")


def test(ctx: ScreenContext, title: str) -> None:
    steps.test(ctx, title, Msg.DRAW_RETROARCH_TEST)


def compress(ctx: ScreenContext, title: str) -> None:
    steps.compress(ctx, title, Msg.DRAW_RETROARCH_COMPRESS)
