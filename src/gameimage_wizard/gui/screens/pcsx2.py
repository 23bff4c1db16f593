# -*- coding: utf-8 -*-
"""Pcsx2 flow."""

from __future__ import annotations

from gameimage_wizard.core.messages import Msg
from gameimage_wizard.gui.screens import steps
from gameimage_wizard.gui.screens.context import ScreenContext


def name(ctx: ScreenContext, title: str) -> None:
    steps.name(ctx, title, Msg.DRAW_PCSX2_NAME)


def icon(ctx: ScreenContext, title: str) -> None:
    steps.icon(ctx, title, Msg.DRAW_PCSX2_ICON)


def rom(ctx: ScreenContext, title: str) -> None:
    steps.files(ctx, title, Msg.DRAW_PCSX2_ROM, "rom")


def bios(ctx: ScreenContext, title: str) -> None:
    steps.files(ctx, title, Msg.DRAW_PCSX2_BIOS, "bios")


def test(ctx: ScreenContext, title: str) -> None:
    steps.test(ctx, title, Msg.DRAW_PCSX2_TEST)


def compress(ctx: ScreenContext, title: str) -> None:
    steps.compress(ctx, title, Msg.DRAW_PCSX2_COMPRESS)
