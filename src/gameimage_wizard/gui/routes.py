# -*- coding: utf-8 -*-
"""Screen builder and header title of every draw message."""

from __future__ import annotations

from gameimage_wizard.core.messages import Msg
from gameimage_wizard.core.router import Route
from gameimage_wizard.gui.screens import frames, linux, pcsx2, retroarch, rpcs3, wine

_NAME = "Select the Application Name"
_ICON = "Select the Application Icon"
_COMPRESS = "Compress the Created Package"
_TEST = "Test the Created Package"
_ROM = "Install the Rom File(s)"
_BIOS = "Install the Bios File(s)"

ROUTES: dict[Msg, Route] = {
    Msg.DRAW_WELCOME: Route(frames.welcome, "Welcome to GameImage"),
    Msg.DRAW_PLATFORM: Route(frames.platform, "Select a Platform"),
    Msg.DRAW_FETCH: Route(frames.fetch, "Download the Required Files"),
    Msg.DRAW_CREATOR: Route(frames.creator, "Create Packages to Include in the Image"),
    Msg.DRAW_DESKTOP: Route(frames.desktop, "Select the Desktop Icon"),
    Msg.DRAW_FINISH: Route(frames.finish, "Thank You for Using GameImage!"),
    # Linux
    Msg.DRAW_LINUX_NAME: Route(linux.name, _NAME),
    Msg.DRAW_LINUX_ICON: Route(linux.icon, _ICON),
    Msg.DRAW_LINUX_METHOD: Route(linux.method, "Select How to Install the Application"),
    Msg.DRAW_LINUX_ROM: Route(linux.rom, "Install the Application"),
    Msg.DRAW_LINUX_DEFAULT: Route(linux.default, "Select the Main Binary"),
    Msg.DRAW_LINUX_COMPRESS: Route(linux.compress, _COMPRESS),
    # Wine
    Msg.DRAW_WINE_NAME: Route(wine.name, _NAME),
    Msg.DRAW_WINE_ICON: Route(wine.icon, _ICON),
    Msg.DRAW_WINE_CONFIGURE: Route(wine.configure, "Configure Wine"),
    Msg.DRAW_WINE_TRICKS: Route(wine.winetricks, "Install Libraries"),
    Msg.DRAW_WINE_ENVIRONMENT: Route(wine.environment, "Configure the Environment"),
    Msg.DRAW_WINE_ROM: Route(wine.rom, "Install/Test the Application(s)"),
    Msg.DRAW_WINE_COMPRESS: Route(wine.compress, _COMPRESS),
    # Retroarch
    Msg.DRAW_RETROARCH_NAME: Route(retroarch.name, _NAME),
    Msg.DRAW_RETROARCH_ICON: Route(retroarch.icon, _ICON),
    Msg.DRAW_RETROARCH_ROM: Route(retroarch.rom, _ROM),
    Msg.DRAW_RETROARCH_CORE: Route(retroarch.core, "Install the Core File(s)"),
    Msg.DRAW_RETROARCH_BIOS: Route(retroarch.bios, _BIOS),
    Msg.DRAW_RETROARCH_TEST: Route(retroarch.test, _TEST),
    Msg.DRAW_RETROARCH_COMPRESS: Route(retroarch.compress, _COMPRESS),
    # Pcsx2
    Msg.DRAW_PCSX2_NAME: Route(pcsx2.name, _NAME),
    Msg.DRAW_PCSX2_ICON: Route(pcsx2.icon, _ICON),
    Msg.DRAW_PCSX2_ROM: Route(pcsx2.rom, _ROM),
    Msg.DRAW_PCSX2_BIOS: Route(pcsx2.bios, _BIOS),
    Msg.DRAW_PCSX2_TEST: Route(pcsx2.test, _TEST),
    Msg.DRAW_PCSX2_COMPRESS: Route(pcsx2.compress, _COMPRESS),
    # Rpcs3
    Msg.DRAW_RPCS3_NAME: Route(rpcs3.name, _NAME),
    Msg.DRAW_RPCS3_ICON: Route(rpcs3.icon, _ICON),
    Msg.DRAW_RPCS3_ROM: Route(rpcs3.rom, "Install the Rom Directory(ies)"),
    Msg.DRAW_RPCS3_BIOS: Route(rpcs3.bios, "Install the Bios and DLC Files"),
    Msg.DRAW_RPCS3_TEST: Route(rpcs3.test, _TEST),
    Msg.DRAW_RPCS3_COMPRESS: Route(rpcs3.compress, _COMPRESS),
}
