# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "GameImage"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "gameimage-wizard.json"

BACKEND_COMMAND = "gameimage"
EXPECTED_BACKEND_VERSION = "1.6"

HEARTBEAT_INTERVAL_MS = 50

# Key-value files, one per concern
GLOBAL_DB_FILE = "gameimage.json"
PROJECT_DB_FILE = "gameimage.project.json"
ENV_DB_FILE = "gameimage.env.json"
WINE_ARGS_DB_FILE = "gameimage.wine.args.json"
WINE_EXECUTABLE_DB_FILE = "gameimage.wine.executable.json"

# Files the backend writes for the wizard to read back
FETCH_DB_FILE = "gameimage.fetch.json"
SEARCH_DB_FILE = "gameimage.search.json"

WINE_DISTS = ("caffe", "default", "osu-tkg", "soda", "staging", "tkg", "vaniglia")

YEAR_FIRST = 1993
YEAR_LAST = 2024
DEFAULT_YEAR = 2024

PLATFORM_DESCRIPTIONS = {
    "linux": "Package a native Linux application. The application files are copied "
    "into the image and a main binary is selected to launch it.",
    "wine": "Package a Windows application with wine. The installer runs inside a "
    "dedicated prefix, libraries can be added with winetricks.",
    "wine_url": "Package a Windows application with a custom wine build fetched from "
    "the url of a dwarfs tarball.",
    "retroarch": "Package games for retroarch. Requires the rom files, a core and "
    "optionally bios files.",
    "pcsx2": "Package Playstation 2 games for pcsx2. Requires the rom files and a bios.",
    "rpcs3": "Package Playstation 3 games for rpcs3. Requires the game directory, "
    "the firmware and optional dlc files.",
}
