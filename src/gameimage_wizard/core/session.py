# -*- coding: utf-8 -*-
"""In-memory wizard selections that survive screen rebuilds."""

from __future__ import annotations

import threading
from enum import Enum
from pathlib import Path

from gameimage_wizard.constants import DEFAULT_YEAR, WINE_DISTS


class Platform(Enum):
    """Packaging backends offered by the platform screen."""

    LINUX = "linux"
    WINE = "wine"
    WINE_URL = "wine_url"
    RETROARCH = "retroarch"
    PCSX2 = "pcsx2"
    RPCS3 = "rpcs3"

    @property
    def backend_id(self) -> str:
        """Identifier passed to the backend; the custom url variant is still wine."""
        if self is Platform.WINE_URL:
            return Platform.WINE.value
        return self.value

    @property
    def is_wine(self) -> bool:
        return self in (Platform.WINE, Platform.WINE_URL)

    @classmethod
    def parse(cls, value: str) -> Platform | None:
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class WizardSession:
    """Selections made while walking the wizard.

    Each accessor holds the lock only for the read or write itself, never
    across a backend call.
    """

    def __init__(
        self,
        build_dir: Path | None = None,
        wine_dist: str = "default",
        year: int = DEFAULT_YEAR,
    ) -> None:
        self._lock = threading.Lock()
        self._platform: Platform | None = None
        self._url: str | None = None
        self._build_dir = build_dir
        self._wine_dist = wine_dist
        self._year = year
        self._query = ""
        self._selections: dict[str, bool] = {}
        self._projects: list[str] = []

    # platform / url

    @property
    def platform(self) -> Platform | None:
        with self._lock:
            return self._platform

    def select_platform(self, platform: Platform) -> None:
        """Make ``platform`` the only selected one.

        Leaving the custom url variant forgets the url, so coming back later
        starts from an empty field.
        """
        with self._lock:
            self._platform = platform
            if platform is not Platform.WINE_URL:
                self._url = None

    @property
    def url(self) -> str | None:
        with self._lock:
            return self._url

    def set_url(self, url: str) -> None:
        with self._lock:
            if self._platform is not Platform.WINE_URL:
                raise ValueError("A custom url requires the wine_url platform")
            self._url = url.strip() or None

    # wine

    @property
    def wine_dist(self) -> str:
        with self._lock:
            return self._wine_dist

    def set_wine_dist(self, dist: str) -> None:
        if dist not in WINE_DISTS:
            raise ValueError(f"Unknown wine distribution '{dist}'")
        with self._lock:
            self._wine_dist = dist

    @property
    def year(self) -> int:
        with self._lock:
            return self._year

    def set_year(self, year: int) -> None:
        with self._lock:
            self._year = int(year)

    # search filter

    @property
    def query(self) -> str:
        with self._lock:
            return self._query

    def set_query(self, query: str) -> None:
        with self._lock:
            self._query = query

    # build directory

    @property
    def build_dir(self) -> Path | None:
        with self._lock:
            return self._build_dir

    def set_build_dir(self, path: Path) -> None:
        with self._lock:
            self._build_dir = Path(path)

    # per-row toggles

    def toggle(self, row: str, value: bool) -> None:
        with self._lock:
            self._selections[row] = bool(value)

    def toggled(self, row: str, default: bool = False) -> bool:
        with self._lock:
            return self._selections.get(row, default)

    def clear_selections(self, prefix: str = "") -> None:
        with self._lock:
            for row in [key for key in self._selections if key.startswith(prefix)]:
                del self._selections[row]

    # creator hub

    @property
    def projects(self) -> list[str]:
        with self._lock:
            return list(self._projects)

    def set_projects(self, projects: list[str]) -> None:
        with self._lock:
            self._projects = list(projects)

    def backend_environ(self) -> dict[str, str]:
        """Environment the backend reads its selections from."""
        with self._lock:
            environ: dict[str, str] = {}
            if self._build_dir is not None:
                environ["GIMG_DIR"] = str(self._build_dir)
            if self._platform is not None:
                environ["GIMG_PLATFORM"] = self._platform.backend_id
                if self._platform.is_wine:
                    environ["GIMG_WINE_DIST"] = self._wine_dist
            if self._url:
                environ["GIMG_FETCH_URL_DWARFS"] = self._url
            return environ
