# -*- coding: utf-8 -*-
"""Per-build directory layout and the key-value files of each project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gameimage_wizard.constants import (
    ENV_DB_FILE,
    GLOBAL_DB_FILE,
    PROJECT_DB_FILE,
    WINE_ARGS_DB_FILE,
    WINE_EXECUTABLE_DB_FILE,
)
from gameimage_wizard.core import kv

logger = logging.getLogger(__name__)


class ProjectError(RuntimeError):
    """Raised when the build directory holds no usable project."""


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    platform: str
    path: Path


class ProjectRecord:
    """Locate the files of the projects inside one build directory."""

    def __init__(self, build_dir: Path) -> None:
        self.build_dir = Path(build_dir)

    @property
    def global_path(self) -> Path:
        return self.build_dir / GLOBAL_DB_FILE

    def current(self) -> str:
        name = kv.read(self.global_path).get("project", "").strip()
        if not name:
            raise ProjectError(f"No project selected in {self.build_dir}")
        return name

    def select(self, name: str) -> None:
        if not name.strip():
            raise ProjectError("Project name must not be empty")
        kv.write(self.global_path, "project", name)

    def register(self, name: str, platform: str) -> ProjectInfo:
        """Record a freshly created project and make it the current one."""
        settings = self.settings_path(name)
        kv.write(settings, "name", name)
        kv.write(settings, "platform", platform)
        self.select(name)
        logger.info("Registered project '%s' (%s)", name, platform)
        return ProjectInfo(name=name, platform=platform, path=self.project_dir(name))

    def projects(self) -> list[ProjectInfo]:
        if not self.build_dir.is_dir():
            return []
        found: list[ProjectInfo] = []
        for path in sorted(p for p in self.build_dir.iterdir() if p.is_dir()):
            settings_file = path / PROJECT_DB_FILE
            if not settings_file.exists():
                continue
            try:
                settings = kv.read(settings_file)
            except kv.KvError as exc:
                logger.warning("Skipping project %s: %s", path.name, exc)
                continue
            found.append(
                ProjectInfo(
                    name=settings.get("name", path.name),
                    platform=settings.get("platform", ""),
                    path=path,
                )
            )
        return found

    def project_dir(self, name: str | None = None) -> Path:
        return self.build_dir / (name or self.current())

    def settings_path(self, name: str | None = None) -> Path:
        return self.project_dir(name) / PROJECT_DB_FILE

    def env_path(self, name: str | None = None) -> Path:
        return self.project_dir(name) / ENV_DB_FILE

    def args_path(self, name: str | None = None) -> Path:
        return self.project_dir(name) / WINE_ARGS_DB_FILE

    def executable_path(self, name: str | None = None) -> Path:
        return self.project_dir(name) / WINE_EXECUTABLE_DB_FILE

    def wine_prefix(self, name: str | None = None) -> Path:
        return self.project_dir(name) / "wine"
