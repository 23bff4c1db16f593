# -*- coding: utf-8 -*-
"""Invocations of the external ``gameimage`` packaging tool."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from gameimage_wizard.constants import BACKEND_COMMAND, FETCH_DB_FILE, SEARCH_DB_FILE
from gameimage_wizard.utils.file_utils import read_json_file

logger = logging.getLogger(__name__)

PathProvider = Callable[[], "Path | None"]
EnvProvider = Callable[[], Mapping[str, str]]


class BackendError(RuntimeError):
    """Raised when the packaging tool fails or its output is unusable."""


def _fmt_argv(argv: Iterable[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


class Backend:
    """Run one blocking command of the packaging tool per call.

    Success is exit code zero; there is no retry and no timeout.
    """

    def __init__(
        self,
        command: str = BACKEND_COMMAND,
        cwd_provider: PathProvider | None = None,
        env_provider: EnvProvider | None = None,
    ) -> None:
        self.command = command
        self._cwd_provider = cwd_provider
        self._env_provider = env_provider

    def _cwd(self) -> Path | None:
        cwd = self._cwd_provider() if self._cwd_provider is not None else None
        if cwd is not None and not Path(cwd).is_dir():
            return None
        return cwd

    def call(self, *args: str) -> int:
        """Run the tool and return its exit code."""
        argv = [*shlex.split(self.command), *[str(a) for a in args]]
        env = dict(os.environ)
        if self._env_provider is not None:
            env.update(self._env_provider())
        logger.info("CMD %s", _fmt_argv(argv))
        try:
            process = subprocess.run(
                argv,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=self._cwd(),
                env=env,
            )
        except OSError as exc:
            raise BackendError(f"Could not start '{argv[0]}': {exc}") from exc

        if process.stdout:
            logger.debug("STDOUT %s", process.stdout.strip())
        if process.stderr:
            logger.debug("STDERR %s", process.stderr.strip())
        logger.info("Exit code %d for '%s'", process.returncode, args[0] if args else argv[0])
        return process.returncode

    def run(self, *args: str) -> None:
        """Run the tool, raising ``BackendError`` on a non-zero exit code."""
        code = self.call(*args)
        if code != 0:
            verb = args[0] if args else self.command
            raise BackendError(f"'{verb}' exited with code {code}")

    # verbs

    def init_build(self, build_dir: Path) -> None:
        self.run("init", f"--dir={build_dir}")

    def fetch_sources(self) -> None:
        self.run("fetch", f"--json={FETCH_DB_FILE}")

    def fetch_list(self, platform: str, json_file: str = FETCH_DB_FILE, url: str | None = None) -> None:
        args = ["fetch", f"--platform={platform}", f"--json={json_file}"]
        if url:
            args.append(f"--url-dwarfs={url}")
        self.run(*args)

    def fetch_platform(self, platform: str) -> None:
        self.run("fetch", f"--platform={platform}")

    def create_project(self, name: str, platform: str) -> None:
        self.run("init", f"--project={name}", f"--platform={platform}")

    def install(self, category: str, *items: str) -> None:
        self.run("install", category, *items)

    def select(self, category: str, path: Path | str) -> None:
        self.run("select", category, str(path))

    def test(self) -> None:
        self.run("test")

    def compress(self) -> None:
        self.run("compress")

    def desktop(self, icon: Path | str) -> None:
        self.run("desktop", str(icon))

    def package(self, projects: Iterable[str]) -> None:
        joined = ":".join(projects)
        if not joined:
            raise BackendError("No project selected to package")
        self.run("package", joined)

    def search_local(self, category: str, json_file: Path | None = None) -> list[Path]:
        """Ask the tool which files of ``category`` the current project holds."""
        cwd = self._cwd()
        target = json_file or ((cwd or Path.cwd()) / SEARCH_DB_FILE)
        self.run("search", "--local", f"--json={target}", category)
        try:
            data = read_json_file(target)
        except (OSError, ValueError) as exc:
            raise BackendError(f"Could not read search results {target}: {exc}") from exc
        entries = data.get(category, [])
        if not isinstance(entries, list):
            raise BackendError(f"Malformed search results for '{category}' in {target}")
        return [Path(str(entry)) for entry in entries]


def read_fetch(path: Path) -> dict[str, Any]:
    """Read the fetch list written by the backend."""
    try:
        return read_json_file(path)
    except (OSError, ValueError) as exc:
        raise BackendError(
            f"Could not read {path.name}, backend failed? No internet? '{exc}'"
        ) from exc


def check_version(path: Path, expected_prefix: str) -> str:
    """Return the backend version stored in the fetch list if it is supported."""
    version = str(read_fetch(path).get("version", ""))
    if not version.startswith(expected_prefix):
        raise BackendError(
            f"Backend version '{version or 'unknown'}' is not supported, update to version {expected_prefix}"
        )
    return version


def fetch_entries(path: Path, platform: str) -> list[str]:
    """Flatten the urls listed for ``platform`` in the fetch list."""
    section = read_fetch(path).get(platform, {})
    urls: list[str] = []

    def _collect(node: Any) -> None:
        if isinstance(node, str):
            urls.append(node)
        elif isinstance(node, dict):
            for value in node.values():
                _collect(value)
        elif isinstance(node, list):
            for value in node:
                _collect(value)

    _collect(section)
    return urls


def prepare_build_dir(backend: Backend, build_dir: Path, expected_prefix: str) -> str:
    """Create and initialise the build directory, then verify the backend version.

    Failures of ``init`` and ``fetch`` are only logged, the version check
    decides whether the wizard may continue.
    """
    try:
        build_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackendError(f"Could not create build directory: {exc}") from exc

    try:
        backend.init_build(build_dir)
    except BackendError as exc:
        logger.error("Error to initialize build directory: %s", exc)

    try:
        backend.fetch_sources()
    except BackendError as exc:
        logger.error("Error to fetch the list of sources: %s", exc)

    version = check_version(build_dir / FETCH_DB_FILE, expected_prefix)
    logger.info("Backend version %s", version)
    return version
