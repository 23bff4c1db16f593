# -*- coding: utf-8 -*-
"""Tests for the packaging tool wrapper, driven by a fake executable."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gameimage_wizard.core.backend import (
    Backend,
    BackendError,
    check_version,
    fetch_entries,
    prepare_build_dir,
)


@pytest.fixture
def backend(tmp_path: Path, fake_backend_script: Path) -> Backend:
    build_dir = tmp_path / "build"
    build_dir.mkdir()
    return Backend(
        command=str(fake_backend_script),
        cwd_provider=lambda: build_dir,
        env_provider=lambda: {"GIMG_DIR": str(build_dir)},
    )


def test_call_returns_exit_code(backend: Backend, backend_calls, monkeypatch) -> None:
    assert backend.call("test") == 0
    monkeypatch.setenv("FAKE_FAIL", "test")
    assert backend.call("test") == 3
    assert backend_calls() == ["test", "test"]


def test_run_raises_on_failure(backend: Backend, monkeypatch) -> None:
    monkeypatch.setenv("FAKE_FAIL", "compress")
    with pytest.raises(BackendError, match="'compress' exited with code 3"):
        backend.compress()


def test_missing_executable(tmp_path: Path) -> None:
    backend = Backend(command=str(tmp_path / "does-not-exist"))
    with pytest.raises(BackendError, match="Could not start"):
        backend.call("test")


def test_verbs_build_expected_arguments(backend: Backend, backend_calls) -> None:
    backend.create_project("doom", "wine")
    backend.install("winetricks", "-f", "dxvk")
    backend.select("rom", "drive_c/doom.exe")
    backend.desktop("/tmp/icon.png")
    backend.package(["doom", "quake"])
    backend.fetch_list("wine", "list.json", "http://example.com/wine.dwarfs")
    assert backend_calls() == [
        "init --project=doom --platform=wine",
        "install winetricks -f dxvk",
        "select rom drive_c/doom.exe",
        "desktop /tmp/icon.png",
        "package doom:quake",
        "fetch --platform=wine --json=list.json --url-dwarfs=http://example.com/wine.dwarfs",
    ]


def test_package_without_projects(backend: Backend, backend_calls) -> None:
    with pytest.raises(BackendError):
        backend.package([])
    assert backend_calls() == []


def test_search_local_reads_results(backend: Backend, tmp_path: Path) -> None:
    found = backend.search_local("rom")
    assert found == [Path("rom/one.bin"), Path("rom/Two.EXE")]
    assert (tmp_path / "build" / "gameimage.search.json").exists()


def test_search_local_malformed_results(tmp_path: Path, backend: Backend) -> None:
    target = tmp_path / "custom.json"
    broken = tmp_path / "broken-gameimage"
    broken.write_text(f"#!/bin/sh\necho '[1]' > '{target}'\n", encoding="utf-8")
    broken.chmod(0o755)
    backend.command = str(broken)
    with pytest.raises(BackendError, match="Could not read search results"):
        backend.search_local("rom", json_file=target)


def test_environment_reaches_the_tool(tmp_path: Path) -> None:
    out = tmp_path / "env.txt"
    script = tmp_path / "env-gameimage"
    script.write_text(f'#!/bin/sh\necho "$GIMG_PLATFORM" > "{out}"\n', encoding="utf-8")
    script.chmod(0o755)
    Backend(command=str(script), env_provider=lambda: {"GIMG_PLATFORM": "pcsx2"}).run("test")
    assert out.read_text(encoding="utf-8").strip() == "pcsx2"


def test_check_version(tmp_path: Path) -> None:
    target = tmp_path / "fetch.json"
    target.write_text(json.dumps({"version": "1.6.3"}), encoding="utf-8")
    assert check_version(target, "1.6") == "1.6.3"

    target.write_text(json.dumps({"version": "1.5.2"}), encoding="utf-8")
    with pytest.raises(BackendError, match="not supported"):
        check_version(target, "1.6")


def test_check_version_missing_file(tmp_path: Path) -> None:
    with pytest.raises(BackendError, match="No internet"):
        check_version(tmp_path / "fetch.json", "1.6")


def test_fetch_entries_flattens_nested_urls(tmp_path: Path) -> None:
    target = tmp_path / "fetch.json"
    target.write_text(
        json.dumps({"version": "1.6", "wine": {"layer": "a.dwarfs", "extra": ["b.dwarfs", {"c": "c.dwarfs"}]}}),
        encoding="utf-8",
    )
    assert fetch_entries(target, "wine") == ["a.dwarfs", "b.dwarfs", "c.dwarfs"]
    assert fetch_entries(target, "pcsx2") == []


def test_prepare_build_dir(tmp_path: Path, fake_backend_script: Path, backend_calls) -> None:
    build_dir = tmp_path / "chosen" / "build"
    backend = Backend(command=str(fake_backend_script), cwd_provider=lambda: build_dir)
    assert prepare_build_dir(backend, build_dir, "1.6") == "1.6.0"
    assert build_dir.is_dir()
    assert backend_calls() == [f"init --dir={build_dir}", "fetch --json=gameimage.fetch.json"]


def test_prepare_build_dir_version_mismatch(tmp_path: Path, fake_backend_script: Path, monkeypatch) -> None:
    monkeypatch.setenv("FAKE_VERSION", "1.5.2")
    build_dir = tmp_path / "build"
    backend = Backend(command=str(fake_backend_script), cwd_provider=lambda: build_dir)
    with pytest.raises(BackendError, match="update to version 1.6"):
        prepare_build_dir(backend, build_dir, "1.6")


def test_prepare_build_dir_init_failure_is_only_logged(tmp_path: Path, fake_backend_script: Path, monkeypatch) -> None:
    monkeypatch.setenv("FAKE_FAIL", "init")
    build_dir = tmp_path / "build"
    backend = Backend(command=str(fake_backend_script), cwd_provider=lambda: build_dir)
    assert prepare_build_dir(backend, build_dir, "1.6") == "1.6.0"
