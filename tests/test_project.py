# -*- coding: utf-8 -*-
"""Tests for the per-build project layout."""

from __future__ import annotations

from pathlib import Path

import pytest

from gameimage_wizard.core import kv
from gameimage_wizard.core.project import ProjectError, ProjectRecord


def test_current_without_selection_raises(tmp_path: Path) -> None:
    with pytest.raises(ProjectError):
        ProjectRecord(tmp_path).current()


def test_register_writes_settings_and_selects(tmp_path: Path) -> None:
    record = ProjectRecord(tmp_path)
    info = record.register("doom", "wine")
    assert info.path == tmp_path / "doom"
    assert record.current() == "doom"
    assert kv.read(record.settings_path()) == {"name": "doom", "platform": "wine"}
    assert kv.read(tmp_path / "gameimage.json") == {"project": "doom"}


def test_select_rejects_blank_name(tmp_path: Path) -> None:
    with pytest.raises(ProjectError):
        ProjectRecord(tmp_path).select("  ")


def test_projects_lists_directories_with_settings(tmp_path: Path) -> None:
    record = ProjectRecord(tmp_path)
    record.register("zelda", "retroarch")
    record.register("doom", "wine")
    (tmp_path / "cache").mkdir()
    assert [(p.name, p.platform) for p in record.projects()] == [("doom", "wine"), ("zelda", "retroarch")]


def test_projects_skips_malformed_settings(tmp_path: Path) -> None:
    record = ProjectRecord(tmp_path)
    record.register("doom", "wine")
    broken = tmp_path / "broken"
    broken.mkdir()
    (broken / "gameimage.project.json").write_text("oops", encoding="utf-8")
    assert [p.name for p in record.projects()] == ["doom"]


def test_projects_of_missing_build_dir_is_empty(tmp_path: Path) -> None:
    assert ProjectRecord(tmp_path / "nowhere").projects() == []


def test_paths_follow_current_project(tmp_path: Path) -> None:
    record = ProjectRecord(tmp_path)
    record.select("doom")
    assert record.env_path() == tmp_path / "doom" / "gameimage.env.json"
    assert record.args_path() == tmp_path / "doom" / "gameimage.wine.args.json"
    assert record.executable_path() == tmp_path / "doom" / "gameimage.wine.executable.json"
    assert record.wine_prefix() == tmp_path / "doom" / "wine"
    assert record.project_dir("other") == tmp_path / "other"
