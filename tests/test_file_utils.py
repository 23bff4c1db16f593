# -*- coding: utf-8 -*-
"""Tests for the shared JSON file helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gameimage_wizard.utils.file_utils import read_json_file, write_json_file


def test_missing_file_uses_fallback_copy(tmp_path: Path) -> None:
    fallback = {"a": "1"}
    data = read_json_file(tmp_path / "absent.json", missing=fallback)
    data["b"] = "2"
    assert fallback == {"a": "1"}


def test_missing_file_without_fallback_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_json_file(tmp_path / "absent.json")


def test_non_object_rejected(tmp_path: Path) -> None:
    target = tmp_path / "list.json"
    target.write_text("[1]", encoding="utf-8")
    with pytest.raises(ValueError, match="not a JSON object"):
        read_json_file(target, missing={})


def test_write_replaces_without_leftovers(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "db.json"
    write_json_file(target, {"name": "Café"})
    write_json_file(target, {"name": "Doom"})
    assert json.loads(target.read_text(encoding="utf-8")) == {"name": "Doom"}
    assert [path.name for path in target.parent.iterdir()] == ["db.json"]


def test_failed_write_keeps_previous_content(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    write_json_file(target, {"a": "1"})
    with pytest.raises(TypeError):
        write_json_file(target, {"a": object()})
    assert read_json_file(target) == {"a": "1"}
    assert [path.name for path in tmp_path.iterdir()] == ["db.json"]
