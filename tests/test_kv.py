# -*- coding: utf-8 -*-
"""Tests for the key-value store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gameimage_wizard.core import kv


def test_read_missing_file_is_empty(tmp_path: Path) -> None:
    assert kv.read(tmp_path / "missing.json") == {}


def test_write_creates_file_and_parents(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "db.json"
    kv.write(target, "project", "doom")
    assert json.loads(target.read_text(encoding="utf-8")) == {"project": "doom"}


def test_write_overwrites_existing_key(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    kv.write(target, "a", "1")
    kv.write(target, "b", "2")
    kv.write(target, "a", "3")
    assert kv.read(target) == {"a": "3", "b": "2"}


@pytest.mark.parametrize("value", [3, True, None, ["a"], {"nested": "x"}])
def test_non_string_values_rejected(tmp_path: Path, value) -> None:
    target = tmp_path / "db.json"
    target.write_text(json.dumps({"ok": "1", "odd": value}), encoding="utf-8")
    with pytest.raises(kv.KvError, match="odd"):
        kv.read(target)
    with pytest.raises(kv.KvError):
        kv.write(target, "ok", "2")
    assert json.loads(target.read_text(encoding="utf-8"))["odd"] == value


def test_erase_removes_only_the_key(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    kv.write(target, "WINEDEBUG", "-all")
    kv.write(target, "DXVK_HUD", "1")
    kv.erase(target, "WINEDEBUG")
    assert kv.read(target) == {"DXVK_HUD": "1"}


def test_erase_on_missing_file_is_noop(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    kv.erase(target, "anything")
    assert not target.exists()


def test_erase_missing_key_keeps_content(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    kv.write(target, "a", "1")
    kv.erase(target, "b")
    assert kv.read(target) == {"a": "1"}


def test_malformed_file_raises(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(kv.KvError):
        kv.read(target)


def test_non_object_file_raises(tmp_path: Path) -> None:
    target = tmp_path / "db.json"
    target.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(kv.KvError):
        kv.read(target)
    with pytest.raises(kv.KvError):
        kv.write(target, "a", "1")
