# -*- coding: utf-8 -*-
"""Tests for session logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from gameimage_wizard.utils.logger import setup_session_logging


def test_session_log_created_once(tmp_path: Path, monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "_gameimage_logging_configured", False, raising=False)
    monkeypatch.setattr(root, "_gameimage_session_log", None, raising=False)

    first = setup_session_logging(tmp_path / "logs", "GameImage Wizard")
    second = setup_session_logging(tmp_path / "other", "GameImage Wizard")

    assert first is not None
    assert first.parent == tmp_path / "logs"
    assert first.name.startswith("gameimage-wizard-")
    assert second == first
    assert not (tmp_path / "other").exists()
    assert "wizard starting" in first.read_text(encoding="utf-8")

    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
