# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHost:
    """Records every host call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.active = True
        self.status = ""

    def set_active(self, active: bool) -> None:
        self.active = active
        self.calls.append(("set_active", active))

    def flush(self) -> None:
        self.calls.append(("flush", None))

    def set_status(self, text: str) -> None:
        self.status = text
        self.calls.append(("set_status", text))

    def alert(self, text: str) -> None:
        self.calls.append(("alert", text))

    def clear_content(self) -> None:
        self.calls.append(("clear_content", None))

    def quit(self) -> None:
        self.calls.append(("quit", None))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


class RecordingSender:
    """Stands in for ``Sender``; keeps messages instead of queueing them."""

    def __init__(self) -> None:
        self.messages: list = []
        self.wakes = 0

    def send(self, message) -> None:
        self.messages.append(message)

    def send_awake(self, message) -> None:
        self.messages.append(message)
        self.wakes += 1

    def send_activate(self, message) -> None:
        from gameimage_wizard.core.messages import Message, Msg

        self.messages.append(Message(Msg.WIND_ACTIVATE))
        self.send_awake(message)

    def kinds(self) -> list:
        return [message.kind for message in self.messages]


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def default_config() -> dict:
    from gameimage_wizard.config import get_default_config

    return get_default_config()


@pytest.fixture
def fake_backend_script(tmp_path: Path) -> Path:
    """Shell script standing in for the packaging tool.

    Every invocation is appended to ``calls.log``. ``fetch --json=...`` writes a
    fetch list carrying ``$FAKE_VERSION``; ``search --local --json=... <cat>``
    writes two entries for the category. ``$FAKE_FAIL`` names a verb that
    exits with code 3.
    """
    script = tmp_path / "fake-gameimage"
    log = tmp_path / "calls.log"
    script.write_text(
        "#!/bin/sh\n"
        f'echo "$@" >> "{log}"\n'
        'if [ -n "$FAKE_FAIL" ] && [ "$1" = "$FAKE_FAIL" ]; then echo "failed" >&2; exit 3; fi\n'
        'case "$1" in\n'
        "  fetch)\n"
        '    for arg in "$@"; do\n'
        '      case "$arg" in\n'
        "        --json=*)\n"
        "          target=\"${arg#--json=}\"\n"
        '          printf \'{"version": "%s", "wine": {"layer": "http://host/wine.dwarfs"}}\' "${FAKE_VERSION:-1.6.0}" > "$target"\n'
        "          ;;\n"
        "      esac\n"
        "    done\n"
        "    ;;\n"
        "  search)\n"
        '    target=""\n'
        '    for arg in "$@"; do\n'
        '      case "$arg" in\n'
        "        --json=*) target=\"${arg#--json=}\" ;;\n"
        "      esac\n"
        "      category=\"$arg\"\n"
        "    done\n"
        '    printf \'{"%s": ["%s/one.bin", "%s/Two.EXE"]}\' "$category" "$category" "$category" > "$target"\n'
        "    ;;\n"
        "esac\n"
        "exit 0\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def backend_calls(tmp_path: Path):
    """Return a callable listing the arguments of every fake backend invocation."""

    def _read() -> list[str]:
        log = tmp_path / "calls.log"
        if not log.exists():
            return []
        return log.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
