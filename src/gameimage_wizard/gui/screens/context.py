# -*- coding: utf-8 -*-
"""Everything a screen builder needs, passed explicitly."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from PyQt6.QtWidgets import QAbstractButton

from gameimage_wizard.core.backend import Backend
from gameimage_wizard.core.bus import Sender
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.navigator import WizardNavigator
from gameimage_wizard.core.project import ProjectError, ProjectRecord
from gameimage_wizard.core.session import WizardSession
from gameimage_wizard.core.tasks import TaskRunner
from gameimage_wizard.gui.host import emit
from gameimage_wizard.gui.main_window import Ui, WizardWindow

logger = logging.getLogger(__name__)


@dataclass
class ScreenContext:
    sender: Sender
    session: WizardSession
    window: WizardWindow
    backend: Backend
    runner: TaskRunner
    navigator: WizardNavigator
    settings: dict[str, Any]

    def ui(self, title: str) -> Ui:
        return self.window.ui(title)

    def project(self) -> ProjectRecord:
        build_dir = self.session.build_dir
        if build_dir is None:
            raise ProjectError("No build directory selected")
        return ProjectRecord(build_dir)

    def go(self, kind: Msg | None, payload: Any = None) -> None:
        if kind is None:
            return
        self.sender.send_awake(Message(kind, payload))

    def emit(self, button: QAbstractButton, kind: Msg | None, payload: Any = None) -> None:
        if kind is None:
            button.hide()
            return
        emit(button, self.sender, Message(kind, payload))

    def alert(self, text: str) -> None:
        """Blocking message for input the wizard refuses."""
        self.window.alert(text)
