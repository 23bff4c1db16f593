# -*- coding: utf-8 -*-
"""Main wizard window: header, content area and footer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gameimage_wizard.constants import APP_NAME
from gameimage_wizard.core.bus import Sender
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.gui.host import disconnect_all

logger = logging.getLogger(__name__)


@dataclass
class Ui:
    """Widgets a screen builder works with."""

    title: QLabel
    group: QWidget
    btn_prev: QPushButton
    btn_next: QPushButton
    status: QLineEdit


class WizardWindow(QMainWindow):
    """Persistent shell; only the content area changes between screens."""

    def __init__(self, sender: Sender, settings: dict[str, Any], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.sender = sender
        self.settings = settings
        self.confirm_close = True
        self._quitting = False

        self.setWindowTitle(APP_NAME)
        ui_settings = settings.get("ui", {})
        self.resize(int(ui_settings.get("width", 640)), int(ui_settings.get("height", 540)))

        self._build_ui()

    def _build_ui(self) -> None:
        central = QWidget()
        central.setObjectName("central")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)

        self.header = QFrame()
        self.header.setObjectName("header")
        header_layout = QHBoxLayout(self.header)
        header_layout.setContentsMargins(0, 0, 0, 0)
        self.title_label = QLabel("")
        self.title_label.setObjectName("header_title")
        header_layout.addWidget(self.title_label)

        self.content_frame = QFrame()
        self.content_frame.setObjectName("content_frame")
        self.content_layout = QVBoxLayout(self.content_frame)
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        self.content = self._new_content()

        self.footer = QFrame()
        self.footer.setObjectName("footer")
        footer_layout = QHBoxLayout(self.footer)
        footer_layout.setContentsMargins(0, 0, 0, 0)
        self.btn_prev = QPushButton("Prev")
        self.btn_prev.setObjectName("footer_prev")
        self.status = QLineEdit()
        self.status.setObjectName("footer_status")
        self.status.setReadOnly(True)
        self.btn_next = QPushButton("Next")
        self.btn_next.setObjectName("footer_next")
        footer_layout.addWidget(self.btn_prev)
        footer_layout.addWidget(self.status, 1)
        footer_layout.addWidget(self.btn_next)

        layout.addWidget(self.header)
        layout.addWidget(self.content_frame, 1)
        layout.addWidget(self.footer)
        self.setCentralWidget(central)

    def _new_content(self) -> QWidget:
        content = QWidget()
        content.setObjectName("content")
        self.content_layout.addWidget(content)
        return content

    def ui(self, title: str) -> Ui:
        """Reset the header and footer for a new screen and return its handles."""
        self.title_label.setText(title)
        disconnect_all(self.btn_prev.clicked)
        disconnect_all(self.btn_next.clicked)
        self.btn_prev.setText("Prev")
        self.btn_next.setText("Next")
        self.btn_prev.show()
        self.btn_next.show()
        return Ui(
            title=self.title_label,
            group=self.content,
            btn_prev=self.btn_prev,
            btn_next=self.btn_next,
            status=self.status,
        )

    # Host

    def clear_content(self) -> None:
        """Destroy the previous screen, widgets and callbacks alike."""
        old = self.content
        self.content_layout.removeWidget(old)
        old.hide()
        old.setParent(None)
        old.deleteLater()
        disconnect_all(self.btn_prev.clicked)
        disconnect_all(self.btn_next.clicked)
        self.content = self._new_content()

    def set_active(self, active: bool) -> None:
        """Flat sweep over the top-level children, no nesting count."""
        central = self.centralWidget()
        if central is None:
            return
        for child in central.findChildren(QWidget, "", Qt.FindChildOption.FindDirectChildrenOnly):
            child.setEnabled(active)

    def flush(self) -> None:
        self.update()

    def set_status(self, text: str) -> None:
        self.status.setText(text)

    def alert(self, text: str) -> None:
        logger.warning("Alert: %s", text)
        QMessageBox.warning(self, APP_NAME, text)

    def quit(self) -> None:
        self._quitting = True
        self.close()
        app = QApplication.instance()
        if app is not None:
            app.quit()

    def closeEvent(self, event: QCloseEvent) -> None:
        if self._quitting or not self.confirm_close:
            event.accept()
            return
        answer = QMessageBox.question(
            self,
            APP_NAME,
            "Exit GameImage?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        event.ignore()
        if answer == QMessageBox.StandardButton.Yes:
            self.sender.send_awake(Message(Msg.QUIT))
