# -*- coding: utf-8 -*-
"""Steps shared by every platform flow: name, icon, files, test, compress."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
)

from gameimage_wizard.core.backend import BackendError
from gameimage_wizard.core.kv import KvError
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.project import ProjectError
from gameimage_wizard.gui.host import log_status
from gameimage_wizard.gui.screens.context import ScreenContext

logger = logging.getLogger(__name__)

INVALID_NAME_CHARS = set('/\\:*?"<>|')


def validate_name(name: str) -> str | None:
    """Return an error text, or ``None`` when ``name`` is usable."""
    if not name:
        return "The application name must not be empty"
    if any(char in INVALID_NAME_CHARS for char in name):
        return "The application name must not contain any of / \\ : * ? \" < > |"
    return None


def name(ctx: ScreenContext, title: str, screen: Msg) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    layout.addWidget(QLabel("Application name"))
    input_name = QLineEdit()
    input_name.setObjectName("input_name")
    input_name.setPlaceholderText("Name of the application inside the image")
    layout.addWidget(input_name)
    layout.addStretch(1)

    try:
        input_name.setText(ctx.project().current())
    except (ProjectError, KvError):
        pass

    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(screen))

    def _next() -> None:
        platform = ctx.session.platform
        if platform is None:
            ctx.alert("Select a platform before naming the application")
            return
        value = input_name.text().strip()
        error = validate_name(value)
        if error is not None:
            ctx.alert(error)
            return

        def _create() -> None:
            ctx.backend.create_project(value, platform.backend_id)
            ctx.project().register(value, platform.backend_id)

        log_status(ui, "Creating project '%s'", value)
        ctx.runner.spawn("create project", _create, on_success=Message(ctx.navigator.next_of(screen)))

    ui.btn_next.clicked.connect(_next)


def icon(ctx: ScreenContext, title: str, screen: Msg) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    layout.addWidget(QLabel("Select an image file to use as the application icon"))
    row = QHBoxLayout()
    input_icon = QLineEdit()
    input_icon.setReadOnly(True)
    btn_browse = QPushButton("Browse")
    row.addWidget(input_icon, 1)
    row.addWidget(btn_browse)
    layout.addLayout(row)
    layout.addStretch(1)

    def _choose() -> None:
        path, _ = QFileDialog.getOpenFileName(
            ui.group, "Select the icon", "", "Images (*.png *.jpg *.jpeg *.svg)"
        )
        if not path:
            log_status(ui, "No file selected")
            return
        input_icon.setText(path)
        ctx.runner.spawn(
            "install icon",
            partial(ctx.backend.install, "icon", path),
            on_success=Message(Msg.STATUS, f"Installed icon '{Path(path).name}'"),
        )

    btn_browse.clicked.connect(_choose)
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(screen))
    ctx.emit(ui.btn_next, ctx.navigator.next_of(screen))


def installed(ctx: ScreenContext, category: str) -> list[Path]:
    """Files of ``category`` in the current project; empty when unavailable."""
    try:
        return ctx.backend.search_local(category)
    except BackendError as exc:
        logger.error("Could not list '%s' files: %s", category, exc)
        return []


def files(
    ctx: ScreenContext,
    title: str,
    screen: Msg,
    category: str,
    directory: bool = False,
) -> None:
    """List installed files of ``category`` and install more on request."""
    ui = ctx.ui(title)
    layout = QHBoxLayout(ui.group)
    listing = QListWidget()
    listing.setObjectName("list_files")
    for path in installed(ctx, category):
        listing.addItem(str(path))
    layout.addWidget(listing, 1)

    sidebar = QVBoxLayout()
    btn_add = QPushButton("Add")
    btn_add.setObjectName("btn_add")
    btn_refresh = QPushButton("Refresh")
    sidebar.addWidget(btn_add)
    sidebar.addWidget(btn_refresh)
    sidebar.addStretch(1)
    layout.addLayout(sidebar)

    def _add() -> None:
        if directory:
            chosen = QFileDialog.getExistingDirectory(ui.group, f"Select the {category} directory")
            paths = [chosen] if chosen else []
        else:
            paths, _ = QFileDialog.getOpenFileNames(ui.group, f"Select the {category} file(s)")
        if not paths:
            log_status(ui, "No file selected")
            return
        log_status(ui, "Installing %d %s file(s)", len(paths), category)
        ctx.runner.spawn(
            f"install {category}",
            partial(ctx.backend.install, category, *paths),
            on_success=Message(screen),
        )

    btn_add.clicked.connect(_add)
    ctx.emit(btn_refresh, screen)
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(screen))
    ctx.emit(ui.btn_next, ctx.navigator.next_of(screen))


def test(ctx: ScreenContext, title: str, screen: Msg) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    layout.addWidget(QLabel("Run the package to check that it starts correctly"))
    btn_test = QPushButton("Test")
    btn_test.setObjectName("btn_test")
    layout.addWidget(btn_test)
    layout.addStretch(1)

    def _test() -> None:
        log_status(ui, "Testing the package")
        ctx.runner.spawn(
            "test",
            ctx.backend.test,
            on_success=Message(Msg.STATUS, "Test finished"),
        )

    btn_test.clicked.connect(_test)
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(screen))
    ctx.emit(ui.btn_next, ctx.navigator.next_of(screen))


def compress(ctx: ScreenContext, title: str, screen: Msg) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    label = QLabel(
        "Press next to compress the package. Compression can take a while, "
        "the window stays disabled until it finishes."
    )
    label.setWordWrap(True)
    layout.addWidget(label)
    layout.addStretch(1)

    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(screen))

    def _next() -> None:
        log_status(ui, "Compressing the package")
        ctx.runner.spawn("compress", ctx.backend.compress, on_success=Message(ctx.navigator.next_of(screen)))

    ui.btn_next.clicked.connect(_next)
