# -*- coding: utf-8 -*-
"""Screens outside the platform flows."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from gameimage_wizard.constants import APP_NAME, FETCH_DB_FILE, PLATFORM_DESCRIPTIONS, WINE_DISTS
from gameimage_wizard.core.backend import BackendError, fetch_entries, prepare_build_dir
from gameimage_wizard.core.kv import KvError
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.project import ProjectError, ProjectInfo
from gameimage_wizard.core.session import Platform
from gameimage_wizard.gui.host import log_status
from gameimage_wizard.gui.screens.context import ScreenContext

logger = logging.getLogger(__name__)


def welcome(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    ui.btn_prev.hide()

    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    logo = QLabel(APP_NAME)
    logo.setObjectName("logo")
    logo.setAlignment(Qt.AlignmentFlag.AlignCenter)
    layout.addWidget(logo)
    layout.addStretch(1)
    layout.addWidget(QLabel("Select The Directory for GameImage's Temporary Files"))
    row = QHBoxLayout()
    input_dir = QLineEdit()
    input_dir.setObjectName("input_dir")
    input_dir.setReadOnly(True)
    if ctx.session.build_dir is not None:
        input_dir.setText(str(ctx.session.build_dir))
    btn_browse = QPushButton("Browse")
    row.addWidget(input_dir, 1)
    row.addWidget(btn_browse)
    layout.addLayout(row)

    def _choose() -> None:
        chosen = QFileDialog.getExistingDirectory(ui.group, "Select the build directory")
        if not chosen:
            log_status(ui, "No directory selected")
            return
        path_build = Path(chosen) / "build"
        input_dir.setText(str(path_build))
        ctx.session.set_build_dir(path_build)

    btn_browse.clicked.connect(_choose)

    def _next() -> None:
        path_build = ctx.session.build_dir
        if path_build is None:
            log_status(ui, "Invalid temporary files directory")
            ctx.alert("Select the directory for temporary files before continuing")
            return
        expected = str(ctx.settings.get("backend", {}).get("expected_version", ""))
        log_status(ui, "Initializing build directory %s", path_build)
        ctx.runner.spawn(
            "prepare build directory",
            partial(prepare_build_dir, ctx.backend, path_build, expected),
            on_success=Message(Msg.DRAW_PLATFORM),
            alert=True,
        )

    ui.btn_next.clicked.connect(_next)


def platform(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    selected = ctx.session.platform

    layout = QVBoxLayout(ui.group)
    description = QTextEdit()
    description.setObjectName("description")
    description.setReadOnly(True)
    layout.addWidget(description, 1)

    if selected is Platform.WINE_URL:
        layout.addWidget(QLabel("Insert the url for the custom wine tarball"))
        input_url = QLineEdit()
        input_url.setObjectName("input_url")
        input_url.setText(ctx.session.url or "")
        input_url.textChanged.connect(ctx.session.set_url)
        layout.addWidget(input_url)

    row = QHBoxLayout()
    menu = QComboBox()
    menu.setObjectName("menu_platform")
    menu.setPlaceholderText("Select a platform")
    for item in Platform:
        menu.addItem(item.value, item)
    menu.setCurrentIndex(next((i for i in range(menu.count()) if menu.itemData(i) == selected), -1))
    row.addWidget(menu, 1)

    if selected is Platform.WINE:
        menu_dist = QComboBox()
        menu_dist.setObjectName("menu_dist")
        menu_dist.addItems(list(WINE_DISTS))
        menu_dist.setCurrentText(ctx.session.wine_dist)
        menu_dist.currentTextChanged.connect(ctx.session.set_wine_dist)
        row.addWidget(menu_dist)
    layout.addLayout(row)

    if selected is not None:
        description.setPlainText(PLATFORM_DESCRIPTIONS.get(selected.value, ""))

    def _select(index: int) -> None:
        choice = menu.itemData(index)
        if not isinstance(choice, Platform):
            logger.error("Could not update the platform from '%s'", menu.itemText(index))
            return
        ctx.session.select_platform(choice)
        ctx.go(Msg.DRAW_PLATFORM)

    menu.activated.connect(_select)
    ctx.emit(ui.btn_prev, Msg.DRAW_WELCOME)

    def _next() -> None:
        chosen = ctx.session.platform
        if chosen is None:
            log_status(ui, "Could not determine chosen platform")
            ctx.alert("Select a platform before continuing")
            return
        log_status(ui, "Fetching list of files to download")
        ctx.runner.spawn(
            "fetch list",
            partial(ctx.backend.fetch_list, chosen.backend_id, FETCH_DB_FILE, ctx.session.url),
            on_success=Message(Msg.DRAW_FETCH),
        )

    ui.btn_next.clicked.connect(_next)


def fetch(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    chosen = ctx.session.platform

    layout = QVBoxLayout(ui.group)
    layout.addWidget(QLabel("Files to download for the selected platform"))
    listing = QListWidget()
    listing.setObjectName("list_fetch")
    layout.addWidget(listing, 1)

    build_dir = ctx.session.build_dir
    if chosen is not None and build_dir is not None:
        try:
            listing.addItems(fetch_entries(build_dir / FETCH_DB_FILE, chosen.backend_id))
        except BackendError as exc:
            log_status(ui, "%s", exc)

    ctx.emit(ui.btn_prev, Msg.DRAW_PLATFORM)

    def _next() -> None:
        if chosen is None:
            ctx.alert("Select a platform before continuing")
            return
        log_status(ui, "Downloading files for %s", chosen.backend_id)
        ctx.runner.spawn(
            "fetch files",
            partial(ctx.backend.fetch_platform, chosen.backend_id),
            on_success=Message(ctx.navigator.first(chosen)),
        )

    ui.btn_next.clicked.connect(_next)


def _project_row(ctx: ScreenContext, info: ProjectInfo) -> QWidget:
    row = QWidget()
    layout = QHBoxLayout(row)
    layout.setContentsMargins(0, 0, 0, 0)
    check = QCheckBox(f"{info.name} ({info.platform or 'unknown'})")
    check.setObjectName(f"check_{info.name}")
    check.setChecked(info.name in ctx.session.projects)

    def _toggle(checked: bool) -> None:
        projects = [name for name in ctx.session.projects if name != info.name]
        if checked:
            projects.append(info.name)
        ctx.session.set_projects(projects)

    check.toggled.connect(_toggle)
    layout.addWidget(check, 1)

    if Platform.parse(info.platform) is Platform.LINUX:
        btn_update = QPushButton("Update")

        def _update() -> None:
            try:
                ctx.project().select(info.name)
            except (ProjectError, KvError) as exc:
                ctx.window.set_status(str(exc))
                return
            ctx.go(Msg.DRAW_LINUX_DEFAULT, True)

        btn_update.clicked.connect(_update)
        layout.addWidget(btn_update)
    return row


def creator(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    layout = QHBoxLayout(ui.group)
    column = QVBoxLayout()
    column.addWidget(QLabel("Projects to include in the image"))

    projects: list[ProjectInfo] = []
    try:
        projects = ctx.project().projects()
    except ProjectError as exc:
        log_status(ui, "%s", exc)
    known = {info.name for info in projects}
    ctx.session.set_projects([name for name in ctx.session.projects if name in known])

    for info in projects:
        column.addWidget(_project_row(ctx, info))
    column.addStretch(1)
    layout.addLayout(column, 1)

    btn_add = QPushButton("New")
    btn_add.setObjectName("btn_new_project")
    ctx.emit(btn_add, Msg.DRAW_PLATFORM)
    sidebar = QVBoxLayout()
    sidebar.addWidget(btn_add)
    sidebar.addStretch(1)
    layout.addLayout(sidebar)

    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_CREATOR))

    def _next() -> None:
        if not ctx.session.projects:
            ctx.alert("Select at least one project to include in the image")
            return
        ctx.go(ctx.navigator.next_of(Msg.DRAW_CREATOR))

    ui.btn_next.clicked.connect(_next)


def desktop(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    layout.addWidget(QLabel("Select the icon of the image in the desktop menu"))
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
            ui.group, "Select the desktop icon", "", "Images (*.png *.jpg *.jpeg *.svg)"
        )
        if not path:
            log_status(ui, "No file selected")
            return
        input_icon.setText(path)
        ctx.runner.spawn(
            "desktop icon",
            partial(ctx.backend.desktop, path),
            on_success=Message(Msg.STATUS, "Desktop icon configured"),
        )

    btn_browse.clicked.connect(_choose)
    ctx.emit(ui.btn_prev, Msg.DRAW_CREATOR)

    def _next() -> None:
        projects = ctx.session.projects
        if not projects:
            ctx.alert("Select at least one project to include in the image")
            return
        log_status(ui, "Packaging %s", ", ".join(projects))
        ctx.runner.spawn(
            "package",
            partial(ctx.backend.package, projects),
            on_success=Message(ctx.navigator.next_of(Msg.DRAW_DESKTOP)),
        )

    ui.btn_next.clicked.connect(_next)


def finish(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    ui.btn_prev.hide()
    ui.btn_next.setText("Close")
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    label = QLabel("The image was created, you can close the wizard now.")
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    layout.addWidget(label)
    layout.addStretch(1)
    ctx.emit(ui.btn_next, Msg.QUIT)
