# -*- coding: utf-8 -*-
"""Wine flow: prefix setup, libraries, environment and executables."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from gameimage_wizard.constants import YEAR_FIRST, YEAR_LAST
from gameimage_wizard.core import kv
from gameimage_wizard.core.backend import Backend, BackendError
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.project import ProjectError
from gameimage_wizard.core.recommend import recommend
from gameimage_wizard.gui.host import log_status
from gameimage_wizard.gui.screens import steps
from gameimage_wizard.gui.screens.context import ScreenContext

logger = logging.getLogger(__name__)

TRICKS_ROW = "wine.tricks."

ArgsProvider = Callable[[QWidget], "list[str] | None"]


def name(ctx: ScreenContext, title: str) -> None:
    steps.name(ctx, title, Msg.DRAW_WINE_NAME)


def icon(ctx: ScreenContext, title: str) -> None:
    steps.icon(ctx, title, Msg.DRAW_WINE_ICON)


def _fixed(*args: str) -> ArgsProvider:
    return lambda parent: list(args)


def _ask(prompt: str, *prefix: str) -> ArgsProvider:
    def _provider(parent: QWidget) -> list[str] | None:
        text, ok = QInputDialog.getText(parent, "Command", prompt)
        if not ok or not text.strip():
            return None
        return [*prefix, text.strip()]

    return _provider


CONFIGURE_ENTRIES: tuple[tuple[str, ArgsProvider], ...] = (
    ("Install DXVK for directx 9/10/11", _fixed("winetricks", "-f", "dxvk")),
    ("Install VKD3D for directx 12", _fixed("winetricks", "-f", "vkd3d")),
    ("Run regedit", _fixed("wine", "regedit")),
    ("Run add/remove programs", _fixed("wine", "uninstaller")),
    ("Run winetricks GUI", _fixed("winetricks", "--gui")),
    ("Run a custom winetricks command", _ask("Enter the winetricks command to execute", "winetricks", "-f")),
    ("Run a custom wine command", _ask("Enter the wine command to execute", "wine")),
)


def _configure_entry(ctx: ScreenContext, parent: QWidget, label: str, provider: ArgsProvider) -> QWidget:
    row = QWidget(parent)
    layout = QHBoxLayout(row)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.addWidget(QLabel(label), 1)
    btn = QPushButton("Run")
    btn.setObjectName("btn_configure")

    def _run() -> None:
        args = provider(parent)
        if args is None:
            return
        ctx.runner.spawn(
            label,
            partial(ctx.backend.install, *args),
            on_success=Message(Msg.STATUS, f"Finished: {label}"),
        )

    btn.clicked.connect(_run)
    layout.addWidget(btn)
    return row


def create_prefix(backend: Backend) -> None:
    backend.install("winetricks", "fontsmooth=rgb")


def configure(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    for label, provider in CONFIGURE_ENTRIES:
        layout.addWidget(_configure_entry(ctx, ui.group, label, provider))

    row = QWidget()
    row_layout = QHBoxLayout(row)
    row_layout.setContentsMargins(0, 0, 0, 0)
    row_layout.addWidget(QLabel("Configure environment"), 1)
    btn_env = QPushButton("Open")
    btn_env.setObjectName("btn_environment")
    ctx.emit(btn_env, Msg.DRAW_WINE_ENVIRONMENT)
    row_layout.addWidget(btn_env)
    layout.addWidget(row)
    layout.addStretch(1)

    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_WINE_CONFIGURE))
    following = ctx.navigator.next_of(Msg.DRAW_WINE_CONFIGURE)

    def _next() -> None:
        try:
            prefix = ctx.project().wine_prefix()
        except (ProjectError, kv.KvError) as exc:
            log_status(ui, "%s", exc)
            return
        if prefix.exists():
            ctx.go(following)
            return
        log_status(ui, "Wine prefix does not exist, creating...")
        ctx.runner.spawn(
            "create wine prefix",
            partial(create_prefix, ctx.backend),
            on_success=Message(following),
        )

    ui.btn_next.clicked.connect(_next)


def install_libraries(backend: Backend, libraries: list[str]) -> None:
    """Install verbs one at a time; winetricks stops at the first failing verb."""
    failed: list[str] = []
    for library in libraries:
        try:
            backend.install("winetricks", "-f", "-q", library)
        except BackendError as exc:
            logger.error("Could not install '%s': %s", library, exc)
            failed.append(library)
    if failed:
        raise BackendError(f"Failed to install: {', '.join(failed)}")


def winetricks(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    layout = QHBoxLayout(ui.group)
    column = QVBoxLayout()
    column.addWidget(QLabel("Select the Game Release Year"))
    menu_year = QComboBox()
    menu_year.setObjectName("menu_year")
    for year in range(YEAR_FIRST, YEAR_LAST + 1):
        menu_year.addItem(str(year))
    menu_year.setCurrentText(str(ctx.session.year))
    column.addWidget(menu_year)

    def _select_year(index: int) -> None:
        ctx.session.set_year(int(menu_year.itemText(index)))
        ctx.session.clear_selections(TRICKS_ROW)
        ctx.go(Msg.DRAW_WINE_TRICKS)

    menu_year.activated.connect(_select_year)

    column.addWidget(QLabel("Recommended Libraries"))
    checklist = QListWidget()
    checklist.setObjectName("list_libraries")
    for library in recommend(ctx.session.year):
        item = QListWidgetItem(library)
        item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
        checked = ctx.session.toggled(TRICKS_ROW + library, default=True)
        item.setCheckState(Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked)
        checklist.addItem(item)
    checklist.itemChanged.connect(
        lambda item: ctx.session.toggle(TRICKS_ROW + item.text(), item.checkState() == Qt.CheckState.Checked)
    )
    column.addWidget(checklist, 1)
    layout.addLayout(column, 1)

    sidebar = QVBoxLayout()
    btn_install = QPushButton("Install")
    btn_install.setObjectName("btn_install")
    sidebar.addWidget(btn_install)
    sidebar.addStretch(1)
    layout.addLayout(sidebar)

    def _install() -> None:
        libraries = [
            checklist.item(row).text()
            for row in range(checklist.count())
            if checklist.item(row).checkState() == Qt.CheckState.Checked
        ]
        if not libraries:
            log_status(ui, "No library selected")
            return
        log_status(ui, "Installing %d libraries", len(libraries))
        ctx.runner.spawn(
            "winetricks",
            partial(install_libraries, ctx.backend, libraries),
            on_success=Message(Msg.STATUS, "Libraries installed"),
        )

    btn_install.clicked.connect(_install)
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_WINE_TRICKS))
    ctx.emit(ui.btn_next, ctx.navigator.next_of(Msg.DRAW_WINE_TRICKS))


def ask_key_value(parent: QWidget) -> tuple[str, str] | None:
    dialog = QDialog(parent)
    dialog.setWindowTitle("Environment variable")
    form = QFormLayout(dialog)
    input_key = QLineEdit()
    input_value = QLineEdit()
    form.addRow("Key", input_key)
    form.addRow("Value", input_value)
    buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
    buttons.accepted.connect(dialog.accept)
    buttons.rejected.connect(dialog.reject)
    form.addRow(buttons)
    if not dialog.exec():
        return None
    key = input_key.text().strip()
    if not key:
        return None
    return key, input_value.text()


def environment(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    ui.btn_next.hide()
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_WINE_ENVIRONMENT))

    try:
        path_db = ctx.project().env_path()
    except (ProjectError, kv.KvError) as exc:
        log_status(ui, "Could not retrieve path to db file: %s", exc)
        return

    layout = QHBoxLayout(ui.group)
    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    inner = QWidget()
    inner_layout = QVBoxLayout(inner)

    try:
        entries = kv.read(path_db)
    except kv.KvError as exc:
        log_status(ui, "%s", exc)
        entries = {}

    for key, value in entries.items():
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        output_key = QLineEdit(key)
        output_key.setReadOnly(True)
        output_value = QLineEdit(value)
        output_value.setReadOnly(True)
        btn_del = QPushButton("Delete")
        btn_del.setObjectName(f"btn_del_{key}")

        def _erase(_checked: bool = False, key: str = key) -> None:
            try:
                kv.erase(path_db, key)
                logger.info("Erased key '%s'", key)
            except kv.KvError as exc:
                logger.error("Failed to erase key '%s': %s", key, exc)
            ctx.go(Msg.DRAW_WINE_ENVIRONMENT)

        btn_del.clicked.connect(_erase)
        row_layout.addWidget(output_key, 1)
        row_layout.addWidget(output_value, 2)
        row_layout.addWidget(btn_del)
        inner_layout.addWidget(row)
    inner_layout.addStretch(1)
    scroll.setWidget(inner)
    layout.addWidget(scroll, 1)

    sidebar = QVBoxLayout()
    btn_add = QPushButton("Add")
    btn_add.setObjectName("btn_add")
    sidebar.addWidget(btn_add)
    sidebar.addStretch(1)
    layout.addLayout(sidebar)

    def _add() -> None:
        entry = ask_key_value(ui.group)
        if entry is None:
            return
        key, value = entry
        try:
            kv.write(path_db, key, value)
            logger.info("Set key '%s' with value '%s'", key, value)
        except kv.KvError as exc:
            logger.error("Failed to set key '%s': %s", key, exc)
        ctx.go(Msg.DRAW_WINE_ENVIRONMENT)

    btn_add.clicked.connect(_add)


def save_arguments(path_db: Path, executable: str, arguments: str) -> None:
    """Store arguments for ``executable``; blank arguments remove the entry."""
    try:
        if arguments.strip():
            kv.write(path_db, executable, arguments)
        else:
            kv.erase(path_db, executable)
    except kv.KvError as exc:
        logger.error("Could not write to db: %s", exc)


def save_selectable(path_db: Path, executable: str, selectable: bool) -> None:
    try:
        if selectable:
            kv.write(path_db, executable, "1")
        else:
            kv.erase(path_db, executable)
    except kv.KvError as exc:
        logger.error("Could not update launcher entry '%s': %s", executable, exc)


def run_executable(backend: Backend, path: str) -> None:
    backend.select("rom", path)
    backend.test()


def _read_or_empty(path: Path | None) -> dict[str, str]:
    if path is None:
        return {}
    try:
        return kv.read(path)
    except kv.KvError as exc:
        logger.error("Could not read %s: %s", path, exc)
        return {}


def _rom_entry(
    ctx: ScreenContext,
    group: QButtonGroup,
    path: Path,
    arguments: dict[str, str],
    selectable: dict[str, str],
    path_args: Path | None,
    path_executable: Path | None,
    project_dir: Path | None,
) -> QWidget:
    entry = QWidget()
    layout = QVBoxLayout(entry)
    layout.setContentsMargins(0, 0, 0, 0)
    key = str(path)

    row = QHBoxLayout()
    radio = QRadioButton(key)
    radio.setProperty("path", key)
    group.addButton(radio)
    row.addWidget(radio, 1)

    btn_folder = QPushButton("Folder")

    def _open_folder() -> None:
        folder = ((project_dir or Path.cwd()) / path).parent
        logger.info("Open '%s'", folder)
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder)))

    btn_folder.clicked.connect(_open_folder)
    row.addWidget(btn_folder)

    btn_run = QPushButton("Run")
    btn_run.clicked.connect(
        lambda *_: ctx.runner.spawn(
            "run executable",
            partial(run_executable, ctx.backend, key),
            on_success=Message(Msg.STATUS, f"Finished running '{path.name}'"),
        )
    )
    row.addWidget(btn_run)
    layout.addLayout(row)

    layout.addWidget(QLabel("Executable arguments"))
    input_arguments = QLineEdit(arguments.get(key, ""))
    input_arguments.setObjectName("input_arguments")
    if path_args is not None:
        input_arguments.textEdited.connect(lambda text: save_arguments(path_args, key, text))
    layout.addWidget(input_arguments)

    check = QCheckBox("Make this executable selectable in the launcher")
    check.setObjectName("check_selectable")
    check.setChecked(key in selectable)
    if path_executable is not None:
        check.toggled.connect(lambda checked: save_selectable(path_executable, key, checked))
    layout.addWidget(check)
    return entry


def rom(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_WINE_ROM))

    path_args: Path | None = None
    path_executable: Path | None = None
    project_dir: Path | None = None
    try:
        record = ctx.project()
        path_args = record.args_path()
        path_executable = record.executable_path()
        project_dir = record.project_dir()
    except (ProjectError, kv.KvError) as exc:
        logger.error("Could not retrieve path to db file: %s", exc)

    query = ctx.session.query
    executables = [path for path in steps.installed(ctx, "rom") if query.lower() in str(path).lower()]
    arguments = _read_or_empty(path_args)
    selectable = _read_or_empty(path_executable)

    layout = QHBoxLayout(ui.group)
    column = QVBoxLayout()
    input_query = QLineEdit(query)
    input_query.setObjectName("input_query")
    input_query.setPlaceholderText("Input a search term to filter executables, press enter to confirm")

    def _search() -> None:
        ctx.session.set_query(input_query.text())
        ctx.go(Msg.DRAW_WINE_ROM)

    input_query.returnPressed.connect(_search)
    input_query.textChanged.connect(lambda text: _search() if not text else None)
    column.addWidget(input_query)

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    inner = QWidget()
    inner_layout = QVBoxLayout(inner)
    group = QButtonGroup(inner)
    for path in executables:
        inner_layout.addWidget(
            _rom_entry(ctx, group, path, arguments, selectable, path_args, path_executable, project_dir)
        )
    inner_layout.addStretch(1)
    scroll.setWidget(inner)
    column.addWidget(scroll, 1)
    layout.addLayout(column, 1)

    sidebar = QVBoxLayout()
    btn_add = QPushButton("Add")
    btn_add.setObjectName("btn_add")
    btn_refresh = QPushButton("Refresh")
    btn_refresh.setObjectName("btn_refresh")
    sidebar.addWidget(btn_add)
    sidebar.addWidget(btn_refresh)
    sidebar.addStretch(1)
    layout.addLayout(sidebar)

    def _add() -> None:
        path, _ = QFileDialog.getOpenFileName(ui.group, "Pick a file to install with wine")
        if not path:
            log_status(ui, "No file selected")
            return
        ctx.runner.spawn(
            "install with wine",
            partial(ctx.backend.install, "wine", path),
            on_success=Message(Msg.DRAW_WINE_ROM),
        )

    btn_add.clicked.connect(_add)
    ctx.emit(btn_refresh, Msg.DRAW_WINE_ROM)

    following = ctx.navigator.next_of(Msg.DRAW_WINE_ROM)

    def _next() -> None:
        checked = group.checkedButton()
        if checked is None:
            ctx.alert("You must select the default executable before continuing")
            return
        ctx.runner.spawn(
            "select executable",
            partial(ctx.backend.select, "rom", str(checked.property("path"))),
            on_success=Message(following),
        )

    ui.btn_next.clicked.connect(_next)


def compress(ctx: ScreenContext, title: str) -> None:
    steps.compress(ctx, title, Msg.DRAW_WINE_COMPRESS)
