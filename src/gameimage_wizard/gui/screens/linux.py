# -*- coding: utf-8 -*-
"""Linux flow: native applications copied into the image."""

from __future__ import annotations

from functools import partial

from PyQt6.QtWidgets import QButtonGroup, QLabel, QRadioButton, QScrollArea, QVBoxLayout, QWidget

from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.gui.host import log_status
from gameimage_wizard.gui.screens import steps
from gameimage_wizard.gui.screens.context import ScreenContext

METHOD_ROW = "linux.method.directory"


def name(ctx: ScreenContext, title: str) -> None:
    steps.name(ctx, title, Msg.DRAW_LINUX_NAME)


def icon(ctx: ScreenContext, title: str) -> None:
    steps.icon(ctx, title, Msg.DRAW_LINUX_ICON)


def method(ctx: ScreenContext, title: str) -> None:
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addStretch(1)
    radio_dir = QRadioButton("Copy the application from a directory")
    radio_dir.setObjectName("radio_directory")
    radio_file = QRadioButton("Install the application from file(s), e.g. an AppImage or a tarball")
    radio_file.setObjectName("radio_file")
    group = QButtonGroup(ui.group)
    group.addButton(radio_dir)
    group.addButton(radio_file)
    if ctx.session.toggled(METHOD_ROW, default=True):
        radio_dir.setChecked(True)
    else:
        radio_file.setChecked(True)
    radio_dir.toggled.connect(lambda checked: ctx.session.toggle(METHOD_ROW, checked))
    layout.addWidget(radio_dir)
    layout.addWidget(radio_file)
    layout.addStretch(1)

    ctx.emit(ui.btn_prev, ctx.navigator.previous_of(Msg.DRAW_LINUX_METHOD))
    ctx.emit(ui.btn_next, ctx.navigator.next_of(Msg.DRAW_LINUX_METHOD))


def rom(ctx: ScreenContext, title: str) -> None:
    steps.files(
        ctx,
        title,
        Msg.DRAW_LINUX_ROM,
        "linux",
        directory=ctx.session.toggled(METHOD_ROW, default=True),
    )


def default(ctx: ScreenContext, title: str, is_update: bool = False) -> None:
    """Pick the main binary; when updating, return to the creator hub afterwards."""
    ui = ctx.ui(title)
    layout = QVBoxLayout(ui.group)
    layout.addWidget(QLabel("Select the binary started by the image"))

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    inner = QWidget()
    inner_layout = QVBoxLayout(inner)
    group = QButtonGroup(inner)
    for path in steps.installed(ctx, "rom"):
        radio = QRadioButton(str(path))
        radio.setProperty("path", str(path))
        group.addButton(radio)
        inner_layout.addWidget(radio)
    inner_layout.addStretch(1)
    scroll.setWidget(inner)
    layout.addWidget(scroll, 1)

    if is_update:
        previous, following = Msg.DRAW_CREATOR, Msg.DRAW_CREATOR
    else:
        previous = ctx.navigator.previous_of(Msg.DRAW_LINUX_DEFAULT)
        following = ctx.navigator.next_of(Msg.DRAW_LINUX_DEFAULT)
    ctx.emit(ui.btn_prev, previous)

    def _next() -> None:
        checked = group.checkedButton()
        if checked is None:
            ctx.alert("You must select the default executable before continuing")
            return
        path = str(checked.property("path"))
        log_status(ui, "Selecting '%s' as the main binary", path)
        ctx.runner.spawn(
            "select binary",
            partial(ctx.backend.select, "rom", path),
            on_success=Message(following),
        )

    ui.btn_next.clicked.connect(_next)


def compress(ctx: ScreenContext, title: str) -> None:
    steps.compress(ctx, title, Msg.DRAW_LINUX_COMPRESS)
