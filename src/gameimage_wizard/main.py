# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Any

from PyQt6.QtGui import QFont, QFontDatabase, QIcon
from PyQt6.QtWidgets import QApplication, QMessageBox

from gameimage_wizard.config import ConfigError, get_default_config, load_config
from gameimage_wizard.constants import APP_NAME, APP_VERSION, DEFAULT_YEAR
from gameimage_wizard.core.backend import Backend
from gameimage_wizard.core.bus import Heartbeat, MessageBus
from gameimage_wizard.core.dispatcher import Dispatcher
from gameimage_wizard.core.event_loop import EventLoop
from gameimage_wizard.core.messages import Message, Msg
from gameimage_wizard.core.navigator import WizardNavigator
from gameimage_wizard.core.router import Router
from gameimage_wizard.core.session import WizardSession
from gameimage_wizard.core.tasks import TaskRunner
from gameimage_wizard.gui.host import QtWaker
from gameimage_wizard.gui.main_window import WizardWindow
from gameimage_wizard.gui.routes import ROUTES
from gameimage_wizard.gui.screens.context import ScreenContext
from gameimage_wizard.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy of the last crash next to the session logs."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError as exc:
        logging.getLogger().error("Could not write crash report: %s", exc)

    if QApplication.instance() is not None:
        QMessageBox.critical(None, APP_NAME, f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def _load_settings(logger: logging.Logger) -> dict[str, Any]:
    try:
        return load_config()
    except (ConfigError, OSError, ValueError) as exc:
        logger.error("Invalid settings, using defaults: %s", exc)
        return get_default_config()


def _apply_font(app: QApplication, ui_settings: dict[str, Any], logger: logging.Logger) -> None:
    font_path = str(ui_settings.get("font_path", ""))
    if not font_path:
        return
    font_id = QFontDatabase.addApplicationFont(font_path)
    if font_id == -1:
        logger.warning("Could not load font %s, keeping the default", font_path)
        return
    families = QFontDatabase.applicationFontFamilies(font_id)
    if families:
        app.setFont(QFont(families[0], int(ui_settings.get("font_size", 12))))


def _apply_icon(window: WizardWindow, ui_settings: dict[str, Any], logger: logging.Logger) -> None:
    icon_path = str(ui_settings.get("icon_path", ""))
    if not icon_path:
        return
    icon = QIcon(icon_path)
    if icon.isNull():
        logger.warning("Could not load window icon %s", icon_path)
        return
    window.setWindowIcon(icon)


def main() -> int:
    """Start the wizard."""
    sys.excepthook = global_exception_handler
    logger = logging.getLogger(__name__)
    settings = _load_settings(logger)
    log_dir = Path(str(settings.get("logging", {}).get("dir", "logs")))
    session_log_path = setup_session_logging(log_dir, "gameimage-wizard")
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    ui_settings = settings.get("ui", {})
    _apply_font(app, ui_settings, logger)

    bus = MessageBus()
    sender = bus.sender()
    wine = settings.get("wine", {})
    build_dir = str(settings.get("build_dir", "")).strip()
    session = WizardSession(
        build_dir=Path(build_dir) if build_dir else None,
        wine_dist=str(wine.get("dist", "default")),
        year=int(wine.get("default_year", DEFAULT_YEAR)),
    )
    backend = Backend(
        command=str(settings["backend"]["command"]),
        cwd_provider=lambda: session.build_dir,
        env_provider=session.backend_environ,
    )

    window = WizardWindow(sender, settings)
    _apply_icon(window, ui_settings, logger)

    context = ScreenContext(
        sender=sender,
        session=session,
        window=window,
        backend=backend,
        runner=TaskRunner(sender),
        navigator=WizardNavigator(),
        settings=settings,
    )
    router = Router(ROUTES, window, context)
    loop = EventLoop(bus, Dispatcher(window, router))

    waker = QtWaker(loop.process_pending, parent=window)
    bus.set_waker(waker.wake)
    heartbeat = Heartbeat(sender, int(settings.get("heartbeat_ms", 50)))
    heartbeat.start()
    app.aboutToQuit.connect(heartbeat.stop)

    window.show()
    sender.send_awake(Message(Msg.DRAW_WELCOME))
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
