# -*- coding: utf-8 -*-
"""Background operations bracketed by window deactivation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gameimage_wizard.core.bus import Sender
from gameimage_wizard.core.messages import Message, Msg

logger = logging.getLogger(__name__)

Work = Callable[[], Any]
SuccessMessage = Message | Callable[[Any], "Message | None"] | None


@dataclass
class Task:
    """One blocking operation and the message that follows its success."""

    name: str
    work: Work
    on_success: SuccessMessage = None
    alert: bool = False

    def resolve(self, result: Any) -> Message | None:
        if callable(self.on_success):
            return self.on_success(result)
        return self.on_success


class WindowLock:
    """Global binary active flag of the main window.

    Not counted: a second deactivate is a no-op and a single activate
    re-enables everything.
    """

    def __init__(self) -> None:
        self._active = True
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    def activate(self) -> bool:
        """Return ``True`` when the state changed."""
        with self._lock:
            changed = not self._active
            self._active = True
            return changed

    def deactivate(self) -> bool:
        with self._lock:
            changed = self._active
            self._active = False
            return changed


class TaskRunner:
    """Spawn detached workers that report back only through the bus.

    At most one operation runs at a time. The worker always sends exactly one
    ``WIND_ACTIVATE``, whatever the outcome of the work.
    """

    def __init__(self, sender: Sender) -> None:
        self._sender = sender
        self._busy = threading.Lock()

    def busy(self) -> bool:
        return self._busy.locked()

    def spawn(
        self,
        name: str,
        work: Work,
        on_success: SuccessMessage = None,
        alert: bool = False,
    ) -> threading.Thread | None:
        if not self._busy.acquire(blocking=False):
            logger.warning("Refusing '%s': another operation is still running", name)
            self._sender.send_awake(Message(Msg.STATUS, "Another operation is still running"))
            return None

        task = Task(name=name, work=work, on_success=on_success, alert=alert)
        self._sender.send_awake(Message(Msg.WIND_DEACTIVATE))
        thread = threading.Thread(target=self._run, args=(task,), name=f"task-{name}", daemon=True)
        try:
            thread.start()
        except RuntimeError:
            self._release(task)
            raise
        return thread

    def _run(self, task: Task) -> None:
        follow_up: list[Message] = []
        try:
            logger.info("Task '%s' started", task.name)
            result = task.work()
            message = task.resolve(result)
            if message is not None:
                follow_up.append(message)
            logger.info("Task '%s' finished", task.name)
        except Exception as exc:
            logger.exception("Task '%s' failed", task.name)
            follow_up.append(Message(Msg.STATUS, str(exc)))
            if task.alert:
                follow_up.append(Message(Msg.ALERT, str(exc)))
        finally:
            self._release(task, follow_up)

    def _release(self, task: Task, follow_up: list[Message] | None = None) -> None:
        """Queue the activate and every follow-up, then free the runner.

        A click handled right after the window is re-enabled still finds the
        runner busy, so it cannot start work ahead of the next screen.
        """
        try:
            if follow_up:
                first, *rest = follow_up
                self._sender.send_activate(first)
                for message in rest:
                    self._sender.send_awake(message)
            else:
                self._sender.send_awake(Message(Msg.WIND_ACTIVATE))
        finally:
            self._busy.release()
        logger.debug("Task '%s' released the window", task.name)
