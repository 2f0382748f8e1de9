"""Runs an editor controller's idle sweep from the Qt event loop."""

import logging

from PySide6.QtCore import QObject, QTimer

from editor.editor_controller import EditorController


class IdleDriver(QObject):
    """
    Polls an editor controller's idle task on a timer.

    The timer fires at the idle timeout interval and asks the controller
    whether the idle sweep is due; the controller decides if it runs.
    """

    def __init__(self, controller: EditorController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._logger = logging.getLogger("IdleDriver")
        self._timer = QTimer(self)
        self._timer.setInterval(max(1, controller.idle_task.timeout_ms))
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        """Start polling."""
        self._timer.start()

    def stop(self) -> None:
        """Stop polling."""
        self._timer.stop()

    def is_active(self) -> bool:
        """Check if the driver is polling."""
        return self._timer.isActive()

    def _on_timeout(self) -> None:
        if self._controller.closed:
            self._timer.stop()
            return

        try:
            if self._controller.poll_idle():
                self._logger.debug("idle sweep ran, %d dirty lines left", len(self._controller.dirty_lines()))

        except Exception:
            self._logger.exception("idle sweep exception")
