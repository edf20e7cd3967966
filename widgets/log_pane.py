import logging

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QPlainTextEdit


class _LogBridge(QObject):
    message = pyqtSignal(str)


class LogPaneHandler(logging.Handler):
    """Mirrors log records into a read-only text pane via a queued signal."""

    def __init__(self, pane: QPlainTextEdit, level=logging.DEBUG):
        super().__init__(level)
        self.setFormatter(logging.Formatter("%(levelname)-7s %(name)s: %(message)s"))
        self._bridge = _LogBridge()
        self._bridge.message.connect(pane.appendPlainText)
        self.previous_levels = {}

    def emit(self, record):
        try:
            self._bridge.message.emit(self.format(record))
        except RuntimeError:
            # pane already destroyed during shutdown
            self.handleError(record)


LOG_PANE_LOGGERS = ("linklist", "stack", "arrayviz", "core", "main", "__main__")


def create_log_pane(logger_names=LOG_PANE_LOGGERS):
    pane = QPlainTextEdit()
    pane.setReadOnly(True)
    pane.setObjectName("operationLog")
    pane.setMaximumBlockCount(500)
    handler = LogPaneHandler(pane)
    for name in logger_names:
        target = logging.getLogger(name)
        handler.previous_levels[name] = target.level
        target.addHandler(handler)
        target.setLevel(logging.DEBUG)
    return pane, handler


def detach_log_pane(handler):
    """Undo `create_log_pane`: drop the handler and give each logger its level back."""
    for name, level in handler.previous_levels.items():
        target = logging.getLogger(name)
        target.removeHandler(handler)
        target.setLevel(level)
    handler.previous_levels.clear()
