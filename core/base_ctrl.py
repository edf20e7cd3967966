import logging

from PyQt5.QtWidgets import QGroupBox, QLabel, QMessageBox, QVBoxLayout, QWidget

logger = logging.getLogger(__name__)

EMPTY_VALUE = "∅"


class StructureController(QWidget):
    """
    Shared plumbing for the per-structure controllers: panel lifecycle,
    locking the panel while the view animates, and reporting refused
    operations.
    """

    title = "Structure"

    def __init__(self, view):
        super().__init__()
        self.view = view
        self.panel_index = -1
        self._controls = []
        self.status_label = QLabel()
        self.status_label.setObjectName("structureStatus")
        self.panel = self._build_panel()
        self.view.interactionLocked.connect(self._toggle_controls)

    # ---------- Panel lifecycle ----------

    def _build_panel(self):
        raise NotImplementedError

    def build_panel(self):
        return self.panel

    def on_activate(self, graphics_view):
        self.view.bind_canvas(graphics_view)

    def on_deactivate(self):
        self.view.stop_animations()

    # ---------- Helpers ----------

    def _register(self, *widgets):
        self._controls.extend(widgets)

    def _toggle_controls(self, locked):
        for widget in self._controls:
            widget.setDisabled(locked)

    def _refresh_status(self):
        pass

    def _reject(self, exc):
        """Report a refused operation; the model is unchanged at this point."""
        logger.warning("%s: %s", self.title, exc)
        self.view.flash_rejected()
        self.status_label.setText(str(exc))
        QMessageBox.information(self, self.title, str(exc).capitalize() + ".")

    @staticmethod
    def _group(title, *widgets):
        group = QGroupBox(title)
        group.setStyleSheet("QGroupBox { color: white; }")
        layout = QVBoxLayout(group)
        layout.setContentsMargins(12, 10, 12, 12)
        layout.setSpacing(6)
        for widget in widgets:
            layout.addWidget(widget)
        return group

    @staticmethod
    def _coerce_value(text):
        value = text.strip() or EMPTY_VALUE
        try:
            return int(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                return value
