import logging
import sys
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSlider,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from arrayviz.arr_ctrl import StaticQueueController, StaticStackController
from core.global_ctrl import MAX_SPEED, MIN_SPEED, GlobalController
from core.log import setup_logging
from core.settings import Settings
from linklist.sl_ctrl import LinkedListController
from stack.st_ctrl import StackController
from widgets.graphics_view import CustomGraphicsView
from widgets.log_pane import create_log_pane, detach_log_pane

logger = logging.getLogger(__name__)

STYLESHEET = Path(__file__).parent / "widgets" / "styles.qss"

# selector order; the first entry is shown on start
STRUCTURES = (
    ("Linked List", LinkedListController),
    ("Dynamic Stack", StackController),
    ("Static Stack", StaticStackController),
    ("Static Queue", StaticQueueController),
)


def _speed_text(speed):
    return f"{speed:.1f}×"


class MainWindow(QMainWindow):
    """Structure canvas and operation panel on the left, operation log on the right."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()
        self.setWindowTitle("Linear Structures Visualizer")
        self.resize(1280, 760)

        self.global_ctrl = GlobalController.from_settings(settings or Settings())
        self._controllers = {}
        self._active_name = None

        central = QWidget(self)
        self.setCentralWidget(central)
        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)
        root_layout.addWidget(self._build_structure_panel(), 14)
        root_layout.addWidget(self._build_log_panel(), 6)

        for name, controller_cls in STRUCTURES:
            self._add_controller(name, controller_cls(self.global_ctrl))

        self.ds_combo.currentTextChanged.connect(self._activate_controller)
        self.speed_slider.valueChanged.connect(self._on_speed_slider_changed)

        if STYLESHEET.exists():
            self.setStyleSheet(STYLESHEET.read_text(encoding="utf-8"))

        self._activate_controller(self.ds_combo.currentText())

    # ---------- Layout ----------

    def _build_structure_panel(self):
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        selector_row = QHBoxLayout()
        self.ds_combo = QComboBox()
        self.ds_combo.setObjectName("structureSelectCombo")
        selector_row.addWidget(QLabel("Data Structure:"))
        selector_row.addWidget(self.ds_combo, 1)
        layout.addLayout(selector_row)

        self.graphics_view = CustomGraphicsView()
        layout.addWidget(self.graphics_view, 1)
        layout.addLayout(self._build_speed_row())

        self.controls_stack = QStackedWidget()
        layout.addWidget(self.controls_stack, 0)
        return panel

    def _build_speed_row(self):
        self.speed_slider = QSlider(Qt.Horizontal)
        # slider works in hundredths of the playback speed
        self.speed_slider.setRange(int(MIN_SPEED * 100), int(MAX_SPEED * 100))
        self.speed_slider.setValue(int(round(self.global_ctrl.speed * 100)))
        self.speed_value_label = QLabel(_speed_text(self.global_ctrl.speed))

        row = QHBoxLayout()
        row.addWidget(QLabel("Animation Speed"))
        row.addWidget(self.speed_slider, 1)
        row.addWidget(self.speed_value_label)
        return row

    def _build_log_panel(self):
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        self.log_pane, self._log_handler = create_log_pane()
        layout.addWidget(QLabel("Operation Log"))
        layout.addWidget(self.log_pane, 1)
        return panel

    # ---------- Structures ----------

    def _add_controller(self, name, controller):
        controller.panel_index = self.controls_stack.addWidget(controller.build_panel())
        self._controllers[name] = controller
        self.ds_combo.addItem(name)

    def _activate_controller(self, name):
        controller = self._controllers.get(name)
        if controller is None or name == self._active_name:
            return

        if self._active_name:
            self._controllers[self._active_name].on_deactivate()
        controller.on_activate(self.graphics_view)
        self.controls_stack.setCurrentIndex(controller.panel_index)
        self._active_name = name
        logger.info("Showing %s", name)

    def _on_speed_slider_changed(self, value):
        speed = value / 100.0
        self.speed_value_label.setText(_speed_text(speed))
        self.global_ctrl.set_speed(speed)

    def closeEvent(self, event):
        detach_log_pane(self._log_handler)
        super().closeEvent(event)


def main():
    settings = Settings.from_environment()
    setup_logging(settings.log_level)
    app = QApplication(sys.argv)
    window = MainWindow(settings)
    window.showMaximized()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
