import logging

from PyQt5.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QVBoxLayout, QWidget

from core.base_ctrl import StructureController
from core.errors import EmptyContainerError
from stack.st_model import DynamicStack
from stack.st_view import StackView

logger = logging.getLogger(__name__)


class StackController(StructureController):
    """Controller for the unbounded (linked) stack."""

    title = "Dynamic Stack"

    def __init__(self, global_ctrl):
        super().__init__(StackView(global_ctrl))
        self.model = DynamicStack()
        self._refresh_status()

    def _build_panel(self):
        self.push_input = QLineEdit()
        self.push_input.setPlaceholderText("Value")
        self.push_input.returnPressed.connect(self._on_push)

        self.push_btn = QPushButton("Push")
        self.push_btn.clicked.connect(self._on_push)
        self.pop_btn = QPushButton("Pop")
        self.pop_btn.clicked.connect(self._on_pop)
        self.peek_btn = QPushButton("Peek")
        self.peek_btn.clicked.connect(self._on_peek)
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self._on_clear)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        layout.addWidget(self._group("Push", self.push_input, self.push_btn))

        row = QHBoxLayout()
        for button in (self.pop_btn, self.peek_btn, self.clear_btn):
            row.addWidget(button)
        layout.addLayout(row)
        layout.addWidget(self.status_label)
        layout.addStretch(1)

        self._register(self.push_input, self.push_btn, self.pop_btn, self.peek_btn, self.clear_btn)
        return container

    def _refresh_status(self):
        self.status_label.setText(f"Size: {self.model.size()}")

    def _on_push(self):
        value = self._coerce_value(self.push_input.text())
        info = self.model.push(value)
        logger.debug("Pushed %r", value)
        self.view.animate_push(self.model.snapshot(), info)
        self.push_input.clear()
        self._refresh_status()

    def _on_pop(self):
        try:
            popped = self.model.pop_info()
        except EmptyContainerError as exc:
            self._reject(exc)
            return
        logger.debug("Popped %r", popped["value"])
        self.view.animate_pop(self.model.snapshot(), popped)
        self._refresh_status()

    def _on_peek(self):
        try:
            value = self.model.peek()
        except EmptyContainerError as exc:
            self._reject(exc)
            return
        self.view.highlight_top()
        self.status_label.setText(f"Size: {self.model.size()} | top = {value}")

    def _on_clear(self):
        self.model.clear()
        self.view.reset()
        self._refresh_status()
