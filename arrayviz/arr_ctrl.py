import logging

from PyQt5.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QSpinBox, QVBoxLayout, QWidget

from arrayviz.arr_model import StaticQueue, StaticStack
from arrayviz.arr_view import BoundedArrayView
from core.base_ctrl import StructureController
from core.errors import CapacityExceededError, EmptyContainerError, InvalidCapacityError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class BoundedController(StructureController):
    """
    Controller shared by the array-backed stack and queue. Subclasses name
    the model class and the add/remove operations.
    """

    model_cls = StaticStack
    marker = "top"
    add_label = "Push"
    remove_label = "Pop"
    removed_verb = "popped"

    def __init__(self, global_ctrl):
        super().__init__(BoundedArrayView(global_ctrl, marker=self.marker))
        self.model = self.model_cls(DEFAULT_CAPACITY)
        self.capacity_spin.setValue(DEFAULT_CAPACITY)
        self.view.render(self.model.snapshot(), self.model.capacity())
        self._refresh_status()

    def _build_panel(self):
        self.capacity_spin = QSpinBox()
        # 0 is allowed here so the model's capacity check is reachable from the UI
        self.capacity_spin.setRange(0, 12)
        self.create_btn = QPushButton("Create")
        self.create_btn.clicked.connect(self._on_create)

        self.value_input = QLineEdit()
        self.value_input.setPlaceholderText("Value")
        self.value_input.returnPressed.connect(self._on_add)
        self.add_btn = QPushButton(self.add_label)
        self.add_btn.clicked.connect(self._on_add)
        self.remove_btn = QPushButton(self.remove_label)
        self.remove_btn.clicked.connect(self._on_remove)
        self.peek_btn = QPushButton("Peek")
        self.peek_btn.clicked.connect(self._on_peek)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        layout.addWidget(self._group("Capacity", self.capacity_spin, self.create_btn))
        layout.addWidget(self._group(self.add_label, self.value_input, self.add_btn))
        row = QHBoxLayout()
        row.addWidget(self.remove_btn)
        row.addWidget(self.peek_btn)
        layout.addLayout(row)
        layout.addWidget(self.status_label)
        layout.addStretch(1)

        self._register(
            self.capacity_spin,
            self.create_btn,
            self.value_input,
            self.add_btn,
            self.remove_btn,
            self.peek_btn,
        )
        return container

    def _refresh_status(self):
        self.status_label.setText(f"Size: {self.model.size()} / {self.model.capacity()}")

    # ---------- Operations ----------

    def _add(self, value):
        raise NotImplementedError

    def _remove(self):
        raise NotImplementedError

    def _animate_remove(self, snapshot):
        raise NotImplementedError

    def _peek_index(self):
        raise NotImplementedError

    # ---------- UI handlers ----------

    def _on_create(self):
        capacity = self.capacity_spin.value()
        try:
            model = self.model_cls(capacity)
        except InvalidCapacityError as exc:
            self._reject(exc)
            return
        self.model = model
        logger.debug("Created %s with capacity %d", self.title, capacity)
        self.view.render(self.model.snapshot(), capacity)
        self._refresh_status()

    def _on_add(self):
        value = self._coerce_value(self.value_input.text())
        try:
            self._add(value)
        except CapacityExceededError as exc:
            self._reject(exc)
            return
        logger.debug("%s %r", self.add_label, value)
        self.view.animate_write(self.model.snapshot())
        self.value_input.clear()
        self._refresh_status()

    def _on_remove(self):
        try:
            value = self._remove()
        except EmptyContainerError as exc:
            self._reject(exc)
            return
        logger.debug("%s -> %r", self.remove_label, value)
        self._animate_remove(self.model.snapshot())
        self.status_label.setText(
            f"Size: {self.model.size()} / {self.model.capacity()} | {self.removed_verb} {value}"
        )

    def _on_peek(self):
        try:
            value = self.model.peek()
        except EmptyContainerError as exc:
            self._reject(exc)
            return
        self.view.highlight(self._peek_index())
        self.status_label.setText(
            f"Size: {self.model.size()} / {self.model.capacity()} | {self.marker} = {value}"
        )


class StaticStackController(BoundedController):
    title = "Static Stack"
    model_cls = StaticStack
    marker = "top"
    add_label = "Push"
    remove_label = "Pop"

    def _add(self, value):
        self.model.push(value)

    def _remove(self):
        return self.model.pop()

    def _animate_remove(self, snapshot):
        self.view.animate_remove_top(snapshot)

    def _peek_index(self):
        return self.model.size() - 1


class StaticQueueController(BoundedController):
    title = "Static Queue"
    model_cls = StaticQueue
    marker = "front"
    add_label = "Enqueue"
    remove_label = "Dequeue"
    removed_verb = "dequeued"

    def _add(self, value):
        self.model.enqueue(value)

    def _remove(self):
        return self.model.dequeue()

    def _animate_remove(self, snapshot):
        self.view.animate_remove_front(snapshot)

    def _peek_index(self):
        return 0
