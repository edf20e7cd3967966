import logging

from PyQt5.QtWidgets import (
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QWidget,
)

from core.base_ctrl import StructureController
from core.errors import OutOfRangeError
from core.global_ctrl import GlobalController
from linklist.sl_model import LinkedList
from linklist.sl_view import LinkedListView

logger = logging.getLogger(__name__)


class LinkedListController(StructureController):
    """
    Controller builds the operation panel and wires UI events -> model -> view.
    """

    title = "Linked List"

    def __init__(self, global_ctrl: GlobalController):
        super().__init__(LinkedListView(global_ctrl))
        self.model = LinkedList()
        self._refresh_status()

    # ---------- Panel UI ----------

    def _build_panel(self):
        self.append_edit = QLineEdit()
        self.append_edit.setPlaceholderText("Value")
        self.insert_index_spin = QSpinBox()
        self.insert_value_edit = QLineEdit()
        self.insert_value_edit.setPlaceholderText("Value")
        self.delete_index_spin = QSpinBox()
        self.get_index_spin = QSpinBox()

        # the spins allow any non-negative index; the model decides what is valid
        for spin in (self.insert_index_spin, self.delete_index_spin, self.get_index_spin):
            spin.setRange(0, 9999)

        self.append_btn = QPushButton("Append")
        self.append_btn.clicked.connect(self._on_append)
        self.insert_btn = QPushButton("Insert")
        self.insert_btn.clicked.connect(self._on_insert)
        self.delete_btn = QPushButton("Delete")
        self.delete_btn.clicked.connect(self._on_delete)
        self.get_btn = QPushButton("Get")
        self.get_btn.clicked.connect(self._on_get)
        self.copy_btn = QPushButton("Copy")
        self.copy_btn.clicked.connect(self._on_copy)
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self._on_clear)

        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)

        layout.addWidget(self._group("Append Tail", self.append_edit, self.append_btn), 0, 0)
        layout.addWidget(
            self._form_group(
                "Insert Before",
                ("Index:", self.insert_index_spin),
                ("Value:", self.insert_value_edit),
                self.insert_btn,
            ),
            1,
            0,
        )
        layout.addWidget(
            self._form_group("Delete At", ("Index:", self.delete_index_spin), self.delete_btn), 0, 1
        )
        layout.addWidget(
            self._form_group("Get At", ("Index:", self.get_index_spin), self.get_btn), 1, 1
        )
        layout.addWidget(self._group("Copy / Clear", self.copy_btn, self.clear_btn), 2, 0)
        layout.addWidget(self.status_label, 2, 1)
        layout.setRowStretch(3, 1)

        self._register(
            self.append_edit,
            self.append_btn,
            self.insert_index_spin,
            self.insert_value_edit,
            self.insert_btn,
            self.delete_index_spin,
            self.delete_btn,
            self.get_index_spin,
            self.get_btn,
            self.copy_btn,
            self.clear_btn,
        )
        return container

    @staticmethod
    def _form_group(title, *rows):
        group = QGroupBox(title)
        group.setStyleSheet("QGroupBox { color: white; }")
        form = QFormLayout()
        form.setContentsMargins(12, 8, 12, 12)
        form.setSpacing(6)
        for row in rows:
            if isinstance(row, tuple):
                form.addRow(*row)
            else:
                form.addRow(row)
        group.setLayout(form)
        return group

    def _refresh_status(self):
        length = self.model.length()
        self.status_label.setText(f"Length: {length}")

    # ---------- UI handlers ----------

    def _on_append(self):
        value = self._coerce_value(self.append_edit.text())
        node_id = self.model.append(value)
        logger.debug("Appended %r", value)
        self.view.animate_insert(self.model.snapshot(), node_id)
        self.append_edit.clear()
        self._refresh_status()

    def _on_insert(self):
        index = self.insert_index_spin.value()
        value = self._coerce_value(self.insert_value_edit.text())
        try:
            node_id = self.model.insert(index, value)
        except OutOfRangeError as exc:
            self._reject(exc)
            return
        logger.debug("Inserted %r before index %d", value, index)
        self.view.animate_insert(self.model.snapshot(), node_id)
        self.insert_value_edit.clear()
        self._refresh_status()

    def _on_delete(self):
        index = self.delete_index_spin.value()
        snapshot = self.model.snapshot()
        try:
            removed = self.model.delete(index)
        except OutOfRangeError as exc:
            self._reject(exc)
            return
        logger.debug("Deleted %r at index %d", removed, index)
        self.view.animate_delete(self.model.snapshot(), snapshot[index]["id"])
        self._refresh_status()

    def _on_get(self):
        index = self.get_index_spin.value()
        try:
            value = self.model.get(index)
        except OutOfRangeError as exc:
            self._reject(exc)
            return
        logger.debug("Get(%d) -> %r", index, value)
        self.view.highlight(index)
        self.status_label.setText(f"Length: {self.model.length()} | [{index}] = {value}")

    def _on_copy(self):
        copied = self.model.clone()
        self.model.clear()
        self.model = copied
        logger.debug("Replaced the list with its copy")
        self.view.animate_replace(self.model.snapshot())
        self._refresh_status()

    def _on_clear(self):
        self.model.clear()
        self.view.reset()
        self._refresh_status()
