from PyQt5.QtCore import QPointF, QRectF
from PyQt5.QtGui import QBrush, QColor, QPen
from PyQt5.QtWidgets import QGraphicsObject, QGraphicsSimpleTextItem

from core.base_view import BaseStructureView, FrameItem, ValueBoxItem

PEEK_COLOR = QColor("#5bc0de")


class BoundedArrayView(BaseStructureView):
    """
    Draws every slot of a fixed buffer, occupied or not, with the cells for
    positions `[0, size)` on top. `marker` names the active end ("top" for a
    stack, "front" for a queue).
    """

    def __init__(self, global_ctrl, marker="top"):
        super().__init__(global_ctrl)
        self.marker = marker
        self.capacity = 0
        self.cells = []
        self.frame = None
        self.base_origin = QPointF(-360, -ArrayCellItem.height / 2)
        self.render([], 0)

    def reset(self):
        self.render([], 0)

    def render(self, snapshot, capacity=None):
        if capacity is not None:
            self.capacity = capacity
        self.stop_animations()
        self.scene.clear()
        self.cells = []

        self.frame = FrameItem()
        self.scene.addItem(self.frame)

        if self.capacity == 0:
            hint = QGraphicsSimpleTextItem("Create a buffer to start")
            hint.setBrush(QBrush(QColor("#e0e0e0")))
            hint.setPos(self.base_origin)
            self.scene.addItem(hint)

        for index in range(self.capacity):
            slot = ArraySlotItem()
            slot.setPos(self._slot_position(index))
            self.scene.addItem(slot)

            label = QGraphicsSimpleTextItem(str(index))
            label.setBrush(QBrush(QColor("#9aa3a8")))
            label.setPos(self._slot_position(index) + QPointF(ArrayCellItem.width / 2 - 4, ArrayCellItem.height + 6))
            self.scene.addItem(label)

        for info in snapshot:
            cell = ArrayCellItem(info["value"])
            cell.setPos(self._slot_position(info["index"]))
            self.scene.addItem(cell)
            self.cells.append(cell)

        if snapshot:
            marker_index = len(snapshot) - 1 if self.marker == "top" else 0
            marker = QGraphicsSimpleTextItem(self.marker)
            marker.setBrush(QBrush(QColor("#e0e0e0")))
            marker.setPos(self._slot_position(marker_index) + QPointF(ArrayCellItem.width / 2 - 10, -26))
            self.scene.addItem(marker)

        self._update_frame()
        self.fit_view()

    def animate_write(self, snapshot):
        """New value landed in slot `size - 1`."""
        self.render(snapshot)
        if not self.cells:
            return
        cell = self.cells[-1]
        target = cell.pos()
        cell.setPos(target + QPointF(0, -90))
        cell.setOpacity(0.0)
        self._track_animation(
            self.anim.parallel(
                self.anim.move_item(cell, target, duration=480),
                self.anim.fade_item(cell, 0.0, 1.0, duration=480),
            )
        )

    def animate_remove_top(self, snapshot):
        if not self.cells:
            self.render(snapshot)
            return
        cell = self.cells[-1]
        self._track_animation(
            self.anim.parallel(
                self.anim.move_item(cell, cell.pos() + QPointF(0, -90), duration=420),
                self.anim.fade_item(cell, 1.0, 0.0, duration=420),
            ),
            finalizer=lambda: self.render(snapshot),
        )

    def animate_remove_front(self, snapshot):
        """Front leaves, then every remaining cell shifts one slot to the left."""
        if not self.cells:
            self.render(snapshot)
            return
        front = self.cells[0]
        leave = self.anim.parallel(
            self.anim.move_item(front, front.pos() + QPointF(-60, -90), duration=380),
            self.anim.fade_item(front, 1.0, 0.0, duration=380),
        )
        shifts = [
            self.anim.move_item(cell, self._slot_position(index), duration=360)
            for index, cell in enumerate(self.cells[1:])
        ]
        self._track_animation(
            self.anim.sequential(leave, self.anim.parallel(*shifts) if shifts else None),
            finalizer=lambda: self.render(snapshot),
        )

    def highlight(self, index):
        if index < 0 or index >= len(self.cells):
            return
        cell = self.cells[index]
        self._track_animation(
            self.anim.flash_color(cell.setFillColor, cell.fillColor, PEEK_COLOR, duration=320)
        )

    def flash_rejected(self, item=None):
        super().flash_rejected(item or self.frame)

    def _slot_position(self, index: int) -> QPointF:
        return self.base_origin + QPointF(index * ArrayCellItem.width, 0)

    def _update_frame(self):
        width = max(1, self.capacity) * ArrayCellItem.width
        rect = QRectF(self.base_origin.x(), self.base_origin.y(), width, ArrayCellItem.height)
        self.frame.set_rect(rect.adjusted(-12, -36, 12, 30))


class ArrayCellItem(ValueBoxItem):
    width = 96
    height = 64

    def __init__(self, value):
        super().__init__(value, fill="#b8b8d6")


class ArraySlotItem(QGraphicsObject):
    width = ArrayCellItem.width
    height = ArrayCellItem.height

    def __init__(self):
        super().__init__()
        self.fillColor = QColor("#f6f6fd")
        self.strokeColor = QColor("#74828a")
        self.setZValue(1)

    def boundingRect(self):
        return QRectF(0, 0, self.width, self.height)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.strokeColor, 1.6))
        painter.setBrush(QBrush(self.fillColor))
        painter.drawRect(self.boundingRect())
