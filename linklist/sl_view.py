from PyQt5.QtCore import QLineF, QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QFont, QPen, QPolygonF
from PyQt5.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from core.base_view import BaseStructureView, FrameItem, ValueBoxItem

HIGHLIGHT_COLOR = QColor("#f0ad4e")


class LinkedListView(BaseStructureView):
    """Lays nodes out left to right with an arrow from each pointer box to its successor."""

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.nodes = {}  # id -> ListNodeItem
        self.order = []  # head -> tail
        self.frame = None
        self.origin = QPointF(0, 0)
        self.gap = 56
        self.render([])

    # ---------- Public API ----------

    def reset(self):
        self.render([])

    def render(self, snapshot):
        self.stop_animations()
        self.scene.clear()
        self.nodes.clear()
        self.order = [info["id"] for info in snapshot]

        self.frame = FrameItem()
        self.scene.addItem(self.frame)

        head_label = QGraphicsSimpleTextItem("head")
        head_label.setBrush(QBrush(QColor("#e0e0e0")))
        head_label.setPos(self.origin + QPointF(0, -36))
        self.scene.addItem(head_label)

        if not snapshot:
            empty = QGraphicsSimpleTextItem("NULL (empty list)")
            empty.setBrush(QBrush(QColor("#e0e0e0")))
            empty.setPos(self.origin)
            self.scene.addItem(empty)

        for index, info in enumerate(snapshot):
            node = ListNodeItem(info["id"], info["value"])
            node.setPos(self._slot_position(index))
            node.set_tail(index == len(snapshot) - 1)
            self.scene.addItem(node)
            self.nodes[info["id"]] = node

        for index in range(len(snapshot) - 1):
            self._add_arrow(self.nodes[self.order[index]], self.nodes[self.order[index + 1]])

        self._update_frame()
        self.fit_view()

    def animate_insert(self, snapshot, inserted_id):
        self.render(snapshot)
        node = self.nodes.get(inserted_id)
        if node is None:
            return
        target = node.pos()
        node.setPos(target + QPointF(0, -90))
        node.setOpacity(0.0)
        drop = self.anim.move_item(node, target, duration=520)
        fade = self.anim.fade_item(node, 0.0, 1.0, duration=520)
        self._track_animation(self.anim.parallel(drop, fade))

    def animate_delete(self, snapshot, removed_id):
        node = self.nodes.get(removed_id)
        if node is None:
            self.render(snapshot)
            return
        lift = self.anim.move_item(node, node.pos() + QPointF(0, 90), duration=420)
        fade = self.anim.fade_item(node, 1.0, 0.0, duration=420)
        self._track_animation(
            self.anim.parallel(lift, fade), finalizer=lambda: self.render(snapshot)
        )

    def animate_replace(self, snapshot):
        """Used after a copy: every node is new, so every node fades in."""
        self.render(snapshot)
        fades = [self.anim.fade_item(node, 0.0, 1.0, duration=600) for node in self.nodes.values()]
        for node in self.nodes.values():
            node.setOpacity(0.0)
        if fades:
            self._track_animation(self.anim.parallel(*fades))

    def highlight(self, index):
        if index < 0 or index >= len(self.order):
            return
        node = self.nodes[self.order[index]]
        flash = self.anim.flash_color(node.setFillColor, node.fillColor, HIGHLIGHT_COLOR, duration=320)
        self._track_animation(flash)

    def flash_rejected(self, item=None):
        super().flash_rejected(item or self.frame)

    # ---------- Helpers ----------

    def _slot_position(self, index):
        return self.origin + QPointF(index * (ListNodeItem.total_width + self.gap), 0)

    def _add_arrow(self, start_node, end_node):
        start = start_node.pos() + start_node.pointer_center()
        end = end_node.pos() + QPointF(0, ListNodeItem.height / 2)
        arrow = ArrowItem(QLineF(start, end))
        self.scene.addItem(arrow)

    def _update_frame(self):
        count = max(1, len(self.order))
        width = count * ListNodeItem.total_width + (count - 1) * self.gap
        rect = QRectF(self.origin, QPointF(self.origin.x() + width, ListNodeItem.height))
        self.frame.set_rect(rect.adjusted(-16, -16, 16, 16))


class ListNodeItem(ValueBoxItem):
    width = 84
    pointer_width = 36
    total_width = width + pointer_width
    height = 50

    def __init__(self, node_id, value):
        super().__init__(value)
        self.node_id = node_id
        self._is_tail = False
        self.setCacheMode(QGraphicsItem.NoCache)

    def boundingRect(self):
        return QRectF(0, 0, self.total_width, self.height)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.strokeColor, 2.2))
        painter.setBrush(QBrush(self.fillColor))
        painter.drawRect(self.boundingRect())
        painter.drawLine(QPointF(self.width, 1.0), QPointF(self.width, self.height - 1.0))

        font = painter.font()
        font.setPointSize(12)
        painter.setFont(font)
        painter.setPen(self.textColor)
        painter.drawText(QRectF(0, 0, self.width, self.height), Qt.AlignCenter, self._value)

        if self._is_tail:
            tail_font = QFont(font)
            tail_font.setPointSize(7)
            tail_font.setBold(True)
            painter.setFont(tail_font)
            painter.setPen(self.strokeColor)
            painter.drawText(self._pointer_rect(), Qt.AlignCenter, "NULL")
        else:
            painter.setBrush(QBrush(self.strokeColor))
            painter.drawEllipse(self.pointer_center(), 4, 4)

    def set_tail(self, is_tail: bool):
        self._is_tail = is_tail
        self.update()

    def _pointer_rect(self):
        return QRectF(self.width, 0, self.pointer_width, self.height)

    def pointer_center(self):
        return self._pointer_rect().center()


class ArrowItem(QGraphicsItem):
    head_size = 9

    def __init__(self, line: QLineF):
        super().__init__()
        self.line = line
        self.color = QColor("#c8c8d0")
        self.setZValue(1)

    def boundingRect(self):
        pad = self.head_size + 2
        return QRectF(self.line.p1(), self.line.p2()).normalized().adjusted(-pad, -pad, pad, pad)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.color, 2))
        painter.drawLine(self.line)

        # arrow head at p2, pointing along the line
        unit = self.line.unitVector()
        dx = unit.dx() * self.head_size
        dy = unit.dy() * self.head_size
        tip = self.line.p2()
        back = QPointF(tip.x() - dx, tip.y() - dy)
        left = QPointF(back.x() - dy / 2, back.y() + dx / 2)
        right = QPointF(back.x() + dy / 2, back.y() - dx / 2)
        painter.setBrush(QBrush(self.color))
        painter.drawPolygon(QPolygonF([tip, left, right]))
