from PyQt5.QtCore import QPointF, QRectF
from PyQt5.QtGui import QBrush, QColor
from PyQt5.QtWidgets import QGraphicsSimpleTextItem

from core.base_view import BaseStructureView, FrameItem, ValueBoxItem

PEEK_COLOR = QColor("#5bc0de")


class StackView(BaseStructureView):
    """Visualizes stack nodes bottom-up and keeps a row of popped values."""

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.nodes = {}  # id -> StackNodeItem
        self.order = []  # bottom -> top
        self.popped_values = []
        self.frame = None
        self.base_pos = QPointF(-StackNodeItem.width / 2, 140)
        self.spacing = StackNodeItem.height + 6
        self.pop_line_limit = 16
        self.render([])

    def reset(self):
        self.popped_values.clear()
        self.render([])

    def render(self, snapshot):
        self.stop_animations()
        self.scene.clear()
        self.nodes.clear()
        self.order = [info["id"] for info in snapshot]

        self.frame = FrameItem()
        self.scene.addItem(self.frame)

        for index, info in enumerate(snapshot):
            node = StackNodeItem(info["id"], info["value"])
            node.setPos(self._slot_position(index))
            self.scene.addItem(node)
            self.nodes[info["id"]] = node

        top_label = QGraphicsSimpleTextItem("top" if snapshot else "empty")
        top_label.setBrush(QBrush(QColor("#e0e0e0")))
        top_index = max(0, len(snapshot) - 1)
        label_pos = self._slot_position(top_index) + QPointF(StackNodeItem.width + 14, 18)
        top_label.setPos(label_pos)
        self.scene.addItem(top_label)

        output = QGraphicsSimpleTextItem(self._output_text())
        output.setBrush(QBrush(QColor("#e0e0e0")))
        output.setPos(self.base_pos + QPointF(0, StackNodeItem.height + 40))
        self.scene.addItem(output)

        self._update_frame(len(snapshot))
        self.fit_view()

    def animate_push(self, snapshot, pushed_info):
        self.render(snapshot)
        node = self.nodes.get(pushed_info["id"])
        if node is None:
            return
        target = node.pos()
        node.setPos(target + QPointF(0, -120))
        node.setOpacity(0.0)
        drop = self.anim.move_item(node, target, duration=540)
        fade = self.anim.fade_item(node, 0.0, 1.0, duration=540)
        self._track_animation(self.anim.parallel(drop, fade))

    def animate_pop(self, snapshot, popped_info):
        node = self.nodes.get(popped_info["id"])

        def _finalizer():
            self.popped_values.append(popped_info["value"])
            self.render(snapshot)

        if node is None:
            _finalizer()
            return
        lift = self.anim.move_item(node, node.pos() + QPointF(0, -120), duration=420)
        fade = self.anim.fade_item(node, 1.0, 0.0, duration=420)
        self._track_animation(self.anim.parallel(lift, fade), finalizer=_finalizer)

    def highlight_top(self):
        if not self.order:
            return
        node = self.nodes[self.order[-1]]
        self._track_animation(
            self.anim.flash_color(node.setFillColor, node.fillColor, PEEK_COLOR, duration=320)
        )

    def flash_rejected(self, item=None):
        super().flash_rejected(item or self.frame)

    def _slot_position(self, index):
        return self.base_pos - QPointF(0, index * self.spacing)

    def _output_text(self):
        if not self.popped_values:
            return "Popped: (none)"
        shown = self.popped_values[-self.pop_line_limit:]
        prefix = "… " if len(self.popped_values) > self.pop_line_limit else ""
        return "Popped: " + prefix + ", ".join(str(value) for value in shown)

    def _update_frame(self, count):
        height = max(1, count) * self.spacing
        top = self.base_pos.y() + StackNodeItem.height - height
        rect = QRectF(self.base_pos.x(), top, StackNodeItem.width, height)
        self.frame.set_rect(rect.adjusted(-10, -10, 10, 10))


class StackNodeItem(ValueBoxItem):
    width = 120
    height = 44

    def __init__(self, node_id, value):
        super().__init__(value, fill="#b8d6c4")
        self.node_id = node_id
