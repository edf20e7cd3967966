from PyQt5.QtCore import QObject, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPen
from PyQt5.QtWidgets import QGraphicsItem, QGraphicsObject, QGraphicsScene

from core.animation import AnimationToolkit

REJECT_COLOR = QColor("#d9534f")


class BaseStructureView(QObject):
    """
    Base class for structure-specific views, providing:
    - shared QGraphicsScene
    - animation helper + lifecycle management
    - interaction locking to keep controllers in sync
    """

    interactionLocked = pyqtSignal(bool)

    def __init__(self, global_ctrl):
        super().__init__()
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(-200, -200, 1200, 800)
        self.anim = AnimationToolkit(global_ctrl)
        self._locked = False
        self._running = []
        self._flashes = []
        self._canvas = None

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.resetTransform()
            self.fit_view()

    def fit_view(self, padding=80):
        if not self._canvas:
            return
        items_rect = self.scene.itemsBoundingRect()
        if items_rect.isNull():
            return
        target = QRectF(items_rect).adjusted(-padding, -padding, padding, padding)
        self.scene.setSceneRect(target)
        self._canvas.fitInView(target, Qt.KeepAspectRatio)

    def lock_interactions(self):
        if not self._locked:
            self._locked = True
            self.interactionLocked.emit(True)

    def unlock_interactions(self):
        if self._locked:
            self._locked = False
            self.interactionLocked.emit(False)

    def _track_animation(self, animation, finalizer=None):
        """
        Keeps references so that animations are not garbage collected.
        Optionally runs a callback after completion, or when the animation
        is cut short by `stop_animations`.
        """
        if animation is None:
            if finalizer:
                finalizer()
            return

        self.lock_interactions()
        entry = (animation, finalizer)
        self._running.append(entry)

        def _cleanup():
            if entry not in self._running:
                return
            self._running.remove(entry)
            if finalizer:
                finalizer()
            if not self._running:
                self.unlock_interactions()

        animation.finished.connect(_cleanup)
        animation.start()

    def stop_animations(self):
        # stop() does not emit finished; pending finalizers still have to bring
        # the scene in line with the model, oldest first
        running, self._running = self._running, []
        flashes, self._flashes = self._flashes, []
        for animation in flashes:
            animation.stop()
        for animation, _ in running:
            animation.stop()
        for _, finalizer in running:
            if finalizer:
                finalizer()
        self.unlock_interactions()

    def flash_rejected(self, item):
        """Flash `item`'s outline red to show that an operation was refused."""
        if item is None:
            return
        base = QColor(item.strokeColor)
        flash = self.anim.flash_color(item.setStrokeColor, base, REJECT_COLOR)
        self._flashes.append(flash)
        flash.finished.connect(lambda: self._flashes.remove(flash))
        flash.start()


class ValueBoxItem(QGraphicsObject):
    """Rectangle with a centered value, the common building block of every view."""

    width = 96
    height = 56

    def __init__(self, value, fill="#e9e9ef"):
        super().__init__()
        self._value = str(value)
        self.fillColor = QColor(fill)
        self.strokeColor = QColor("#4a4a52")
        self.textColor = QColor("#1f1f24")
        self.setZValue(2)
        self.setCacheMode(QGraphicsItem.DeviceCoordinateCache)

    def boundingRect(self):
        return QRectF(0, 0, self.width, self.height)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.strokeColor, 2))
        painter.setBrush(QBrush(self.fillColor))
        painter.drawRect(self.boundingRect())

        font = painter.font()
        font.setPointSize(13)
        painter.setFont(font)
        painter.setPen(self.textColor)
        painter.drawText(self.boundingRect(), Qt.AlignCenter, self._value)

    def value(self):
        return self._value

    def set_value(self, value):
        self._value = str(value)
        self.update()

    def setFillColor(self, color):
        self.fillColor = QColor(color)
        self.update()

    def setStrokeColor(self, color):
        self.strokeColor = QColor(color)
        self.update()


class FrameItem(QGraphicsObject):
    """Outline drawn around a structure; it is what flashes on a rejected operation."""

    def __init__(self):
        super().__init__()
        self._rect = QRectF()
        self.strokeColor = QColor("#74828a")
        self.setZValue(0)

    def set_rect(self, rect: QRectF):
        self.prepareGeometryChange()
        self._rect = QRectF(rect)
        self.update()

    def boundingRect(self):
        return self._rect.adjusted(-2, -2, 2, 2)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.strokeColor, 2.4, Qt.DashLine))
        painter.setBrush(Qt.NoBrush)
        painter.drawRoundedRect(self._rect, 8, 8)

    def setStrokeColor(self, color):
        self.strokeColor = QColor(color)
        self.update()
