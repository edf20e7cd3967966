from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter, QWheelEvent
from PyQt5.QtWidgets import QGraphicsView


class CustomGraphicsView(QGraphicsView):
    """
    Canvas shared by every structure view:
    - normal wheel: horizontal panning (the structures grow sideways)
    - Ctrl + wheel: zoom by 1.1, kept between min_zoom and max_zoom
    """

    min_zoom = 0.2
    max_zoom = 4.0

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

    def wheelEvent(self, event: QWheelEvent):
        angle = event.angleDelta().y()
        if event.modifiers() & Qt.ControlModifier:
            factor = 1.1 if angle > 0 else (1 / 1.1)
            zoom = self.transform().m11() * factor
            if self.min_zoom <= zoom <= self.max_zoom:
                self.scale(factor, factor)
        else:
            bar = self.horizontalScrollBar()
            bar.setValue(bar.value() - angle // 2)
        event.accept()
