from PyQt5.QtCore import (
    QEasingCurve,
    QParallelAnimationGroup,
    QPropertyAnimation,
    QSequentialAnimationGroup,
    QVariantAnimation,
)
from PyQt5.QtGui import QColor


class AnimationToolkit:
    """
    Builds the few animations the structure views use, always scaled by the
    global playback speed.
    """

    def __init__(self, global_ctrl):
        self.global_ctrl = global_ctrl

    def _timed(self, anim, duration, easing, start=None, end=None):
        anim.setDuration(self.global_ctrl.scale_duration(duration))
        anim.setEasingCurve(easing)
        if start is not None:
            anim.setStartValue(start)
        if end is not None:
            anim.setEndValue(end)
        return anim

    def move_item(self, item, end_pos, duration=500):
        """Slide from the item's current position; the start is read when the animation runs."""
        return self._timed(
            QPropertyAnimation(item, b"pos"), duration, QEasingCurve.InOutCubic, end=end_pos
        )

    def fade_item(self, item, start=0.0, end=1.0, duration=400):
        return self._timed(
            QPropertyAnimation(item, b"opacity"), duration, QEasingCurve.InOutQuad, start, end
        )

    def flash_color(self, setter, base_color, flash_color, duration=260):
        """
        Goes base -> flash -> base once. `setter` receives each QColor
        (e.g. item.setFillColor).
        """
        base_color = QColor(base_color)
        flash_color = QColor(flash_color)

        def _step(start, end):
            anim = self._timed(QVariantAnimation(), duration, QEasingCurve.InOutQuad, start, end)
            anim.valueChanged.connect(
                lambda value: setter(value) if isinstance(value, QColor) else None
            )
            return anim

        return self.sequential(_step(base_color, flash_color), _step(flash_color, base_color))

    # ---------- Grouping ----------

    @staticmethod
    def _grouped(group, animations):
        # None entries stand for steps that have nothing to animate
        for anim in animations:
            if anim is not None:
                group.addAnimation(anim)
        return group

    @classmethod
    def parallel(cls, *animations):
        return cls._grouped(QParallelAnimationGroup(), animations)

    @classmethod
    def sequential(cls, *animations):
        return cls._grouped(QSequentialAnimationGroup(), animations)
