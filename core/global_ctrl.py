from PyQt5.QtCore import QObject, pyqtSignal

MIN_SPEED = 0.5
MAX_SPEED = 3.0


def clamp_speed(value: float) -> float:
    return max(MIN_SPEED, min(MAX_SPEED, value))


class GlobalController(QObject):
    """
    Shared playback speed for every structure view. Views ask it to scale
    their base durations so one slider drives all animations.
    """

    speedChanged = pyqtSignal(float)

    def __init__(self, speed: float = 1.0):
        super().__init__()
        self._speed = clamp_speed(speed)

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.animation_speed)

    @property
    def speed(self) -> float:
        return self._speed

    def set_speed(self, value: float):
        value = clamp_speed(value)
        if abs(value - self._speed) > 1e-3:
            self._speed = value
            self.speedChanged.emit(self._speed)

    def scale_duration(self, base_ms: int) -> int:
        # faster playback means shorter animations
        return max(1, int(base_ms / self._speed))
