import logging
import os
from dataclasses import dataclass

import dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "DS_LESSONS_"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    animation_speed: float = 1.0

    @classmethod
    def from_environment(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from `DS_LESSONS_*` variables, reading the nearest `.env` first."""
        if load_env_file:
            dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

        log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning("Unknown log level %r, using %s", log_level, cls.log_level)
            log_level = cls.log_level

        raw_speed = os.environ.get(f"{ENV_PREFIX}ANIMATION_SPEED")
        animation_speed = cls.animation_speed
        if raw_speed:
            try:
                animation_speed = float(raw_speed)
            except ValueError:
                logger.warning(
                    "Invalid animation speed %r, using %.1f", raw_speed, cls.animation_speed
                )

        return cls(log_level=log_level, animation_speed=animation_speed)
