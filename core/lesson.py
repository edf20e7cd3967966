import logging
from typing import Callable

from rich.console import Console

from core.console import default_console
from core.log import setup_logging
from core.settings import Settings

logger = logging.getLogger(__name__)


def run_lesson(run: Callable[[Console], None]) -> int:
    """Console-script wrapper: configure logging, run the lesson, map Ctrl-C to 130."""
    settings = Settings.from_environment()
    setup_logging(settings.log_level)
    logger.debug("Starting %s", run.__module__)
    try:
        run(default_console)
    except (KeyboardInterrupt, EOFError):
        default_console.print()
        return 130
    return 0
