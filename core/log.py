import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING, console: Optional[Console] = None):
    """Route every logger through a single RichHandler.

    Args:
        level: Root log level, as a number or a level name.
        console: Console the handler writes to (stderr when omitted).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    # named loggers may be opened up for the GUI log pane; the terminal keeps this level
    handler.setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
    )
