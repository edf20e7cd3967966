import logging
import sys
from typing import Optional

from rich.console import Console

from core.console import default_console, parse_int, request_continue, request_input
from core.lesson import run_lesson
from stack.st_model import DynamicStack

logger = logging.getLogger(__name__)

STOP_VALUE = -1


def unwind(stack, console: Console, title: str = "Unwinding your stack:"):
    """Pop everything, printing `[n]: value` with n counting down to 1."""
    console.print()
    console.print(title)
    position = stack.size()
    while not stack.is_empty():
        console.print(f"[{position}]: {stack.pop()}", markup=False)
        position -= 1
    console.print()


def run(console: Optional[Console] = None):
    if console is None:
        console = default_console
    while True:
        stack: DynamicStack[int] = DynamicStack()

        item_number = 1
        while True:
            value = request_input(
                f"What value would you like for item #{item_number}? "
                f"(Enter {STOP_VALUE} to stop entering values) ",
                parse_int,
                console=console,
            )
            if value == STOP_VALUE:
                break
            stack.push(value)
            item_number += 1

        logger.debug("Collected %d values", stack.size())
        unwind(stack, console)

        if not request_continue(console=console):
            return


def main() -> int:
    return run_lesson(run)


if __name__ == "__main__":
    sys.exit(main())
