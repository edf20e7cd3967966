import logging
from typing import Callable, Optional

from rich.console import Console

from arrayviz.arr_model import FixedArray, StaticQueue, StaticStack
from core.console import default_console, parse_count, parse_int, request_continue, request_input
from core.errors import InvalidCapacityError
from core.lesson import run_lesson

logger = logging.getLogger(__name__)


def create_with_capacity(factory: Callable[[int], FixedArray], noun: str, console: Console):
    """Ask for a capacity until `factory` accepts it."""
    while True:
        capacity = request_input(
            f"How many items would you like to put {noun}? ", parse_count, console=console
        )
        try:
            return factory(capacity)
        except InvalidCapacityError as exc:
            logger.info("Rejected capacity %d", capacity)
            console.print(f"{capacity} is not a valid capacity: {exc}.")
            console.print()


def fill(add: Callable[[int], None], capacity: int, console: Console):
    for item_number in range(1, capacity + 1):
        value = request_input(
            f"What value would you like for item #{item_number}? ", parse_int, console=console
        )
        add(value)


def run_static_stack(console: Optional[Console] = None):
    if console is None:
        console = default_console
    while True:
        stack = create_with_capacity(StaticStack, "on the stack", console)
        fill(stack.push, stack.capacity(), console)

        console.print()
        console.print("Unwinding your stack:")
        while not stack.is_empty():
            position = stack.size()
            console.print(f"[{position}]: {stack.pop()}", markup=False)
        console.print()

        if not request_continue(console=console):
            return


def run_static_queue(console: Optional[Console] = None):
    if console is None:
        console = default_console
    while True:
        queue = create_with_capacity(StaticQueue, "in the queue", console)
        fill(queue.enqueue, queue.capacity(), console)

        console.print()
        console.print("Replaying your queue:")
        for position in range(1, queue.capacity() + 1):
            console.print(f"[{position}]: {queue.dequeue()}", markup=False)
        console.print()

        if not request_continue(console=console):
            return


def main_stack() -> int:
    return run_lesson(run_static_stack)


def main_queue() -> int:
    return run_lesson(run_static_queue)

