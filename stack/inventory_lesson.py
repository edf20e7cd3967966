import logging
import sys
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from rich.console import Console

from core.console import default_console, parse_count, request_input, wait_for_enter
from core.errors import EmptyContainerError
from core.lesson import run_lesson
from stack.st_model import DynamicStack

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
SEPARATOR = "--------------------"


@dataclass
class InventoryItem:
    """A part stored in the inventory bin."""

    serial_number: int = 0
    lot_number: int = 0
    manufacture_date: date = field(default_factory=lambda: date(1970, 1, 1))

    def describe(self) -> str:
        return (
            f"Serial number: {self.serial_number}\n"
            f"Lot number: {self.lot_number}\n"
            f"Manufacture date: {self.manufacture_date.strftime(DATE_FORMAT)}"
        )


def parse_manufacture_date(text: str) -> date:
    return datetime.strptime(text.strip(), DATE_FORMAT).date()


parse_manufacture_date.kind = "date (use YYYY-MM-DD)"


def add_item_menu(stack: DynamicStack[InventoryItem], console: Console):
    console.print("========== ADD PART ==========")
    console.print()

    item = InventoryItem()
    item.serial_number = request_input(
        "What is the part's serial number? ", parse_count, console=console
    )
    item.lot_number = request_input("What is the part's lot number? ", parse_count, console=console)
    item.manufacture_date = request_input(
        "What is the part's manufacture date? (Use YYYY-MM-DD format) ",
        parse_manufacture_date,
        console=console,
    )

    stack.push(item)
    logger.debug("Added part %s", item.serial_number)


def take_item_menu(stack: DynamicStack[InventoryItem], console: Console):
    console.print("========== TAKE ITEM =========")
    console.print()
    try:
        item = stack.pop()
    except EmptyContainerError:
        console.print("There are no items to take.")
        logger.info("Take requested on an empty bin")
    else:
        console.print("You've taken the following item:")
        console.print(item.describe(), markup=False)

    wait_for_enter(console)


def print_remaining(stack: DynamicStack[InventoryItem], console: Console):
    if stack.is_empty():
        console.print("You had no items remaining in the inventory stack.")
        return

    console.print("You had the following items remaining in the inventory stack:")
    console.print()
    first = True
    while not stack.is_empty():
        if not first:
            console.print(SEPARATOR)
        first = False
        console.print(stack.pop().describe(), markup=False)


def run(console: Optional[Console] = None):
    if console is None:
        console = default_console
    stack: DynamicStack[InventoryItem] = DynamicStack()
    message = ""

    while True:
        if message:
            console.print(message, markup=False)
            console.print()
            message = ""

        console.print("[A]dd an item | [T]ake an item | [E]xit", markup=False)
        original_choice = request_input("", console=console)
        choice = original_choice.strip().lower()

        if choice == "a":
            add_item_menu(stack, console)
        elif choice == "t":
            take_item_menu(stack, console)
        elif choice == "e":
            break
        else:
            message = f'"{original_choice}" is not a valid option.'

    print_remaining(stack, console)


def main() -> int:
    return run_lesson(run)


if __name__ == "__main__":
    sys.exit(main())
