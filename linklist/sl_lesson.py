import logging
import sys
from typing import Optional

from rich.console import Console

from core.console import default_console, parse_count, parse_int, request_continue, request_input
from core.lesson import run_lesson
from linklist.sl_model import LinkedList

logger = logging.getLogger(__name__)

MENU_CHOICES = ("a", "i", "d", "c", "q")


def print_list(linked_list: LinkedList[int], console: Console):
    console.print("== List ==")
    empty = True
    for index, value in linked_list.items():
        empty = False
        console.print(f"[{index}] {value}", markup=False)
    if empty:
        console.print("The list is empty.")
    console.print()


def _validate_menu_choice(choice: str, console: Console) -> bool:
    if choice not in MENU_CHOICES:
        console.print("Your choice must be a, i, d, c, or q.")
        console.print()
        return False
    return True


def _request_index(prompt: str, upper_bound: int, console: Console) -> int:
    """Ask until the index is at most `upper_bound`."""

    def _validate(index):
        if index > upper_bound:
            console.print(f"{index} is not a valid index.")
            console.print()
            return False
        return True

    return request_input(prompt, parse_count, _validate, console)


def prompt_append(linked_list: LinkedList[int], console: Console):
    value = request_input("What number would you like to append? ", parse_int, console=console)
    linked_list.append(value)
    logger.debug("Appended %s", value)


def prompt_insert(linked_list: LinkedList[int], console: Console):
    index = _request_index(
        "Before what index would you like to insert your number? ",
        linked_list.length(),
        console,
    )
    value = request_input("What number would you like to insert? ", parse_int, console=console)
    linked_list.insert(index, value)
    logger.debug("Inserted %s at %d", value, index)


def prompt_delete(linked_list: LinkedList[int], console: Console):
    length = linked_list.length()
    if length == 0:
        console.print("The list is empty; there is nothing to delete.")
        console.print()
        return
    index = _request_index("What index would you like to delete? ", length - 1, console)
    removed = linked_list.delete(index)
    logger.debug("Deleted %s from %d", removed, index)


def run(console: Optional[Console] = None):
    if console is None:
        console = default_console
    while True:
        linked_list: LinkedList[int] = LinkedList()

        while True:
            print_list(linked_list, console)
            console.print("Options:")
            for key, label in zip(MENU_CHOICES, ("Append", "Insert", "Delete", "Copy", "Quit")):
                console.print(f"[{key}] {label}", markup=False)
            console.print()

            choice = request_input(
                "What would you like to do? ",
                lambda text: text.strip().lower(),
                lambda text: _validate_menu_choice(text, console),
                console,
            )

            if choice == "a":
                prompt_append(linked_list, console)
            elif choice == "i":
                prompt_insert(linked_list, console)
            elif choice == "d":
                prompt_delete(linked_list, console)
            elif choice == "c":
                # keep working on the copy; the original is released
                copied = linked_list.clone()
                linked_list.clear()
                linked_list = copied
                logger.debug("Replaced list with its copy (%d items)", len(copied))
            else:
                break

        if not request_continue(console=console):
            return


def main() -> int:
    return run_lesson(run)


if __name__ == "__main__":
    sys.exit(main())
