"""
Interactive prompt primitives shared by the console lessons.

`request_input` asks for a value, converts it and keeps asking until the
conversion and the optional validator both accept it. `request_continue` is
the "run again?" question every lesson ends with.
"""

from typing import Callable, Optional, TypeVar

from rich.console import Console

T = TypeVar("T")

default_console = Console(highlight=False)

CONTINUE_PROMPT = "Would you like to run the program again? [y/N] "
_YES = ("y", "yes")
_NO = ("n", "no")


def parse_int(text: str) -> int:
    return int(text.strip())


def parse_count(text: str) -> int:
    value = int(text.strip())
    if value < 0:
        raise ValueError(f"{value} is negative")
    return value


parse_int.kind = "whole number"
parse_count.kind = "non-negative whole number"


def request_input(
    prompt: str,
    parse: Callable[[str], T] = str,
    validator: Optional[Callable[[T], bool]] = None,
    console: Optional[Console] = None,
) -> T:
    """Prompt until a response parses and passes `validator`.

    Args:
        prompt: Text shown before the cursor.
        parse: Converts the raw line; raising ValueError rejects it.
        validator: Optional extra check. It is responsible for telling the
            user why a value was rejected.
        console: Console used for prompting and messages.
    """
    if console is None:
        console = default_console
    while True:
        response = console.input(prompt, markup=False)
        try:
            value = parse(response)
        except ValueError:
            kind = getattr(parse, "kind", getattr(parse, "__name__", "value"))
            console.print(f'"{response}" is not a valid {kind}.', markup=False)
            console.print()
            continue

        if validator is None or validator(value):
            return value


def _validate_continue_response(response: str, console: Console) -> bool:
    normalized = response.strip().lower()
    if not normalized or normalized in _YES or normalized in _NO:
        return True
    console.print(
        f"{response} is an invalid response. Available responses are yes, y, no, or n.",
        markup=False,
    )
    console.print()
    return False


def request_continue(prompt: str = CONTINUE_PROMPT, console: Optional[Console] = None) -> bool:
    if console is None:
        console = default_console
    response = request_input(
        prompt,
        validator=lambda text: _validate_continue_response(text, console),
        console=console,
    )
    # empty means the default answer, which is no
    return response.strip().lower() in _YES


def wait_for_enter(console: Optional[Console] = None):
    if console is None:
        console = default_console
    console.print()
    console.input("Press enter to continue.", markup=False)
