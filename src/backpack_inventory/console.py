"""
Console input and output for the backpack menu.
"""
import re
import sys
from typing import Iterable, Optional, TextIO

from .errors import InvalidInput
from .models import Item

RULE = "=" * 40

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

MENU_OPTIONS = [
    ("1", "Add item"),
    ("2", "Remove item by name"),
    ("3", "List items"),
    ("4", "Search item by name"),
    ("0", "Exit"),
]


class LineReader:
    """
    Reads whole lines from a text stream, one prompt at a time.

    Use it as a context manager. A stream passed with `owns_stream=True`
    is closed on exit; stdin is never closed.
    """

    def __init__(self, stream: Optional[TextIO] = None, owns_stream: bool = False):
        self.stream = stream if stream is not None else sys.stdin
        self.owns_stream = owns_stream and stream is not None
        # undecodable bytes become U+FFFD instead of aborting the session
        if hasattr(self.stream, "reconfigure"):
            self.stream.reconfigure(errors="replace")

    def __enter__(self) -> "LineReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self.owns_stream and not self.stream.closed:
            self.stream.close()

    def read_line(self, prompt: str = "") -> str:
        """
        Print `prompt` and return the next line without its line ending.

        Raises:
            EOFError: when the stream is exhausted
        """
        if prompt:
            print(prompt, end="", flush=True)
        line = self.stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "", field: str = "number") -> int:
        """
        Read one line and parse it as an integer.

        The full line is consumed even when it is not a number.

        Raises:
            InvalidInput: if the line is not an integer
            EOFError: when the stream is exhausted
        """
        raw = self.read_line(prompt)
        text = raw.strip()
        if not INTEGER_PATTERN.fullmatch(text):
            raise InvalidInput(f"Invalid {field}: {raw!r} is not a whole number")
        return int(text)


def print_banner() -> None:
    print(RULE)
    print("  Survival Backpack - Island Inventory")
    print(RULE)
    print()


def print_menu() -> None:
    print("Menu:")
    for key, label in MENU_OPTIONS:
        print(f"{key} - {label}")


def format_item_line(position: int, item: Item) -> str:
    return (f"{position}) Name: {item.name} | Category: {item.category} "
            f"| Quantity: {item.quantity}")


def print_listing(items: Iterable[Item], capacity: int) -> None:
    """Print every item, numbered from 1, with a count/capacity header."""
    items = list(items)
    print(f"\n=== Items in backpack ({len(items)}/{capacity}) ===")
    if not items:
        print("(empty)")
    for position, item in enumerate(items, start=1):
        print(format_item_line(position, item))
    print(RULE)
    print()


def print_item(item: Item) -> None:
    print("🔍 Item found:")
    print(f"Name: {item.name}")
    print(f"Category: {item.category}")
    print(f"Quantity: {item.quantity}")
