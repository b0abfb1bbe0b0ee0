#!/usr/bin/env python3
"""
Command-line interface for the backpack inventory
"""
import sys
import argparse
import logging
from typing import Callable, Dict, Optional, Tuple

from . import __version__, console
from .console import LineReader
from .errors import InvalidInput, InventoryError
from .inventory import Inventory
from .models import validate_field

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

EXIT_CHOICE = 0


def add_item(inventory: Inventory, reader: LineReader) -> None:
    """Prompt for name, category and quantity, then add the item."""
    inventory.ensure_room()

    name = validate_field("name", reader.read_line("Item name: "))

    category = validate_field(
        "category", reader.read_line("Item category (e.g. weapon, ammo, healing, tool): ")
    )

    quantity = reader.read_int("Quantity: ", field="quantity")

    inventory.insert(name, category, quantity)
    print("✅ Item added successfully!")


def remove_item(inventory: Inventory, reader: LineReader) -> None:
    """Prompt for a name and remove the first item with that name."""
    inventory.ensure_not_empty()

    name = reader.read_line("Name of the item to remove: ")
    inventory.remove(name)
    print("✅ Item removed successfully.")


def list_items(inventory: Inventory, reader: LineReader) -> None:
    console.print_listing(inventory.list_items(), inventory.capacity)


def search_item(inventory: Inventory, reader: LineReader) -> None:
    """Prompt for a name and show the first item with that name."""
    inventory.ensure_not_empty()

    name = reader.read_line("Name of the item to search for: ")
    console.print_item(inventory.search(name))


# choice -> (handler, print the listing afterwards)
MENU_ACTIONS: Dict[int, Tuple[Callable[[Inventory, LineReader], None], bool]] = {
    1: (add_item, True),
    2: (remove_item, True),
    3: (list_items, False),
    4: (search_item, True),
}


def run_menu(inventory: Inventory, reader: LineReader) -> int:
    """
    Run the interactive menu until the user quits.

    Each choice runs one operation to completion. Inventory errors are
    reported and the menu is shown again.

    Returns:
        Exit code (0 on quit or end of input)
    """
    console.print_banner()

    while True:
        console.print_menu()
        try:
            choice = reader.read_int("Choose an option: ", field="option")
        except InvalidInput:
            print("❌ Invalid input. Please try again.\n")
            continue
        except EOFError:
            LOGGER.debug("End of input at menu prompt")
            print("\n👋 Leaving... Good luck on the island!")
            return 0

        if choice == EXIT_CHOICE:
            print("👋 Leaving... Good luck on the island!")
            return 0

        action = MENU_ACTIONS.get(choice)
        if action is None:
            print("❌ Invalid option. Please try again.\n")
            continue

        handler, show_listing = action
        try:
            handler(inventory, reader)
        except InventoryError as e:
            print(f"⚠️  {e}. Operation cancelled.")
        except EOFError:
            LOGGER.debug("End of input during option %d", choice)
            print("\n👋 Leaving... Good luck on the island!")
            return 0

        if show_listing:
            console.print_listing(inventory.list_items(), inventory.capacity)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser_cli = argparse.ArgumentParser(
        description="Backpack Inventory - Keep track of what you carry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Menu options:
  1  Add item
  2  Remove item by name
  3  List items
  4  Search item by name
  0  Exit
        """
    )
    parser_cli.add_argument('--verbose', '-v', action='store_true', help='Log debug messages to stderr')
    parser_cli.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser_cli.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    inventory = Inventory()
    with LineReader() as reader:
        try:
            return run_menu(inventory, reader)
        except KeyboardInterrupt:
            print("\n\n👋 Backpack closed")
            return 0


if __name__ == '__main__':
    sys.exit(main())
