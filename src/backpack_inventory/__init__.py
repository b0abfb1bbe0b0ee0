"""
Backpack Inventory - A small survival backpack manager for the terminal

Features:
- Add, remove and search items by name (first match wins)
- Fixed capacity of 10 items, insertion order preserved
- Interactive text menu
"""

__version__ = "0.1.0"

from .errors import (
    InventoryError,
    InvalidInput,
    CapacityExceeded,
    EmptyInventory,
    NotFound,
)
from .models import Item, make_item
from .inventory import Inventory, MAX_ITEMS

__all__ = [
    "InventoryError",
    "InvalidInput",
    "CapacityExceeded",
    "EmptyInventory",
    "NotFound",
    "Item",
    "make_item",
    "Inventory",
    "MAX_ITEMS",
]
