"""
Bounded, ordered inventory with sequential lookup by name.

Names are not unique. Every name-based operation acts on the first
matching item in storage order.
"""
import logging
from typing import Iterator, Tuple

from .errors import CapacityExceeded, EmptyInventory, InvalidInput, NotFound
from .models import Item, make_item

LOGGER = logging.getLogger(__name__)

MAX_ITEMS = 10


class Inventory:
    """Holds up to `capacity` items in insertion order."""

    def __init__(self, capacity: int = MAX_ITEMS):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidInput(f"Capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._items: list[Item] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def find_index(self, name: str) -> int:
        """
        Sequential scan for the first item whose name equals `name`.

        The comparison is exact and case-sensitive.

        Returns:
            Index of the first match, or -1 if no item has that name
        """
        for i, item in enumerate(self._items):
            if item.name == name:
                return i
        return -1

    def insert(self, name: str, category: str, quantity: int) -> Item:
        """
        Append a new item at the end of the inventory.

        Raises:
            CapacityExceeded: if the inventory is already full
            InvalidInput: if a field is empty, too long, or quantity is negative
        """
        self.ensure_room()

        try:
            item = make_item(name, category, quantity)
        except InvalidInput as e:
            LOGGER.debug("Rejected insert of %r: %s", name, e)
            raise
        self._items.append(item)
        LOGGER.info("Added %r (%s x%d) at position %d",
                    item.name, item.category, item.quantity, len(self._items))
        return item

    def ensure_room(self) -> None:
        """Raise CapacityExceeded when no more items fit."""
        if self.is_full:
            LOGGER.debug("Inventory full (%d/%d)", len(self._items), self._capacity)
            raise CapacityExceeded(
                f"Backpack is full! You can only carry up to {self._capacity} items"
            )

    def ensure_not_empty(self) -> None:
        """Raise EmptyInventory when there are no items."""
        if not self._items:
            raise EmptyInventory("The backpack is empty")

    def remove(self, name: str) -> Item:
        """
        Remove the first item called `name`; later items move up one place.

        Raises:
            EmptyInventory: if there is nothing to remove
            NotFound: if no item has that name
        """
        self.ensure_not_empty()

        idx = self.find_index(name)
        if idx == -1:
            LOGGER.debug("Rejected removal of %r: not found", name)
            raise NotFound(name)

        removed = self._items.pop(idx)
        LOGGER.info("Removed %r from position %d", removed.name, idx + 1)
        return removed

    def search(self, name: str) -> Item:
        """
        Return the first item called `name` without changing the inventory.

        Raises:
            EmptyInventory: if the inventory is empty
            NotFound: if no item has that name
        """
        self.ensure_not_empty()

        idx = self.find_index(name)
        if idx == -1:
            raise NotFound(name)
        return self._items[idx]

    def list_items(self) -> Tuple[Item, ...]:
        """Snapshot of all items in storage order."""
        return tuple(self._items)
