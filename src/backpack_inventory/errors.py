"""Errors raised by the backpack inventory."""


class InventoryError(Exception):
    """Base class for every recoverable inventory error."""


class InvalidInput(InventoryError):
    """A field value is malformed or out of range."""


class CapacityExceeded(InventoryError):
    """An item was added to a full inventory."""


class EmptyInventory(InventoryError):
    """A lookup was attempted on an empty inventory."""


class NotFound(InventoryError):
    """No stored item has the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Item '{name}' not found")
        self.name = name
