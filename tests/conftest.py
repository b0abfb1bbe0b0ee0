"""Shared fixtures for backpack inventory tests."""
import pytest

from backpack_inventory import Inventory


@pytest.fixture
def inventory():
    """An empty inventory with the default capacity."""
    return Inventory()


@pytest.fixture
def stocked_inventory():
    """Inventory holding a rifle and two bandage stacks."""
    inv = Inventory()
    inv.insert("Rifle", "arma", 2)
    inv.insert("Bandagem", "cura", 5)
    inv.insert("Bandagem", "cura", 1)
    return inv
