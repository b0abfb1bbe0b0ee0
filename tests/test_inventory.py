"""Tests for the Inventory manager."""
import pytest

from backpack_inventory import (
    CapacityExceeded,
    EmptyInventory,
    InvalidInput,
    Inventory,
    MAX_ITEMS,
    NotFound,
)


def fill(inventory, count):
    for i in range(count):
        inventory.insert(f"Item{i}", "misc", i)


class TestInsert:
    """Tests for Inventory.insert."""

    def test_appends_at_end(self, inventory):
        for expected_len in range(1, MAX_ITEMS + 1):
            item = inventory.insert(f"Item{expected_len}", "misc", expected_len)
            assert len(inventory) == expected_len
            assert inventory.list_items()[-1] == item

    def test_full_inventory_raises_capacity_exceeded(self, inventory):
        fill(inventory, MAX_ITEMS)
        before = inventory.list_items()

        with pytest.raises(CapacityExceeded):
            inventory.insert("Extra", "misc", 1)

        assert inventory.list_items() == before
        assert inventory.is_full

    def test_capacity_checked_before_fields(self, inventory):
        """A full inventory reports capacity even when the fields are bad too."""
        fill(inventory, MAX_ITEMS)

        with pytest.raises(CapacityExceeded):
            inventory.insert("", "", -1)

    @pytest.mark.parametrize("name, category, quantity", [
        ("", "arma", 1),
        ("Rifle", "", 1),
        ("Rifle", "arma", -1),
        ("Rifle", "arma", True),
        ("Rifle", "arma", "5"),
        ("Rifle", "arma", 2.0),
        (7, "arma", 1),
        ("Rifle", None, 1),
    ])
    def test_invalid_fields_leave_inventory_unchanged(self, stocked_inventory, name, category, quantity):
        before = stocked_inventory.list_items()

        with pytest.raises(InvalidInput):
            stocked_inventory.insert(name, category, quantity)

        assert stocked_inventory.list_items() == before

    def test_duplicate_names_allowed(self, inventory):
        inventory.insert("Bandagem", "cura", 5)
        inventory.insert("Bandagem", "cura", 1)

        assert len(inventory) == 2


class TestRemove:
    """Tests for Inventory.remove."""

    def test_remove_compacts_following_items(self, inventory):
        fill(inventory, 5)
        before = inventory.list_items()

        removed = inventory.remove("Item2")

        after = inventory.list_items()
        assert removed == before[2]
        assert len(after) == 4
        assert after[:2] == before[:2]
        assert after[2:] == before[3:]

    def test_remove_first_match_only(self, stocked_inventory):
        removed = stocked_inventory.remove("Bandagem")

        assert removed.quantity == 5
        assert [i.as_tuple() for i in stocked_inventory.list_items()] == [
            ("Rifle", "arma", 2),
            ("Bandagem", "cura", 1),
        ]

    def test_remove_from_empty_inventory(self, inventory):
        with pytest.raises(EmptyInventory):
            inventory.remove("Rifle")

    def test_remove_missing_name(self, stocked_inventory):
        before = stocked_inventory.list_items()

        with pytest.raises(NotFound) as excinfo:
            stocked_inventory.remove("Granada")

        assert excinfo.value.name == "Granada"
        assert stocked_inventory.list_items() == before

    def test_match_is_case_sensitive(self, stocked_inventory):
        with pytest.raises(NotFound):
            stocked_inventory.remove("rifle")


class TestSearch:
    """Tests for Inventory.search and find_index."""

    def test_search_returns_first_match(self, stocked_inventory):
        item = stocked_inventory.search("Bandagem")

        assert item.quantity == 5

    def test_search_does_not_mutate(self, stocked_inventory):
        before = stocked_inventory.list_items()
        stocked_inventory.search("Rifle")
        assert stocked_inventory.list_items() == before

    def test_search_empty_inventory(self, inventory):
        with pytest.raises(EmptyInventory):
            inventory.search("Rifle")

    def test_search_missing_name(self, stocked_inventory):
        with pytest.raises(NotFound, match="Granada"):
            stocked_inventory.search("Granada")

    def test_find_index(self, stocked_inventory):
        assert stocked_inventory.find_index("Rifle") == 0
        assert stocked_inventory.find_index("Bandagem") == 1
        assert stocked_inventory.find_index("Granada") == -1


class TestListItems:
    """Tests for Inventory.list_items."""

    def test_empty_listing(self, inventory):
        assert inventory.list_items() == ()
        assert inventory.is_empty

    def test_listing_is_idempotent(self, stocked_inventory):
        assert stocked_inventory.list_items() == stocked_inventory.list_items()

    def test_listing_is_a_snapshot(self, stocked_inventory):
        snapshot = stocked_inventory.list_items()
        stocked_inventory.remove("Rifle")

        assert len(snapshot) == 3
        assert len(stocked_inventory) == 2

    def test_iteration_matches_listing(self, stocked_inventory):
        assert tuple(stocked_inventory) == stocked_inventory.list_items()


class TestCapacity:
    """Tests for the capacity setting."""

    def test_default_capacity(self, inventory):
        assert inventory.capacity == MAX_ITEMS == 10

    def test_custom_capacity(self):
        inventory = Inventory(capacity=2)
        fill(inventory, 2)

        with pytest.raises(CapacityExceeded, match="up to 2 items"):
            inventory.insert("Extra", "misc", 1)

    @pytest.mark.parametrize("capacity", [0, -1, True, "10"])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(InvalidInput):
            Inventory(capacity=capacity)


def test_backpack_scenario(inventory):
    """Walk through adding, removing and searching like a player would."""
    inventory.insert("Rifle", "arma", 2)
    inventory.insert("Bandagem", "cura", 5)
    assert [i.as_tuple() for i in inventory.list_items()] == [
        ("Rifle", "arma", 2),
        ("Bandagem", "cura", 5),
    ]

    inventory.remove("Rifle")
    assert [i.as_tuple() for i in inventory.list_items()] == [("Bandagem", "cura", 5)]

    assert inventory.search("Bandagem").quantity == 5

    fill(inventory, MAX_ITEMS - 1)
    with pytest.raises(CapacityExceeded):
        inventory.insert("Extra", "misc", 1)
