"""Tests for InventoryStore: capacity, ordering, first-match lookups."""

import pytest

from stockpile.errors import (
    EmptyInventory,
    InvalidName,
    InvalidQuantity,
    InventoryFull,
    ItemNotFound,
)
from stockpile.models import MAX_ITEMS, Item, Row
from stockpile.store import InventoryStore


@pytest.fixture
def store():
    return InventoryStore()


@pytest.fixture
def fruit(store):
    store.add("apple", 5)
    store.add("banana", 3)
    store.add("cherry", 1)
    return store


# --- add ---

def test_add_returns_item_and_grows(store):
    item = store.add("Pen", 10)
    assert item == Item("Pen", 10)
    assert len(store) == 1


def test_size_tracks_successful_adds(store):
    for n in range(MAX_ITEMS):
        store.add(f"item-{n}", n)
        assert len(store) == n + 1


def test_add_when_full_changes_nothing(store):
    for n in range(MAX_ITEMS):
        store.add(f"item-{n}", n)
    before = store.list()

    with pytest.raises(InventoryFull) as exc:
        store.add("one-too-many", 1)
    assert exc.value.max_items == MAX_ITEMS

    assert len(store) == MAX_ITEMS
    assert store.list() == before


def test_full_checked_before_validation():
    store = InventoryStore(max_items=1)
    store.add("only", 1)
    with pytest.raises(InventoryFull):
        store.add("", -1)


def test_zero_quantity_is_valid(store):
    assert store.add("Freebie", 0).quantity == 0


@pytest.mark.parametrize("name", ["", "   "])
def test_add_rejects_blank_name(store, name):
    with pytest.raises(InvalidName):
        store.add(name, 1)
    assert store.is_empty


@pytest.mark.parametrize("qty", [-1, 2.5, "3", True])
def test_add_rejects_bad_quantity(store, qty):
    with pytest.raises(InvalidQuantity):
        store.add("Pen", qty)
    assert store.is_empty


def test_duplicate_names_allowed(store):
    store.add("apple", 5)
    store.add("apple", 9)
    assert len(store) == 2


def test_custom_capacity():
    store = InventoryStore(max_items=2)
    store.add("a", 1)
    store.add("b", 2)
    assert store.is_full
    with pytest.raises(InventoryFull):
        store.add("c", 3)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        InventoryStore(max_items=0)


def test_independent_instances():
    a = InventoryStore()
    b = InventoryStore()
    a.add("Widget", 5)
    assert len(a) == 1
    assert len(b) == 0


# --- list ---

def test_list_empty_store(store):
    assert store.list() == []
    assert store.is_empty


def test_list_rows_are_one_based_in_insertion_order(fruit):
    assert fruit.list() == [Row(1, "apple", 5), Row(2, "banana", 3), Row(3, "cherry", 1)]


# --- search ---

def test_search_returns_first_match(store):
    store.add("apple", 5)
    store.add("banana", 3)
    store.add("apple", 9)

    found = store.search("apple")
    assert found.quantity == 5
    assert found.index == 1


def test_search_is_exact(fruit):
    with pytest.raises(ItemNotFound):
        fruit.search("Apple")
    with pytest.raises(ItemNotFound):
        fruit.search("apple ")


def test_search_empty_store(store):
    with pytest.raises(EmptyInventory):
        store.search("anything")


def test_empty_is_a_not_found(store):
    """search/remove on an empty store signal not-found too."""
    with pytest.raises(ItemNotFound):
        store.search("x")
    with pytest.raises(KeyError):
        store.remove("x")


# --- remove ---

def test_remove_compacts_preserving_order(fruit):
    removed = fruit.remove("banana")
    assert removed == Item("banana", 3)
    assert fruit.list() == [Row(1, "apple", 5), Row(2, "cherry", 1)]
    assert len(fruit) == 2


def test_remove_only_first_duplicate(store):
    store.add("apple", 5)
    store.add("apple", 9)
    store.remove("apple")
    assert store.list() == [Row(1, "apple", 9)]


def test_remove_missing_leaves_store_unchanged(fruit):
    before = fruit.list()
    with pytest.raises(ItemNotFound) as exc:
        fruit.remove("missing")
    assert not isinstance(exc.value, EmptyInventory)
    assert exc.value.name == "missing"
    assert fruit.list() == before


def test_remove_empty_store(store):
    with pytest.raises(EmptyInventory):
        store.remove("anything")


def test_remove_frees_capacity():
    store = InventoryStore(max_items=1)
    store.add("a", 1)
    store.remove("a")
    store.add("b", 2)
    assert store.list() == [Row(1, "b", 2)]


def test_pen_book_scenario(store):
    store.add("Pen", 10)
    store.add("Book", 3)
    assert store.list() == [(1, "Pen", 10), (2, "Book", 3)]

    store.remove("Pen")
    assert store.list() == [(1, "Book", 3)]
