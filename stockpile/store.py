"""In-memory inventory store.

A bounded, insertion-ordered list of Items. All lookups are linear scans for
the first exact name match, which is fine at this capacity.
"""

from __future__ import annotations

import logging

from stockpile.errors import (
    EmptyInventory,
    InvalidName,
    InvalidQuantity,
    InventoryFull,
    ItemNotFound,
)
from stockpile.models import MAX_ITEMS, Found, Item, Row

log = logging.getLogger(__name__)


class InventoryStore:
    """Holds up to ``max_items`` Items in insertion order."""

    def __init__(self, max_items: int = MAX_ITEMS) -> None:
        if max_items < 1:
            raise ValueError(f"max_items must be >= 1, got {max_items}")
        self.max_items = max_items
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.max_items

    def add(self, name: str, quantity: int) -> Item:
        """Append a new item.

        Raises:
            InventoryFull: the store is at capacity. Checked first.
            InvalidName: name is blank.
            InvalidQuantity: quantity is not a non-negative int.
        """
        if self.is_full:
            log.debug("add rejected, store full (%d/%d)", len(self._items), self.max_items)
            raise InventoryFull(self.max_items)
        if not isinstance(name, str) or not name.strip():
            raise InvalidName("Item name cannot be empty!")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantity("Quantity must be a whole number.")
        if quantity < 0:
            raise InvalidQuantity("Quantity cannot be negative.")

        item = Item(name=name, quantity=quantity)
        self._items.append(item)
        log.debug("added %r x%d (%d/%d)", name, quantity, len(self._items), self.max_items)
        return item

    def list(self) -> list[Row]:
        """Rows in storage order with 1-based indices. Empty list when empty."""
        return [Row(i, item.name, item.quantity) for i, item in enumerate(self._items, start=1)]

    def _position(self, name: str) -> int:
        """0-based position of the first exact match, or -1."""
        for pos, item in enumerate(self._items):
            if item.name == name:
                return pos
        return -1

    def search(self, name: str) -> Found:
        """Find the first item named exactly ``name``.

        Raises:
            EmptyInventory: nothing is stored (no scan happens).
            ItemNotFound: no exact match.
        """
        if self.is_empty:
            raise EmptyInventory(name)
        pos = self._position(name)
        if pos == -1:
            log.debug("search miss for %r", name)
            raise ItemNotFound(name)
        return Found(index=pos + 1, item=self._items[pos])

    def remove(self, name: str) -> Item:
        """Delete the first item named exactly ``name`` and return it.

        Later items move down one slot, so order is preserved.

        Raises:
            EmptyInventory: nothing is stored.
            ItemNotFound: no exact match; the store is unchanged.
        """
        if self.is_empty:
            raise EmptyInventory(name, "Inventory is empty. Nothing to remove.")
        pos = self._position(name)
        if pos == -1:
            log.debug("remove miss for %r", name)
            raise ItemNotFound(name, "Item not found.")
        item = self._items.pop(pos)
        log.debug("removed %r from slot %d (%d/%d)", name, pos + 1, len(self._items), self.max_items)
        return item
