"""Data models for stockpile.

Item, Row, Found and MenuChoice: the typed structures that flow through
validation -> store -> menu.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

MAX_ITEMS = 10


class MenuChoice(int, Enum):
    """Top-level menu entries, numbered as displayed."""

    ADD = 1
    VIEW = 2
    SEARCH = 3
    REMOVE = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return {
            MenuChoice.ADD: "Add Item",
            MenuChoice.VIEW: "View Items",
            MenuChoice.SEARCH: "Search Item",
            MenuChoice.REMOVE: "Remove Item",
            MenuChoice.EXIT: "Exit",
        }[self]


@dataclass(frozen=True)
class Item:
    """A named inventory record."""

    name: str
    quantity: int


class Row(NamedTuple):
    """One line of the inventory listing. ``index`` is 1-based."""

    index: int
    name: str
    quantity: int


@dataclass(frozen=True)
class Found:
    """Result of a successful search: 1-based position plus the item."""

    index: int
    item: Item

    @property
    def quantity(self) -> int:
        return self.item.quantity
