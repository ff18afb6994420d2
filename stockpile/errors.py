"""Exception hierarchy for stockpile.

Every error carries its user-facing message as ``str(exc)``, so the menu can
print it directly. Lookup failures are also ``KeyError`` and bad input is also
``ValueError``, for callers that only care about the builtin category.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for all stockpile errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InventoryFull(InventoryError):
    """Raised by add() when the store already holds max_items items."""

    def __init__(self, max_items: int) -> None:
        super().__init__("Inventory is full. Cannot add more items.")
        self.max_items = max_items


class ItemNotFound(InventoryError, KeyError):
    """No stored item has the requested name."""

    def __init__(self, name: str, message: str = "Item not found in inventory.") -> None:
        super().__init__(message)
        self.name = name


class EmptyInventory(ItemNotFound):
    """Lookup attempted while the store holds zero items."""

    def __init__(self, name: str = "", message: str = "Inventory is empty.") -> None:
        super().__init__(name, message)


class InvalidInput(InventoryError, ValueError):
    """Input failed validation; the caller should re-prompt."""


class InvalidName(InvalidInput):
    pass


class InvalidQuantity(InvalidInput):
    pass


class InvalidChoice(InvalidInput):
    pass


class InputClosed(InventoryError):
    """The input stream hit EOF while a prompt was waiting."""

    def __init__(self) -> None:
        super().__init__("Input stream closed.")
