"""Interactive menu loop for stockpile.

Reads one line per prompt from a text stream and renders everything through a
Rich console. The store is owned by the Menu; nothing is module-level state.

Flow per iteration:
1. Print banner + numbered choices
2. Read a choice line, validate it (bad input -> error, redisplay)
3. Dispatch to the add / view / search / remove handler
4. Stop on Exit; EOF on the stream raises InputClosed
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stockpile.errors import (
    InputClosed,
    InvalidChoice,
    InvalidInput,
    InventoryFull,
    ItemNotFound,
)
from stockpile.models import MenuChoice
from stockpile.store import InventoryStore
from stockpile.validation import parse_menu_choice, parse_quantity, validate_name

log = logging.getLogger(__name__)

BANNER = "PRIME INVENTORY MANAGEMENT SYSTEM"
_RULE = "=" * 37
_TABLE_RULE = "-" * 38


class Menu:
    """Text menu bound to a single InventoryStore."""

    def __init__(
        self,
        store: InventoryStore,
        console: Console,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.store = store
        self.console = console
        self.stdin = stdin if stdin is not None else sys.stdin
        self._handlers: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD: self.add_item,
            MenuChoice.VIEW: self.view_items,
            MenuChoice.SEARCH: self.search_item,
            MenuChoice.REMOVE: self.remove_item,
        }

    # --- I/O helpers ---

    def _say(self, text: str = "", style: Optional[str] = None, end: str = "\n") -> None:
        # markup=False: item names are user text and may contain brackets
        self.console.print(text, style=style, end=end, markup=False, highlight=False)

    def _read_line(self, prompt: str, style: Optional[str] = "yellow") -> str:
        """Show ``prompt`` and return the next line without its terminator."""
        self._say(prompt, style=style, end="")
        line = self.stdin.readline()
        if line == "":
            raise InputClosed()
        return line.rstrip("\r\n")

    def _header(self, title: str) -> None:
        self._say()
        self._say(f"---------- {title} ----------", style="bold cyan")

    # --- Menu loop ---

    def render(self) -> None:
        self._say()
        self._say(_RULE, style="cyan")
        self._say(f"      {BANNER}", style="bold")
        self._say(_RULE, style="cyan")
        for choice in MenuChoice:
            self._say(f"{choice.value}. {choice.label}")

    def read_choice(self) -> Optional[MenuChoice]:
        """Prompt once for a choice. Invalid input prints an error and returns None."""
        raw = self._read_line("Enter choice: ")
        try:
            return parse_menu_choice(raw)
        except InvalidChoice as e:
            log.debug("rejected menu input %r", raw)
            self._say(str(e), style="red")
            return None

    def run(self) -> None:
        """Loop until the user picks Exit."""
        while True:
            self.render()
            choice = self.read_choice()
            if choice is None:
                continue
            if choice is MenuChoice.EXIT:
                self._say()
                self._say("Exiting program... Goodbye!", style="green")
                return
            self._handlers[choice]()

    # --- Prompts with re-try ---

    def prompt_name(self, prompt: str = "Enter item name: ") -> str:
        raw = self._read_line(prompt)
        while True:
            try:
                return validate_name(raw)
            except InvalidInput as e:
                raw = self._read_line(str(e), style="red")

    def prompt_quantity(self, prompt: str = "Enter quantity: ") -> int:
        raw = self._read_line(prompt)
        while True:
            try:
                return parse_quantity(raw)
            except InvalidInput as e:
                raw = self._read_line(str(e), style="red")

    # --- Handlers ---

    def add_item(self) -> None:
        if self.store.is_full:
            self._say()
            self._say(f"Error: {InventoryFull(self.store.max_items)}", style="red")
            return

        self._header("Add New Item")
        name = self.prompt_name()
        quantity = self.prompt_quantity()
        self.store.add(name, quantity)
        self._say("Item added successfully!", style="green")

    def view_items(self) -> None:
        self._header("Current Inventory")
        rows = self.store.list()
        if not rows:
            self._say("Inventory is empty.", style="yellow")
            return

        table = Table(show_header=True, header_style="bold blue", show_edge=False)
        table.add_column("ID", justify="right")
        table.add_column("Item Name", min_width=12)
        table.add_column("Quantity", justify="right")
        for row in rows:
            table.add_row(str(row.index), Text(row.name), str(row.quantity))

        self._say(_TABLE_RULE, style="cyan")
        self.console.print(table)
        self._say(_TABLE_RULE, style="cyan")

    def search_item(self) -> None:
        if self.store.is_empty:
            self._say()
            self._say("Inventory is empty.", style="yellow")
            return

        self._say()
        name = self._read_line("Enter item name to search: ")
        try:
            found = self.store.search(name)
        except ItemNotFound as e:
            self._say(f"[!] {e}", style="red")
            return
        self._say()
        self._say("Item found!", style="green")
        self._say(f"Item: {found.item.name} | Quantity: {found.quantity}", style="bold")

    def remove_item(self) -> None:
        if self.store.is_empty:
            self._say()
            self._say("Inventory is empty. Nothing to remove.", style="yellow")
            return

        self._header("Remove Item")
        name = self._read_line("Enter item name to remove: ")
        try:
            self.store.remove(name)
        except ItemNotFound as e:
            self._say(f"[!] {e}", style="red")
            return
        self._say("[✔] Item removed successfully.", style="green")
