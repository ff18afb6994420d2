"""Pure validators for interactive input.

None of these functions do I/O. Each returns the cleaned value or raises an
InvalidInput subclass whose message is meant to be shown before re-prompting.
"""

from __future__ import annotations

import re

from stockpile.errors import InvalidChoice, InvalidName, InvalidQuantity
from stockpile.models import MenuChoice

_DIGITS_RE = re.compile(r"[0-9]+")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
# Matches the interpreter's default int-string limit, applied on every version
_MAX_QUANTITY_DIGITS = 4300


def validate_name(raw: str) -> str:
    """Return ``raw`` unchanged if it holds anything besides whitespace.

    The name is not trimmed: "  Pen " and "Pen" are different items.
    """
    if not raw.strip():
        raise InvalidName("Item name cannot be empty! Enter again: ")
    return raw


def parse_quantity(raw: str) -> int:
    """Parse a quantity made only of decimal digits.

    Signs, decimal points and surrounding whitespace are all rejected.
    """
    if raw == "":
        raise InvalidQuantity("Quantity cannot be empty! Enter again: ")
    if len(raw) > _MAX_QUANTITY_DIGITS or not _DIGITS_RE.fullmatch(raw):
        raise InvalidQuantity("Invalid input! Please enter a NUMBER: ")
    try:
        value = int(raw)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        raise InvalidQuantity("Invalid input! Please enter a NUMBER: ") from None
    # Unreachable after the digit check, kept so the invariant is local.
    if value < 0:
        raise InvalidQuantity("Quantity cannot be negative. Enter again: ")
    return value


def parse_menu_choice(raw: str) -> MenuChoice:
    """Map a menu line to a MenuChoice.

    Non-numeric input and out-of-range numbers raise InvalidChoice with
    different messages.
    """
    token = raw.strip()
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidChoice("Invalid input! Please enter a number (1-5).")
    try:
        return MenuChoice(int(token))
    except ValueError:
        raise InvalidChoice("Invalid choice! Please select 1-5.") from None
