"""stockpile: a small in-memory inventory tracker with a text menu.

Add, list, search and remove named items with whole-number quantities. The
store holds a fixed maximum number of items (10 unless configured) and lives
only for the length of the session.

Usage:
    python -m stockpile                      # Start the menu
    python -m stockpile --max-items 25       # Larger store
    python -m stockpile --plain              # No colours
    STOCKPILE_MAX_ITEMS=5 python -m stockpile
"""

__version__ = "0.1.0"
