"""Runtime settings for stockpile, read from the environment.

Only two knobs exist. Options given on the command line override these
values after loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from stockpile.models import MAX_ITEMS

ENV_MAX_ITEMS = "STOCKPILE_MAX_ITEMS"
ENV_PLAIN = "STOCKPILE_PLAIN"

_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(ValueError):
    """An environment value could not be used."""


@dataclass
class Settings:
    """Resolved configuration for one session."""

    max_items: int = MAX_ITEMS
    plain: bool = False


def _parse_max_items(value: str) -> int:
    try:
        n = int(value.strip())
    except ValueError:
        raise ConfigError(f"{ENV_MAX_ITEMS} must be an integer, got {value!r}") from None
    if n < 1:
        raise ConfigError(f"{ENV_MAX_ITEMS} must be >= 1, got {n}")
    return n


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Unset or empty variables fall back to the defaults.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    raw_max = env.get(ENV_MAX_ITEMS, "")
    if raw_max.strip():
        settings.max_items = _parse_max_items(raw_max)

    settings.plain = env.get(ENV_PLAIN, "").strip().lower() in _TRUTHY
    return settings
