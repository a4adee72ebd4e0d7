"""Puzzle selection, display shuffling and saved game state for beehive."""

from .models import GameConfig, GameState, CatalogMode, Environment, SortMode
from .catalog import (
    PuzzleCatalog,
    DEFAULT_CATALOG_PATH,
    days_since_epoch,
    to_local_date,
    next_rollover,
    time_until_rollover,
    with_derived_fields,
)
from .shuffler import LetterShuffler
from .store import JsonStateStore

__all__ = [
    "GameConfig",
    "GameState",
    "CatalogMode",
    "Environment",
    "SortMode",
    "PuzzleCatalog",
    "DEFAULT_CATALOG_PATH",
    "days_since_epoch",
    "to_local_date",
    "next_rollover",
    "time_until_rollover",
    "with_derived_fields",
    "LetterShuffler",
    "JsonStateStore",
]
