"""
Arena - The default skirmish.

Three players (warrior, mage, rogue) meet in an open field and
fight until a single one is left standing.

This module contains:
- The class and weapon catalog
- The initial world state
- The scripted turns
"""

from .catalog import ARENA_CLASSES, ARENA_WEAPONS, create_default_state
from .script import default_turns

__all__ = [
    "ARENA_CLASSES",
    "ARENA_WEAPONS",
    "create_default_state",
    "default_turns",
]
