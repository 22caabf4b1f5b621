"""
Engine Core - Deterministic world state management.

The engine is the runtime that:
1. Holds the WorldState in a Store
2. Validates incoming actions
3. Applies actions via the reducer
4. Notifies subscribers after every dispatch
"""

from .state import (
    WorldState,
    Player,
    Weapon,
    PlayerClass,
    Catalog,
    alive_players,
    dead_players,
)
from .action import Action, ActionType
from .validator import is_valid_action
from .reducer import Reducer, reduce
from .store import Store

__all__ = [
    "WorldState",
    "Player",
    "Weapon",
    "PlayerClass",
    "Catalog",
    "alive_players",
    "dead_players",
    "Action",
    "ActionType",
    "is_valid_action",
    "Reducer",
    "reduce",
    "Store",
]
