"""
Action System - The tagged commands applied to world state.

Actions represent:
1. Player actions (join, move, change weapon, attack)
2. System actions (game over, synthesized by the turn driver)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Player actions
    ADD_PLAYER = "add player"
    MOVE = "move"
    CHANGE_WEAPON = "change weapon"
    ATTACK = "attack"

    # System actions
    GAME_OVER = "game over"

    @classmethod
    def parse(cls, value: ActionType | str) -> ActionType | str:
        """Resolve a type name, keeping unknown names as raw strings."""
        if isinstance(value, ActionType):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Action:
    """
    A single game event to be applied to the world state.

    Actions are:
    - Built by the scripts that drive a game
    - Validated before application
    - Consumed once by the reducer

    Only the fields relevant to the action type are set. Type names such
    as "move" resolve to their ActionType; an unknown name is kept as its
    raw string so the validator can reject it.
    """
    action_type: ActionType | str
    player_id: int | None = None
    player_class: str | None = None
    weapon: str | None = None
    hp: int | None = None
    x: int | None = None
    y: int | None = None
    target_id: int | None = None
    winner: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "action_type", ActionType.parse(self.action_type))

    @property
    def type_name(self) -> str:
        if isinstance(self.action_type, ActionType):
            return self.action_type.value
        return str(self.action_type)

    @classmethod
    def add_player(
        cls,
        player_id: int,
        player_class: str,
        weapon: str,
        x: int = 0,
        y: int = 0,
        hp: int | None = None,
    ) -> Action:
        """Factory for add player action."""
        return cls(
            action_type=ActionType.ADD_PLAYER,
            player_id=player_id,
            player_class=player_class,
            weapon=weapon,
            hp=hp,
            x=x,
            y=y,
        )

    @classmethod
    def move(cls, player_id: int, x: int, y: int) -> Action:
        """Factory for move action."""
        return cls(action_type=ActionType.MOVE, player_id=player_id, x=x, y=y)

    @classmethod
    def change_weapon(cls, player_id: int, weapon: str) -> Action:
        """Factory for change weapon action."""
        return cls(action_type=ActionType.CHANGE_WEAPON, player_id=player_id, weapon=weapon)

    @classmethod
    def attack(cls, player_id: int, target_id: int) -> Action:
        """Factory for attack action."""
        return cls(action_type=ActionType.ATTACK, player_id=player_id, target_id=target_id)

    @classmethod
    def game_over(cls, winner: int) -> Action:
        """Factory for game over action."""
        return cls(action_type=ActionType.GAME_OVER, winner=winner)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of the set fields, with ``type`` first."""
        data: dict[str, Any] = {"type": self.type_name}
        for f in fields(self):
            if f.name == "action_type":
                continue
            value = getattr(self, f.name)
            if value is not None:
                data[f.name] = value
        return data
