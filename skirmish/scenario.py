"""
Scenario files - Load a catalog and a script from JSON.

A scenario file looks like:

    {
      "name": "duel",
      "available": {
        "classes": [{"name": "warrior"}],
        "weapons": [{"name": "sword", "damage": 10}]
      },
      "turns": [
        [{"type": "add player", "playerId": 1, "class": "warrior",
          "weapon": "sword", "hp": 30, "x": 0, "y": 0}],
        [{"type": "attack", "playerId": 1, "targetId": 2}]
      ]
    }

Action fields use the same camelCase keys as the scripts they come from.
Actions with an unknown type are loaded as-is; the reducer ignores them.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .engine_core.action import Action, ActionType
from .engine_core.state import Catalog, PlayerClass, Weapon, WorldState


class ScenarioLoadError(Exception):
    """Raised when a scenario file cannot be read or is malformed."""

    def __init__(self, source: str, errors: list[str]):
        self.source = source
        self.errors = errors
        super().__init__(f"Cannot load scenario {source}: {len(errors)} error(s)")


# =============================================================================
# File Schemas
# =============================================================================

class ClassModel(BaseModel):
    """A class catalog entry."""
    name: str = Field(min_length=1)


class WeaponModel(BaseModel):
    """A weapon catalog entry."""
    name: str = Field(min_length=1)
    damage: int = Field(gt=0)


class AvailableModel(BaseModel):
    """Catalog of everything players may pick."""
    classes: list[ClassModel] = Field(default_factory=list)
    weapons: list[WeaponModel] = Field(default_factory=list)


class ActionModel(BaseModel):
    """One scripted action. Which fields matter depends on ``type``."""
    type: str
    player_id: Optional[int] = Field(None, alias="playerId")
    player_class: Optional[str] = Field(None, alias="class")
    weapon: Optional[str] = None
    hp: Optional[int] = None
    x: Optional[int] = None
    y: Optional[int] = None
    target_id: Optional[int] = Field(None, alias="targetId")
    winner: Optional[int] = None

    model_config = {"populate_by_name": True}

    def to_action(self) -> Action:
        return Action(
            action_type=ActionType.parse(self.type),
            player_id=self.player_id,
            player_class=self.player_class,
            weapon=self.weapon,
            hp=self.hp,
            x=self.x,
            y=self.y,
            target_id=self.target_id,
            winner=self.winner,
        )


class ScenarioModel(BaseModel):
    """A complete scenario file."""
    name: str = "scenario"
    available: AvailableModel = Field(default_factory=AvailableModel)
    turns: list[list[ActionModel]] = Field(default_factory=list)


# =============================================================================
# Loading
# =============================================================================

@dataclass
class Scenario:
    """A loaded scenario, ready to be played."""
    name: str
    initial_state: WorldState
    turns: list[list[Action]]

    @property
    def action_count(self) -> int:
        return sum(len(t) for t in self.turns)


def parse_scenario(data: Any, source: str = "<data>") -> Scenario:
    """Validate raw scenario data and build the initial state and script."""
    try:
        model = ScenarioModel.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ScenarioLoadError(source, errors) from e

    catalog = Catalog(
        classes=tuple(PlayerClass(name=c.name) for c in model.available.classes),
        weapons=tuple(Weapon(name=w.name, damage=w.damage) for w in model.available.weapons),
    )
    return Scenario(
        name=model.name,
        initial_state=WorldState(available=catalog),
        turns=[[a.to_action() for a in turn] for turn in model.turns],
    )


def load_scenario(path: Union[str, Path]) -> Scenario:
    """Load a scenario from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(str(path), [f"File not found: {path}"])
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(str(path), [f"Invalid JSON: {e}"])

    return parse_scenario(data, source=str(path))
