"""
World State - The single state tree of a running simulation.

Design principles:
- Immutable-friendly: every transition returns a new WorldState
- Players are value records, replaced rather than edited
- Catalog data (classes, weapons) is static reference data
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .action import Action


DEFAULT_PLAYER_HP = 100


@dataclass(frozen=True)
class Weapon:
    """A weapon catalog entry."""
    name: str
    damage: int


@dataclass(frozen=True)
class PlayerClass:
    """A class catalog entry."""
    name: str


@dataclass(frozen=True)
class Catalog:
    """
    Static reference data available to players.

    Loaded once before the store is created and never changed.
    """
    classes: tuple[PlayerClass, ...] = ()
    weapons: tuple[Weapon, ...] = ()

    def has_class(self, name: str | None) -> bool:
        return any(c.name == name for c in self.classes)

    def has_weapon(self, name: str | None) -> bool:
        return any(w.name == name for w in self.weapons)

    def get_weapon(self, name: str | None) -> Weapon | None:
        """Get weapon by name."""
        for w in self.weapons:
            if w.name == name:
                return w
        return None


@dataclass(frozen=True)
class Player:
    """
    A player in the world.

    Dead players (hp <= 0) stay in the player list until the game ends.
    """
    player_id: int
    player_class: str
    weapon: str
    hp: int = DEFAULT_PLAYER_HP
    x: int = 0
    y: int = 0

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def with_changes(self, **kwargs: Any) -> Player:
        """Return new player with some fields replaced."""
        return Player(
            player_id=self.player_id,
            player_class=kwargs.get("player_class", self.player_class),
            weapon=kwargs.get("weapon", self.weapon),
            hp=kwargs.get("hp", self.hp),
            x=kwargs.get("x", self.x),
            y=kwargs.get("y", self.y),
        )


@dataclass(frozen=True)
class WorldState:
    """
    Complete world state at a point in time.

    This is the canonical state that the store owns.
    All state changes go through the reducer.
    """
    player_list: tuple[Player, ...] = ()
    available: Catalog = field(default_factory=Catalog)

    # Last accepted action, read by the narrator
    last_action: Action | None = None
    winner: int | None = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def get_player(self, player_id: int | None) -> Player | None:
        """Get player by ID."""
        for p in self.player_list:
            if p.player_id == player_id:
                return p
        return None

    def is_alive(self, player_id: int | None) -> bool:
        """Missing players count as dead."""
        player = self.get_player(player_id)
        return player is not None and player.is_alive

    def with_player_added(self, player: Player) -> WorldState:
        """Return new state with the player appended."""
        return self._copy_with(player_list=self.player_list + (player,))

    def with_player(self, player: Player) -> WorldState:
        """
        Return new state with the player's record replaced.

        The old record is removed and the updated one appended, so the
        player ends up last in the list.
        """
        others = tuple(p for p in self.player_list if p.player_id != player.player_id)
        return self._copy_with(player_list=others + (player,))

    def _copy_with(self, **kwargs: Any) -> WorldState:
        """Create a copy with some fields replaced."""
        return WorldState(
            player_list=kwargs.get("player_list", self.player_list),
            available=kwargs.get("available", self.available),
            last_action=kwargs.get("last_action", self.last_action),
            winner=kwargs.get("winner", self.winner),
        )


def alive_players(player_list: tuple[Player, ...]) -> list[Player]:
    return [p for p in player_list if p.hp > 0]


def dead_players(player_list: tuple[Player, ...]) -> list[Player]:
    return [p for p in player_list if p.hp <= 0]
