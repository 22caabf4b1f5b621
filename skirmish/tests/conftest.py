"""
Pytest fixtures for Skirmish tests.
"""

import pytest

from ..engine_core.state import WorldState, Player, Weapon, PlayerClass, Catalog
from ..engine_core.store import Store
from ..games.arena import create_default_state


@pytest.fixture
def catalog() -> Catalog:
    """One class, two weapons."""
    return Catalog(
        classes=(PlayerClass(name="warrior"),),
        weapons=(Weapon(name="sword", damage=10), Weapon(name="axe", damage=15)),
    )


@pytest.fixture
def empty_state(catalog: Catalog) -> WorldState:
    """World with a catalog and no players."""
    return WorldState(available=catalog)


@pytest.fixture
def two_player_state(empty_state: WorldState) -> WorldState:
    """Player 1 is healthy, player 2 is one sword hit from death."""
    return WorldState(
        player_list=(
            Player(player_id=1, player_class="warrior", weapon="sword", hp=30, x=0, y=0),
            Player(player_id=2, player_class="warrior", weapon="sword", hp=5, x=1, y=1),
        ),
        available=empty_state.available,
    )


@pytest.fixture
def three_player_state(two_player_state: WorldState) -> WorldState:
    """Two player state plus a third healthy player."""
    return two_player_state.with_player_added(
        Player(player_id=3, player_class="warrior", weapon="axe", hp=40, x=2, y=2)
    )


@pytest.fixture
def arena_state() -> WorldState:
    """The default arena world."""
    return create_default_state()


@pytest.fixture
def store(two_player_state: WorldState) -> Store:
    return Store(two_player_state)
