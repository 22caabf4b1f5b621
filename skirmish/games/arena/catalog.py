"""
Arena catalog - Classes and weapons available in the default world.
"""

from ...engine_core.state import Catalog, PlayerClass, Weapon, WorldState


ARENA_CLASSES = (
    PlayerClass(name="warrior"),
    PlayerClass(name="mage"),
    PlayerClass(name="rogue"),
)

ARENA_WEAPONS = (
    Weapon(name="sword", damage=10),
    Weapon(name="axe", damage=15),
    Weapon(name="bow", damage=8),
    Weapon(name="dagger", damage=7),
    Weapon(name="staff", damage=6),
)


def create_default_state() -> WorldState:
    """
    Create the starting world.

    Empty player list; players join through add player actions.
    """
    return WorldState(
        player_list=(),
        available=Catalog(classes=ARENA_CLASSES, weapons=ARENA_WEAPONS),
    )
