"""
Arena script - The built-in three player skirmish.

Player 1 ends up the sole survivor during turn 5; the moves
scripted after that point are never dispatched.
"""

from ...engine_core.action import Action


def default_turns() -> list[list[Action]]:
    """Return the scripted turns, one list of actions per turn."""
    return [
        # Everyone joins
        [
            Action.add_player(1, "warrior", "sword", x=0, y=0, hp=30),
            Action.add_player(2, "mage", "staff", x=5, y=5, hp=25),
            Action.add_player(3, "rogue", "bow", x=2, y=7, hp=20),
        ],
        [
            Action.move(1, 3, 4),
            Action.move(2, 4, 4),
            Action.change_weapon(3, "dagger"),
        ],
        [
            Action.attack(1, 2),
            Action.attack(2, 1),
            Action.attack(3, 2),
        ],
        [
            Action.move(3, -1, 2),  # off the map, rejected
            Action.change_weapon(1, "axe"),
            Action.attack(2, 3),
        ],
        [
            Action.attack(1, 2),
            Action.attack(2, 1),  # player 2 is dead, rejected
            Action.attack(3, 1),
        ],
        [
            Action.attack(1, 3),
            Action.move(1, 1, 1),
        ],
        [
            Action.move(3, 0, 0),
        ],
    ]
