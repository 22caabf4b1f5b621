"""
Validator - Decides whether an action may be applied to a state.

Invalid actions are not errors: the reducer simply ignores them.
"""

from __future__ import annotations

from .state import WorldState
from .action import Action, ActionType


def _is_position(x: int | None, y: int | None) -> bool:
    return x is not None and y is not None and x >= 0 and y >= 0


def is_valid_action(state: WorldState, action: Action) -> bool:
    """
    Check an action against the current state.

    Checks run in order: player id sign, acting player alive,
    then the rule for the action type. Unknown types are invalid.
    """
    # Nothing changes once a winner is declared
    if state.is_over:
        return False

    action_type = action.action_type
    player_id = action.player_id

    if player_id is not None:
        if player_id < 0:
            return False
        if action_type != ActionType.ADD_PLAYER and not state.is_alive(player_id):
            return False

    if action_type == ActionType.ATTACK:
        return state.is_alive(action.target_id)

    if action_type == ActionType.ADD_PLAYER:
        return (
            player_id is not None
            and state.get_player(player_id) is None
            and state.available.has_class(action.player_class)
            and state.available.has_weapon(action.weapon)
            and _is_position(action.x, action.y)
        )

    if action_type == ActionType.MOVE:
        return _is_position(action.x, action.y)

    if action_type == ActionType.CHANGE_WEAPON:
        return state.available.has_weapon(action.weapon)

    if action_type == ActionType.GAME_OVER:
        return True

    return False
