"""
Reducer - Applies actions to world state.

The reducer is the single point of state transition.
All state changes must go through reduce().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Total: invalid or unresolvable actions return the state unchanged
"""

from __future__ import annotations
from typing import Callable, Optional

from .state import WorldState, Player, DEFAULT_PLAYER_HP
from .action import Action, ActionType
from .validator import is_valid_action


Handler = Callable[[WorldState, Action], Optional[WorldState]]


class Reducer:
    """
    Reducer applies actions to world state.

    Stateless - all state is in WorldState.
    """

    def apply(self, state: WorldState, action: Action | None) -> WorldState:
        """
        Apply an action to the world state.

        Returns the new state, or the same state object when the action
        is absent, invalid, or of an unknown type.
        """
        if action is None:
            return state
        if not is_valid_action(state, action):
            return state

        handler = self._get_handler(action.action_type)
        if not handler:
            return state

        new_state = handler(state, action)
        if new_state is None:
            return state

        return new_state._copy_with(last_action=action)

    def _get_handler(self, action_type: ActionType | str) -> Handler | None:
        """Get the handler function for an action type."""
        handlers: dict[ActionType | str, Handler] = {
            ActionType.ADD_PLAYER: self._handle_add_player,
            ActionType.MOVE: self._handle_move,
            ActionType.CHANGE_WEAPON: self._handle_change_weapon,
            ActionType.ATTACK: self._handle_attack,
            ActionType.GAME_OVER: self._handle_game_over,
        }
        return handlers.get(action_type)

    def _handle_add_player(self, state: WorldState, action: Action) -> WorldState:
        """Handle add player action."""
        player = Player(
            player_id=action.player_id,
            player_class=action.player_class,
            weapon=action.weapon,
            hp=action.hp if action.hp is not None else DEFAULT_PLAYER_HP,
            x=action.x,
            y=action.y,
        )
        return state.with_player_added(player)

    def _handle_move(self, state: WorldState, action: Action) -> WorldState | None:
        """Handle move action."""
        player = state.get_player(action.player_id)
        if not player:
            return None
        return state.with_player(player.with_changes(x=action.x, y=action.y))

    def _handle_change_weapon(self, state: WorldState, action: Action) -> WorldState | None:
        """Handle change weapon action."""
        player = state.get_player(action.player_id)
        if not player:
            return None
        return state.with_player(player.with_changes(weapon=action.weapon))

    def _handle_attack(self, state: WorldState, action: Action) -> WorldState | None:
        """
        Handle attack action.

        Damage comes from the attacker's currently equipped weapon.
        Target hp may drop below zero.
        """
        attacker = state.get_player(action.player_id)
        target = state.get_player(action.target_id)
        if not attacker or not target:
            return None

        weapon = state.available.get_weapon(attacker.weapon)
        if not weapon:
            return None

        return state.with_player(target.with_changes(hp=target.hp - weapon.damage))

    def _handle_game_over(self, state: WorldState, action: Action) -> WorldState:
        """Handle game over, declaring the winner."""
        return state._copy_with(winner=action.winner)


_reducer = Reducer()


def reduce(state: WorldState, action: Action | None) -> WorldState:
    """
    Convenience function to apply an action.

    Uses a shared stateless Reducer.
    """
    return _reducer.apply(state, action)
