"""
Tests for action validation.

Tests:
- Player id checks
- Per-type rules
- Unknown types
- Lookups of missing players
"""

import pytest

from ..engine_core.action import Action, ActionType
from ..engine_core.validator import is_valid_action


class TestPlayerIdChecks:
    """Rules that apply to every action carrying a player id."""

    def test_negative_player_id_rejected(self, empty_state):
        """Negative ids are never valid, even when joining."""
        action = Action.add_player(-1, "warrior", "sword")
        assert not is_valid_action(empty_state, action)

    def test_missing_player_cannot_act(self, two_player_state):
        """Acting players must exist."""
        assert not is_valid_action(two_player_state, Action.move(7, 1, 1))

    def test_dead_player_cannot_act(self, two_player_state):
        """Acting players must be alive."""
        state = two_player_state.with_player(
            two_player_state.get_player(2).with_changes(hp=0)
        )
        assert not is_valid_action(state, Action.move(2, 1, 1))
        assert not is_valid_action(state, Action.change_weapon(2, "axe"))
        assert not is_valid_action(state, Action.attack(2, 1))

    def test_player_zero_is_checked(self, empty_state):
        """Id 0 is a real id and must refer to a live player."""
        assert not is_valid_action(empty_state, Action.move(0, 1, 1))


class TestAttack:
    """Tests for attack validation."""

    def test_attack_alive_target(self, two_player_state):
        assert is_valid_action(two_player_state, Action.attack(1, 2))

    def test_attack_missing_target(self, two_player_state):
        """Attacking a player that never joined is rejected."""
        action = Action(action_type=ActionType.ATTACK, target_id=99)
        assert not is_valid_action(two_player_state, action)

    def test_attack_dead_target(self, two_player_state):
        state = two_player_state.with_player(
            two_player_state.get_player(2).with_changes(hp=-3)
        )
        assert not is_valid_action(state, Action.attack(1, 2))


class TestAddPlayer:
    """Tests for add player validation."""

    def test_valid_join(self, empty_state):
        assert is_valid_action(empty_state, Action.add_player(1, "warrior", "sword", 0, 0))

    def test_unknown_class(self, empty_state):
        assert not is_valid_action(empty_state, Action.add_player(1, "bard", "sword"))

    def test_unknown_weapon(self, empty_state):
        assert not is_valid_action(empty_state, Action.add_player(1, "warrior", "lute"))

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (None, 0)])
    def test_bad_position(self, empty_state, x, y):
        action = Action(
            action_type=ActionType.ADD_PLAYER,
            player_id=1,
            player_class="warrior",
            weapon="sword",
            x=x,
            y=y,
        )
        assert not is_valid_action(empty_state, action)

    def test_duplicate_id_rejected(self, two_player_state):
        """Player ids stay unique."""
        assert not is_valid_action(two_player_state, Action.add_player(1, "warrior", "sword"))

    def test_missing_id_rejected(self, empty_state):
        action = Action(
            action_type=ActionType.ADD_PLAYER,
            player_class="warrior",
            weapon="sword",
            x=0,
            y=0,
        )
        assert not is_valid_action(empty_state, action)


class TestMoveAndWeapon:
    """Tests for move and change weapon validation."""

    def test_move_in_bounds(self, two_player_state):
        assert is_valid_action(two_player_state, Action.move(1, 0, 9))

    def test_move_negative_coordinate(self, two_player_state):
        assert not is_valid_action(two_player_state, Action.move(1, -1, 0))

    def test_change_to_known_weapon(self, two_player_state):
        assert is_valid_action(two_player_state, Action.change_weapon(1, "axe"))

    def test_change_to_unknown_weapon(self, two_player_state):
        assert not is_valid_action(two_player_state, Action.change_weapon(1, "spoon"))


class TestGameOverAndUnknown:
    """Tests for system and unknown actions."""

    def test_game_over_always_valid(self, empty_state):
        assert is_valid_action(empty_state, Action.game_over(1))

    def test_unknown_type_rejected(self, two_player_state):
        action = Action(action_type="dance", player_id=1)
        assert not is_valid_action(two_player_state, action)

    def test_nothing_valid_after_winner(self, two_player_state):
        """Once a winner is declared the world is frozen."""
        state = two_player_state._copy_with(winner=1)
        assert not is_valid_action(state, Action.move(1, 2, 2))
        assert not is_valid_action(state, Action.game_over(2))

    def test_validation_is_pure(self, two_player_state):
        """Same inputs, same answer, state untouched."""
        action = Action.attack(1, 2)
        before = two_player_state
        assert is_valid_action(two_player_state, action) == is_valid_action(two_player_state, action)
        assert two_player_state == before
