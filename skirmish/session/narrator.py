"""
Narrator - Turns state changes into console lines.

Subscribed to the store, it prints one line for every dispatch,
describing the last accepted action. Colors are cosmetic only.
"""

from __future__ import annotations
import re
import sys
from typing import TextIO

from ..engine_core.action import Action, ActionType
from ..engine_core.state import WorldState
from ..engine_core.store import Store, Unsubscribe

RESET_CODE = "\x1b[0m"

# First matching rule wins
COLOR_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"killed", re.IGNORECASE), "\x1b[31m"),
    (re.compile(r"winner", re.IGNORECASE), "\x1b[33m"),
    (re.compile(r"moved", re.IGNORECASE), "\x1b[34m"),
    (re.compile(r"changed[\w\s]+weapon", re.IGNORECASE), "\x1b[36m"),
    (re.compile(r"attack", re.IGNORECASE), "\x1b[35m"),
    (re.compile(r"entered", re.IGNORECASE), "\x1b[32m"),
]


def describe(state: WorldState, action: Action | None) -> str:
    """Describe what an action did, given the state after it was applied."""
    if action is None:
        return "Something indescribable has happened"

    action_type = action.action_type

    if action_type == ActionType.ATTACK:
        attacker = state.get_player(action.player_id)
        weapon = attacker.weapon if attacker else action.weapon
        if state.is_alive(action.target_id):
            return f"Player {action.player_id} attacked player {action.target_id} with {weapon}"
        return f"Player {action.player_id} killed player {action.target_id} with {weapon}"

    if action_type == ActionType.ADD_PLAYER:
        return f"Player {action.player_id} entered world as {action.player_class}"

    if action_type == ActionType.MOVE:
        return f"Player {action.player_id} moved to position [{action.x}:{action.y}]"

    if action_type == ActionType.CHANGE_WEAPON:
        return f"Player {action.player_id} changed his weapon to {action.weapon}"

    if action_type == ActionType.GAME_OVER:
        return f"Game Over\nPlayer {action.winner} is the winner"

    return "Something indescribable has happened"


def colorize(message: str) -> str:
    """Wrap a message in the ANSI color of the first matching rule."""
    for pattern, color in COLOR_RULES:
        if pattern.search(message):
            return f"{color}{message}{RESET_CODE}"
    return message


class ConsoleNarrator:
    """
    Store subscriber that writes one line per state change.

    Usage:
        narrator = ConsoleNarrator(store, color=True)
        narrator.attach()
        ...
        narrator.detach()
    """

    def __init__(self, store: Store, stream: TextIO | None = None, color: bool = True):
        self.store = store
        self.stream = stream or sys.stdout
        self.color = color
        self._unsubscribe: Unsubscribe | None = None

    def attach(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __call__(self) -> None:
        state = self.store.get_state()
        message = describe(state, state.last_action)
        if self.color:
            message = colorize(message)
        print(message, file=self.stream)
