"""
Turn Driver - Replays a scripted game against a store.

The loop:
1. Wait the turn delay
2. Dispatch the turn's actions one by one
3. After each dispatch, check for a decisive state
4. On a decisive state, declare the winner and stop
5. Otherwise move on to the next turn

A decisive state is exactly one player alive with at least one dead.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from ..engine_core.action import Action
from ..engine_core.state import WorldState, alive_players, dead_players
from ..engine_core.store import Store

logger = logging.getLogger(__name__)

Turn = Sequence[Action]


class DriverOutcome(Enum):
    """How a scripted run ended."""
    EXHAUSTED = "exhausted"  # All scripted turns were played
    STOPPED_EARLY = "stopped_early"  # Decisive game over


@dataclass
class RunResult:
    """
    Result of replaying a script.

    Both outcomes are normal completions, not failures.
    """
    outcome: DriverOutcome
    turns_played: int = 0
    actions_dispatched: int = 0  # Scripted actions only
    winner: int | None = None

    @property
    def stopped_early(self) -> bool:
        return self.outcome == DriverOutcome.STOPPED_EARLY


def find_winner(state: WorldState) -> int | None:
    """Return the sole survivor's id if the state is decisive."""
    alive = alive_players(state.player_list)
    dead = dead_players(state.player_list)
    if len(alive) == 1 and len(dead) >= 1:
        return alive[0].player_id
    return None


class TurnDriver:
    """
    Sequences scripted turns with a fixed delay before each one.

    Usage:
        driver = TurnDriver(store, turn_delay=0.2)
        result = driver.run(turns)

        if result.stopped_early:
            print(f"Player {result.winner} won")
    """

    def __init__(
        self,
        store: Store,
        turn_delay: float = 0.2,
        sleep: Callable[[float], None] = time.sleep,
        on_turn_start: Callable[[int], None] | None = None,
    ):
        self.store = store
        self.turn_delay = turn_delay
        self._sleep = sleep
        self._on_turn_start = on_turn_start

    def run(self, turns: Iterable[Turn]) -> RunResult:
        """Play turns in order until they run out or the game is decided."""
        result = RunResult(outcome=DriverOutcome.EXHAUSTED)

        for index, actions in enumerate(turns):
            if self.turn_delay > 0:
                self._sleep(self.turn_delay)

            logger.debug("Starting turn %d with %d action(s)", index, len(actions))
            if self._on_turn_start:
                self._on_turn_start(index)
            result.turns_played += 1

            winner = self._play_turn(actions, result)
            if winner is not None:
                logger.info("Game over after turn %d, winner is player %d", index, winner)
                result.outcome = DriverOutcome.STOPPED_EARLY
                result.winner = winner
                break

        return result

    def _play_turn(self, actions: Turn, result: RunResult) -> int | None:
        """
        Dispatch one turn's actions.

        Returns the winner if the turn ended the game, else None.
        """
        for action in actions:
            state = self.store.dispatch(action)
            result.actions_dispatched += 1

            winner = find_winner(state)
            if winner is not None:
                self.store.dispatch(Action.game_over(winner))
                return winner

        return None


def run(
    store: Store,
    turns: Iterable[Turn],
    turn_delay: float = 0.2,
    sleep: Callable[[float], None] = time.sleep,
) -> RunResult:
    """
    Convenience function to replay a script.

    Creates a TurnDriver and runs it.
    """
    driver = TurnDriver(store, turn_delay=turn_delay, sleep=sleep)
    return driver.run(turns)
