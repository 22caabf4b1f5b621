"""
Session Module - Runs one scripted play-through.

A session replays a fixed script against a store:
- The turn driver paces turns and detects the end of the game
- The narrator prints what happened after every dispatch

Sessions are EPHEMERAL: nothing is persisted.
"""

from .turn_driver import TurnDriver, DriverOutcome, RunResult, find_winner, run
from .narrator import ConsoleNarrator, describe, colorize

__all__ = [
    "TurnDriver",
    "DriverOutcome",
    "RunResult",
    "find_winner",
    "run",
    "ConsoleNarrator",
    "describe",
    "colorize",
]
