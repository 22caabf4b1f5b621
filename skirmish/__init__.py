"""
Skirmish - Scripted Turn-Based Combat

A deterministic state-reduction engine for a small combat game.
Players join, move, change weapons and attack until one remains.
The package provides:
- World state and actions
- Action validation and the reducer
- A store with subscribers
- A paced turn driver that stops on a decisive game over
"""

__version__ = "0.1.0"
