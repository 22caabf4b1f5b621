"""
Store - Holds the current world state and notifies subscribers.

One store per simulation, passed explicitly to whoever needs it.
Not safe for concurrent dispatch from several threads.
"""

from __future__ import annotations
import logging
from typing import Callable

from .state import WorldState
from .action import Action
from .reducer import reduce

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Store:
    """
    Thin state container around the reducer.

    Usage:
        store = Store(initial_state)
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch(Action.move(1, 2, 3))
        unsubscribe()
    """

    def __init__(
        self,
        initial_state: WorldState,
        reducer: Callable[[WorldState, Action | None], WorldState] = reduce,
    ):
        self._state = initial_state
        self._reducer = reducer
        self._listeners: list[Listener] = []

    def get_state(self) -> WorldState:
        return self._state

    def dispatch(self, action: Action | None) -> WorldState:
        """
        Reduce the action into the current state, then notify subscribers.

        Subscribers are called with no arguments and read the new
        state through get_state().
        """
        previous = self._state
        self._state = self._reducer(previous, action)
        if self._state is previous and action is not None:
            logger.debug("Dropped action %s", action.to_dict())

        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener()

        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register a listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
