"""
Keyboard state as seen by the gameplay loop.
NO UI DEPENDENCIES.

Key events may arrive at any time; they only touch the pressed-key set
and the action queue. The frame step reads a snapshot of the set and
drains the queue once per tick.
"""
from enum import Enum, auto
from typing import Iterable, List, Set, FrozenSet, Tuple

from .constants import MOVE_KEYS, FIRE_KEY, REVIVE_KEY


class Action(Enum):
    """Discrete one-shot actions triggered by a key press."""
    FIRE = auto()
    REVIVE = auto()


ACTION_KEYS = {
    FIRE_KEY: Action.FIRE,
    REVIVE_KEY: Action.REVIVE,
}


class InputState:
    """Pressed keys plus a queue of pending actions."""

    def __init__(self):
        self.pressed: Set[str] = set()
        self._actions: List[Action] = []

    def key_down(self, key: str) -> None:
        """Record a key press. Action keys also enqueue their action."""
        key = key.lower()
        self.pressed.add(key)
        action = ACTION_KEYS.get(key)
        if action is not None:
            self._actions.append(action)

    def key_up(self, key: str) -> None:
        self.pressed.discard(key.lower())

    def snapshot(self) -> FrozenSet[str]:
        """Keys held right now, frozen for one tick."""
        return frozenset(self.pressed)

    def drain_actions(self) -> List[Action]:
        """Return pending actions in arrival order and clear the queue."""
        actions, self._actions = self._actions, []
        return actions


def movement_from_keys(pressed: Iterable[str]) -> Tuple[int, int]:
    """
    Combine held movement keys into a direction (dx, dy).
    Opposite keys cancel out.
    """
    dx = dy = 0
    for key in pressed:
        step = MOVE_KEYS.get(key)
        if step is not None:
            dx += step[0]
            dy += step[1]
    return dx, dy
