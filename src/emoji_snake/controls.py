# src/emoji_snake/controls.py
from __future__ import annotations
import logging
from typing import Optional, Tuple

from .config import DIRECTIONS, UP, DOWN, LEFT, RIGHT
from .state import GameState, is_opposite

logger = logging.getLogger(__name__)

# Key / button names -> direction names
_ALIASES = {
    "ARROWUP": "UP", "W": "UP",
    "ARROWDOWN": "DOWN", "S": "DOWN",
    "ARROWLEFT": "LEFT", "A": "LEFT",
    "ARROWRIGHT": "RIGHT", "D": "RIGHT",
}


def direction_from_name(name: str) -> Optional[Tuple[int, int]]:
    """'up', 'ArrowUp', 'w' ... -> (dx, dy); None if not a direction."""
    if not isinstance(name, str):
        return None
    key = name.strip().upper()
    return DIRECTIONS.get(_ALIASES.get(key, key))


def direction_from_swipe(dx: float, dy: float, threshold: float = 30.0) -> Optional[Tuple[int, int]]:
    """
    Map a drag/touch gesture (in pixels, y pointing down) to the direction of
    its dominant axis. Gestures shorter than `threshold` are taps, not swipes.
    """
    if max(abs(dx), abs(dy)) < threshold:
        return None
    if abs(dx) >= abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class InputController:
    """Turns directional intents into a single pending direction (no 180° turns)."""

    def __init__(self, state: GameState):
        self.state = state

    def request_direction(self, candidate) -> None:
        if isinstance(candidate, str):
            candidate = direction_from_name(candidate)
        if candidate not in DIRECTIONS.values():
            logger.debug("Ignoring unknown direction %r", candidate)
            return
        # Validate against the committed direction, not the pending one
        if is_opposite(candidate, self.state.direction):
            logger.debug("Ignoring reversal %r while moving %r", candidate, self.state.direction)
            return
        self.state.pending = candidate
