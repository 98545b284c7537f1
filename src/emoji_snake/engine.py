# src/emoji_snake/engine.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import random

from .config import FOOD_POINTS, POWER_UP_POINTS, POISON_PENALTY, POWER_UP_TICKS
from .grid import Cell, Grid
from .state import GameState, Snapshot, next_cell

logger = logging.getLogger(__name__)


class EngineStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    game_over: bool = False
    score: int = 0
    consumed: Optional[str] = None        # "food", "power_up", "poison"
    snapshot: Optional[Snapshot] = None   # None on game over


class TickEngine:
    """
    Advances a GameState by one grid step per call.

    Order per tick: commit direction, compute the next head, check walls and
    body, grow, resolve at most one consumable (food > power-up > poison),
    decay the power-up timer, snapshot.
    """

    def __init__(self, grid: Grid, rng: random.Random, power_up_ticks: int = POWER_UP_TICKS):
        self.grid = grid
        self.rng = rng
        self.power_up_ticks = power_up_ticks
        self.status = EngineStatus.RUNNING

    def restart(self) -> None:
        self.status = EngineStatus.RUNNING

    def hits(self, state: GameState, cell: Cell) -> bool:
        """Wall or any segment behind the current head."""
        return not self.grid.in_bounds(cell) or cell in state.snake[1:]

    def step(self, state: GameState) -> TickResult:
        if self.status is not EngineStatus.RUNNING:
            raise RuntimeError("step() after game over; restart() first")

        # Commit direction once per tick
        state.direction = state.pending
        new_head = next_cell(state.snake[0], state.direction)

        if self.hits(state, new_head):
            self.status = EngineStatus.GAME_OVER
            return TickResult(game_over=True, score=state.score)

        state.snake.insert(0, new_head)

        consumed = None
        if new_head == state.food:
            state.score += FOOD_POINTS
            state.food = self.grid.random_cell(self.rng)
            consumed = "food"
        elif new_head == state.power_up:
            state.score += POWER_UP_POINTS
            state.power.activate(self.power_up_ticks)
            state.power_up = self.grid.random_cell(self.rng)
            consumed = "power_up"
        elif new_head == state.poison:
            state.score = max(0, state.score - POISON_PENALTY)
            state.snake.pop()
            state.poison = self.grid.random_cell(self.rng)
            consumed = "poison"
        else:
            state.snake.pop()

        if consumed:
            logger.debug("Consumed %s at %s, score=%d", consumed, new_head, state.score)

        state.power.decay()
        return TickResult(score=state.score, consumed=consumed, snapshot=Snapshot.of(state))
