# src/emoji_snake/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple
import random

import numpy as np  # type: ignore

from .config import START_CELL, RIGHT, FRUIT_GLYPHS
from .grid import Cell, Grid

# Board codes used by Snapshot.board()
EMPTY, BODY, HEAD, FOOD, POWER_UP, POISON = range(6)
_BOARD_CHARS = {EMPTY: ".", BODY: "o", HEAD: "@", FOOD: "F", POWER_UP: "*", POISON: "X"}


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def next_cell(cell: Cell, direction: Tuple[int, int]) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])


@dataclass
class PowerUpState:
    active: bool = False
    ticks_remaining: int = 0

    def activate(self, ticks: int) -> None:
        self.active = True
        self.ticks_remaining = ticks

    def decay(self) -> None:
        """Count down one tick; switches off once the counter hits zero."""
        if not self.active:
            return
        self.ticks_remaining -= 1
        if self.ticks_remaining <= 0:
            self.active = False


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Tuple[int, int]     # committed this tick
    pending: Tuple[int, int]       # next tick's direction
    food: Cell
    power_up: Cell
    poison: Cell
    power: PowerUpState = field(default_factory=PowerUpState)
    score: int = 0


def new_game_state(grid: Grid, rng: random.Random, start: Cell = START_CELL) -> GameState:
    return GameState(
        snake=[grid.clamp(start)],
        direction=RIGHT,
        pending=RIGHT,
        food=grid.random_cell(rng),
        power_up=grid.random_cell(rng),
        poison=grid.random_cell(rng),
        power=PowerUpState(),
        score=0,
    )


@dataclass(frozen=True)
class Snapshot:
    """Render-ready view of one frame."""
    head: Cell
    body: Tuple[Cell, ...]
    food: Cell
    power_up: Cell
    poison: Cell
    score: int
    power_up_active: bool
    direction: Tuple[int, int]

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(
            head=state.snake[0],
            body=tuple(state.snake[1:]),
            food=state.food,
            power_up=state.power_up,
            poison=state.poison,
            score=state.score,
            power_up_active=state.power.active,
            direction=state.direction,
        )

    @property
    def fruit_index(self) -> int:
        # Fruit glyph cycles with the score
        return self.score % len(FRUIT_GLYPHS)

    def board(self, width: int, height: int) -> np.ndarray:
        """
        Encode the frame as a (height, width) int8 grid.
        Later layers win: consumables, then body, then head.
        Cells outside the grid are skipped.
        """
        grid = np.full((height, width), EMPTY, dtype=np.int8)
        layers = [
            (FOOD, [self.food]),
            (POWER_UP, [self.power_up]),
            (POISON, [self.poison]),
            (BODY, self.body),
            (HEAD, [self.head]),
        ]
        for code, cells in layers:
            for x, y in cells:
                if 0 <= x < width and 0 <= y < height:
                    grid[y, x] = code
        return grid

    def print_board(self, width: int, height: int) -> str:
        rows = self.board(width, height)
        lines = ["".join(_BOARD_CHARS[int(c)] for c in row) for row in rows]
        lines.append(f"score={self.score} power_up={'on' if self.power_up_active else 'off'}")
        return "\n".join(lines)
