# src/emoji_snake/grid.py
from __future__ import annotations
import random
from typing import Protocol, Tuple

Cell = Tuple[int, int]


class BoundsProvider(Protocol):
    """Anything that can report the current grid size in cells."""

    def size(self) -> Tuple[int, int]: ...


class FixedBounds:
    """A constant cell count, e.g. 30x30."""

    def __init__(self, cells_w: int, cells_h: int):
        self.cells_w = cells_w
        self.cells_h = cells_h

    def size(self) -> Tuple[int, int]:
        return self.cells_w, self.cells_h


class ViewportBounds:
    """Cell count derived from a pixel viewport, recomputed on resize."""

    def __init__(self, cell_size: int, width_px: int, height_px: int):
        self.cell_size = cell_size
        self.resize(width_px, height_px)

    def resize(self, width_px: int, height_px: int) -> None:
        self.cells_w = max(1, width_px // self.cell_size)
        self.cells_h = max(1, height_px // self.cell_size)

    def size(self) -> Tuple[int, int]:
        return self.cells_w, self.cells_h


class Grid:
    """The discrete coordinate space every entity lives in."""

    def __init__(self, bounds: BoundsProvider):
        self.bounds = bounds

    @property
    def width(self) -> int:
        return self.bounds.size()[0]

    @property
    def height(self) -> int:
        return self.bounds.size()[1]

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        w, h = self.bounds.size()
        return 0 <= x < w and 0 <= y < h

    def random_cell(self, rng: random.Random) -> Cell:
        # Pure uniform sample: may land on the snake or another consumable.
        w, h = self.bounds.size()
        return (rng.randrange(w), rng.randrange(h))

    def clamp(self, cell: Cell) -> Cell:
        w, h = self.bounds.size()
        return (min(max(cell[0], 0), w - 1), min(max(cell[1], 0), h - 1))
