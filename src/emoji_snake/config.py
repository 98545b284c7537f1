# src/emoji_snake/config.py
from dataclasses import dataclass
from typing import Optional
import math
import re

# ----- Window & grid -----
CELL_SIZE = 20
GRID_CELLS = 30
WIDTH, HEIGHT = CELL_SIZE * GRID_CELLS, CELL_SIZE * GRID_CELLS
START_CELL = (10, 10)

# ----- Colors -----
BG     = (30, 30, 30)
GREEN  = (80, 200, 80)
LIME   = (150, 240, 120)
RED    = (200, 70, 70)
GOLD   = (240, 200, 60)
PURPLE = (150, 80, 190)
TEXT   = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}

# ----- Glyphs -----
HEAD_GLYPH = "🐸"
BODY_GLYPH = "🟩"
FRUIT_GLYPHS = ("🍎", "🍌", "🍇", "🍉")
STAR_GLYPH = "⭐"
POISON_GLYPH = "☠️"

# ----- Scoring -----
FOOD_POINTS = 1
POWER_UP_POINTS = 5
POISON_PENALTY = 3
POWER_UP_TICKS = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 100
    min_tick_ms: int = 50
    max_tick_ms: int = 1000
    volume: float = 0.5
    grid_cells: int = GRID_CELLS
    cell_size: int = CELL_SIZE
    resizable: bool = False
    assets_dir: Optional[str] = None


def parse_interval(raw) -> Optional[int]:
    """
    Read a tick interval the way a speed input field would: an int, or a
    string with a leading integer ("120", "120ms"). Returns None if unusable.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        return int(m.group(1)) if m else None
    return None


def parse_volume(raw) -> Optional[float]:
    """Volume in [0.0, 1.0], or None."""
    if isinstance(raw, bool):
        return None
    try:
        vol = float(raw)
    except (TypeError, ValueError):
        return None
    if not 0.0 <= vol <= 1.0:  # also rejects NaN
        return None
    return vol
