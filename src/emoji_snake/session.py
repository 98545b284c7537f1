# src/emoji_snake/session.py
from __future__ import annotations
from typing import Optional
import logging
import random

from .config import Config, parse_interval, parse_volume
from .controls import InputController
from .engine import TickEngine, TickResult
from .grid import FixedBounds, Grid, ViewportBounds
from .state import GameState, Snapshot, new_game_state

logger = logging.getLogger(__name__)


class GameListener:
    """Outbound events of a session. Subclass and override what you need."""

    def on_render(self, snapshot: Snapshot) -> None:
        pass

    def on_eat(self) -> None:
        pass

    def on_game_over(self, score: int) -> None:
        pass

    def on_volume(self, volume: float) -> None:
        pass


def make_grid(cfg: Config, width_px: Optional[int] = None, height_px: Optional[int] = None) -> Grid:
    """Fixed N x N grid, or one derived from the viewport when cfg.resizable."""
    if cfg.resizable:
        w = width_px if width_px is not None else cfg.grid_cells * cfg.cell_size
        h = height_px if height_px is not None else cfg.grid_cells * cfg.cell_size
        return Grid(ViewportBounds(cfg.cell_size, w, h))
    return Grid(FixedBounds(cfg.grid_cells, cfg.grid_cells))


class GameSession:
    """
    Owns one game: its state, the tick engine and the repeating tick task.
    All mutation happens on the caller's thread (tick callback, input and
    config handlers), so there is no locking.
    """

    def __init__(self, cfg: Config, scheduler, listener: Optional[GameListener] = None,
                 grid: Optional[Grid] = None):
        self.cfg = cfg
        self.scheduler = scheduler
        self.listener = listener or GameListener()
        self.grid = grid or make_grid(cfg)
        self.rng = random.Random(cfg.seed)
        self.engine = TickEngine(self.grid, self.rng)
        self.state: GameState = new_game_state(self.grid, self.rng)
        self.controls = InputController(self.state)
        self.task = None

    # ----- lifecycle -----
    def start(self) -> None:
        self._schedule()

    def stop(self) -> None:
        if self.task is not None:
            self.task.cancel()
            self.task = None

    def _schedule(self) -> None:
        # Cancel before rescheduling so two timers never run at once
        self.stop()
        self.task = self.scheduler.every(self.cfg.tick_ms, self.tick)

    def reset(self) -> None:
        self.state = new_game_state(self.grid, self.rng)
        self.controls.state = self.state
        self.engine.restart()
        logger.info("New game at %s, tick=%dms", self.state.snake[0], self.cfg.tick_ms)
        self._schedule()

    def tick(self) -> TickResult:
        result = self.engine.step(self.state)
        if result.game_over:
            logger.info("Game over, score=%d", result.score)
            try:
                self.listener.on_game_over(result.score)
            finally:
                self.reset()
            return result
        if result.consumed == "food":
            self.listener.on_eat()
        self.listener.on_render(result.snapshot)
        return result

    # ----- input -----
    def request_direction(self, candidate) -> None:
        self.controls.request_direction(candidate)

    # ----- configuration -----
    def set_interval(self, raw) -> bool:
        ms = parse_interval(raw)
        if ms is None or not self.cfg.min_tick_ms <= ms <= self.cfg.max_tick_ms:
            logger.warning("Rejected tick interval %r (allowed %d-%d ms)",
                           raw, self.cfg.min_tick_ms, self.cfg.max_tick_ms)
            return False
        self.cfg.tick_ms = ms
        logger.info("Tick interval set to %dms", ms)
        if self.task is not None:
            self._schedule()
        return True

    def set_volume(self, raw) -> bool:
        vol = parse_volume(raw)
        if vol is None:
            logger.warning("Rejected volume %r (allowed 0.0-1.0)", raw)
            return False
        self.cfg.volume = vol
        logger.info("Volume set to %.2f", vol)
        self.listener.on_volume(vol)
        return True

    def resize(self, width_px: int, height_px: int) -> None:
        """Recompute a viewport-derived grid; re-place consumables left off-grid."""
        bounds = self.grid.bounds
        if not isinstance(bounds, ViewportBounds):
            return
        bounds.resize(width_px, height_px)
        for name in ("food", "power_up", "poison"):
            if not self.grid.in_bounds(getattr(self.state, name)):
                setattr(self.state, name, self.grid.random_cell(self.rng))
        logger.debug("Grid resized to %dx%d", self.grid.width, self.grid.height)

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state)
