"""Tick-driven emoji snake: grid, state, input, engine and session."""

from .engine import EngineStatus, TickEngine, TickResult
from .grid import FixedBounds, Grid, ViewportBounds
from .session import GameListener, GameSession
from .state import GameState, PowerUpState, Snapshot, new_game_state

__all__ = [
    "EngineStatus", "TickEngine", "TickResult",
    "FixedBounds", "Grid", "ViewportBounds",
    "GameListener", "GameSession",
    "GameState", "PowerUpState", "Snapshot", "new_game_state",
]
