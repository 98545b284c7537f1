import os
import random
import sys

import pytest

# Allow running the suite from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from emoji_snake.config import RIGHT
from emoji_snake.grid import FixedBounds, Grid
from emoji_snake.state import GameState


FAR = (29, 29)


def _make_state(snake, direction=RIGHT, food=FAR, power_up=(28, 29), poison=(27, 29), score=0):
    """Hand-placed state; consumables default to a corner away from the action."""
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        power_up=power_up,
        poison=poison,
        score=score,
    )


@pytest.fixture
def make_state():
    return _make_state


@pytest.fixture
def grid():
    return Grid(FixedBounds(30, 30))


@pytest.fixture
def rng():
    return random.Random(1234)
