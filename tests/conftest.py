"""
Shared fixtures for the snek test suite.
"""

import itertools
import random
from unittest.mock import Mock

import pytest

from snek.domain.board import Board
from snek.services.surface import RecordingSurface

FAR_CELL = (0, 0)


def scripted_rng(cells=(), randoms=None, default_cell=FAR_CELL):
    """
    A stand-in for random.Random.

    `cells` are consumed in order by food placement (one randrange call per
    axis), then `default_cell` is returned forever. `randoms` feed the food
    expiry draw; without them every draw is 0.99 and food never expires early.
    """
    rng = Mock(spec=random.Random)
    coords = [c for cell in cells for c in cell]
    rng.randrange.side_effect = itertools.chain(coords, itertools.cycle(default_cell))
    if randoms is None:
        rng.random.return_value = 0.99
    else:
        rng.random.side_effect = list(randoms)
    return rng


@pytest.fixture
def board():
    return Board(250, 250, 10)


@pytest.fixture
def surface():
    return RecordingSurface(10)
