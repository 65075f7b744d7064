"""
Board entity - the fixed-size grid the snake moves on.

Wrapping is applied to a candidate position before it is used, rather
than letting a position leave the board and correcting it a tick later.
"""

import random
from typing import List, Tuple

Cell = Tuple[int, int]


class Board:
    """
    A fixed grid of `size`-aligned cells covering [0, width) x [0, height).

    Attributes:
        width, height: pixel dimensions, both multiples of size
        size: edge length of one cell
    """

    __slots__ = ("_width", "_height", "_size")

    def __init__(self, width: int, height: int, size: int):
        if size <= 0:
            raise ValueError(f"Cell size must be positive, got {size}.")
        for name, value in (("width", width), ("height", height)):
            if value <= 0 or value % size:
                raise ValueError(
                    f"Board {name} must be a positive multiple of {size}, got {value}."
                )
        self._width = width
        self._height = height
        self._size = size

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._size

    @property
    def cell_count(self) -> int:
        return (self._width // self._size) * (self._height // self._size)

    def wrap(self, pos: Cell) -> Cell:
        """
        Wrap a raw position back onto the board.

        Each axis is handled independently, x before y: a coordinate at or
        past the far edge becomes 0, a negative one becomes the last cell.
        """
        x, y = pos
        if x >= self._width:
            x = 0
        elif x < 0:
            x = self._width - self._size
        if y >= self._height:
            y = 0
        elif y < 0:
            y = self._height - self._size
        return (x, y)

    def contains(self, pos: Cell) -> bool:
        x, y = pos
        return 0 <= x < self._width and 0 <= y < self._height

    def cells(self) -> List[Cell]:
        """Return every aligned cell, row by row."""
        return [
            (x, y)
            for y in range(0, self._height, self._size)
            for x in range(0, self._width, self._size)
        ]

    def random_cell(self, rng: random.Random) -> Cell:
        """Pick a uniformly random aligned cell."""
        x = rng.randrange(0, self._width, self._size)
        y = rng.randrange(0, self._height, self._size)
        return (x, y)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._width, self._height, self._size) == (other._width, other._height, other._size)

    def __hash__(self):
        return hash((self._width, self._height, self._size))

    def __repr__(self):
        return f"<Board {self._width}x{self._height} size={self._size}>"
