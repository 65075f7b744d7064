"""
Drawing surfaces the game engine paints on.

The engine only ever asks a surface to draw a cell, clear a cell or clear
a rectangular region; it never reads anything back. Two implementations
are provided:

- RecordingSurface keeps the filled cells and the call log in memory
  (headless runs, tests, ASCII output)
- ImageSurface paints onto a Pillow image that can be saved as a PNG or
  collected into an animated GIF
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from PIL import Image, ImageDraw

from snek.domain.board import Cell
from snek.domain.constants import CELL_SIZE, FOOD, SNAKE

logger = logging.getLogger(__name__)


class ColorScheme:
    """Colors used by ImageSurface"""

    BACKGROUND = "#FFFFFF"
    SNAKE_BORDER = "#FFFFFF"
    SNAKE = "#FF0000"
    FOOD = "#008000"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class DrawingSurface:
    """
    Base class/interface for drawing surfaces.

    Coordinates are pixel positions of a cell's top-left corner; every cell
    is `cell_size` wide and high.
    """

    def __init__(self, cell_size: int = CELL_SIZE):
        self.cell_size = cell_size

    def draw_cell(self, x: int, y: int, kind: str = SNAKE) -> None:
        raise NotImplementedError

    def clear_cell(self, x: int, y: int) -> None:
        raise NotImplementedError

    def clear_region(self, x: int, y: int, w: int, h: int) -> None:
        raise NotImplementedError


class RecordingSurface(DrawingSurface):
    """Keeps what is on screen, plus every call made, in memory."""

    def __init__(self, cell_size: int = CELL_SIZE):
        super().__init__(cell_size)
        self.cells: Dict[Cell, str] = {}
        self.operations: List[tuple] = []

    def draw_cell(self, x: int, y: int, kind: str = SNAKE) -> None:
        self.cells[(x, y)] = kind
        self.operations.append(("draw", x, y, kind))

    def clear_cell(self, x: int, y: int) -> None:
        self.cells.pop((x, y), None)
        self.operations.append(("clear", x, y))

    def clear_region(self, x: int, y: int, w: int, h: int) -> None:
        self.cells = {
            (cx, cy): kind
            for (cx, cy), kind in self.cells.items()
            if not (x <= cx < x + w and y <= cy < y + h)
        }
        self.operations.append(("clear_region", x, y, w, h))

    def filled(self, kind: Optional[str] = None) -> List[Cell]:
        """Cells currently painted, optionally only those of one kind."""
        return sorted(cell for cell, k in self.cells.items() if kind is None or k == kind)

    def cleared(self) -> List[Cell]:
        """Every cell passed to clear_cell, in call order."""
        return [(op[1], op[2]) for op in self.operations if op[0] == "clear"]


class ImageSurface(DrawingSurface):
    """Paints the game onto a Pillow image."""

    def __init__(self, width: int, height: int, cell_size: int = CELL_SIZE):
        super().__init__(cell_size)
        self.width = width
        self.height = height
        self.image = Image.new('RGB', (width, height), hex_to_rgb(ColorScheme.BACKGROUND))
        self._draw = ImageDraw.Draw(self.image)
        self.frames: List[Image.Image] = []
        self.frame_durations: List[Optional[int]] = []

    def _fill(self, x: int, y: int, w: int, h: int, color: str) -> None:
        if w <= 0 or h <= 0:
            return
        # Pillow rectangles include both corners
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], fill=hex_to_rgb(color))

    def draw_cell(self, x: int, y: int, kind: str = SNAKE) -> None:
        size = self.cell_size
        if kind == FOOD:
            self._fill(x, y, size, size, ColorScheme.FOOD)
            return
        # Snake segments get a 1px border so adjacent cells stay distinguishable
        self._fill(x, y, size, size, ColorScheme.SNAKE_BORDER)
        self._fill(x + 1, y + 1, size - 2, size - 2, ColorScheme.SNAKE)

    def clear_cell(self, x: int, y: int) -> None:
        self._fill(x, y, self.cell_size, self.cell_size, ColorScheme.BACKGROUND)

    def clear_region(self, x: int, y: int, w: int, h: int) -> None:
        self._fill(x, y, w, h, ColorScheme.BACKGROUND)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        return self.image.getpixel((x, y))

    def capture_frame(self, duration_ms: Optional[int] = None) -> Image.Image:
        """
        Store a copy of the current image as an animation frame.

        `duration_ms` is how long the frame stays on screen; frames without
        one use the `frame_ms` passed to save_animation().
        """
        frame = self.image.copy()
        self.frames.append(frame)
        self.frame_durations.append(duration_ms)
        return frame

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        logger.info(f"Saved board image to {path}")
        return path

    def save_animation(self, path: Union[str, Path], frame_ms: int = 200) -> Path:
        """Write the captured frames as an animated GIF."""
        if not self.frames:
            raise ValueError("No frames captured; call capture_frame() first.")
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        durations = [frame_ms if d is None else d for d in self.frame_durations]
        first, *rest = self.frames
        first.save(
            path,
            save_all=True,
            append_images=rest,
            duration=durations,
            loop=0,
        )
        logger.info(f"Saved {len(self.frames)} frame animation to {path}")
        return path
