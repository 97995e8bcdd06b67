"""Terminal and PNG renderings of a maze with an optional solution path."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image

from .grid import WALL, Coordinate, Grid, grid_size, validate_grid

PathLike = Union[str, Path]

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
SOLVE_COLOR = (255, 0, 0)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)

WALL_CHAR = "#"
OPEN_CHAR = " "
SOLVE_CHAR = "*"
START_CHAR = "S"
GOAL_CHAR = "E"


def render_ascii(
    grid: Grid,
    path: Optional[Iterable[Coordinate]] = None,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
) -> str:
    """Draw the grid as text, one character plus a space per cell."""

    validate_grid(grid)
    rows = [[WALL_CHAR if value == WALL else OPEN_CHAR for value in row] for row in grid]
    for cell in path or ():
        rows[cell.y][cell.x] = SOLVE_CHAR
    if start is not None:
        rows[start.y][start.x] = START_CHAR
    if end is not None:
        rows[end.y][end.x] = GOAL_CHAR
    return "\n".join(" ".join(row) + " " for row in rows)


class MazeRenderer:
    """Rasterise a maze grid to a PIL image, ``cell_size`` pixels per cell."""

    def __init__(self, cell_size: int = 20) -> None:
        if cell_size < 1:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size

    def canvas_dimensions(self, grid: Grid) -> Tuple[int, int]:
        width, height = grid_size(grid)
        return width * self.cell_size, height * self.cell_size

    def render(
        self,
        grid: Grid,
        path: Optional[Sequence[Coordinate]] = None,
        start: Optional[Coordinate] = None,
        end: Optional[Coordinate] = None,
    ) -> Image.Image:
        validate_grid(grid)
        cells = np.asarray(grid, dtype=np.uint8)
        pixels = np.where(
            cells[..., None] == WALL,
            np.array(WALL_COLOR, dtype=np.uint8),
            np.array(PATH_COLOR, dtype=np.uint8),
        ).astype(np.uint8)

        for cell in path or ():
            pixels[cell.y, cell.x] = SOLVE_COLOR
        if start is not None:
            pixels[start.y, start.x] = START_COLOR
        if end is not None:
            pixels[end.y, end.x] = GOAL_COLOR

        image = Image.fromarray(pixels)
        return image.resize(self.canvas_dimensions(grid), Image.Resampling.NEAREST)

    def save(
        self,
        destination: PathLike,
        grid: Grid,
        path: Optional[Sequence[Coordinate]] = None,
        start: Optional[Coordinate] = None,
        end: Optional[Coordinate] = None,
    ) -> Path:
        """Render and write a PNG, creating parent directories as needed."""

        target = Path(destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, path, start, end).save(target, format="PNG")
        return target


__all__ = [
    "MazeRenderer",
    "render_ascii",
    "WALL_COLOR",
    "PATH_COLOR",
    "SOLVE_COLOR",
    "START_COLOR",
    "GOAL_COLOR",
]
