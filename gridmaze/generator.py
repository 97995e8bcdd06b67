"""Randomised depth-first maze generator over odd-aligned logical cells."""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .errors import InvalidDimensions
from .grid import (
    DIFFICULTY_PRESETS,
    OPEN,
    WALL,
    Difficulty,
    DifficultyPreset,
    Grid,
    new_grid,
)

logger = logging.getLogger(__name__)

MIN_SIZE = 2
MAX_SIZE = 512

# Steps between logical cells; the wall cell sits halfway.
CARVE_STEPS: Tuple[Tuple[int, int], ...] = ((0, 2), (0, -2), (2, 0), (-2, 0))

Cell = Tuple[int, int]


class MazeGenerator:
    """Build perfect (or, at low difficulty, loopy) mazes from 2x2 up to MAX_SIZE on a side.

    Logical cells live at coordinates where both x and y are odd, so one wall
    cell always separates neighbouring corridors. Carving is an iterative
    recursive backtracker; difficulty presets then tune the result:

    * ``loop_fraction`` opens that fraction of the wall count (at most) among
      walls sitting between two corridors, adding shortcuts.
    * ``straight_bias`` is the probability of continuing in the current
      direction while carving, which lengthens straight runs.
    """

    def __init__(self, presets: Optional[Mapping[Difficulty, DifficultyPreset]] = None) -> None:
        self.presets: Dict[Difficulty, DifficultyPreset] = dict(presets or DIFFICULTY_PRESETS)

    def generate(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> Grid:
        """Return a new ``height`` x ``width`` grid of walls (1) and open cells (0).

        Missing dimensions fall back to the difficulty preset. A fresh random
        source seeded with ``seed`` is used unless ``rng`` is supplied.
        """

        level = Difficulty.parse(difficulty)
        preset = self.presets[level]
        width = preset.width if width is None else width
        height = preset.height if height is None else height
        self._check_dimensions(width, height)
        if rng is None:
            rng = random.Random(seed)

        grid = new_grid(width, height, WALL)
        self._carve(grid, rng, preset.straight_bias)
        opened = 0
        if preset.loop_fraction > 0:
            opened = self._open_loops(grid, rng, preset.loop_fraction)

        logger.debug(
            "Generated %dx%d %s maze (seed=%s, loops opened=%d)",
            width,
            height,
            level.value,
            seed,
            opened,
        )
        return grid

    # ------------------------------------------------------------------

    @staticmethod
    def _check_dimensions(width: object, height: object) -> None:
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
            if value < MIN_SIZE:
                raise InvalidDimensions(f"{name} must be at least {MIN_SIZE}, got {value}")
            if value > MAX_SIZE:
                raise InvalidDimensions(f"{name} must be at most {MAX_SIZE}, got {value}")

    @staticmethod
    def _logical_cells(width: int, height: int) -> List[Cell]:
        return [(x, y) for y in range(1, height, 2) for x in range(1, width, 2)]

    def _carve(self, grid: Grid, rng: random.Random, straight_bias: float) -> None:
        height = len(grid)
        width = len(grid[0])
        start = rng.choice(self._logical_cells(width, height))
        grid[start[1]][start[0]] = OPEN

        stack: List[Tuple[Cell, Optional[Tuple[int, int]]]] = [(start, None)]
        while stack:
            (x, y), heading = stack[-1]
            options = [
                (dx, dy)
                for dx, dy in CARVE_STEPS
                if 0 <= x + dx < width and 0 <= y + dy < height and grid[y + dy][x + dx] == WALL
            ]
            if not options:
                stack.pop()
                continue
            if heading in options and straight_bias > 0 and rng.random() < straight_bias:
                step = heading
            else:
                step = rng.choice(options)
            dx, dy = step
            nx, ny = x + dx, y + dy
            grid[y + dy // 2][x + dx // 2] = OPEN
            grid[ny][nx] = OPEN
            stack.append(((nx, ny), step))

    @staticmethod
    def _connector_walls(grid: Grid) -> List[Cell]:
        """Walls with open cells on two opposite sides."""

        height = len(grid)
        width = len(grid[0])
        walls: List[Cell] = []
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                if grid[y][x] != WALL:
                    continue
                vertical = grid[y - 1][x] == OPEN and grid[y + 1][x] == OPEN
                horizontal = grid[y][x - 1] == OPEN and grid[y][x + 1] == OPEN
                if vertical or horizontal:
                    walls.append((x, y))
        return walls

    def _open_loops(self, grid: Grid, rng: random.Random, loop_fraction: float) -> int:
        wall_count = sum(row.count(WALL) for row in grid)
        candidates = self._connector_walls(grid)
        budget = min(len(candidates), int(wall_count * loop_fraction))
        for x, y in rng.sample(candidates, budget):
            grid[y][x] = OPEN
        return budget


def generate_maze(
    width: Optional[int] = None,
    height: Optional[int] = None,
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Shortcut for ``MazeGenerator().generate(...)`` with the default presets."""

    return MazeGenerator().generate(width, height, difficulty, seed=seed, rng=rng)


__all__ = ["MazeGenerator", "generate_maze", "MIN_SIZE", "MAX_SIZE"]
