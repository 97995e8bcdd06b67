"""Grid, coordinate and difficulty primitives shared by the maze modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union

from .errors import InvalidCoordinate, InvalidDifficulty, MalformedGrid

WALL = 1
OPEN = 0

Grid = List[List[int]]

# (dx, dy) in fixed order: down, up, right, left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def offset(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    @classmethod
    def from_dict(cls, payload: Any) -> "Coordinate":
        """Parse the ``{"x": int, "y": int}`` wire form."""

        if not isinstance(payload, Mapping):
            raise InvalidCoordinate(f"Coordinate must be an object with x and y, got {payload!r}")
        x = payload.get("x")
        y = payload.get("y")
        if not _is_int(x) or not _is_int(y):
            raise InvalidCoordinate(f"Coordinate x and y must be integers, got {payload!r}")
        return cls(x, y)


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            choices = ", ".join(d.value for d in cls)
            raise InvalidDifficulty(f"Unknown difficulty {value!r}; expected one of {choices}") from exc


@dataclass(frozen=True)
class DifficultyPreset:
    """Default dimensions and carving parameters for one difficulty level."""

    width: int
    height: int
    loop_fraction: float = 0.0
    straight_bias: float = 0.0


DIFFICULTY_PRESETS: Dict[Difficulty, DifficultyPreset] = {
    Difficulty.EASY: DifficultyPreset(11, 11, loop_fraction=0.1),
    Difficulty.MEDIUM: DifficultyPreset(21, 21),
    Difficulty.HARD: DifficultyPreset(51, 21, straight_bias=0.5),
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def new_grid(width: int, height: int, fill: int = WALL) -> Grid:
    return [[fill for _ in range(width)] for _ in range(height)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def grid_size(grid: Grid) -> Tuple[int, int]:
    """Return ``(width, height)`` of a rectangular grid."""

    height = len(grid)
    width = len(grid[0]) if height else 0
    return width, height


def in_bounds(grid: Grid, coord: Coordinate) -> bool:
    width, height = grid_size(grid)
    return 0 <= coord.x < width and 0 <= coord.y < height


def neighbors(grid: Grid, coord: Coordinate) -> Iterator[Coordinate]:
    """Yield the in-bounds axis neighbours of ``coord`` in direction order."""

    for dx, dy in DIRECTIONS:
        candidate = coord.offset(dx, dy)
        if in_bounds(grid, candidate):
            yield candidate


def validate_grid(grid: Any) -> Grid:
    """Check that ``grid`` is a non-empty rectangle of 0/1 integers.

    Rows must be lists, since repair writes into the grid in place.
    """

    if not isinstance(grid, list) or not grid:
        raise MalformedGrid("Grid must be a non-empty list of rows")
    width = None
    for y, row in enumerate(grid):
        if not isinstance(row, list) or not row:
            raise MalformedGrid(f"Row {y} must be a non-empty list")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise MalformedGrid(f"Row {y} has length {len(row)}, expected {width}")
        for x, value in enumerate(row):
            if not _is_int(value) or value not in (OPEN, WALL):
                raise MalformedGrid(f"Cell ({x}, {y}) must be 0 or 1, got {value!r}")
    return grid


def validate_coordinate(grid: Grid, coord: Coordinate, *, label: str = "coordinate") -> Coordinate:
    if not isinstance(coord, Coordinate):
        raise InvalidCoordinate(f"{label} must be a Coordinate, got {coord!r}")
    if not in_bounds(grid, coord):
        width, height = grid_size(grid)
        raise InvalidCoordinate(
            f"{label} ({coord.x}, {coord.y}) is outside the {width}x{height} grid"
        )
    return coord


__all__ = [
    "WALL",
    "OPEN",
    "Grid",
    "DIRECTIONS",
    "Coordinate",
    "Difficulty",
    "DifficultyPreset",
    "DIFFICULTY_PRESETS",
    "new_grid",
    "copy_grid",
    "grid_size",
    "in_bounds",
    "neighbors",
    "validate_grid",
    "validate_coordinate",
]
