"""Maze generation, connectivity repair and shortest-path solving on 2D grids."""

__all__ = [
    "WALL",
    "OPEN",
    "Coordinate",
    "Difficulty",
    "DifficultyPreset",
    "DIFFICULTY_PRESETS",
    "MazeError",
    "InvalidDimensions",
    "InvalidCoordinate",
    "MalformedGrid",
    "InvalidDifficulty",
    "InvalidRequest",
    "MazeGenerator",
    "generate_maze",
    "repair",
    "repair_endpoints",
    "PathSolver",
    "solve",
    "PathEvaluator",
    "PathEvaluationResult",
    "MazeRenderer",
    "render_ascii",
    "MazeService",
]

from .errors import (
    MazeError,
    InvalidDimensions,
    InvalidCoordinate,
    MalformedGrid,
    InvalidDifficulty,
    InvalidRequest,
)
from .grid import WALL, OPEN, Coordinate, Difficulty, DifficultyPreset, DIFFICULTY_PRESETS
from .generator import MazeGenerator, generate_maze
from .repair import repair, repair_endpoints
from .solver import PathSolver, solve
from .evaluator import PathEvaluator, PathEvaluationResult
from .render import MazeRenderer, render_ascii
from .service import MazeService
