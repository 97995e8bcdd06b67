"""Request/response boundary between wire payloads and the maze core."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .errors import InvalidCoordinate, InvalidRequest
from .evaluator import PathEvaluator
from .generator import MazeGenerator
from .grid import Coordinate, Difficulty, Grid, grid_size, validate_grid
from .repair import repair_endpoints
from .solver import Path, PathSolver

logger = logging.getLogger(__name__)


@dataclass
class GeneratedMaze:
    grid: Grid
    difficulty: Difficulty
    start: Coordinate
    end: Coordinate

    @property
    def width(self) -> int:
        return grid_size(self.grid)[0]

    @property
    def height(self) -> int:
        return grid_size(self.grid)[1]

    def to_dict(self) -> dict:
        return {
            "grid": self.grid,
            "width": self.width,
            "height": self.height,
            "difficulty": self.difficulty.value,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass
class SolveResult:
    path: Optional[Path]

    @property
    def found(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        if self.path is None:
            return {"path": None}
        return {"path": [cell.to_dict() for cell in self.path]}


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidRequest("Request body must be a JSON object")
    return payload


def _require_field(payload: Mapping[str, Any], name: str) -> Any:
    if name not in payload or payload[name] is None:
        raise InvalidRequest(f"Missing required field '{name}'")
    return payload[name]


def _clamp(coord: Coordinate, width: int, height: int) -> Coordinate:
    return Coordinate(
        min(max(coord.x, 0), width - 1),
        min(max(coord.y, 0), height - 1),
    )


def parse_path(value: Any) -> List[Coordinate]:
    if not isinstance(value, list):
        raise InvalidRequest("'path' must be a list of coordinates")
    return [Coordinate.from_dict(item) for item in value]


class MazeService:
    """Handle generate/solve/verify requests expressed as plain dictionaries."""

    def __init__(
        self,
        generator: Optional[MazeGenerator] = None,
        solver: Optional[PathSolver] = None,
        evaluator: Optional[PathEvaluator] = None,
    ) -> None:
        self.generator = generator or MazeGenerator()
        self.solver = solver or PathSolver()
        self.evaluator = evaluator or PathEvaluator(self.solver)

    def create_maze(
        self,
        difficulty: Difficulty,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        start: Optional[Coordinate] = None,
        end: Optional[Coordinate] = None,
        seed: Optional[int] = None,
    ) -> GeneratedMaze:
        """Generate a maze and repair both endpoints so they join the maze body.

        Endpoints default to the top-left and bottom-right corners and are
        clamped into the generated bounds.
        """

        grid = self.generator.generate(width, height, difficulty, seed=seed)
        grid_width, grid_height = grid_size(grid)
        start = _clamp(start or Coordinate(0, 0), grid_width, grid_height)
        end = _clamp(end or Coordinate(grid_width - 1, grid_height - 1), grid_width, grid_height)
        if start == end:
            raise InvalidCoordinate(f"start and end must differ, both are ({start.x}, {start.y})")
        repair_endpoints(grid, start, end)
        return GeneratedMaze(grid=grid, difficulty=difficulty, start=start, end=end)

    def generate(self, payload: Any) -> Dict[str, Any]:
        payload = _require_mapping(payload)
        difficulty = Difficulty.parse(_require_field(payload, "difficulty"))
        start = Coordinate.from_dict(payload["start"]) if payload.get("start") is not None else None
        end = Coordinate.from_dict(payload["end"]) if payload.get("end") is not None else None
        seed = payload.get("seed")
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
            raise InvalidRequest(f"'seed' must be an integer, got {seed!r}")

        maze = self.create_maze(
            difficulty,
            width=payload.get("width"),
            height=payload.get("height"),
            start=start,
            end=end,
            seed=seed,
        )
        logger.debug(
            "generate difficulty=%s size=%dx%d start=%s end=%s",
            difficulty.value,
            maze.width,
            maze.height,
            maze.start,
            maze.end,
        )
        return maze.to_dict()

    def solve(self, payload: Any) -> Dict[str, Any]:
        payload = _require_mapping(payload)
        grid = validate_grid(_require_field(payload, "grid"))
        start = Coordinate.from_dict(_require_field(payload, "start"))
        end = Coordinate.from_dict(_require_field(payload, "end"))

        result = SolveResult(self.solver.solve(grid, start, end))
        logger.debug("solve start=%s end=%s found=%s", start, end, result.found)
        return result.to_dict()

    def verify(self, payload: Any) -> Dict[str, Any]:
        payload = _require_mapping(payload)
        grid = validate_grid(_require_field(payload, "grid"))
        start = Coordinate.from_dict(_require_field(payload, "start"))
        end = Coordinate.from_dict(_require_field(payload, "end"))
        path = parse_path(_require_field(payload, "path"))
        return self.evaluator.evaluate(grid, path, start, end).to_dict()


__all__ = ["MazeService", "GeneratedMaze", "SolveResult", "parse_path"]
