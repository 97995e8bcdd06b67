"""Check a candidate path against a maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Set, Tuple

from .grid import DIRECTIONS, WALL, Coordinate, Grid, in_bounds, validate_coordinate, validate_grid
from .solver import PathSolver


@dataclass
class PathEvaluationResult:
    connected: bool
    touches_goal: bool
    stray_in_walls: bool
    is_shortest: bool
    length: int
    message: str

    @property
    def is_valid(self) -> bool:
        return self.connected and self.touches_goal and not self.stray_in_walls

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "touches_goal": self.touches_goal,
            "stray_in_walls": self.stray_in_walls,
            "is_shortest": self.is_shortest,
            "is_valid": self.is_valid,
            "length": self.length,
            "message": self.message,
        }


class PathEvaluator:
    """Evaluate a path by checking it steps through open cells from start to goal.

    The path may be listed in either direction; solver output runs from the
    goal back to the start.
    """

    def __init__(self, solver: Optional[PathSolver] = None) -> None:
        self.solver = solver or PathSolver()

    def evaluate(
        self,
        grid: Grid,
        path: Sequence[Coordinate],
        start: Coordinate,
        goal: Coordinate,
    ) -> PathEvaluationResult:
        validate_grid(grid)
        validate_coordinate(grid, start, label="start")
        validate_coordinate(grid, goal, label="goal")

        cells = list(path)
        if cells and cells[0] == goal and cells[-1] == start:
            cells.reverse()

        stray_in_walls = any(not in_bounds(grid, cell) or grid[cell.y][cell.x] == WALL for cell in cells)
        connected, touches_goal = self._check_connectivity(cells, start, goal)

        shortest = self.solver.solve(grid, start, goal)
        is_shortest = (
            connected
            and touches_goal
            and not stray_in_walls
            and shortest is not None
            and len(cells) == len(shortest)
        )

        if not cells:
            message = "No path supplied."
        elif stray_in_walls:
            message = "Path crosses walls or leaves the grid."
        elif not touches_goal:
            message = "Path does not reach the goal."
        elif not connected:
            message = "Path is not continuous from start to goal."
        elif not is_shortest:
            message = "Path connects start to goal but is not the shortest."
        else:
            message = "Path is a shortest route from start to goal."

        return PathEvaluationResult(
            connected=connected,
            touches_goal=touches_goal,
            stray_in_walls=stray_in_walls,
            is_shortest=is_shortest,
            length=len(cells),
            message=message,
        )

    # ------------------------------------------------------------------

    @staticmethod
    def _check_connectivity(
        cells: Sequence[Coordinate],
        start: Coordinate,
        goal: Coordinate,
    ) -> Tuple[bool, bool]:
        if not cells:
            return False, False
        touches_goal = cells[-1] == goal
        if cells[0] != start:
            return False, touches_goal
        seen: Set[Coordinate] = {cells[0]}
        steps = set(DIRECTIONS)
        for previous, current in zip(cells, cells[1:]):
            if (current.x - previous.x, current.y - previous.y) not in steps:
                return False, touches_goal
            if current in seen:
                return False, touches_goal
            seen.add(current)
        return True, touches_goal


__all__ = ["PathEvaluator", "PathEvaluationResult"]
