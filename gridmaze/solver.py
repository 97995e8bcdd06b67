"""Breadth-first shortest path search over open grid cells."""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from .grid import DIRECTIONS, OPEN, Coordinate, Grid, grid_size, validate_coordinate, validate_grid

logger = logging.getLogger(__name__)

Path = List[Coordinate]


class PathSolver:
    """Find shortest 4-connected paths between two cells of a grid.

    Neighbours are expanded in a fixed order, so ties between equally short
    paths always resolve the same way for a given grid and endpoints.
    """

    def __init__(self, directions: Sequence[Tuple[int, int]] = DIRECTIONS) -> None:
        self.directions: Tuple[Tuple[int, int], ...] = tuple(directions)

    def solve(self, grid: Grid, start: Coordinate, end: Coordinate) -> Optional[Path]:
        """Return the path from ``end`` back to ``start``, or ``None`` if unreachable.

        Wall endpoints are not an error; they simply yield ``None``.
        """

        validate_grid(grid)
        validate_coordinate(grid, start, label="start")
        validate_coordinate(grid, end, label="end")

        if grid[start.y][start.x] != OPEN or grid[end.y][end.x] != OPEN:
            logger.debug("Endpoint on a wall: start=%s end=%s", start, end)
            return None

        width, height = grid_size(grid)
        parents: Dict[Coordinate, Optional[Coordinate]] = {start: None}
        queue: deque[Coordinate] = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return self._reconstruct(parents, end)
            for dx, dy in self.directions:
                nx, ny = current.x + dx, current.y + dy
                if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == OPEN:
                    candidate = Coordinate(nx, ny)
                    if candidate not in parents:
                        parents[candidate] = current
                        queue.append(candidate)

        logger.debug("No path between %s and %s after visiting %d cells", start, end, len(parents))
        return None

    @staticmethod
    def _reconstruct(parents: Dict[Coordinate, Optional[Coordinate]], end: Coordinate) -> Path:
        path: Path = []
        node: Optional[Coordinate] = end
        while node is not None:
            path.append(node)
            node = parents[node]
        return path


def solve(grid: Grid, start: Coordinate, end: Coordinate) -> Optional[Path]:
    return PathSolver().solve(grid, start, end)


__all__ = ["PathSolver", "Path", "solve"]
