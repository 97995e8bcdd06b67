"""Force endpoint cells open and attach them to the maze body."""

from __future__ import annotations

import logging

from .grid import OPEN, Coordinate, Grid, neighbors, validate_coordinate, validate_grid

logger = logging.getLogger(__name__)


def repair(grid: Grid, coordinate: Coordinate) -> Grid:
    """Open ``coordinate`` and, if it has no open neighbour, open exactly one.

    The neighbour chosen is the first in-bounds one in the order down, up,
    right, left. The grid is modified in place and returned. Calling this
    twice for the same coordinate changes nothing the second time.
    """

    validate_grid(grid)
    validate_coordinate(grid, coordinate)

    grid[coordinate.y][coordinate.x] = OPEN
    adjacent = list(neighbors(grid, coordinate))
    if any(grid[cell.y][cell.x] == OPEN for cell in adjacent):
        return grid
    if adjacent:
        link = adjacent[0]
        grid[link.y][link.x] = OPEN
        logger.debug("Opened (%d, %d) to reconnect (%d, %d)", link.x, link.y, coordinate.x, coordinate.y)
    return grid


def repair_endpoints(grid: Grid, start: Coordinate, end: Coordinate) -> Grid:
    """Run :func:`repair` for both endpoints, never skipping either."""

    repair(grid, start)
    repair(grid, end)
    return grid


__all__ = ["repair", "repair_endpoints"]
