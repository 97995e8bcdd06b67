"""Exception types raised on invalid maze input."""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for input validation failures."""

    kind = "maze_error"


class InvalidDimensions(MazeError):
    kind = "invalid_dimensions"


class InvalidCoordinate(MazeError):
    kind = "invalid_coordinate"


class MalformedGrid(MazeError):
    kind = "malformed_grid"


class InvalidDifficulty(MazeError):
    kind = "invalid_difficulty"


class InvalidRequest(MazeError):
    """Raised when a request payload is missing fields or has the wrong shape."""

    kind = "invalid_request"


__all__ = [
    "MazeError",
    "InvalidDimensions",
    "InvalidCoordinate",
    "MalformedGrid",
    "InvalidDifficulty",
    "InvalidRequest",
]
