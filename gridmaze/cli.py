"""Command line entry point: generate a maze, solve it, print and export it."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import MazeError
from .evaluator import PathEvaluator
from .grid import Coordinate, Difficulty
from .render import MazeRenderer, render_ascii
from .service import MazeService


def _coordinate(value: str) -> Coordinate:
    try:
        x_text, y_text = value.split(",")
        return Coordinate(int(x_text), int(y_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}") from exc


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random maze and find the shortest path through it")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Easy (11x11), Medium (21x21) or Hard (51x21)",
    )
    parser.add_argument("--width", type=int, default=None, help="Override the preset width")
    parser.add_argument("--height", type=int, default=None, help="Override the preset height")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--start", type=_coordinate, default=None, help="Start cell as X,Y (default 0,0)")
    parser.add_argument("--end", type=_coordinate, default=None, help="End cell as X,Y (default bottom-right)")
    parser.add_argument("--output", type=Path, default=Path("maze_result.png"), help="PNG file to write")
    parser.add_argument("--no-image", action="store_true", help="Skip the PNG export")
    parser.add_argument("--cell-size", type=int, default=20, help="Pixels per maze cell in the PNG")
    parser.add_argument("--json", action="store_true", help="Print a JSON document instead of ASCII art")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    service = MazeService()
    try:
        maze = service.create_maze(
            Difficulty.parse(args.difficulty),
            width=args.width,
            height=args.height,
            start=args.start,
            end=args.end,
            seed=args.seed,
        )
    except MazeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    path = service.solver.solve(maze.grid, maze.start, maze.end)
    evaluation = PathEvaluator(service.solver).evaluate(maze.grid, path or [], maze.start, maze.end)

    if args.json:
        document = maze.to_dict()
        document["path"] = [cell.to_dict() for cell in path] if path is not None else None
        document["evaluation"] = evaluation.to_dict()
        print(json.dumps(document, indent=2))
    else:
        print(f"{maze.difficulty.value} maze ({maze.width}x{maze.height})")
        print(render_ascii(maze.grid, path, maze.start, maze.end))
        print(evaluation.message)

    if not args.no_image:
        target = MazeRenderer(cell_size=args.cell_size).save(args.output, maze.grid, path, maze.start, maze.end)
        if not args.json:
            print(f"Saved maze image to {target}")

    return 0 if path is not None else 1


if __name__ == "__main__":
    sys.exit(main())
