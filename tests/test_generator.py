import random
import unittest
from collections import deque

from gridmaze import InvalidDimensions, InvalidDifficulty, MazeGenerator, generate_maze
from gridmaze.generator import MAX_SIZE
from gridmaze.grid import DIFFICULTY_PRESETS, OPEN, WALL, Difficulty, DifficultyPreset


def _open_cells(grid):
    return {(x, y) for y, row in enumerate(grid) for x, value in enumerate(row) if value == OPEN}


def _component(grid, origin):
    height, width = len(grid), len(grid[0])
    seen = {origin}
    queue = deque([origin])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == OPEN and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


def _edge_count(cells):
    return sum(1 for x, y in cells for dx, dy in ((1, 0), (0, 1)) if (x + dx, y + dy) in cells)


def _turn_count(grid):
    """Open cells with exactly two open neighbours that are not opposite each other."""

    cells = _open_cells(grid)
    turns = 0
    for x, y in cells:
        vertical = [(x, y - 1) in cells, (x, y + 1) in cells]
        horizontal = [(x - 1, y) in cells, (x + 1, y) in cells]
        if sum(vertical) == 1 and sum(horizontal) == 1:
            turns += 1
    return turns


class MazeGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = MazeGenerator()

    def test_dimensions_match_request_for_every_difficulty(self) -> None:
        for difficulty in Difficulty:
            for width, height in ((2, 2), (2, 7), (10, 4), (11, 11), (21, 20), (51, 21)):
                grid = self.generator.generate(width, height, difficulty, seed=3)
                self.assertEqual(len(grid), height)
                self.assertTrue(all(len(row) == width for row in grid))
                self.assertTrue(all(value in (OPEN, WALL) for row in grid for value in row))

    def test_preset_dimensions_used_when_omitted(self) -> None:
        for difficulty, preset in DIFFICULTY_PRESETS.items():
            grid = self.generator.generate(difficulty=difficulty, seed=1)
            self.assertEqual((len(grid[0]), len(grid)), (preset.width, preset.height))
        hard = generate_maze(difficulty="Hard", seed=1)
        self.assertEqual((len(hard[0]), len(hard)), (51, 21))

    def test_medium_and_hard_are_perfect_mazes(self) -> None:
        for difficulty in (Difficulty.MEDIUM, Difficulty.HARD):
            for seed in range(5):
                grid = self.generator.generate(difficulty=difficulty, seed=seed)
                cells = _open_cells(grid)
                origin = next(iter(cells))
                self.assertEqual(_component(grid, origin), cells)
                # a connected graph with no cycles has exactly n - 1 edges
                self.assertEqual(_edge_count(cells), len(cells) - 1)

    def test_every_logical_cell_is_carved(self) -> None:
        grid = self.generator.generate(20, 14, "Medium", seed=11)
        for y in range(1, 14, 2):
            for x in range(1, 20, 2):
                self.assertEqual(grid[y][x], OPEN, (x, y))

    def test_easy_opens_loops(self) -> None:
        grid = self.generator.generate(difficulty="Easy", seed=4)
        cells = _open_cells(grid)
        self.assertEqual(_component(grid, next(iter(cells))), cells)
        self.assertGreater(_edge_count(cells), len(cells) - 1)

    def test_loop_budget_is_bounded_by_wall_fraction(self) -> None:
        perfect = MazeGenerator({Difficulty.EASY: DifficultyPreset(31, 31)})
        loopy = MazeGenerator({Difficulty.EASY: DifficultyPreset(31, 31, loop_fraction=0.05)})
        base = perfect.generate(difficulty="Easy", seed=9)
        opened = loopy.generate(difficulty="Easy", seed=9)
        walls = sum(row.count(WALL) for row in base)
        difference = sum(1 for a, b in zip(sum(base, []), sum(opened, [])) if a != b)
        self.assertGreater(difference, 0)
        self.assertLessEqual(difference, int(walls * 0.05))

    def test_straight_bias_reduces_turns(self) -> None:
        winding = MazeGenerator({Difficulty.HARD: DifficultyPreset(41, 41)})
        straight = MazeGenerator({Difficulty.HARD: DifficultyPreset(41, 41, straight_bias=1.0)})
        winding_turns = sum(_turn_count(winding.generate(difficulty="Hard", seed=seed)) for seed in range(5))
        straight_turns = sum(_turn_count(straight.generate(difficulty="Hard", seed=seed)) for seed in range(5))
        self.assertLess(straight_turns, winding_turns)

    def test_same_seed_produces_identical_grid(self) -> None:
        for difficulty in Difficulty:
            first = self.generator.generate(difficulty=difficulty, seed=1234)
            second = self.generator.generate(difficulty=difficulty, seed=1234)
            self.assertEqual(first, second)

    def test_explicit_rng_is_used(self) -> None:
        first = self.generator.generate(15, 15, "Hard", rng=random.Random(5))
        second = self.generator.generate(15, 15, "Hard", rng=random.Random(5))
        self.assertEqual(first, second)

    def test_invalid_dimensions_rejected(self) -> None:
        for width, height in ((1, 5), (5, 1), (0, 0), (-3, 4)):
            with self.assertRaises(InvalidDimensions):
                self.generator.generate(width, height, "Medium")
        with self.assertRaises(InvalidDimensions):
            self.generator.generate("10", 10, "Medium")
        with self.assertRaises(InvalidDimensions):
            self.generator.generate(MAX_SIZE + 1, 10, "Medium")
        grid = self.generator.generate(MAX_SIZE, 2, "Medium", seed=1)
        self.assertEqual(len(grid[0]), MAX_SIZE)

    def test_unknown_difficulty_rejected(self) -> None:
        with self.assertRaises(InvalidDifficulty):
            self.generator.generate(10, 10, "Impossible")
        with self.assertRaises(InvalidDifficulty):
            self.generator.generate(10, 10, "easy")


if __name__ == "__main__":
    unittest.main()
