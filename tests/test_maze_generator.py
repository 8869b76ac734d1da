import io
import json
import unittest
from collections import deque
from contextlib import redirect_stdout

from maze_builders import wall_codes

from mazerank import InvalidDimensionError, Maze, MazeGenerator, generate_maze
from mazerank.base import OFFSETS, OPPOSITE
from mazerank.maze import generator as generator_module

SEEDS = (1, 7, 42, 99, 2024, 123456)
SIZES = ((3, 3), (5, 5), (8, 4), (4, 9), (15, 15))


def _corners(maze: Maze):
    return {
        (0, 0),
        (0, maze.width - 1),
        (maze.height - 1, 0),
        (maze.height - 1, maze.width - 1),
    }


def _reachable(maze: Maze, start):
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbor in maze.grid.accessible_neighbors(*cell):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


class MazeGeneratorTests(unittest.TestCase):
    def test_golden_five_by_five_seed_42(self) -> None:
        maze = generate_maze(5, 5, 42)
        self.assertEqual(
            wall_codes(maze),
            [
                ["NEW", "NW", "NES", "NSW", "NE"],
                ["EW", "EW", "NSW", "N", "E"],
                ["E", "SW", "NE", "EW", "W"],
                ["W", "NE", "EW", "EW", "EW"],
                ["ESW", "SW", "S", "ES", "ESW"],
            ],
        )
        self.assertEqual(maze.entrance.to_dict(), {"row": 2, "col": 0, "side": "west"})
        self.assertEqual(maze.exit.to_dict(), {"row": 2, "col": 4, "side": "east"})

    def test_same_seed_is_deterministic(self) -> None:
        for width, height in SIZES:
            for seed in SEEDS:
                with self.subTest(width=width, height=height, seed=seed):
                    first = generate_maze(width, height, seed)
                    second = generate_maze(width, height, seed)
                    self.assertEqual(first.grid, second.grid)
                    self.assertEqual(first.entrance, second.entrance)
                    self.assertEqual(first.exit, second.exit)

    def test_different_seeds_differ(self) -> None:
        self.assertNotEqual(generate_maze(10, 10, 1).grid, generate_maze(10, 10, 2).grid)

    def test_spanning_tree(self) -> None:
        for width, height in SIZES:
            for seed in SEEDS:
                with self.subTest(width=width, height=height, seed=seed):
                    maze = generate_maze(width, height, seed)
                    self.assertEqual(maze.grid.passage_count(), width * height - 1)
                    self.assertEqual(len(_reachable(maze, (0, 0))), width * height)

    def test_walls_are_symmetric(self) -> None:
        for seed in SEEDS:
            maze = generate_maze(12, 7, seed)
            for cell in maze.grid:
                for direction, (dr, dc) in OFFSETS.items():
                    nr, nc = cell.row + dr, cell.col + dc
                    if not maze.grid.in_bounds(nr, nc):
                        continue
                    neighbor = maze.grid.cell(nr, nc)
                    self.assertEqual(cell.walls[direction], neighbor.walls[OPPOSITE[direction]])

    def test_openings_avoid_corners_and_face_each_other(self) -> None:
        for width, height in SIZES:
            for seed in SEEDS:
                with self.subTest(width=width, height=height, seed=seed):
                    maze = generate_maze(width, height, seed)
                    self.assertNotIn(maze.entrance.position, _corners(maze))
                    self.assertNotIn(maze.exit.position, _corners(maze))
                    self.assertEqual(OPPOSITE[maze.entrance.side], maze.exit.side)
                    self.assertFalse(maze.cell(*maze.entrance.position).walls[maze.entrance.side])
                    self.assertFalse(maze.cell(*maze.exit.position).walls[maze.exit.side])

    def test_only_entrance_and_exit_open_the_boundary(self) -> None:
        maze = generate_maze(9, 6, 2024)
        walls = maze.grid.wall_array()
        openings = (
            int((~walls[0, :, 0]).sum())
            + int((~walls[:, -1, 1]).sum())
            + int((~walls[-1, :, 2]).sum())
            + int((~walls[:, 0, 3]).sum())
        )
        self.assertEqual(openings, 2)

    def test_minimum_size(self) -> None:
        for seed in SEEDS:
            maze = generate_maze(3, 3, seed)
            for opening in (maze.entrance, maze.exit):
                if opening.side in ("north", "south"):
                    self.assertEqual(opening.col, 1)
                else:
                    self.assertEqual(opening.row, 1)

    def test_invalid_dimensions(self) -> None:
        for width, height in ((2, 5), (5, 2), (0, 0), (-3, 4)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidDimensionError):
                    generate_maze(width, height, 1)
        with self.assertRaises(InvalidDimensionError):
            MazeGenerator(4.5, 4)

    def test_generated_grid_is_frozen(self) -> None:
        maze = generate_maze(4, 4, 5)
        with self.assertRaises(RuntimeError):
            maze.grid.remove_wall(0, 0, "east")

    def test_generator_defaults(self) -> None:
        generator = MazeGenerator()
        maze = generator.create_maze(31337)
        self.assertEqual((maze.width, maze.height), (10, 10))
        self.assertEqual(maze.seed, 31337)

    def test_to_dict_restores(self) -> None:
        maze = generate_maze(6, 4, 77)
        payload = json.loads(json.dumps(maze.to_dict()))
        restored = Maze.from_dict(payload)
        self.assertEqual(restored.grid, maze.grid)
        self.assertEqual(restored.entrance, maze.entrance)
        self.assertEqual(restored.exit, maze.exit)
        self.assertTrue(restored.grid.frozen)

    def test_from_dict_rejects_bad_openings(self) -> None:
        payload = generate_maze(5, 5, 42).to_dict()
        cases = {
            "out of range": {"row": 9, "col": 0, "side": "west"},
            "negative row": {"row": -1, "col": 0, "side": "west"},
            "corner": {"row": 0, "col": 0, "side": "north"},
            "interior": {"row": 2, "col": 2, "side": "west"},
            "unknown side": {"row": 2, "col": 0, "side": "up"},
            "closed wall": {"row": 1, "col": 0, "side": "west"},
            "missing side": {"row": 2, "col": 0},
        }
        for name, entrance in cases.items():
            with self.subTest(name):
                with self.assertRaises(ValueError):
                    Maze.from_dict(dict(payload, entrance=entrance))

    def test_from_dict_rejects_shared_opening(self) -> None:
        payload = generate_maze(5, 5, 42).to_dict()
        with self.assertRaises(ValueError):
            Maze.from_dict(dict(payload, exit=payload["entrance"]))

    def test_from_dict_rejects_size_mismatch(self) -> None:
        payload = generate_maze(5, 5, 42).to_dict()
        with self.assertRaises(ValueError):
            Maze.from_dict(dict(payload, width=6))

    def test_cli_prints_maze_json(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            generator_module.main(["5", "5", "--seed", "42"])
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["entrance"], {"row": 2, "col": 0, "side": "west"})
        self.assertEqual(payload["grid"][2][0]["west"], False)


if __name__ == "__main__":
    unittest.main()
