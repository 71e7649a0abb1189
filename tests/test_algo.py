import unittest
import random
import sys
import os
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mazer.core.grid import Grid
from mazer.core.events import StepLog, EVT_VISIT, EVT_CARVE, EVT_BACKTRACK, EVT_HUNT
from mazer.algo.backtrack import RecursiveBacktracker
from mazer.algo.hunt_and_kill import HuntAndKill
from mazer.algo.kruskal import KruskalsAlgorithm

GENERATORS = [RecursiveBacktracker, KruskalsAlgorithm, HuntAndKill]

def flood_fill(grid, start=(0, 0)):
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for n in grid.get_open_neighbors(x, y):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen

def assert_symmetric(test, grid):
    for y in range(grid.height):
        for x in range(grid.width):
            for nx, ny, d in grid.get_neighbors(x, y):
                test.assertEqual(grid.has_wall(x, y, d), grid.has_wall(nx, ny, Grid.OPPOSITE[d]),
                                 f"Wall mismatch between ({x},{y}) and ({nx},{ny})")

class TestGenerators(unittest.TestCase):
    def test_spanning_and_perfect(self):
        for cls in GENERATORS:
            for w, h in [(1, 1), (1, 7), (6, 1), (2, 2), (9, 5), (20, 20)]:
                with self.subTest(algo=cls.__name__, size=(w, h)):
                    grid = Grid(w, h)
                    cls(grid, seed=42).run_all()

                    self.assertEqual(len(flood_fill(grid)), w * h, "Every cell should be reachable")
                    # A spanning tree has exactly N-1 edges
                    self.assertEqual(grid.passage_count(), w * h - 1)
                    assert_symmetric(self, grid)

    def test_every_cell_visited(self):
        for cls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                w, h = 15, 12
                grid = Grid(w, h)
                cls(grid, seed=7).run_all()
                visited_count = sum(1 for i in range(w * h) if grid.cells[i] & Grid.VISITED)
                self.assertEqual(visited_count, w * h)

    def test_single_cell(self):
        for cls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid = Grid(1, 1)
                statuses = list(cls(grid, seed=1).run())
                self.assertEqual(statuses[-1], "Done")
                self.assertEqual(grid.wall_count(0, 0), 4)
                self.assertTrue(grid.is_visited(0, 0))

    def test_determinism(self):
        for cls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid1 = Grid(10, 10)
                log1 = StepLog()
                cls(grid1, seed=12345, recorder=log1).run_all()

                grid2 = Grid(10, 10)
                log2 = StepLog()
                for _ in cls(grid2, rng=random.Random(12345), recorder=log2).run(): pass

                self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())
                self.assertEqual(log1.steps, log2.steps)

    def test_injected_rng_wins_over_seed(self):
        for cls in GENERATORS:
            with self.subTest(algo=cls.__name__):
                grid1 = Grid(8, 8)
                cls(grid1, seed=99, rng=random.Random(7)).run_all()

                grid2 = Grid(8, 8)
                cls(grid2, seed=7).run_all()
                self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_no_recorder_leaves_nothing(self):
        grid = Grid(5, 5)
        gen = RecursiveBacktracker(grid, seed=3)
        gen.run_all()
        self.assertIsNone(gen.recorder)

    def test_backtracker_steps(self):
        w, h = 6, 4
        grid = Grid(w, h)
        log = StepLog()
        RecursiveBacktracker(grid, seed=5, recorder=log).run_all()

        self.assertEqual(log[0].kind, EVT_VISIT)
        self.assertEqual(log[0].cell, (0, 0))
        self.assertEqual(log.count(EVT_VISIT), 1)
        self.assertEqual(log.count(EVT_CARVE), w * h - 1)
        # Each cell is pushed once and popped once
        self.assertEqual(log.count(EVT_BACKTRACK), w * h)
        self.assertEqual(log[-1], (EVT_BACKTRACK, 0, 0, None, None))

        # The log alone is enough to rebuild the stack
        stack = [(0, 0)]
        for step in log.steps[1:]:
            if step.kind == EVT_CARVE:
                self.assertEqual(step.cell, stack[-1])
                stack.append(step.target)
            elif step.kind == EVT_BACKTRACK:
                self.assertEqual(step.cell, stack.pop())
        self.assertEqual(stack, [])

    def test_hunt_and_kill_steps(self):
        w, h = 12, 12
        grid = Grid(w, h)
        log = StepLog()
        HuntAndKill(grid, seed=11, recorder=log).run_all()

        self.assertEqual(log[0].kind, EVT_VISIT)
        self.assertEqual(log.count(EVT_CARVE), w * h - 1)
        self.assertNotIn(EVT_BACKTRACK, [s.kind for s in log])

        steps = log.steps
        hunts = [i for i, s in enumerate(steps) if s.kind == EVT_HUNT]
        self.assertGreater(len(hunts), 0, "12x12 walk should get stuck at least once")
        for i in hunts:
            carve = steps[i + 1]
            # Hunt names the found cell, the carve comes into it from a visited neighbour
            self.assertEqual(carve.kind, EVT_CARVE)
            self.assertEqual(carve.target, steps[i].cell)
            dx, dy = abs(carve.x - carve.to_x), abs(carve.y - carve.to_y)
            self.assertEqual(dx + dy, 1)

    def test_hunt_scans_row_major(self):
        grid = Grid(3, 3)
        gen = HuntAndKill(grid, seed=0)
        self.assertIsNone(gen.hunt())  # nothing visited yet

        grid.set_visited(2, 2)
        # (2,1) comes before (1,2) in row-major order
        self.assertEqual(gen.hunt(), (2, 1))

        for y in range(3):
            for x in range(3):
                grid.set_visited(x, y)
        self.assertIsNone(gen.hunt())

    def test_kruskal_sets_match_flood_fill(self):
        w, h = 15, 10
        grid = Grid(w, h)
        log = StepLog()
        gen = KruskalsAlgorithm(grid, seed=99, recorder=log)
        gen.run_all()

        reachable = flood_fill(grid)
        self.assertEqual(len(reachable), w * h)
        root = gen.sets.find((0, 0))
        for cell in reachable:
            self.assertEqual(gen.sets.find(cell), root)
        self.assertEqual(gen.sets.set_count, 1)

        # Only carves, no cursor events
        self.assertEqual({s.kind for s in log}, {EVT_CARVE})
        self.assertEqual(len(log), w * h - 1)

if __name__ == '__main__':
    unittest.main()
