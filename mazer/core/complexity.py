import logging
import random
from typing import Optional
from mazer.core.grid import Grid
from mazer.core.events import StepLog

logger = logging.getLogger(__name__)

class MazePostProcessor:
    @staticmethod
    def braid(grid: Grid, factor: float = 1.0, seed: int = None,
              rng: Optional[random.Random] = None, recorder: Optional[StepLog] = None) -> int:
        """
        Removes dead ends to create loops.
        factor: 0.0 = Remove NO dead ends (Perfect Maze)
                1.0 = Try every dead end once

        Dead ends are collected once up front. A removal that turns some other
        cell into a dead end does not get that cell considered in this pass,
        so factor 1.0 can still leave a few behind.
        """
        if rng is None:
            rng = random.Random(seed)

        dead_ends = grid.dead_ends()
        rng.shuffle(dead_ends)

        # Number to open up
        target_remove = int(len(dead_ends) * factor)
        removed_count = 0

        for x, y in dead_ends[:target_remove]:
            closed_neighbors = grid.neighbors_walled((x, y))
            if not closed_neighbors:
                continue  # 1xN strip ends have nowhere to go

            nx, ny = rng.choice(closed_neighbors)
            grid.remove_wall((x, y), (nx, ny))
            removed_count += 1

            if recorder is not None:
                recorder.log_braid(x, y, nx, ny)

        logger.debug("Braid: %d dead ends, opened %d (factor=%s)",
                     len(dead_ends), removed_count, factor)
        return removed_count

    @staticmethod
    def remove_extra_walls(grid: Grid, factor: float = 0.05, seed: int = None,
                           rng: Optional[random.Random] = None,
                           recorder: Optional[StepLog] = None) -> int:
        """
        Knocks down a random share of the remaining internal walls with no
        connectivity check, adding shortcuts and cycles.
        factor: 0.0 = keep every wall, 1.0 = open the whole grid
        """
        if rng is None:
            rng = random.Random(seed)

        walls = list(grid.internal_walls())
        rng.shuffle(walls)

        target_remove = int(len(walls) * factor)
        for a, b in walls[:target_remove]:
            grid.remove_wall(a, b)
            if recorder is not None:
                recorder.log_extra(a[0], a[1], b[0], b[1])

        logger.debug("Extra walls: %d standing, removed %d (factor=%s)",
                     len(walls), target_remove, factor)
        return target_remove

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for y in range(grid.height):
            for x in range(grid.width):
                walls = grid.wall_count(x, y)
                if walls == 3: dead_ends += 1
                elif walls == 2: corridors += 1
                elif walls <= 1: intersections += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": grid.passage_count(),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
