from typing import Iterator, List, Tuple
from mazer.algo.base import Generator
from mazer.core.union_find import UnionFind

Wall = Tuple[Tuple[int, int], Tuple[int, int]]

class KruskalsAlgorithm(Generator):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sets: UnionFind = None

    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid

        self.sets = UnionFind((x, y) for y in range(grid.height) for x in range(grid.width))

        # Start position doesn't matter here; mark everything visited so the
        # grid flags look the same as the other generators' output.
        walls: List[Wall] = []
        for y in range(grid.height):
            for x in range(grid.width):
                grid.set_visited(x, y)
                # Only right and bottom to avoid listing a wall twice
                if x < grid.width - 1:
                    walls.append(((x, y), (x + 1, y)))
                if y < grid.height - 1:
                    walls.append(((x, y), (x, y + 1)))

        # Fisher-Yates
        rng.shuffle(walls)

        for a, b in walls:
            if self.sets.connected(a, b):
                continue  # would close a loop

            grid.remove_wall(a, b)
            self.sets.union(a, b)
            self.step_count += 1

            if self.recorder is not None:
                self.recorder.log_carve(a[0], a[1], b[0], b[1])

            if self.step_count % 100 == 0:
                yield f"Sets: {self.sets.set_count}"

        yield "Done"
