from typing import Iterator, List, Tuple
from mazer.algo.base import Generator

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid

        # Start at (0,0)
        start_x, start_y = 0, 0
        grid.set_visited(start_x, start_y)
        if self.recorder is not None:
            self.recorder.log_visit(start_x, start_y)

        # Explicit stack of (x, y), no recursion
        stack: List[Tuple[int, int]] = [(start_x, start_y)]

        while stack:
            cx, cy = stack[-1]
            neighbors = grid.neighbors_unvisited((cx, cy))

            if neighbors:
                # Choose random neighbor
                nx, ny = rng.choice(neighbors)

                # Carve
                grid.remove_wall((cx, cy), (nx, ny))
                grid.set_visited(nx, ny)
                stack.append((nx, ny))
                self.step_count += 1

                if self.recorder is not None:
                    self.recorder.log_carve(cx, cy, nx, ny)

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack. The popped cell is still reported so a
                # replay cursor can walk back over it.
                stack.pop()
                if self.recorder is not None:
                    self.recorder.log_backtrack(cx, cy)

        yield "Done"
