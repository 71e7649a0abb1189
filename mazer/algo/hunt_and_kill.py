from typing import Iterator, Optional, Tuple
from mazer.algo.base import Generator

class HuntAndKill(Generator):
    """
    Random walk ("kill") until stuck, then scan row by row ("hunt") for the
    first unvisited cell touching the carved region and continue from there.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Rows above this are fully visited and stay that way
        self.hunt_row = 0

    def hunt(self) -> Optional[Tuple[int, int]]:
        """First unvisited cell (row-major) with a visited neighbor, or None."""
        grid = self.grid
        for y in range(self.hunt_row, grid.height):
            row_done = True
            for x in range(grid.width):
                if grid.is_visited(x, y):
                    continue
                row_done = False
                if grid.neighbors_visited((x, y)):
                    return (x, y)
            if row_done and y == self.hunt_row:
                self.hunt_row += 1
        return None

    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid
        recorder = self.recorder

        current = (0, 0)
        grid.set_visited(*current)
        if recorder is not None:
            recorder.log_visit(*current)

        while True:
            neighbors = grid.neighbors_unvisited(current)

            if neighbors:
                # Kill
                nxt = rng.choice(neighbors)
                grid.remove_wall(current, nxt)
                grid.set_visited(*nxt)
                if recorder is not None:
                    recorder.log_carve(current[0], current[1], nxt[0], nxt[1])
                current = nxt
            else:
                # Hunt
                found = self.hunt()
                if found is None:
                    break

                nx, ny = rng.choice(grid.neighbors_visited(found))
                grid.remove_wall(found, (nx, ny))
                grid.set_visited(*found)
                if recorder is not None:
                    recorder.log_hunt(*found)
                    recorder.log_carve(nx, ny, found[0], found[1])
                current = found

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Hunting... Carved: {self.step_count}"

        yield "Done"
