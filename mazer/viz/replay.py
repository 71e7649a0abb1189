from typing import Iterable, Iterator, Optional, Tuple
from mazer.core.grid import Grid
from mazer.core.events import Step, CELL_EVENTS, WALL_EVENTS, EVT_CARVE, EVT_BACKTRACK


def apply_step(grid: Grid, step: Step) -> Tuple[int, int]:
    """
    Applies one recorded step to a display grid.
    Returns where the carve head sits afterwards.
    """
    if step.kind in CELL_EVENTS:
        # Backtrack only moves the cursor
        if step.kind != EVT_BACKTRACK:
            grid.set_visited(step.x, step.y)
        return step.cell

    if step.kind in WALL_EVENTS:
        grid.remove_wall(step.cell, step.target)
        # Post-processing steps leave visited flags alone
        if step.kind == EVT_CARVE:
            grid.set_visited(step.to_x, step.to_y)
        return step.target

    raise ValueError(f"Unknown step kind: {step.kind!r}")


def replay_steps(width: int, height: int, steps: Iterable[Step]) -> Grid:
    """Rebuilds a maze from its step log on a fresh all-walled grid."""
    grid = Grid(width, height)
    for step in steps:
        apply_step(grid, step)
    return grid


class StepAdapter:
    """
    Adapts a recorded step log to look like a Generator for the Renderer.
    Applies changes to the Grid as it iterates.
    """
    def __init__(self, grid: Grid, steps: Iterable[Step], batch: int = 1):
        self.grid = grid
        self.steps = steps
        self.batch = max(1, batch)

        self.cursor: Optional[Tuple[int, int]] = None
        self.applied = 0

    def run(self) -> Iterator[str]:
        for step in self.steps:
            self.cursor = apply_step(self.grid, step)
            self.applied += 1

            # Yield every N steps
            if self.applied % self.batch == 0:
                yield step.kind

        self.cursor = None
        yield "Done"
