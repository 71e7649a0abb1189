import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from mazer.core.grid import Grid
from mazer.core.events import StepLog

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rng: Optional[random.Random] = None,
                 recorder: Optional[StepLog] = None):
        self.grid = grid
        # An injected rng wins over the seed so callers can share one stream
        self.rng = rng if rng is not None else random.Random(seed)
        self.recorder = recorder
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
