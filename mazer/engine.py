"""
Maze generation entry points.

``generate`` is the pure form: config + random source in, finished grid and
step log out. ``MazeGenerator`` wraps it for callers that prefer to configure
once and ask for mazes repeatedly (e.g. a game loop).
"""
import logging
import numbers
import random
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from mazer.algo.backtrack import RecursiveBacktracker
from mazer.algo.hunt_and_kill import HuntAndKill
from mazer.algo.kruskal import KruskalsAlgorithm
from mazer.core.complexity import MazePostProcessor
from mazer.core.events import StepLog
from mazer.core.grid import Grid

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "backtrack": RecursiveBacktracker,
    "kruskal": KruskalsAlgorithm,
    "hunt_and_kill": HuntAndKill,
}

# Accept the camelCase name used by existing game configs
ALIASES = {"huntAndKill": "hunt_and_kill"}


def resolve_algorithm(name: str) -> str:
    name = ALIASES.get(name, name)
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}'. Choose from: {', '.join(ALGORITHMS)}")
    return name


@dataclass(frozen=True)
class MazeConfig:
    width: int
    height: int
    algorithm: str = "kruskal"
    braiding_factor: float = 0.3
    extra_wall_removal: float = 0.05

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            # bool is an int subclass; 3.0 would break the cell array later
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {self.width}x{self.height}")
        for name in ("braiding_factor", "extra_wall_removal"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        # frozen: go through object.__setattr__ to normalise the alias
        object.__setattr__(self, "algorithm", resolve_algorithm(self.algorithm))


class MazeResult(NamedTuple):
    grid: Grid
    steps: StepLog


def generate(config: MazeConfig, rng: Optional[random.Random] = None, seed: int = None,
             record_steps: bool = False) -> MazeResult:
    """
    Builds a fresh fully-walled grid, carves a perfect maze with the configured
    algorithm, then braids and removes extra walls (in that order).

    Pass either ``rng`` or ``seed`` for reproducible output. With
    ``record_steps`` False the returned StepLog stays empty.
    """
    if rng is None:
        rng = random.Random(seed)

    grid = Grid(config.width, config.height)
    steps = StepLog()
    recorder = steps if record_steps else None

    generator = ALGORITHMS[config.algorithm](grid, rng=rng, recorder=recorder)
    generator.run_all()
    logger.debug("%s carved %dx%d", config.algorithm, config.width, config.height)

    # Post-processing for complexity
    if config.braiding_factor > 0:
        MazePostProcessor.braid(grid, config.braiding_factor, rng=rng, recorder=recorder)
    if config.extra_wall_removal > 0:
        MazePostProcessor.remove_extra_walls(grid, config.extra_wall_removal,
                                             rng=rng, recorder=recorder)

    return MazeResult(grid, steps)


class MazeGenerator:
    """
    Stateful facade over ``generate``. Only the config, the random source and
    the last result are kept; each ``generate`` call builds a new grid.
    """
    def __init__(self, width: int, height: int, algorithm: str = "kruskal",
                 braiding_factor: float = 0.3, extra_wall_removal: float = 0.05,
                 seed: int = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.config: MazeConfig = None
        self.last_result: Optional[MazeResult] = None
        self.configure(width, height, algorithm, braiding_factor, extra_wall_removal)

    def configure(self, width: int, height: int, algorithm: str = "kruskal",
                  braiding_factor: float = 0.3, extra_wall_removal: float = 0.05):
        self.config = MazeConfig(width, height, algorithm, braiding_factor, extra_wall_removal)
        self.last_result = None

    def generate(self, record_steps: bool = False) -> Grid:
        self.last_result = generate(self.config, rng=self.rng, record_steps=record_steps)
        return self.last_result.grid

    def get_generation_steps(self) -> StepLog:
        if self.last_result is None:
            return StepLog()
        return self.last_result.steps

    def get_start_position(self) -> Tuple[int, int]:
        return (0, 0)

    def get_exit_position(self) -> Tuple[int, int]:
        return (self.config.width - 1, self.config.height - 1)
