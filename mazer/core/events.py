from typing import Iterator, List, NamedTuple, Optional, Tuple

# Event Types
EVT_VISIT = "visit"
EVT_CARVE = "carve"
EVT_BACKTRACK = "backtrack"
EVT_HUNT = "hunt"
EVT_BRAID = "braid"
EVT_EXTRA = "extra"

# Kinds that name a single cell vs. a from/to pair
CELL_EVENTS = frozenset({EVT_VISIT, EVT_BACKTRACK, EVT_HUNT})
WALL_EVENTS = frozenset({EVT_CARVE, EVT_BRAID, EVT_EXTRA})


class Step(NamedTuple):
    """
    One structural event of a generation run.
    Single-cell kinds leave to_x / to_y as None.
    """
    kind: str
    x: int
    y: int
    to_x: Optional[int] = None
    to_y: Optional[int] = None

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def target(self) -> Optional[Tuple[int, int]]:
        if self.to_x is None:
            return None
        return (self.to_x, self.to_y)


class StepLog:
    """
    Append-only, ordered record of generation steps.
    Generators take an optional StepLog; passing None skips recording entirely.
    """
    __slots__ = ('_steps',)

    def __init__(self):
        self._steps: List[Step] = []

    def log_visit(self, x: int, y: int):
        self._steps.append(Step(EVT_VISIT, x, y))

    def log_backtrack(self, x: int, y: int):
        self._steps.append(Step(EVT_BACKTRACK, x, y))

    def log_hunt(self, x: int, y: int):
        self._steps.append(Step(EVT_HUNT, x, y))

    def log_carve(self, x1: int, y1: int, x2: int, y2: int):
        self._steps.append(Step(EVT_CARVE, x1, y1, x2, y2))

    def log_braid(self, x1: int, y1: int, x2: int, y2: int):
        self._steps.append(Step(EVT_BRAID, x1, y1, x2, y2))

    def log_extra(self, x1: int, y1: int, x2: int, y2: int):
        self._steps.append(Step(EVT_EXTRA, x1, y1, x2, y2))

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def count(self, kind: str) -> int:
        return sum(1 for s in self._steps if s.kind == kind)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, i):
        return self._steps[i]

    def __repr__(self) -> str:
        return f"StepLog({len(self._steps)} steps)"
