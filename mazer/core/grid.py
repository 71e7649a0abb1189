from array import array
from typing import Iterator, List, Tuple

Cell = Tuple[int, int]

class Grid:
    # Bitmask Constants (top/right/bottom/left)
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED = 0b00010000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # Neighbor scan order: top, right, bottom, left
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        # Initialize with all walls present (value 15)
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def direction_between(self, a: Cell, b: Cell) -> int:
        """
        Returns the direction bit pointing from cell a to cell b.
        Raises ValueError unless both are in bounds and orthogonally adjacent.
        """
        (x1, y1), (x2, y2) = a, b
        if not (self.in_bounds(x1, y1) and self.in_bounds(x2, y2)):
            raise ValueError(f"Cells {a} and {b} must both lie inside the grid")
        dx, dy = x2 - x1, y2 - y1
        if dx == 1 and dy == 0:
            return self.EAST
        if dx == -1 and dy == 0:
            return self.WEST
        if dy == 1 and dx == 0:
            return self.SOUTH
        if dy == -1 and dx == 0:
            return self.NORTH
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between current cell (x,y) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]

        if not (0 <= x2 < self.width and 0 <= y2 < self.height):
             return # Cannot carve into void

        # Remove wall from cell 1
        self.cells[y1 * self.width + x1] &= ~dir_bit
        # Remove opposite wall from cell 2
        self.cells[y2 * self.width + x2] &= ~self.OPPOSITE[dir_bit]

    def remove_wall(self, a: Cell, b: Cell):
        """Removes the shared wall between two adjacent cells, on both sides."""
        dir_bit = self.direction_between(a, b)
        self.carve_path(a[0], a[1], dir_bit)

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def wall_count(self, x: int, y: int) -> int:
        val = self.cells[y * self.width + x]
        return sum(1 for d in self.DIRECTIONS if val & d)

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = y * self.width + x
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[y * self.width + x] & self.VISITED) != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors,
        in top, right, bottom, left order.
        Does NOT check walls (that's for pathfinding).
        """
        # North
        if y > 0:
            yield (x, y - 1, self.NORTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # South
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def neighbors_unvisited(self, cell: Cell) -> List[Cell]:
        x, y = cell
        return [(nx, ny) for nx, ny, _ in self.get_neighbors(x, y)
                if not self.is_visited(nx, ny)]

    def neighbors_visited(self, cell: Cell) -> List[Cell]:
        x, y = cell
        return [(nx, ny) for nx, ny, _ in self.get_neighbors(x, y)
                if self.is_visited(nx, ny)]

    def neighbors_walled(self, cell: Cell) -> List[Cell]:
        x, y = cell
        return [(nx, ny) for nx, ny, dir_bit in self.get_neighbors(x, y)
                if self.has_wall(x, y, dir_bit)]

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not self.has_wall(x, y, dir_bit):
                yield (nx, ny)

    def dead_ends(self) -> List[Cell]:
        """Cells with exactly three walls (one way in), row-major."""
        return [(x, y)
                for y in range(self.height)
                for x in range(self.width)
                if self.wall_count(x, y) == 3]

    def internal_walls(self) -> Iterator[Tuple[Cell, Cell]]:
        """
        Yields ((x, y), (nx, ny)) for every internal wall still standing.
        Only right and bottom neighbors are listed so each wall appears once.
        """
        for y in range(self.height):
            for x in range(self.width):
                if x < self.width - 1 and self.has_wall(x, y, self.EAST):
                    yield ((x, y), (x + 1, y))
                if y < self.height - 1 and self.has_wall(x, y, self.SOUTH):
                    yield ((x, y), (x, y + 1))

    def passage_count(self) -> int:
        """Number of internal walls that have been removed."""
        total = (self.width - 1) * self.height + self.width * (self.height - 1)
        return total - sum(1 for _ in self.internal_walls())
