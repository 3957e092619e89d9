"""Level layouts and the grid that holds the current level."""

from __future__ import annotations

from .constants import DOOR_CLOSED, DOOR_OPEN, FINISH, FLOOR, TANKS, WALL

_EASY = (
    "##########",
    "#.A.D..#F#",
    "###.#.####",
    "#..B#.#A.#",
    "#.#.#.##.#",
    "#.#.D....#",
    "#.#.####.#",
    "#.#....#.#",
    "#...##.#.#",
    "##########",
)

_MEDIUM = (
    "####################",
    "#...D#B..D#.D.#...F#",
    "#.##.#.####.#.####.#",
    "#..A.#..#.#A#.#B.#.#",
    "#.##.#.##.#.#.##.#.#",
    "#D...DB...#.D....#.#",
    "#.#######.######.#.#",
    "#.......#......#.#.#",
    "#.#####.######.#.#.#",
    "####################",
)

_HARD = (
    "####################",
    "#..A.#.#....#B..D..#",
    "#.##.#.####.#.####.#",
    "#.#.B#.#A.#.#.#B.#.#",
    "#.##.#.##.#D#.##.#.#",
    "#A...DB#..#......#.#",
    "####D####.######.#.#",
    "#...B.D.#..V...#.#.#",
    "#.#####.######.#.#.#",
    "#.#...#.....#..#.#.#",
    "#.#D#.#####.####.#.#",
    "#...#A.D..#B..D..#.#",
    "###.#####.########.#",
    "#.......#B..D......#",
    "#.#####.##########.#",
    "#.#...#....D.....#.#",
    "#.#.#.############.#",
    "#...#......A.....D.#",
    "##################F#",
    "####################",
)

LEVELS: dict[int, tuple[str, ...]] = {1: _EASY, 2: _MEDIUM, 3: _HARD}


class MapManager:
    """Holds the grid of the current level; cells are addressed as (row, column)."""

    def __init__(self) -> None:
        self.grid: list[list[str]] = []
        self.rows = 0
        self.cols = 0

    def load_level(self, difficulty: int) -> None:
        """Load level 1, 2 or 3; any other difficulty leaves the grid unchanged."""
        layout = LEVELS.get(difficulty)
        if layout is None:
            return
        self.grid = [list(row) for row in layout]
        self.rows = len(layout)
        self.cols = len(layout[0])

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Set a cell; positions outside the grid are ignored."""
        if self._in_bounds(x, y):
            self.grid[x][y] = value

    def get_cell(self, x: int, y: int) -> str:
        """Return a cell; positions outside the grid read as walls."""
        if self._in_bounds(x, y):
            return self.grid[x][y]
        return WALL

    def is_tank(self, c: str) -> bool:
        return c in TANKS

    def is_wall(self, x: int, y: int) -> bool:
        return self.get_cell(x, y) == WALL

    def is_valid(self, x: int, y: int) -> bool:
        """True when the cell is neither a wall nor a closed door."""
        return not (self.is_wall(x, y) or self.get_cell(x, y) == DOOR_CLOSED)

    def is_valid_for_bot(self, x: int, y: int, atmosphere: str, can_break: bool) -> bool:
        """Whether the pathfinding bot may consider entering the cell."""
        if not self._in_bounds(x, y):
            return False
        cell = self.grid[x][y]
        if cell in (FLOOR, FINISH, DOOR_OPEN) or self.is_tank(cell):
            return True
        if cell == DOOR_CLOSED:
            return atmosphere == "A"
        if cell == WALL:
            return can_break
        return False