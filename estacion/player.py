"""The player's position, battery, energy and movement rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    DOOR_CLOSED,
    DOOR_OPEN,
    FINISH,
    FLOOR,
    MAX_ENERGY,
    PLAYER,
    TANKS,
    WALL,
)

Grid = list[list[str]]


@dataclass
class Player:
    """State of the player on the grid; position is (row, column)."""

    x: int = 0
    y: int = 0
    battery: int = 0
    energy: int = 0
    can_break: bool = False
    current_atmosphere: str = FLOOR
    under_player: str = FLOOR
    game_won: bool = False
    waiting_for_break: bool = False
    _last_dx: int = field(default=0, repr=False)
    _last_dy: int = field(default=0, repr=False)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_last_direction(self, dx: int, dy: int) -> None:
        """Remember the direction a wall would be broken in."""
        self._last_dx = dx
        self._last_dy = dy

    @property
    def last_direction(self) -> tuple[int, int]:
        return self._last_dx, self._last_dy

    def is_tank(self, c: str) -> bool:
        return c in TANKS

    def is_wall(self, nx: int, ny: int, grid: Grid) -> bool:
        if not (0 <= nx < len(grid) and 0 <= ny < len(grid[nx])):
            return False
        return grid[nx][ny] == WALL

    def is_valid(self, nx: int, ny: int, grid: Grid, rows: int, cols: int) -> bool:
        """True when the cell is inside the grid and neither a wall nor a closed door."""
        if not (0 <= nx < rows and 0 <= ny < cols):
            return False
        return not (self.is_wall(nx, ny, grid) or grid[nx][ny] == DOOR_CLOSED)

    def move(self, dx: int, dy: int, grid: Grid, rows: int, cols: int) -> None:
        """Step by (dx, dy), updating the grid, battery, energy and atmosphere."""
        nx, ny = self.x + dx, self.y + dy
        if not (0 <= nx < rows and 0 <= ny < cols):
            return
        cell = grid[nx][ny]

        if cell == FINISH:
            grid[self.x][self.y] = self.under_player
            self.under_player = FINISH
            self.x, self.y = nx, ny
            grid[nx][ny] = PLAYER
            self.game_won = True
            return

        if self.is_tank(cell):
            self.current_atmosphere = cell
            self.under_player = FLOOR
            self.update_doors(grid, rows, cols)

        if self.is_valid(nx, ny, grid, rows, cols):
            grid[self.x][self.y] = self.under_player
            self.under_player = grid[nx][ny]
            self.x, self.y = nx, ny
            grid[nx][ny] = PLAYER
            self.battery -= 1
            self.energy += 1
            if self.energy >= MAX_ENERGY:
                self.energy = MAX_ENERGY
                self.can_break = True

    def break_wall(self, grid: Grid) -> None:
        """Break the wall in the last direction moved, spending all energy."""
        if not self.can_break:
            return
        tx, ty = self.x + self._last_dx, self.y + self._last_dy
        if self.is_wall(tx, ty, grid):
            grid[tx][ty] = FLOOR
            self.can_break = False
            self.energy = 0

    def update_doors(self, grid: Grid, rows: int, cols: int) -> None:
        """Open every door in atmosphere A and close them all otherwise."""
        state = DOOR_OPEN if self.current_atmosphere == "A" else DOOR_CLOSED
        for row in grid[:rows]:
            for j, cell in enumerate(row[:cols]):
                if cell in (DOOR_CLOSED, DOOR_OPEN):
                    row[j] = state

    def reset(self) -> None:
        """Clear energy, atmosphere and outcome flags for a new round."""
        self.energy = 0
        self.can_break = False
        self.current_atmosphere = FLOOR
        self.game_won = False
        self.waiting_for_break = False