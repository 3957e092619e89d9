"""A* pathfinding for the demo bot, aware of atmospheres, doors and wall breaking."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING, Optional

from .constants import FLOOR, MAX_ENERGY, WALL

if TYPE_CHECKING:
    from .maps import MapManager

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Node:
    """A search node: a cell plus the bot state reached when arriving there."""

    x: int
    y: int
    g_cost: int = 0
    h_cost: int = 0
    f_cost: int = 0
    parent: Optional[Node] = field(default=None, repr=False)
    atmosphere: str = FLOOR
    can_break_wall: bool = False
    energy: int = 0


class AIBot:
    """Finds a route from a start cell to a goal cell on the current level."""

    def heuristic(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Manhattan distance between two cells."""
        return abs(x1 - x2) + abs(y1 - y2)

    def find_path(
        self,
        start_x: int,
        start_y: int,
        end_x: int,
        end_y: int,
        map_manager: MapManager,
    ) -> list[tuple[int, int]]:
        """Return the cells from start to end inclusive, or an empty list if unreachable."""
        closed: set[tuple[int, int]] = set()
        nodes: dict[tuple[int, int], Node] = {}
        tie = count()

        start = Node(start_x, start_y)
        start.h_cost = self.heuristic(start_x, start_y, end_x, end_y)
        start.f_cost = start.h_cost
        nodes[(start_x, start_y)] = start
        open_set: list[tuple[int, int, Node]] = [(start.f_cost, next(tie), start)]

        while open_set:
            _, _, current = heapq.heappop(open_set)
            position = (current.x, current.y)
            if position in closed:
                continue
            closed.add(position)

            if position == (end_x, end_y):
                return self._reconstruct(current)

            for dx, dy in _DIRECTIONS:
                nx, ny = current.x + dx, current.y + dy
                if not map_manager.is_valid_for_bot(
                    nx, ny, current.atmosphere, current.can_break_wall
                ):
                    continue
                if (nx, ny) in closed:
                    continue

                neighbor = nodes.setdefault((nx, ny), Node(nx, ny))
                tentative_g = current.g_cost + 1

                cell = map_manager.get_cell(nx, ny)
                new_atmosphere = cell if map_manager.is_tank(cell) else current.atmosphere

                new_energy = current.energy + 1
                new_can_break = new_energy >= MAX_ENERGY
                if cell == WALL:
                    if not new_can_break:
                        continue
                    new_energy = 0
                    new_can_break = False

                if tentative_g < neighbor.g_cost or neighbor.g_cost == 0:
                    neighbor.parent = current
                    neighbor.g_cost = tentative_g
                    neighbor.h_cost = self.heuristic(nx, ny, end_x, end_y)
                    neighbor.f_cost = neighbor.g_cost + neighbor.h_cost
                    neighbor.atmosphere = new_atmosphere
                    neighbor.can_break_wall = new_can_break
                    neighbor.energy = new_energy
                    heapq.heappush(open_set, (neighbor.f_cost, next(tie), neighbor))

        return []

    @staticmethod
    def _reconstruct(node: Node) -> list[tuple[int, int]]:
        path: list[tuple[int, int]] = []
        current: Optional[Node] = node
        while current is not None:
            path.append((current.x, current.y))
            current = current.parent
        path.reverse()
        return path