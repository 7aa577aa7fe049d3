"""Wall map of a grid maze and the search for a route through it."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum

from mazebot.ranges import WorldRanges

MAP_MAX_X = 10
MAP_MAX_Y = 10
WALL_RANGE = 1.0
_UNVISITED_COST = 10000

Coord = tuple[int, int]


class Direction(IntEnum):
    """World directions: north is +x, west is +y, south is -x, east is -y."""

    NORTH = 0
    WEST = 1
    SOUTH = 2
    EAST = 3


@dataclass
class Cell:
    """A grid cell and the walls known around it."""

    walls: set[Direction] = field(default_factory=set)


def manhattan_dist(start: Coord, end: Coord) -> int:
    """Return the Manhattan distance between two grid coordinates."""
    return abs(start[0] - end[0]) + abs(start[1] - end[1])


class Maze:
    """A grid of cells whose walls are learnt from range readings."""

    def __init__(self, size_x: int = MAP_MAX_X, size_y: int = MAP_MAX_Y) -> None:
        if size_x <= 0 or size_y <= 0:
            raise ValueError("maze dimensions must be positive")
        self.size_x = size_x
        self.size_y = size_y
        self._cells = {
            (x, y): Cell() for x in range(size_x) for y in range(size_y)
        }

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def _cell(self, x: int, y: int) -> Cell:
        if not self._contains(x, y):
            raise ValueError(f"cell ({x}, {y}) is outside the maze")
        return self._cells[(x, y)]

    def _set_wall(self, x: int, y: int, direction: Direction, present: bool) -> None:
        walls = self._cells[(x, y)].walls
        if present:
            walls.add(direction)
        else:
            walls.discard(direction)

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        """Tell whether the cell at (x, y) has a wall on the given side."""
        return direction in self._cell(x, y).walls

    def fill_walls(self, x: int, y: int, ranges: WorldRanges) -> dict[Direction, bool]:
        """Record walls around (x, y) from range readings and return what was found.

        A side has a wall when its reading is at most one cell away. The facing
        side of the neighbouring cell is updated as well; south and east
        neighbours are only updated from x > 1 and y > 1 respectively.
        """
        self._cell(x, y)
        found = {
            Direction.NORTH: ranges.north <= WALL_RANGE,
            Direction.WEST: ranges.west <= WALL_RANGE,
            Direction.SOUTH: ranges.south <= WALL_RANGE,
            Direction.EAST: ranges.east <= WALL_RANGE,
        }
        for direction, present in found.items():
            self._set_wall(x, y, direction, present)

        if x < self.size_x - 1:
            self._set_wall(x + 1, y, Direction.SOUTH, found[Direction.NORTH])
        if y < self.size_y - 1:
            self._set_wall(x, y + 1, Direction.EAST, found[Direction.WEST])
        if x > 1:
            self._set_wall(x - 1, y, Direction.NORTH, found[Direction.SOUTH])
        if y > 1:
            self._set_wall(x, y - 1, Direction.WEST, found[Direction.EAST])
        return found

    def find_path(self, start: Coord, goal: Coord) -> list[Coord]:
        """Search from ``start`` to ``goal`` through open sides.

        Returns the route from the goal back to the start, both included, or
        an empty list when the goal cannot be reached.
        """
        start = (int(start[0]), int(start[1]))
        goal_x, goal_y = int(goal[0]), int(goal[1])
        self._cell(*start)

        cost: dict[Coord, int] = {start: 0}
        parent: dict[Coord, Coord | None] = {start: None}
        queue: deque[Coord] = deque([start])

        while queue:
            current = queue.popleft()
            cur_x, cur_y = current
            cur_cost = cost[current]

            if current == (goal_x, goal_y):
                path: list[Coord] = []
                node: Coord | None = current
                while node is not None:
                    path.append(node)
                    node = parent.get(node)
                return path

            walls = self._cells[current].walls
            north_cost = int(
                cur_cost + math.sqrt((goal_x - cur_x + 1) ** 2 + (goal_y - cur_y) ** 2)
            )
            candidates = (
                (Direction.NORTH, cur_x < self.size_x - 1, (cur_x + 1, cur_y), north_cost),
                (Direction.EAST, cur_y > 0, (cur_x, cur_y - 1), cur_cost + 1),
                (Direction.WEST, cur_y < self.size_y - 1, (cur_x, cur_y + 1), cur_cost + 1),
                (Direction.SOUTH, cur_x > 0, (cur_x - 1, cur_y), cur_cost + 1),
            )
            for direction, inside, neighbour, new_cost in candidates:
                if direction in walls or not inside:
                    continue
                if cost.get(neighbour, _UNVISITED_COST) > new_cost:
                    cost[neighbour] = new_cost
                    parent[neighbour] = current
                    queue.append(neighbour)

        return []