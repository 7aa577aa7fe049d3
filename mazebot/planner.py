"""Choose the next cell for the robot to head for on its way to the goal."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from mazebot.maze import Coord, Direction, Maze
from mazebot.ranges import WorldRanges

GOAL_TOLERANCE = 0.2
CELL_CENTRE_OFFSET = 0.5


def cell_index(pos_x: float, pos_y: float) -> Coord:
    """Return the grid cell that holds a world position."""
    return math.floor(pos_x), math.floor(pos_y)


@dataclass(frozen=True)
class PlanStep:
    """Outcome of one planning cycle."""

    cell: Coord
    outside_map: bool = False
    goal_reached: bool = False
    walls: dict[Direction, bool] = field(default_factory=dict)
    path: list[Coord] = field(default_factory=list)
    target: tuple[float, float] | None = None


class PathPlanner:
    """Map walls as the robot moves and pick the next waypoint towards the goal."""

    def __init__(self, goal_x: float, goal_y: float, maze: Maze | None = None) -> None:
        self.goal_x = goal_x
        self.goal_y = goal_y
        self.goal_cell = cell_index(goal_x, goal_y)
        self.maze = maze if maze is not None else Maze()
        self.target: tuple[float, float] | None = None

    def step(self, pos_x: float, pos_y: float, ranges: WorldRanges) -> PlanStep:
        """Run one cycle from the robot's position and the world-frame ranges.

        Outside the map nothing is updated. Within the goal tolerance the goal
        is reported as reached. Otherwise the walls around the robot's cell are
        recorded, a path is searched, and the target becomes the centre of the
        next cell on it, the goal itself when already in the goal cell, or stays
        as it was when no path exists.
        """
        cell = cell_index(pos_x, pos_y)
        if not (0 <= cell[0] < self.maze.size_x and 0 <= cell[1] < self.maze.size_y):
            return PlanStep(cell=cell, outside_map=True, target=self.target)

        if math.hypot(self.goal_x - pos_x, self.goal_y - pos_y) < GOAL_TOLERANCE:
            return PlanStep(cell=cell, goal_reached=True, target=self.target)

        walls = self.maze.fill_walls(cell[0], cell[1], ranges)
        path = self.maze.find_path(cell, self.goal_cell)

        if len(path) == 1:
            self.target = (self.goal_x, self.goal_y)
        elif len(path) > 1:
            next_x, next_y = path[-2]
            self.target = (next_x + CELL_CENTRE_OFFSET, next_y + CELL_CENTRE_OFFSET)

        return PlanStep(cell=cell, walls=walls, path=path, target=self.target)