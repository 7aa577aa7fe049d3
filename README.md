# mazebot

`mazebot` helps a small robot find its way through a maze of unit square cells. The world frame is fixed. North is +x, west is +y, south is -x and east is -y. The robot's yaw is measured from +x.

The package has four modules.

## `mazebot.ranges`: world-frame range readings

- `heading_from_quaternion(x, y, z, w)` returns the yaw of an orientation quaternion in radians, within [-pi, pi].
- `world_ranges(scan, heading)` takes a laser scan and the robot's heading and returns a frozen `WorldRanges(north, west, south, east)`.
  - The scan holds one reading per degree, counter-clockwise from the robot's front.
  - The heading is truncated to whole degrees.
  - It raises `IndexError` if a needed index falls outside the scan.

## `mazebot.maze`: wall map and path search

- `Direction` is an `IntEnum` with the members `NORTH`, `WEST`, `SOUTH` and `EAST`.
- `Cell` holds the set of walls known for one cell.
- `Maze(size_x=10, size_y=10)` is a grid of cells. It raises `ValueError` for non-positive sizes.
  - `has_wall(x, y, direction)` tells whether a cell has a wall on one side. It raises `ValueError` outside the grid.
  - `fill_walls(x, y, ranges)` records walls around `(x, y)` and returns a dict of `Direction` to `bool`.
    - A side counts as a wall when its reading is 1.0 or less.
    - The facing side of the neighbouring cell is updated too.
    - South and east neighbours are only updated when `x > 1` and `y > 1` respectively.
  - `find_path(start, goal)` searches outward from `start` using a queue, moving only through open sides. A neighbour is queued again whenever it can be reached more cheaply.
    - Steps east, west and south cost 1.
    - A step north costs the integer part of the Euclidean distance from the cell one row south of the current cell to the goal.
    - It returns the route from the goal back to the start, both included, or an empty list if the goal is unreachable.
- `manhattan_dist(start, end)` returns the Manhattan distance between two cells.

## `mazebot.planner`: choosing the next waypoint

- `cell_index(pos_x, pos_y)` returns the cell that holds a position. It uses the floor of each coordinate.
- `PathPlanner(goal_x, goal_y, maze=None)` creates a fresh 10×10 `Maze` when none is given.
- `PathPlanner.step(pos_x, pos_y, ranges)` runs one planning cycle and returns a frozen `PlanStep` with the fields `cell`, `outside_map`, `goal_reached`, `walls`, `path` and `target`. The cycle goes like this:
  - If the robot is outside the map, nothing is updated and `outside_map` is set.
  - If the robot is closer than 0.2 to the goal, `goal_reached` is set.
  - Otherwise the walls around the robot's cell are filled in and a path is searched. Then:
    - If the path reaches a neighbouring cell, the target becomes the centre of the next cell on the path.
    - If the robot is already in the goal cell, the target becomes the goal point itself.
    - If no path exists, the previous target is kept. That target may be `None`.

## `mazebot.control`: PID steering

- `PidGains(kp, ki, kd)` holds one set of gains.
- `PidController(angular, linear, dt)` takes two `PidGains` and a time step. It raises `ValueError` unless `dt > 0`.
- `PidController.step(position, heading, target)` returns a `VelocityCommand(linear, angular)`.
  - The heading error is wrapped into [-pi, pi].
  - The integral term is only the current error times `dt`.
  - The derivative term is (previous error − current error) / `dt`.
  - The linear speed is clamped to ±0.22 and the angular speed to ±2.84.
- `saturate(value, limit)` clamps a value to [-limit, limit].

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from mazebot.control import PidController, PidGains
from mazebot.maze import Maze
from mazebot.planner import PathPlanner
from mazebot.ranges import heading_from_quaternion, world_ranges

planner = PathPlanner(5.5, 6.5, Maze(10, 10))
controller = PidController(PidGains(1.0, 0.0, 0.0), PidGains(0.5, 0.0, 0.0), 0.1)

heading = heading_from_quaternion(0.0, 0.0, 0.0, 1.0)
ranges = world_ranges([3.0] * 360, heading)

plan = planner.step(0.5, 0.5, ranges)
command = controller.step((0.5, 0.5), heading, plan.target)
print(plan.target, command)
```

## What this package does not do

`mazebot` is a library of per-cycle computations. It has no command-line program. It does not talk to a robot, simulator or messaging system, and it does not read sensors or send velocity commands itself. It has no timed control loop either. The caller supplies the positions, headings and scans, calls `step` at its own rate, and delivers the resulting commands to the robot.