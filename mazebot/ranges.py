"""Turn a robot-frame laser scan into ranges along the world's compass directions."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

SCAN_SIZE = 360

# Scan index, in the robot frame, of each direction when the robot faces world north.
_NORTH_INDEX = 0
_WEST_INDEX = 90
_SOUTH_INDEX = 180
_EAST_INDEX = 270


@dataclass(frozen=True)
class WorldRanges:
    """Obstacle distances along the world's north (+x), west (+y), south (-x) and east (-y)."""

    north: float
    west: float
    south: float
    east: float


def heading_from_quaternion(x: float, y: float, z: float, w: float) -> float:
    """Return the yaw, in radians within [-pi, pi], of an orientation quaternion."""
    return math.atan2(2 * (w * z + x * y), 1 - 2 * (z * z + y * y))


def _wrap_index(index: int) -> int:
    if index < 0:
        return index + SCAN_SIZE
    if index > SCAN_SIZE - 1:
        return index - SCAN_SIZE
    return index


def world_ranges(scan: Sequence[float], heading: float) -> WorldRanges:
    """Pick the scan readings that point along the world axes.

    ``scan`` holds one reading per degree, counter-clockwise from the robot's
    front; ``heading`` is the robot's yaw in radians, between -pi and pi.
    The heading is truncated to whole degrees.
    """
    rotate = int(heading / math.pi * 180)

    def reading(base: int) -> float:
        index = _wrap_index(base - rotate)
        if not 0 <= index < len(scan):
            raise IndexError(
                f"scan index {index} outside a scan of {len(scan)} readings"
            )
        return scan[index]

    return WorldRanges(
        north=reading(_NORTH_INDEX),
        west=reading(_WEST_INDEX),
        south=reading(_SOUTH_INDEX),
        east=reading(_EAST_INDEX),
    )