"""Maze wall mapping, path search, waypoint planning and PID steering for a grid robot."""

__version__ = "0.1.0"
__all__ = ["control", "maze", "planner", "ranges"]