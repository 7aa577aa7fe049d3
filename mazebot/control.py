"""PID control that drives the robot towards a target point."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_LINEAR_VEL = 0.22
MAX_ANGULAR_VEL = 2.84


def saturate(value: float, limit: float) -> float:
    """Clamp ``value`` to the range [-limit, limit]."""
    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value


@dataclass(frozen=True)
class PidGains:
    """Proportional, integral and derivative gains."""

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0


@dataclass(frozen=True)
class VelocityCommand:
    """Forward speed in m/s and turn rate in rad/s."""

    linear: float = 0.0
    angular: float = 0.0


def _wrap_angle(angle: float) -> float:
    if angle < -math.pi:
        angle += 2 * math.pi
    if angle > math.pi:
        angle -= 2 * math.pi
    return angle


class PidController:
    """Steer heading and speed from the errors to a target point.

    The integral term uses only the current error times ``dt``, and the
    derivative term is the previous error minus the current one over ``dt``.
    """

    def __init__(self, angular: PidGains, linear: PidGains, dt: float) -> None:
        if dt <= 0:
            raise ValueError("dt must be positive")
        self.angular = angular
        self.linear = linear
        self.dt = dt
        self._prev_pos_error = 0.0
        self._prev_heading_error = 0.0

    def step(
        self,
        position: tuple[float, float],
        heading: float,
        target: tuple[float, float],
    ) -> VelocityCommand:
        """Return the saturated velocity command for one control cycle."""
        error_x = target[0] - position[0]
        error_y = target[1] - position[1]
        error_pos = math.hypot(error_x, error_y)
        error_heading = _wrap_angle(math.atan2(error_y, error_x) - heading)

        dt = self.dt
        i_angular = dt * error_heading
        i_linear = dt * error_pos
        d_angular = (self._prev_heading_error - error_heading) / dt
        d_pos = (self._prev_pos_error - error_pos) / dt
        self._prev_heading_error = error_heading
        self._prev_pos_error = error_pos

        a, l = self.angular, self.linear
        vel_heading = a.kp * error_heading + a.ki * i_angular + a.kd * d_angular
        vel_x = l.kp * error_pos + l.ki * i_linear + l.kd * d_pos

        return VelocityCommand(
            linear=saturate(vel_x, MAX_LINEAR_VEL),
            angular=saturate(vel_heading, MAX_ANGULAR_VEL),
        )