import math

import pytest

from mazebot.control import (
    MAX_ANGULAR_VEL,
    MAX_LINEAR_VEL,
    PidController,
    PidGains,
    VelocityCommand,
    saturate,
)

NONE = PidGains()


def test_saturate_clamps_both_sides():
    assert saturate(5.0, 2.0) == 2.0
    assert saturate(-5.0, 2.0) == -2.0
    assert saturate(1.5, 2.0) == 1.5


def test_invalid_dt_rejected():
    with pytest.raises(ValueError):
        PidController(NONE, NONE, 0)


def test_proportional_linear_straight_ahead():
    pid = PidController(NONE, PidGains(kp=1.0), 0.1)
    cmd = pid.step((0.0, 0.0), 0.0, (0.1, 0.0))
    assert cmd.linear == pytest.approx(0.1)
    assert cmd.angular == pytest.approx(0.0)


def test_linear_saturates_at_limit():
    pid = PidController(NONE, PidGains(kp=1.0), 0.1)
    assert pid.step((0.0, 0.0), 0.0, (5.0, 0.0)).linear == MAX_LINEAR_VEL


def test_angular_saturates_at_limit():
    pid = PidController(PidGains(kp=10.0), NONE, 0.1)
    cmd = pid.step((0.0, 0.0), 0.0, (0.0, 1.0))
    assert cmd.angular == MAX_ANGULAR_VEL
    cmd = pid.step((0.0, 0.0), 0.0, (0.0, -1.0))
    assert cmd.angular == -MAX_ANGULAR_VEL


def test_proportional_heading_quarter_turn():
    pid = PidController(PidGains(kp=1.0), NONE, 0.1)
    cmd = pid.step((0.0, 0.0), 0.0, (0.0, 1.0))
    assert cmd.angular == pytest.approx(math.pi / 2)


def test_heading_error_wraps_to_short_turn():
    pid = PidController(PidGains(kp=1.0), NONE, 0.1)
    target = (math.cos(-3.0), math.sin(-3.0))
    cmd = pid.step((0.0, 0.0), 3.0, target)
    assert 0 < cmd.angular < math.pi


def test_derivative_zero_when_error_unchanged():
    pid = PidController(NONE, PidGains(kd=1.0), 0.1)
    pid.step((0.0, 0.0), 0.0, (0.01, 0.0))
    cmd = pid.step((0.0, 0.0), 0.0, (0.01, 0.0))
    assert cmd.linear == pytest.approx(0.0)


def test_derivative_sign_on_first_step_is_negative():
    pid = PidController(NONE, PidGains(kd=1.0), 0.1)
    cmd = pid.step((0.0, 0.0), 0.0, (0.01, 0.0))
    assert cmd.linear < 0
    assert cmd.linear >= -MAX_LINEAR_VEL


def test_integral_does_not_accumulate():
    pid = PidController(NONE, PidGains(ki=1.0), 0.1)
    first = pid.step((0.0, 0.0), 0.0, (0.5, 0.0))
    second = pid.step((0.0, 0.0), 0.0, (0.5, 0.0))
    assert first == second
    assert first.linear > 0


def test_at_target_no_motion():
    pid = PidController(PidGains(kp=1.0), PidGains(kp=1.0), 0.1)
    cmd = pid.step((1.0, 1.0), 0.0, (1.0, 1.0))
    assert cmd == VelocityCommand(0.0, 0.0)