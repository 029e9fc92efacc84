from dataclasses import dataclass, field

import numpy as np
import pytest

from coldet.concepts import State
from coldet import states


@dataclass(eq=False)
class Ball:
    velocity: tuple = (0.0, 0.0, 0.0)
    radius: float = 1.0
    rotation_normal: tuple = (0.0, 0.0, 0.0)
    state: State = State.FREE


@dataclass(eq=False)
class Plane:
    normal: tuple = (0.0, 1.0, 0.0)
    point: tuple = field(default=(0.0, 0.0, 0.0))


UP = (0.0, 1.0, 0.0)


def test_rotation_axis_perpendicular_to_velocity_and_normal():
    ball = Ball(velocity=(2.0, 0.0, 1.0), radius=0.5, rotation_normal=UP)
    axis = states.rotation_axis(ball)
    assert np.dot(axis, ball.velocity) == pytest.approx(0.0)
    assert np.dot(axis, UP) == pytest.approx(0.0)
    assert np.linalg.norm(axis) == pytest.approx(0.5 * np.linalg.norm(ball.velocity))


def test_rotation_axis_zero_without_normal():
    ball = Ball(velocity=(1.0, 2.0, 3.0))
    assert np.allclose(states.rotation_axis(ball), 0.0)


def test_free_to_resting():
    assert states.free_to_resting(UP, (0.0, -1.0, 0.0))
    assert not states.free_to_resting(UP, (1.0, 0.0, 0.0))


def test_free_sliding_and_rolling_are_exclusive():
    ds = (1.0, -0.5, 0.0)
    v = (2.0, 0.0, 0.0)
    assert states.free_to_sliding(UP, ds, v, (0.0, 0.0, 0.0))
    assert not states.free_to_rolling(UP, ds, v, (0.0, 0.0, 0.0))
    w = (0.0, 0.0, 2.0)
    assert states.free_to_rolling(UP, ds, v, w)
    assert not states.free_to_sliding(UP, ds, v, w)


def test_free_requires_velocity_and_downward_motion():
    assert not states.free_to_sliding(UP, (0.0, 1.0, 0.0), (2.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    assert not states.free_to_rolling(UP, (1.0, -0.5, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_resting_transitions():
    assert states.resting_to_free(UP, (0.0, 1.0, 0.0))
    assert not states.resting_to_free(UP, (0.0, -1.0, 0.0))
    assert states.resting_to_sliding(UP, (1.0, -0.5, 0.0))
    assert not states.resting_to_sliding(UP, (0.0, -1.0, 0.0))
    assert states.resting_to_rolling(UP, (1.0, -0.5, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    assert not states.resting_to_rolling(UP, (1.0, -0.5, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_sliding_transitions():
    assert states.sliding_to_free(UP, (0.0, 1.0, 0.0))
    assert not states.sliding_to_free(UP, (1.0, 0.0, 0.0))
    assert states.sliding_to_resting(UP, (0.0, -3.0, 0.0))
    assert states.sliding_to_rolling((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert not states.sliding_to_rolling((2.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def test_rolling_transitions():
    assert states.rolling_to_free(UP, (0.0, 1.0, 0.0))
    assert states.rolling_to_sliding((2.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert not states.rolling_to_sliding((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert states.rolling_to_resting(UP, (0.0, -1.0, 0.0))
    assert not states.rolling_to_resting(UP, (1.0, -0.5, 0.0))


def test_detect_free_to_resting_attaches():
    ball = Ball(state=State.FREE)
    plane = Plane()
    attachments = {}
    result = states.detect_state_change(ball, plane, attachments, (0.0, -1.0, 0.0))
    assert result is State.RESTING
    assert ball.state is State.RESTING
    assert attachments[ball] is plane


def test_detect_free_to_rolling():
    ball = Ball(velocity=(1.0, 0.0, 0.0), rotation_normal=UP, state=State.FREE)
    plane = Plane()
    attachments = {}
    assert states.detect_state_change(ball, plane, attachments, (1.0, -0.5, 0.0)) is State.ROLLING
    assert attachments[ball] is plane


def test_detect_free_to_sliding():
    ball = Ball(velocity=(1.0, 0.0, 0.0), state=State.FREE)
    plane = Plane()
    attachments = {}
    assert states.detect_state_change(ball, plane, attachments, (1.0, -0.5, 0.0)) is State.SLIDING
    assert attachments[ball] is plane


def test_detect_free_stays_free_when_leaving():
    ball = Ball(velocity=(1.0, 1.0, 0.0), state=State.FREE)
    attachments = {}
    assert states.detect_state_change(ball, Plane(), attachments, (0.0, 1.0, 0.0)) is State.FREE
    assert attachments == {}


@pytest.mark.parametrize("start", [State.RESTING, State.SLIDING, State.ROLLING])
def test_detect_lift_off_detaches(start):
    ball = Ball(velocity=(1.0, 0.0, 0.0), state=start)
    plane = Plane()
    attachments = {ball: plane}
    assert states.detect_state_change(ball, plane, attachments, (0.0, 1.0, 0.0)) is State.FREE
    assert ball not in attachments


def test_detect_rolling_to_sliding_keeps_attachment():
    ball = Ball(velocity=(1.0, 0.0, 0.0), state=State.ROLLING)
    plane = Plane()
    attachments = {ball: plane}
    assert states.detect_state_change(ball, plane, attachments, (1.0, -0.1, 0.0)) is State.SLIDING
    assert attachments[ball] is plane


def test_detect_sliding_to_rolling():
    ball = Ball(velocity=(1.0, 0.0, 0.0), rotation_normal=UP, state=State.SLIDING)
    plane = Plane()
    attachments = {ball: plane}
    assert states.detect_state_change(ball, plane, attachments, (1.0, -0.1, 0.0)) is State.ROLLING


def test_detect_resting_to_sliding():
    ball = Ball(velocity=(1.0, 0.0, 0.0), state=State.RESTING)
    plane = Plane()
    attachments = {ball: plane}
    assert states.detect_state_change(ball, plane, attachments, (1.0, -0.5, 0.0)) is State.SLIDING
    assert attachments[ball] is plane