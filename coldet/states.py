"""Motion-state transitions of a sphere in contact with a fixed plane."""

import numpy as np

from .concepts import State

EPSILON = 1e-6
RESTING_TOLERANCE = 300000 * EPSILON
ROLLING_TOLERANCE = 1000 * EPSILON
FREE_TOLERANCE = 1000 * EPSILON


def _vec(v):
    return np.asarray(v, dtype=float)


def _normalize(v):
    v = _vec(v)
    length = np.linalg.norm(v)
    if length == 0.0:
        return np.zeros_like(v)
    return v / length


def _cos_angle(a, b):
    return float(np.dot(_normalize(a), _normalize(b)))


def _length(v):
    return float(np.linalg.norm(_vec(v)))


def _slip(v, w):
    return _length(v) - _length(w)


def _is_resting_ds(n, ds):
    inner = _cos_angle(n, ds)
    return -1.0 <= inner <= -1.0 + RESTING_TOLERANCE


def _is_sliding_ds(n, ds):
    inner = _cos_angle(ds, n)
    return -1.0 + RESTING_TOLERANCE < inner < 0.0


def rotation_axis(sphere):
    """Angular axis of a sphere: ``-(r * (v x rotation_normal))``."""
    v = _vec(sphere.velocity)
    n = _vec(sphere.rotation_normal)
    return -(sphere.radius * np.cross(v, n))


def free_to_resting(n, ds):
    """A free sphere comes to rest when it moves straight into the plane."""
    return _is_resting_ds(n, ds)


def free_to_sliding(n, ds, v, w):
    """A free sphere starts sliding when it moves into the plane and slips."""
    return _cos_angle(ds, n) <= 0.0 and _length(v) > 0.0 and _slip(v, w) > ROLLING_TOLERANCE


def free_to_rolling(n, ds, v, w):
    """A free sphere starts rolling when it moves into the plane without slipping."""
    return _cos_angle(ds, n) <= 0.0 and _length(v) > 0.0 and _slip(v, w) <= ROLLING_TOLERANCE


def resting_to_free(n, ds):
    """A resting sphere lifts off when it moves away from the plane."""
    return _cos_angle(ds, n) > 0.0


def resting_to_sliding(n, ds):
    """A resting sphere starts sliding when it moves along the plane."""
    return _is_sliding_ds(n, ds)


def resting_to_rolling(n, ds, v, w):
    """A resting sphere starts rolling when it moves along the plane without slipping."""
    return _is_sliding_ds(n, ds) and _length(v) > 0.0 and _slip(v, w) <= ROLLING_TOLERANCE


def sliding_to_free(n, ds):
    """A sliding sphere lifts off when it moves away from the plane."""
    return _cos_angle(ds, n) > FREE_TOLERANCE


def sliding_to_resting(n, ds):
    """A sliding sphere comes to rest when it moves straight into the plane."""
    return _is_resting_ds(n, ds)


def sliding_to_rolling(v, w):
    """A sliding sphere starts rolling once its slip is within tolerance."""
    return _slip(v, w) <= ROLLING_TOLERANCE


def rolling_to_free(n, ds):
    """A rolling sphere lifts off when it moves away from the plane."""
    return _cos_angle(ds, n) > FREE_TOLERANCE


def rolling_to_sliding(v, w):
    """A rolling sphere starts sliding once its slip exceeds tolerance."""
    return _slip(v, w) > ROLLING_TOLERANCE


def rolling_to_resting(n, ds):
    """A rolling sphere comes to rest when it moves straight into the plane."""
    return _is_resting_ds(n, ds)


def detect_state_change(sphere, plane, attachments, ds):
    """Update ``sphere.state`` for a step ``ds`` against ``plane``.

    ``attachments`` maps spheres to the plane they are attached to and is
    updated in place. Returns the sphere's resulting state.
    """
    v = sphere.velocity
    n = plane.normal
    state = sphere.state

    if state is State.FREE:
        w = rotation_axis(sphere)
        if free_to_resting(n, ds):
            sphere.state = State.RESTING
            attachments[sphere] = plane
        elif free_to_rolling(n, ds, v, w):
            sphere.state = State.ROLLING
            attachments[sphere] = plane
        elif free_to_sliding(n, ds, v, w):
            sphere.state = State.SLIDING
            attachments[sphere] = plane
    elif state is State.RESTING:
        w = rotation_axis(sphere)
        if resting_to_free(n, ds):
            sphere.state = State.FREE
            attachments.pop(sphere, None)
        elif resting_to_rolling(n, ds, v, w):
            sphere.state = State.ROLLING
        elif resting_to_sliding(n, ds):
            sphere.state = State.SLIDING
    elif state is State.SLIDING:
        w = rotation_axis(sphere)
        if sliding_to_free(n, ds):
            sphere.state = State.FREE
            attachments.pop(sphere, None)
        elif sliding_to_rolling(v, w):
            sphere.state = State.ROLLING
        elif sliding_to_resting(n, ds):
            sphere.state = State.RESTING
    elif state is State.ROLLING:
        w = rotation_axis(sphere)
        if rolling_to_free(n, ds):
            sphere.state = State.FREE
            attachments.pop(sphere, None)
        elif rolling_to_sliding(v, w):
            sphere.state = State.SLIDING
        elif rolling_to_resting(n, ds):
            sphere.state = State.RESTING

    return sphere.state