"""Friction, damping and rolling-motion computations for spheres on planes."""

import numpy as np

from .concepts import State
from .timeconv import to_dt

COMPRESSION_TIME = 1.0


def _vec(v):
    return np.asarray(v, dtype=float)


def _normalize(v):
    v = _vec(v)
    length = np.linalg.norm(v)
    if length == 0.0:
        return np.zeros_like(v)
    return v / length


def total_friction(mu1, mu2):
    """Combined friction of two surfaces in contact."""
    return mu1 * mu2


def add_time_dependent_loss(sphere, attachments, dt_ns):
    """Damp the velocity of a sliding or rolling sphere over ``dt_ns`` nanoseconds.

    ``attachments`` maps a sphere to the plane it is attached to; a sliding or
    rolling sphere without an entry raises KeyError.
    """
    if sphere.state not in (State.SLIDING, State.ROLLING):
        return
    mu1 = sphere.friction_coef
    mu2 = attachments[sphere].friction_coef
    loss_factor = total_friction(mu1, mu2) * to_dt(dt_ns)
    v = _vec(sphere.velocity)
    sphere.velocity = v - v * loss_factor


def add_time_independent_loss(v, mu1, mu2):
    """Return ``v`` reduced by the combined friction, clamped to [0, 1]."""
    loss_factor = min(max(total_friction(mu1, mu2) * COMPRESSION_TIME, 0.0), 1.0)
    v = _vec(v)
    return v - v * loss_factor


def sliding_force(force, mu1, mu2):
    """Force left over after sliding friction."""
    force = _vec(force)
    return force - force * total_friction(mu1, mu2)


def rolling_force(m, r, force, mu1, mu2, v, n):
    """Rolling resistance force, opposing the pre-tangential acceleration."""
    moment = inertia(m, r)
    a_hat_t = pre_tangential_acceleration(force, m, mu1, mu2, r, v, n)
    r_scalar = ((m * moment) / (m * r**2 + moment)) * np.linalg.norm(a_hat_t)
    return _normalize(a_hat_t) * -r_scalar


def pre_tangential_acceleration(force, m, mu1, mu2, r, v, n):
    """Tangential acceleration before the rolling correction is applied."""
    force = _vec(force)
    g = force / m
    n_norm = _normalize(n)
    k_n = n_norm * np.dot(force, n_norm)
    xi = (mu1 + mu2) * r**2 * (np.linalg.norm(k_n) / m)
    v_norm = _normalize(v)
    a_hat_normal = n_norm * np.dot(g, n_norm)
    a_hat_velocity = v_norm * xi
    return g - a_hat_normal - a_hat_velocity


def normal_acceleration(force, m, n):
    """Component of ``force / m`` along the plane normal."""
    g = _vec(force) / m
    n_norm = _normalize(n)
    return n_norm * np.dot(g, n_norm)


def inertia(m, r):
    """Moment of inertia of a solid sphere."""
    return (2.0 / 5.0) * m * r**2


def tangential_acceleration(force, m, mu1, mu2, r, v, n):
    """Tangential acceleration including rolling resistance."""
    a_hat_t = pre_tangential_acceleration(force, m, mu1, mu2, r, v, n)
    resistance = rolling_force(m, r, force, mu1, mu2, v, n)
    return a_hat_t + resistance / m


def total_rolling_acceleration(force, m, mu1, mu2, r, v, n):
    """Normal plus tangential acceleration of a rolling sphere."""
    return normal_acceleration(force, m, n) + tangential_acceleration(force, m, mu1, mu2, r, v, n)