"""Rotation bookkeeping for spheres: rotation normal, axis and angular speed."""

import math

import numpy as np

__all__ = ["set_rotation_normal", "rotation_axis", "update_rotation_speed"]


def _normalize(v):
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length == 0.0:
        return np.zeros_like(v)
    return v / length


def set_rotation_normal(sphere, n):
    """Store the normalised ``n`` as the sphere's rotation normal."""
    sphere.rotation_normal = _normalize(n)
    return sphere.rotation_normal


def rotation_axis(sphere):
    """Return the sphere's rotation axis, ``-(r * (v x n))``."""
    n = np.asarray(sphere.rotation_normal, dtype=float)
    v = np.asarray(sphere.velocity, dtype=float)
    return -(float(sphere.radius) * np.cross(v, n))


def update_rotation_speed(sphere):
    """Set the sphere's rotation speed from the length of its rotation axis.

    The axis length is read as degrees and stored in radians. Returns the
    new speed.
    """
    speed = float(np.linalg.norm(rotation_axis(sphere))) * (math.pi / 180.0)
    sphere.rotation_speed = speed
    return speed