"""Friction, motion-state, collision-queue, rotation and histogram helpers for spheres on planes."""

__version__ = "0.1.0"

__all__ = [
    "collisions",
    "concepts",
    "distribution",
    "energy",
    "formatting",
    "rotation",
    "scenario",
    "states",
    "timeconv",
]