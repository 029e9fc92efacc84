"""Structural interfaces for rigid bodies and the checks that go with them."""

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class State(Enum):
    """Motion state of a dynamic sphere."""

    FREE = auto()
    RESTING = auto()
    SLIDING = auto()
    ROLLING = auto()


@runtime_checkable
class SphereLike(Protocol):
    """A sphere: a centre point and a radius."""

    point: Any
    radius: float


@runtime_checkable
class PlaneLike(Protocol):
    """An infinite plane: a point on it and its normal."""

    point: Any
    normal: Any


@runtime_checkable
class LimitedPlaneLike(Protocol):
    """A bounded, two-sided plane spanned by two partial derivatives."""

    point: Any
    normal_front: Any
    normal_back: Any
    partial_derivative_u: Any
    partial_derivative_v: Any

    def evaluate_front(self, u, v): ...

    def evaluate_back(self, u, v): ...


@runtime_checkable
class CylinderLike(Protocol):
    """A cylinder: an axis vector, a radius and an origin."""

    vector: Any
    radius: float
    origin: Any


@runtime_checkable
class BezierSurfaceLike(Protocol):
    """A body carrying a Bezier surface."""

    bezier_surface: Any


@runtime_checkable
class DynamicBody(Protocol):
    """A body with a velocity that can be accelerated."""

    velocity: Any

    def add_acceleration(self, a): ...


@runtime_checkable
class StatefulSphere(SphereLike, Protocol):
    """A sphere with a motion state and a friction coefficient."""

    state: State
    friction_coef: float


def is_sphere(obj):
    """Whether ``obj`` looks like a sphere."""
    return isinstance(obj, SphereLike)


def is_plane(obj):
    """Whether ``obj`` looks like an infinite plane."""
    return isinstance(obj, PlaneLike)


def is_limited_plane(obj):
    """Whether ``obj`` looks like a limited plane."""
    return isinstance(obj, LimitedPlaneLike)


def is_dynamic(obj):
    """Whether ``obj`` has a velocity and accepts accelerations."""
    return isinstance(obj, DynamicBody)


def has_states(obj):
    """Whether ``obj`` is a sphere whose ``state`` is a :class:`State`."""
    return isinstance(obj, StatefulSphere) and isinstance(obj.state, State)