"""Thread-safe view over a scenario built on demand and advanced by a solver."""

import threading
from enum import IntEnum


class GeometryType(IntEnum):
    """Kind of object at a combined object index."""

    NA = 0
    SPHERE = 1
    PLANE = 2
    LIMITED_PLANE = 3
    BEZIER_SURFACE = 4


class ScenarioView:
    """Holds a scenario produced by ``constructor`` and advanced by ``solver``.

    Objects are indexed in one combined sequence: spheres, then planes, then
    limited planes, then Bezier surfaces. Until :meth:`construct` is called
    every count is zero.
    """

    def __init__(self, constructor, solver):
        self._constructor = constructor
        self._solver = solver
        self._scenario = None
        self._lock = threading.Lock()

    @property
    def scenario(self):
        """The current scenario, or None before construction."""
        with self._lock:
            return self._scenario

    def construct(self):
        """Build a fresh scenario, replacing any previous one."""
        with self._lock:
            self._scenario = self._constructor()

    def solve(self, timestep):
        """Advance the scenario by ``timestep``; does nothing before construction."""
        with self._lock:
            if self._scenario is None:
                return
            self._solver(self._scenario, timestep)

    def _count(self, attribute):
        with self._lock:
            if self._scenario is None:
                return 0
            return len(getattr(self._scenario, attribute, ()))

    def number_of_spheres(self):
        return self._count("spheres")

    def number_of_planes(self):
        return self._count("fixed_planes")

    def number_of_limited_planes(self):
        return self._count("fixed_limited_planes")

    def number_of_bezier_surfaces(self):
        return self._count("fixed_bezier_surfaces")

    def total_number_of_objects(self):
        return (
            self.number_of_spheres()
            + self.number_of_planes()
            + self.number_of_limited_planes()
            + self.number_of_bezier_surfaces()
        )

    def spheres_offset(self):
        return 0

    def planes_offset(self):
        return self.spheres_offset() + self.number_of_spheres()

    def limited_planes_offset(self):
        return self.planes_offset() + self.number_of_planes()

    def bezier_surfaces_offset(self):
        return self.limited_planes_offset() + self.number_of_limited_planes()

    def geometry_type(self, combined_obj_nr):
        """Kind of object at ``combined_obj_nr``, or NA when out of range."""
        if combined_obj_nr < self.planes_offset():
            return GeometryType.SPHERE
        if combined_obj_nr < self.limited_planes_offset():
            return GeometryType.PLANE
        if combined_obj_nr < self.bezier_surfaces_offset():
            return GeometryType.LIMITED_PLANE
        if combined_obj_nr < self.total_number_of_objects():
            return GeometryType.BEZIER_SURFACE
        return GeometryType.NA