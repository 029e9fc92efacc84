"""Landing-position histograms along the x and z axes."""

import math
from dataclasses import dataclass, field

BINS = 50
OFFSET = 25


@dataclass
class Distribution:
    """Counts of landing points in unit-wide bins from -25 to 24 on each axis.

    A landing point is counted only when both its x and z bins are in range.
    """

    x: list = field(default_factory=lambda: [0] * BINS)
    z: list = field(default_factory=lambda: [0] * BINS)

    def record(self, x, z):
        """Count a landing at ``(x, z)``; return whether it was in range."""
        x_index = math.floor(x) + OFFSET
        z_index = math.floor(z) + OFFSET
        if 0 <= x_index < len(self.x) and 0 <= z_index < len(self.z):
            self.x[x_index] += 1
            self.z[z_index] += 1
            return True
        return False

    def total(self):
        """Number of landings counted."""
        return sum(self.x)

    def rows(self, axis):
        """Yield ``(bin, count)`` pairs for axis ``"x"`` or ``"z"``."""
        if axis == "x":
            counts = self.x
        elif axis == "z":
            counts = self.z
        else:
            raise ValueError(f"unknown axis: {axis!r}")
        for index, count in enumerate(counts):
            yield index - OFFSET, count