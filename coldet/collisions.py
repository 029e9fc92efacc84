"""Collision records and the ordering rules of the collision queues.

A queue is kept sorted by time point in descending order, so the earliest
collision sits at the end and is taken with ``list.pop()``. Bodies are
told apart by identity, not by equality.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Collision:
    """A dynamic sphere hitting a fixed object at time point ``tp``.

    ``other`` is the fixed body: a plane, a fixed sphere or a limited plane.
    """

    tp: Any
    sphere: Any
    other: Any


@dataclass(frozen=True)
class PairCollision:
    """Two dynamic spheres hitting each other at time point ``tp``."""

    tp: Any
    first: Any
    second: Any

    def key(self):
        """Identity key of the pair, independent of order."""
        return frozenset((id(self.first), id(self.second)))


def _latest_first(collisions):
    return sorted(collisions, key=lambda c: c.tp, reverse=True)


def _keep_earliest(ordered, key):
    seen = set()
    kept = []
    for collision in reversed(ordered):
        k = key(collision)
        if k in seen:
            continue
        seen.add(k)
        kept.append(collision)
    kept.reverse()
    return kept


def sort_and_make_unique(collisions):
    """Return the collisions sorted latest first, one per sphere.

    Only the earliest collision of each sphere is kept, so the last element
    of the result is the earliest collision overall.
    """
    return _keep_earliest(_latest_first(collisions), lambda c: id(c.sphere))


def sort_and_make_unique_pairs(collisions):
    """Return the pair collisions sorted latest first, one per sphere pair.

    ``(a, b)`` and ``(b, a)`` count as the same pair; the earliest
    collision of each pair is kept.
    """
    return _keep_earliest(_latest_first(collisions), PairCollision.key)


def earliest_kind(queues):
    """Key of the queue whose next collision comes first, or None.

    ``queues`` maps a kind to a queue sorted latest first; empty queues are
    skipped. On equal time points the kind listed first wins.
    """
    candidates = [(queue[-1].tp, kind) for kind, queue in queues.items() if queue]
    if not candidates:
        return None
    earliest_tp = min(tp for tp, _ in candidates)
    for tp, kind in candidates:
        if tp == earliest_tp:
            return kind
    return None