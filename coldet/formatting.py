"""Text rendering of vectors."""

from numbers import Integral


def _element(value):
    if isinstance(value, Integral):
        return str(int(value))
    return "%f" % float(value)


def to_string(vec):
    """Render a vector as ``[a, b, c]``; floats use six decimal places.

    Raises ValueError for an empty vector.
    """
    items = list(vec)
    if not items:
        raise ValueError("vector must have at least one element")
    return "[" + ", ".join(_element(v) for v in items) + "]"