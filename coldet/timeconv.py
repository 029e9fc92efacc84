"""Conversions between integer nanosecond durations and floating-point time steps."""

NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_MICROSECOND = 1_000


def to_dt(duration_ns):
    """Return a duration given in nanoseconds as seconds (float)."""
    return duration_ns / NANOSECONDS_PER_SECOND


def to_duration(dt):
    """Convert a floating-point count of microseconds to whole nanoseconds.

    The fractional part is truncated toward zero.
    """
    return int(dt * NANOSECONDS_PER_MICROSECOND)


def time_diff(t1, t2):
    """Return ``t1 - t2`` in whole nanoseconds, truncated toward zero."""
    return int(t1 - t2)