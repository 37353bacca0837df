"""Duration encoders, one per output shape."""

from __future__ import annotations

import enum

from pyextduration._constants import MILLIS_PER_SECOND, U64_MAX
from pyextduration._duration import Duration
from pyextduration._errors import ERR_MSG_OVERFLOW, DurationOverflowError
from pyextduration._utils import round_nanos_to_millis

# Largest unit first; milliseconds per unit
_HUMAN_UNITS: tuple[tuple[str, int], ...] = (
    ("d", 86_400_000),
    ("h", 3_600_000),
    ("m", 60_000),
    ("s", 1_000),
    ("ms", 1),
)


class Shape(enum.Enum):
    """Output shape selector for :func:`encode`."""

    HUMAN = "human"
    SECS = "secs"
    MILLIS = "millis"
    SECS_F64_MS = "secs_f64_ms"


def _rounded_total_millis(duration: Duration) -> int:
    return duration.seconds * MILLIS_PER_SECOND + round_nanos_to_millis(duration.nanos)


def format_human(duration: Duration) -> str:
    """Render the minimal unit string, e.g. ``"1h 2m 3s 250ms"``.

    Nanoseconds are rounded to the nearest millisecond before the
    breakdown; zero units are omitted and a zero duration renders ``"0s"``.
    """
    remaining = _rounded_total_millis(duration)
    if remaining == 0:
        return "0s"

    parts = []
    for suffix, unit_millis in _HUMAN_UNITS:
        count, remaining = divmod(remaining, unit_millis)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)


def format_secs(duration: Duration) -> int:
    """Whole seconds; the sub-second part is truncated."""
    return duration.seconds


def format_millis(duration: Duration) -> int:
    """Total milliseconds, rounded to nearest.

    Raises:
        DurationOverflowError: If the result exceeds the unsigned 64-bit range.
    """
    total = _rounded_total_millis(duration)
    if total > U64_MAX:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW,
            f"{duration} is {total} ms, exceeds {U64_MAX}",
        )
    return total


def format_secs_f64_ms(duration: Duration) -> float:
    """Float seconds rounded to three decimals (millisecond precision).

    Rounds on the integer millisecond total, then converts to float once.
    """
    return _rounded_total_millis(duration) / MILLIS_PER_SECOND


_ENCODERS = {
    Shape.HUMAN: format_human,
    Shape.SECS: format_secs,
    Shape.MILLIS: format_millis,
    Shape.SECS_F64_MS: format_secs_f64_ms,
}


def encode(duration: Duration, shape: Shape = Shape.HUMAN) -> str | int | float:
    """Encode ``duration`` in the given output shape."""
    return _ENCODERS[shape](duration)


def encode_optional(
    duration: Duration | None, shape: Shape = Shape.HUMAN
) -> str | int | float | None:
    """Encode ``duration``, passing an absent (``None``) value through."""
    if duration is None:
        return None
    return encode(duration, shape)
