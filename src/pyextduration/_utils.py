"""Rounding helpers shared by the decoders and encoders.

Every millisecond quantization in the package rounds half away from
zero, so ``x.5`` ms always goes up for the non-negative values handled
here.
"""

from __future__ import annotations

import math

from pyextduration._constants import NANOS_PER_MILLI


def round_half_away(value: float) -> int:
    """Round a finite float to the nearest integer, ties away from zero."""
    whole = math.trunc(value)
    # Exact for |value| < 2**52; larger floats have no fractional part.
    rest = value - whole
    if rest >= 0.5:
        return whole + 1
    if rest <= -0.5:
        return whole - 1
    return whole


def round_nanos_to_millis(nanos: int) -> int:
    """Round a non-negative nanosecond count to the nearest millisecond."""
    return (nanos + NANOS_PER_MILLI // 2) // NANOS_PER_MILLI
