"""Numeric limits for duration decoding and encoding."""

U64_MAX = 2**64 - 1
"""Largest whole-second or millisecond count representable."""

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1_000

DEFAULT_MAX_INPUT_LENGTH = 1024
"""Maximum accepted duration string length (CWE-400 prevention)."""

ASCII_WHITESPACE = " \t\n\r\f\v"

MAX_MAGNITUDE_DIGITS = 23
"""Significant digits beyond which any token exceeds the second range (1e23 ms > 2**64 s)."""
