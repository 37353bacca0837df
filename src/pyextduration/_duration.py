"""Canonical duration value and checked arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from pyextduration._constants import (
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    U64_MAX,
)
from pyextduration._errors import (
    ERR_MSG_NEGATIVE,
    ERR_MSG_OVERFLOW,
    DurationOverflowError,
    NegativeValueError,
)


def check_seconds(seconds: int, context: str = "seconds") -> int:
    """Return ``seconds`` unchanged if it fits the unsigned 64-bit range."""
    if seconds > U64_MAX:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW,
            f"{context} value {seconds} exceeds {U64_MAX}",
        )
    return seconds


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative duration: whole seconds plus sub-second nanoseconds.

    Always normalized, ``0 <= nanos < 1_000_000_000``. Use
    :meth:`from_parts` to build a value from an un-normalized pair.
    """

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise NegativeValueError(
                ERR_MSG_NEGATIVE,
                f"seconds value {self.seconds} is negative",
            )
        check_seconds(self.seconds)
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(
                f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}"
            )

    @classmethod
    def from_parts(cls, seconds: int, nanos: int) -> Duration:
        """Build a duration, carrying whole seconds out of ``nanos``."""
        if nanos < 0:
            raise NegativeValueError(
                ERR_MSG_NEGATIVE,
                f"nanos value {nanos} is negative",
            )
        carry, nanos = divmod(nanos, NANOS_PER_SECOND)
        return cls(check_seconds(seconds + carry, "carried seconds"), nanos)

    @classmethod
    def from_secs(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        return cls.from_parts(0, millis * NANOS_PER_MILLI)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        return cls.from_parts(0, nanos)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        if delta < timedelta(0):
            raise NegativeValueError(
                ERR_MSG_NEGATIVE,
                f"timedelta {delta!r} is negative",
            )
        return cls(delta.days * 86_400 + delta.seconds, delta.microseconds * 1_000)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    @property
    def subsec_millis(self) -> int:
        """Sub-second part in whole milliseconds (truncated)."""
        return self.nanos // NANOS_PER_MILLI

    def to_timedelta(self) -> timedelta:
        """Convert to :class:`datetime.timedelta`, truncating below one microsecond."""
        try:
            return timedelta(seconds=self.seconds, microseconds=self.nanos // 1_000)
        except OverflowError as e:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{self.seconds}s does not fit in datetime.timedelta",
                wrapped=e,
            ) from e

    def checked_add(self, other: Duration) -> Duration:
        return Duration.from_parts(self.seconds + other.seconds, self.nanos + other.nanos)

    def __str__(self) -> str:
        millis, rest = divmod(self.nanos, NANOS_PER_MILLI)
        if rest:
            return f"{self.seconds}.{self.nanos:09d}s"
        if millis:
            return f"{self.seconds}.{millis:03d}s"
        return f"{self.seconds}s"


ZERO = Duration(0)

MAX = Duration(U64_MAX, NANOS_PER_SECOND - 1)

