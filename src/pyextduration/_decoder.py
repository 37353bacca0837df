"""Flexible duration decoding from integer, float or string values."""

from __future__ import annotations

import logging
import math
from typing import Any

from pyextduration._constants import (
    ASCII_WHITESPACE,
    DEFAULT_MAX_INPUT_LENGTH,
    MILLIS_PER_SECOND,
    NANOS_PER_MILLI,
    U64_MAX,
)
from pyextduration._duration import Duration, check_seconds
from pyextduration._errors import (
    ERR_MSG_EMPTY,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_NEGATIVE,
    ERR_MSG_NON_FINITE,
    ERR_MSG_OVERFLOW,
    ERR_MSG_UNSUPPORTED_TYPE,
    DurationError,
    DurationOverflowError,
    EmptyInputError,
    MaxInputLengthExceededError,
    NegativeValueError,
    NonFiniteError,
    UnsupportedTypeError,
)
from pyextduration._tokenizer import tokenize
from pyextduration._utils import round_half_away

logger = logging.getLogger(__name__)


def decode_int(value: int) -> Duration:
    """Decode an integer count of whole seconds."""
    if value < 0:
        raise NegativeValueError(ERR_MSG_NEGATIVE, f"integer value {value} is negative")
    if value > U64_MAX:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW, f"integer value {value} exceeds {U64_MAX}"
        )
    return Duration(value)


def decode_float(value: float) -> Duration:
    """Decode float seconds; the fraction is rounded to whole milliseconds.

    ``1.9996`` rounds to ``1000`` ms and carries into the seconds field,
    giving exactly two seconds.
    """
    if not math.isfinite(value):
        raise NonFiniteError(ERR_MSG_NON_FINITE, f"float value {value!r} is not finite")
    if value < 0.0:
        raise NegativeValueError(ERR_MSG_NEGATIVE, f"float value {value!r} is negative")

    seconds = check_seconds(math.trunc(value), "float")
    millis = round_half_away((value - seconds) * MILLIS_PER_SECOND)
    if millis == MILLIS_PER_SECOND:
        seconds = check_seconds(seconds + 1, "float carry")
        millis = 0
    return Duration(seconds, millis * NANOS_PER_MILLI)


def decode_str(text: str, *, max_input_length: int | None = None) -> Duration:
    """Decode a unit-annotated string like ``"1h 23m 45s"`` or ``"1m250ms"``.

    Token order is free and repeated units add up, so ``"1h 1h"`` equals
    ``"2h"``. Strings longer than ``max_input_length`` (1024 by default,
    surrounding whitespace excluded) are rejected even when every token is
    valid; raise the limit to accept long runs of repeated tokens.

    Args:
        text: The duration string.
        max_input_length: Maximum string length, ignoring surrounding
            whitespace. Defaults to 1024.

    Raises:
        EmptyInputError: If the string is empty or whitespace only.
        MalformedTokenError: If a token is missing its digits or unit.
        UnknownUnitError: If a unit is not one of d, h, m, s, ms.
        DurationOverflowError: If the total exceeds the 64-bit second range.
        MaxInputLengthExceededError: If the string is longer than the limit.
    """
    if max_input_length is None:
        max_input_length = DEFAULT_MAX_INPUT_LENGTH
    stripped = text.strip(ASCII_WHITESPACE)
    if not stripped:
        raise EmptyInputError(ERR_MSG_EMPTY, f"empty duration string: {text!r}")
    if len(stripped) > max_input_length:
        raise MaxInputLengthExceededError(
            ERR_MSG_INPUT_TOO_LONG,
            f"duration string length {len(stripped)} exceeds limit {max_input_length}",
        )

    seconds = 0
    nanos = 0
    for token in tokenize(text):
        seconds = check_seconds(seconds + token.seconds_delta, f"token '{token}'")
        nanos += token.nanos_delta
    return Duration.from_parts(seconds, nanos)


def decode(value: Any, *, max_input_length: int | None = None) -> Duration:
    """Decode an integer, float or string into a :class:`Duration`.

    Args:
        value: Integer seconds, float seconds.millis, or a unit string.
        max_input_length: Maximum accepted string length. Defaults to 1024,
            which bounds how many repeated tokens a string may carry.

    Returns:
        The normalized duration.

    Raises:
        DurationError: The subclass names the failure kind.
    """
    try:
        # bool is an int subclass but never a duration
        if isinstance(value, bool):
            raise UnsupportedTypeError(
                ERR_MSG_UNSUPPORTED_TYPE, f"got boolean {value!r}"
            )
        if isinstance(value, int):
            return decode_int(value)
        if isinstance(value, float):
            return decode_float(value)
        if isinstance(value, str):
            return decode_str(value, max_input_length=max_input_length)
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE, f"got {type(value).__name__}: {value!r}"
        )
    except DurationError as e:
        logger.debug("rejected duration input: %s", e.internal())
        raise


def decode_optional(value: Any, *, max_input_length: int | None = None) -> Duration | None:
    """Decode ``value``, mapping an absent (``None``) value to ``None``."""
    if value is None:
        return None
    return decode(value, max_input_length=max_input_length)
