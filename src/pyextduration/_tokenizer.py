"""Tokenizer for unit-annotated duration strings such as ``"1h 23m 45s"``.

The grammar is a sequence of ``<digits><unit>`` terms separated by
optional ASCII whitespace. ``UNIT`` consumes a maximal run of letters, so
``"1ms"`` is one millisecond term and never ``1m`` followed by a stray
``s``. Units are resolved after parsing, which keeps unknown suffixes
(``"5q"``) distinct from structurally malformed input (``"h"``, ``"5"``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from pyextduration._constants import (
    ASCII_WHITESPACE,
    MAX_MAGNITUDE_DIGITS,
    NANOS_PER_MILLI,
)
from pyextduration._errors import (
    ERR_MSG_EMPTY,
    ERR_MSG_MALFORMED_TOKEN,
    ERR_MSG_OVERFLOW,
    ERR_MSG_UNKNOWN_UNIT,
    DurationOverflowError,
    EmptyInputError,
    MalformedTokenError,
    UnknownUnitError,
)

DURATION_GRAMMAR = r"""
start: term (_WS? term)*
term: MAGNITUDE UNIT

MAGNITUDE: /[0-9]+/
UNIT: /[a-zA-Z]+/
_WS: /[ \t\n\r\f\v]+/
"""

_parser = Lark(DURATION_GRAMMAR, parser="lalr")


class Unit(enum.Enum):
    """Supported duration units, keyed by their lowercase suffix."""

    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def seconds(self) -> int:
        """Whole seconds per unit; zero for sub-second units."""
        return _UNIT_SECONDS[self]

    @classmethod
    def from_suffix(cls, suffix: str) -> Unit:
        try:
            return cls(suffix.lower())
        except ValueError:
            raise UnknownUnitError(
                ERR_MSG_UNKNOWN_UNIT,
                f"unknown unit '{suffix}' (use d, h, m, s, ms)",
            ) from None


_UNIT_SECONDS: dict[Unit, int] = {
    Unit.DAY: 86_400,
    Unit.HOUR: 3_600,
    Unit.MINUTE: 60,
    Unit.SECOND: 1,
    Unit.MILLISECOND: 0,
}


@dataclass(frozen=True)
class DurationToken:
    """A single ``<magnitude><unit>`` term."""

    magnitude: int
    unit: Unit

    @property
    def seconds_delta(self) -> int:
        return self.magnitude * self.unit.seconds

    @property
    def nanos_delta(self) -> int:
        if self.unit is Unit.MILLISECOND:
            return self.magnitude * NANOS_PER_MILLI
        return 0

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.suffix}"


def _parse_magnitude(digits: str) -> int:
    if len(digits.lstrip("0")) > MAX_MAGNITUDE_DIGITS:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW,
            f"magnitude with {len(digits)} digits exceeds the duration range",
        )
    return int(digits)


def parse_tree(text: str) -> Tree:
    """Parse a duration string into a lark tree of ``term`` nodes."""
    stripped = text.strip(ASCII_WHITESPACE)
    if not stripped:
        raise EmptyInputError(ERR_MSG_EMPTY, f"empty duration string: {text!r}")
    try:
        return _parser.parse(stripped)
    except UnexpectedInput as e:
        raise MalformedTokenError(
            ERR_MSG_MALFORMED_TOKEN,
            f"cannot parse duration {text!r} at column {e.column}",
            wrapped=e,
        ) from e


def tokenize(text: str) -> list[DurationToken]:
    """Split a duration string into validated tokens.

    Every unit is checked before the caller accumulates anything.

    Raises:
        EmptyInputError: If the string is empty or whitespace only.
        MalformedTokenError: If a term lacks digits or a unit, or the
            string contains any other character.
        UnknownUnitError: If a unit suffix is not one of d, h, m, s, ms.
        DurationOverflowError: If a magnitude has too many digits to fit.
    """
    tree = parse_tree(text)
    tokens = []
    for term in tree.children:
        magnitude, unit = term.children
        tokens.append(
            DurationToken(_parse_magnitude(magnitude), Unit.from_suffix(str(unit)))
        )
    return tokens
