"""pyextduration - Flexible duration decoding and shape-selectable encoding."""

from __future__ import annotations

try:
    from pyextduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyextduration._decoder import (
    decode,
    decode_float,
    decode_int,
    decode_optional,
    decode_str,
)
from pyextduration._duration import MAX, ZERO, Duration
from pyextduration._encoder import (
    Shape,
    encode,
    encode_optional,
    format_human,
    format_millis,
    format_secs,
    format_secs_f64_ms,
)
from pyextduration._errors import (
    DurationError,
    DurationOverflowError,
    EmptyInputError,
    MalformedTokenError,
    MaxInputLengthExceededError,
    NegativeValueError,
    NonFiniteError,
    UnknownUnitError,
    UnsupportedTypeError,
)
from pyextduration._tokenizer import DurationToken, Unit, tokenize

__all__ = [
    "decode",
    "decode_float",
    "decode_int",
    "decode_optional",
    "decode_str",
    "encode",
    "encode_optional",
    "format_human",
    "format_millis",
    "format_secs",
    "format_secs_f64_ms",
    "tokenize",
    "Duration",
    "DurationToken",
    "Shape",
    "Unit",
    "MAX",
    "ZERO",
    "DurationError",
    "DurationOverflowError",
    "EmptyInputError",
    "MalformedTokenError",
    "MaxInputLengthExceededError",
    "NegativeValueError",
    "NonFiniteError",
    "UnknownUnitError",
    "UnsupportedTypeError",
]
