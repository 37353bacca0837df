"""Pydantic field types binding the flexible decoder to one output shape.

Every type accepts integer seconds, float seconds.millis or a unit
string on input; they differ only in how the field serializes::

    class Config(BaseModel):
        timeout: HumanDuration                 # "1m 5s"
        interval: SecsDuration                 # 65
        deadline: MillisDuration | None = None # 65000, null when absent

Optional fields never reach the decoder for a missing or ``null`` value.
Decode failures surface as :class:`pydantic.ValidationError` with the
field location attached.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from pyextduration._decoder import decode
from pyextduration._duration import Duration
from pyextduration._encoder import (
    format_human,
    format_millis,
    format_secs,
    format_secs_f64_ms,
)


def validate_duration(value: Any) -> Duration:
    """Pydantic validator: pass ``Duration`` instances through, decode anything else."""
    if isinstance(value, Duration):
        return value
    return decode(value)


_validator = PlainValidator(validate_duration)

HumanDuration = Annotated[
    Duration, _validator, PlainSerializer(format_human, return_type=str)
]
SecsDuration = Annotated[
    Duration, _validator, PlainSerializer(format_secs, return_type=int)
]
MillisDuration = Annotated[
    Duration, _validator, PlainSerializer(format_millis, return_type=int)
]
SecsF64MsDuration = Annotated[
    Duration, _validator, PlainSerializer(format_secs_f64_ms, return_type=float)
]

ExtDuration = HumanDuration
"""Human output, flexible input."""
