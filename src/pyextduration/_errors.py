"""Exception hierarchy for duration decoding and encoding."""


class DurationError(ValueError):
    """Base exception for duration decode/encode errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (including the offending input) for logging.
    Subclasses ``ValueError`` so validation layers such as pydantic
    report it as an ordinary validation failure.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class NegativeValueError(DurationError):
    """Raised when an integer or float input is negative."""


class NonFiniteError(DurationError):
    """Raised when a float input is NaN or infinite."""


class EmptyInputError(DurationError):
    """Raised when a string input is empty or all whitespace."""


class MalformedTokenError(DurationError):
    """Raised when a string token has digits without a unit or a unit without digits."""


class UnknownUnitError(DurationError):
    """Raised when a string token's unit is not one of d, h, m, s, ms."""


class DurationOverflowError(DurationError):
    """Raised when a duration exceeds the unsigned 64-bit range."""


class UnsupportedTypeError(DurationError):
    """Raised when the input is not an integer, float or string."""


class MaxInputLengthExceededError(DurationError):
    """Raised when a duration string exceeds the input length limit."""


# Sanitized user-facing error message constants
ERR_MSG_NEGATIVE = "negative duration not allowed"
ERR_MSG_NON_FINITE = "non-finite float"
ERR_MSG_EMPTY = "empty duration string"
ERR_MSG_MALFORMED_TOKEN = "malformed duration token (expected <number><unit>)"
ERR_MSG_UNKNOWN_UNIT = "unknown unit (use d, h, m, s, ms)"
ERR_MSG_OVERFLOW = "duration overflow"
ERR_MSG_UNSUPPORTED_TYPE = (
    "expected integer seconds, float seconds.millis, "
    "or a string like '1h 23m 45s' / '123s' / '250ms'"
)
ERR_MSG_INPUT_TOO_LONG = "duration string too long"
