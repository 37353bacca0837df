"""Error class hierarchy tests."""

import pytest

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


class TestDurationErrorBase:
    def test_str_returns_user_message(self):
        err = DurationError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DurationError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DurationError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DurationError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_value_error(self):
        assert isinstance(DurationError("test"), ValueError)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        NegativeValueError,
        NonFiniteError,
        EmptyInputError,
        MalformedTokenError,
        UnknownUnitError,
        DurationOverflowError,
        UnsupportedTypeError,
        MaxInputLengthExceededError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_duration_error(self, cls):
        assert issubclass(cls, DurationError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"


class TestDualMessaging:
    def test_user_message_omits_input(self):
        from pyextduration import decode

        with pytest.raises(UnknownUnitError) as excinfo:
            decode("12parsecs")
        assert "parsecs" not in str(excinfo.value)
        assert "parsecs" in excinfo.value.internal()
