"""Encoder tests for the human, secs, millis and secs_f64_ms shapes."""

import pytest

from pyextduration import (
    MAX,
    Duration,
    Shape,
    decode,
    encode,
    encode_optional,
    format_human,
    format_millis,
    format_secs,
    format_secs_f64_ms,
)
from pyextduration._constants import U64_MAX
from pyextduration._errors import DurationOverflowError


MILLISECOND_DURATIONS = [
    Duration(0),
    Duration(0, 1_000_000),
    Duration(0, 999_000_000),
    Duration(1),
    Duration(59, 999_000_000),
    Duration(60),
    Duration(86_399, 1_000_000),
    Duration(86_400),
    Duration(90_061, 1_000_000),
    Duration(1_000_000_000, 500_000_000),
    Duration(93_784, 5_000_000),
    Duration(U64_MAX, 999_000_000),
]


class TestFormatHuman:
    def test_zero(self):
        assert format_human(Duration(0)) == "0s"

    def test_sub_half_millisecond_is_zero(self):
        assert format_human(Duration(0, 499_999)) == "0s"

    def test_minute_and_seconds(self):
        assert format_human(Duration.from_millis(65_000)) == "1m 5s"

    def test_hms(self, hms_duration):
        assert format_human(hms_duration) == "1h 23m 45s"

    def test_all_units_but_days(self, mixed_duration):
        assert format_human(mixed_duration) == "1h 2m 3s 250ms"

    def test_zero_units_omitted(self):
        assert format_human(Duration(86_400 + 5)) == "1d 5s"

    def test_days_not_folded(self):
        assert format_human(Duration(400 * 86_400)) == "400d"

    def test_half_millisecond_rounds_up(self):
        assert format_human(Duration(0, 500_000)) == "1ms"

    def test_rounding_carries_into_seconds(self):
        assert format_human(Duration(59, 999_500_000)) == "1m"

    def test_max(self):
        assert format_human(MAX).endswith("16s")


class TestFormatSecs:
    def test_truncates(self):
        assert format_secs(Duration.from_millis(1500)) == 1

    def test_truncates_near_next_second(self):
        assert format_secs(Duration(1, 999_999_999)) == 1

    def test_max(self):
        assert format_secs(MAX) == U64_MAX


class TestFormatMillis:
    def test_exact(self):
        assert format_millis(Duration.from_millis(1234)) == 1234

    def test_rounds(self):
        assert format_millis(Duration.from_millis(1500)) == 1500

    def test_rounding_across_second_boundary(self):
        assert format_millis(Duration(1, 999_500_000)) == 2000

    def test_half_millisecond_rounds_away_from_zero(self):
        assert format_millis(Duration(0, 62_500_000)) == 63
        assert format_millis(Duration(0, 62_499_999)) == 62

    def test_overflow(self):
        with pytest.raises(DurationOverflowError, match="overflow"):
            format_millis(Duration(U64_MAX // 1000 + 1))

    def test_largest_representable(self):
        seconds, millis = divmod(U64_MAX, 1000)
        assert format_millis(Duration(seconds, millis * 1_000_000)) == U64_MAX


class TestFormatSecsF64Ms:
    def test_three_decimals(self):
        assert format_secs_f64_ms(Duration.from_millis(1234)) == 1.234

    def test_minute_and_millis(self):
        assert format_secs_f64_ms(decode("1m250ms")) == 60.25

    def test_sub_millisecond_dropped(self):
        assert format_secs_f64_ms(Duration(2, 400_000)) == 2.0

    def test_half_millisecond_rounds_up(self):
        assert format_secs_f64_ms(Duration(0, 62_500_000)) == 0.063

    @pytest.mark.parametrize(
        "duration,expected",
        [
            (Duration(0, 500_500_000), 0.501),
            (Duration(0, 501_500_000), 0.502),
            (Duration(1, 100_500_000), 1.101),
            (Duration(12_345, 999_500_000), 12_346.0),
        ],
    )
    def test_half_millisecond_rounds_up_at_non_dyadic_values(self, duration, expected):
        assert format_secs_f64_ms(duration) == expected

    @pytest.mark.parametrize("seconds", [0, 1, 60, 12_345])
    def test_agrees_with_millis_shape(self, seconds):
        for millis in range(1000):
            d = Duration(seconds, millis * 1_000_000 + 500_000)
            assert format_secs_f64_ms(d) == format_millis(d) / 1000

    def test_returns_float(self):
        assert isinstance(format_secs_f64_ms(Duration(3)), float)


class TestEncode:
    @pytest.mark.parametrize(
        "shape,expected",
        [
            (Shape.HUMAN, "1m 250ms"),
            (Shape.SECS, 60),
            (Shape.MILLIS, 60250),
            (Shape.SECS_F64_MS, 60.25),
        ],
    )
    def test_shapes(self, shape, expected):
        assert encode(Duration(60, 250_000_000), shape) == expected

    def test_default_is_human(self):
        assert encode(Duration(65)) == "1m 5s"

    def test_shape_values(self):
        assert [s.value for s in Shape] == ["human", "secs", "millis", "secs_f64_ms"]

    def test_optional_none(self):
        assert encode_optional(None, Shape.MILLIS) is None

    def test_optional_value(self):
        assert encode_optional(Duration(2), Shape.MILLIS) == 2000


class TestHumanRoundTrip:
    @pytest.mark.parametrize("duration", MILLISECOND_DURATIONS, ids=str)
    def test_parse_of_format_is_identity(self, duration):
        assert decode(format_human(duration)) == duration

    def test_scenario(self):
        parsed = decode("1h 23m 45s")
        assert parsed == Duration(5025)
        assert format_human(parsed) == "1h 23m 45s"

    def test_sub_millisecond_precision_is_lost(self):
        assert decode(format_human(Duration(1, 1_400_000))) == Duration(1, 1_000_000)
