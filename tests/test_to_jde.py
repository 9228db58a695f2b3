"""datetime to JDE conversion tests."""

from datetime import date, datetime, timedelta, timezone

import pytest

from pyjde import InvalidArgumentsError, JdeDateTime, to_calendar, to_jde


class TestToJde:
    def test_with_seconds(self):
        assert to_jde(datetime(2024, 1, 1, 9, 30, 45)) == (124001, 93045)

    def test_explicit_include_seconds(self):
        assert to_jde(datetime(2024, 1, 1, 9, 30, 45), True) == (124001, 93045)

    def test_without_seconds(self):
        assert to_jde(datetime(2024, 1, 1, 9, 30), False) == (124001, 930)

    def test_without_seconds_drops_seconds(self):
        assert to_jde(datetime(2024, 1, 1, 9, 30, 59), False) == (124001, 930)

    def test_returns_named_pair(self):
        result = to_jde(datetime(2024, 1, 1, 9, 30, 45))
        assert isinstance(result, JdeDateTime)
        assert result.date == 124001
        assert result.time == 93045
        jde_date, jde_time = result
        assert (jde_date, jde_time) == (124001, 93045)

    def test_single_digit_fields(self):
        assert to_jde(datetime(2024, 1, 1, 1, 2, 3)) == (124001, 10203)

    def test_midnight(self):
        assert to_jde(datetime(2024, 1, 1)) == (124001, 0)

    def test_last_century(self):
        assert to_jde(datetime(1999, 12, 31, 23, 59, 59)) == (99365, 235959)

    def test_leap_year_end(self):
        assert to_jde(datetime(2024, 12, 31)).date == 124366

    def test_before_base_year(self):
        assert to_jde(datetime(1899, 12, 31)).date == -635

    def test_microseconds_ignored(self):
        assert to_jde(datetime(2024, 1, 1, 9, 30, 45, 999999)) == (124001, 93045)

    def test_plain_date_is_midnight(self):
        assert to_jde(date(2024, 2, 29)) == (124060, 0)

    def test_aware_datetime_uses_wall_clock(self):
        value = datetime(2024, 1, 1, 9, 30, 45, tzinfo=timezone(timedelta(hours=-5)))
        assert to_jde(value) == (124001, 93045)

    def test_invalid_argument(self):
        with pytest.raises(InvalidArgumentsError):
            to_jde("2024-01-01")


class TestCurrentTime:
    def test_none_uses_now(self):
        before = datetime.now().replace(microsecond=0)
        jde_date, jde_time = to_jde(None)
        after = datetime.now()
        decoded = to_calendar(jde_date, jde_time)
        assert before <= decoded <= after

    def test_injected_clock(self, frozen_converter):
        assert frozen_converter.to_jde() == (124065, 70809)

    def test_injected_clock_without_seconds(self, frozen_converter):
        assert frozen_converter.to_jde(None, False) == (124065, 708)

    def test_explicit_value_ignores_clock(self, frozen_converter):
        assert frozen_converter.to_jde(datetime(2024, 1, 1, 9, 30, 45)) == (124001, 93045)

    def test_now(self, frozen_converter, frozen_now):
        assert frozen_converter.now() == frozen_now
