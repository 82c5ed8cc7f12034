"""Unit tests for TimeSpan, DateTime and DateTimeExpression."""

import datetime as _dt

import pandas as pd
import pytest

from tagparser.chrono import TICKS_PER_SECOND, DateTime, DateTimeExpression, DateTimeParts, TimeSpan
from tagparser.tools.error import ConversionError


class TestTimeSpan:
    def test_from_string(self):
        assert TimeSpan.from_string("01:02:03.5") == TimeSpan.from_seconds(3723.5)
        assert TimeSpan.from_string("90") == TimeSpan.from_minutes(1.5)
        assert TimeSpan.from_string("-00:00:01") == TimeSpan.from_seconds(-1)

    def test_to_string(self):
        assert TimeSpan.from_seconds(3723.5).to_string() == "01:02:03.5"
        assert TimeSpan().to_string() == "00:00:00"

    def test_invalid(self):
        with pytest.raises(ConversionError):
            TimeSpan.from_string("1:x")


class TestDateTime:
    """Test suite for DateTime."""

    def test_iso_round_trip(self):
        moment = DateTime.from_date_and_time(2012, 2, 29, 15, 34, 20, 33)
        text = moment.to_iso_string()
        assert text == "2012-02-29T15:34:20.033"
        assert DateTime.from_iso_string(text) == moment

    def test_omit_default_components(self):
        assert DateTime.from_date(2017, 5, 1).to_iso_string(omit_default_components=True) == "2017-05-01"

    def test_zone_is_converted_to_gmt(self):
        assert DateTime.from_iso_string("2017-05-01T12:00:00+02:00") == DateTime.from_date_and_time(2017, 5, 1, 10)

    def test_partial_date(self):
        assert DateTime.from_iso_string("2017") == DateTime.from_date(2017, 1, 1)

    @pytest.mark.parametrize("text", ["17-05-01", "2017-13-01", "0000-01-01"])
    def test_invalid(self, text):
        with pytest.raises(ConversionError):
            DateTime.from_iso_string(text)

    @pytest.mark.parametrize("text, expected", [
        ("3000-01-01", DateTime.from_date(3000, 1, 1)),
        ("1600-02-29T12:00:00", DateTime.from_date_and_time(1600, 2, 29, 12)),
        ("0001-01-01T00:00:01", DateTime(TICKS_PER_SECOND)),
    ])
    def test_dates_outside_nanosecond_range(self, text, expected):
        assert DateTime.from_iso_string(text) == expected

    def test_from_timestamp_keeps_sub_microsecond_ticks(self):
        timestamp = pd.Timestamp("2017-05-01T00:00:00.0000005")
        assert DateTime.from_timestamp(timestamp) == DateTime.from_date(2017, 5, 1) + TimeSpan(5)

    def test_from_timestamp_of_far_date(self):
        assert DateTime.from_timestamp(pd.Timestamp(_dt.datetime(3000, 6, 1))) == DateTime.from_date(3000, 6, 1)


class TestDateTimeExpression:
    def test_keeps_precision(self):
        expr = DateTimeExpression.from_iso_string("2017-05")
        assert expr.parts == DateTimeParts.YEAR | DateTimeParts.MONTH
        assert expr.to_iso_string() == "2017-05"

    def test_zone_offset(self):
        expr = DateTimeExpression.from_iso_string("2017-05-01T12:30+02:00")
        assert expr.delta == TimeSpan.from_hours(2)
        assert expr.gmt() == DateTime.from_date_and_time(2017, 5, 1, 10, 30)
        assert expr.to_iso_string() == "2017-05-01T12:30+02:00"
