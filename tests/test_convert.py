"""
Tests for the date/time and boolean collaborators.
"""

import pytest
from datetime import datetime, timedelta, timezone

from edmwire.edm import convert_to_datetime, convert_to_edm_datetime, to_boolean


class TestConvertToEdmDateTime:
    """Test canonical DateTime rendering."""

    def test_seven_fraction_digits(self):
        """Fractions are rendered with seven digits and a Z."""
        dt = datetime(2020, 1, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
        assert convert_to_edm_datetime(dt) == "2020-01-02T03:04:05.0000060Z"

    def test_naive_is_utc(self):
        """Naive datetimes are taken as UTC."""
        assert convert_to_edm_datetime(datetime(2020, 1, 2)) == "2020-01-02T00:00:00.0000000Z"

    def test_offset_converted(self):
        """Aware datetimes are shifted to UTC."""
        dt = datetime(2020, 1, 2, 0, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert convert_to_edm_datetime(dt) == "2020-01-02T05:30:00.0000000Z"

    def test_text_is_parsed(self):
        """Text input is parsed first."""
        assert convert_to_edm_datetime("2020-01-02T03:04:05Z") == "2020-01-02T03:04:05.0000000Z"

    def test_empty_passes_through(self):
        """Empty values are returned unchanged."""
        assert convert_to_edm_datetime(None) is None
        assert convert_to_edm_datetime("") == ""

    def test_wrong_type_raises(self):
        """Non-datetime values raise TypeError."""
        with pytest.raises(TypeError):
            convert_to_edm_datetime(12345)


class TestConvertToDateTime:
    """Test DateTime parsing."""

    def test_canonical_text(self):
        """Canonical text parses to an aware UTC datetime."""
        dt = convert_to_datetime("2012-03-04T05:06:07.1234567Z")
        assert dt == datetime(2012, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc)
        assert dt.tzinfo == timezone.utc

    def test_date_only(self):
        """A bare date is midnight UTC."""
        assert convert_to_datetime("2012-03-04") == datetime(2012, 3, 4, tzinfo=timezone.utc)

    def test_offset(self):
        """Offsets are applied and normalized to UTC."""
        dt = convert_to_datetime("2012-03-04T05:06:07+01:30")
        assert dt == datetime(2012, 3, 4, 3, 36, 7, tzinfo=timezone.utc)

    def test_datetime_passes_through(self):
        """A datetime is returned as-is."""
        dt = datetime(2012, 3, 4)
        assert convert_to_datetime(dt) is dt

    def test_garbage_raises(self):
        """Unparsable text raises ValueError."""
        with pytest.raises(ValueError):
            convert_to_datetime("yesterday")


class TestToBoolean:
    """Test boolean coercion."""

    @pytest.mark.parametrize("text", ["1", "true", "TRUE", " yes ", "on"])
    def test_true_words(self, text):
        """Truthy words coerce to True."""
        assert to_boolean(text) is True

    @pytest.mark.parametrize("text", ["0", "false", "no", "off", "", "2"])
    def test_other_words(self, text):
        """Everything else coerces to False."""
        assert to_boolean(text) is False

    def test_bool_passes_through(self):
        """Booleans are returned as-is."""
        assert to_boolean(True) is True
        assert to_boolean(False) is False


class TestConvertToDateTimeInputs:
    """Test the input forms accepted by DateTime parsing."""

    def test_basic_format(self):
        """Compact ISO-8601 text parses."""
        assert convert_to_datetime("20120304T050607") == datetime(
            2012, 3, 4, 5, 6, 7, tzinfo=timezone.utc
        )

    def test_result_is_utc(self):
        """Offsets come back normalized to timezone.utc."""
        dt = convert_to_datetime("2012-03-04T05:06:07-02:00")
        assert dt.tzinfo == timezone.utc
        assert dt.hour == 7

    def test_non_text_raises_type_error(self):
        """Values that are neither text nor datetime raise TypeError."""
        with pytest.raises(TypeError):
            convert_to_datetime(12345)
