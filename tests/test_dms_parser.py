#!/usr/bin/env python3
"""
Unit tests for parse_dms().

Tests verify:
1. Numbers pass straight through
2. Deg/min/sec with a variety of separators and N/S/E/W suffixes
3. Fixed-width forms without separators (dddmm, dddmmss)
4. Decimal degrees with sign and suffix, including a double negative
5. Non-numeric and over-long input returns None
"""

import logging
import math
import os
import sys

import pytest

# Add parent directory to path to import modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from geodms.dms_parser import parse_dms


class TestNumericInput:
    """Numbers are returned unchanged."""

    def test_returns_float_it_is_passed(self):
        assert parse_dms(3.5) == 3.5

    def test_returns_int_it_is_passed(self):
        result = parse_dms(-12)
        assert result == -12
        assert isinstance(result, int)

    def test_nan_is_a_parse_failure(self):
        assert parse_dms(float("nan")) is None

    def test_infinity_is_a_parse_failure(self):
        assert parse_dms(float("inf")) is None
        assert parse_dms(float("-inf")) is None


class TestDegMinSec:
    """Deg-min-sec suffixed with N/S/E/W."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("40°44′55″N", 40.74861111111111),
            ("40°44′55″S", -40.74861111111111),
            ("40°44′55″", 40.74861111111111),
            ("-40°44′55″", -40.74861111111111),
            ("73 59 11E", 73.9863888888889),
            ("73 59 11W", -73.9863888888889),
            ("73/59/11E", 73.9863888888889),
            ("73/59/11W", -73.9863888888889),
            ("51° 28′ 40.12″ N", 51.477811111111116),
            ("51° 28′ 40.12″ S", -51.477811111111116),
        ],
    )
    def test_parses_dms(self, text, expected):
        assert parse_dms(text) == pytest.approx(expected, abs=1e-12)

    def test_ascii_separators(self):
        """Apostrophe/quote separators as typed on a plain keyboard."""
        expected = -(3 + 37 / 60 + 9 / 3600)
        assert parse_dms("3º 37' 09\"W") == pytest.approx(expected, abs=1e-12)

    def test_lowercase_suffix_is_negative(self):
        assert parse_dms("40 44 55s") == pytest.approx(-40.74861111111111, abs=1e-12)
        assert parse_dms("73 59 11w") == pytest.approx(-73.9863888888889, abs=1e-12)

    def test_surrounding_whitespace_ignored(self):
        assert parse_dms("   40°44′55″S  ") == pytest.approx(-40.74861111111111, abs=1e-12)

    def test_deg_min_only(self):
        assert parse_dms("40°30′N") == pytest.approx(40.5)
        assert parse_dms("40 30 W") == pytest.approx(-40.5)

    def test_minutes_over_sixty_are_accepted(self):
        assert parse_dms("10 90 0") == pytest.approx(11.5)


class TestFixedWidth:
    """Fixed-width format without separators."""

    def test_dddmmss(self):
        assert parse_dms("0033709W") == pytest.approx(-3.6191666666666666, abs=1e-12)

    def test_dddmm(self):
        assert parse_dms("00337W") == pytest.approx(-3.6166666666666667, abs=1e-12)

    def test_ddmm(self):
        assert parse_dms("4030N") == pytest.approx(40.5)

    def test_ddmmss(self):
        assert parse_dms("403036") == pytest.approx(40.51)

    def test_short_digit_run_is_plain_degrees(self):
        assert parse_dms("40°N") == 40.0
        assert parse_dms("123") == 123.0

    def test_decimal_is_not_fixed_width(self):
        assert parse_dms("12345.5") == 12345.5

    def test_long_digit_run_is_plain_degrees(self):
        assert parse_dms("12345678") == 12345678.0
        assert parse_dms("12345678W") == -12345678.0


class TestDecimal:
    """Decimal format with N/S/E/W."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("27.389N", 27.389),
            ("27.389S", -27.389),
            ("27.389E", 27.389),
            ("27.389W", -27.389),
            ("-27.389", -27.389),
        ],
    )
    def test_parses_decimal(self, text, expected):
        assert parse_dms(text) == expected

    def test_double_negative(self):
        assert parse_dms("-27.389S") == 27.389

    def test_comma_reads_leading_number(self):
        assert parse_dms("12,5") == 12.0


class TestParseFailure:
    """Non-numeric or unsupported input returns None."""

    def test_non_numeric_input(self):
        assert parse_dms("FRED") is None

    def test_empty_string(self):
        assert parse_dms("") is None
        assert parse_dms("   ") is None

    def test_too_many_parts(self):
        assert parse_dms("1 2 3 4") is None

    def test_none_input(self):
        assert parse_dms(None) is None

    def test_failure_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geodms.dms_parser"):
            parse_dms("FRED")
        assert "FRED" in caplog.text

    def test_no_exception_for_odd_input(self):
        result = parse_dms("N 40 ° ° 30 ′′ x")
        assert math.isclose(result, 40.5)
