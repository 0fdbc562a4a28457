"""Tests for series labels."""

import pytest
from bqc.core.series import MAX_SERIES, series_label, parse_series_label
from bqc.core.errors import MalformedToken, SeriesOutOfRange


class TestSeriesLabel:
    def test_single_letters(self):
        assert series_label(0) == "a"
        assert series_label(1) == "b"
        assert series_label(25) == "z"

    def test_two_letters(self):
        assert series_label(26) == "za"
        assert series_label(51) == "zz"

    def test_max_series(self):
        assert MAX_SERIES == 51

    def test_out_of_range_raises(self):
        with pytest.raises(SeriesOutOfRange, match="0-51"):
            series_label(52)
        with pytest.raises(SeriesOutOfRange):
            series_label(-1)


class TestParseSeriesLabel:
    def test_single_letter(self):
        assert parse_series_label("c7_8_8_8") == (2, "7_8_8_8")

    def test_z_alone(self):
        assert parse_series_label("z0_0_0_0") == (25, "0_0_0_0")

    def test_two_letters(self):
        assert parse_series_label("zb1_1_1_1") == (27, "1_1_1_1")

    def test_uppercase(self):
        assert parse_series_label("ZZ9_9_0_0") == (51, "9_9_0_0")

    def test_roundtrip_all_labels(self):
        for s in range(MAX_SERIES + 1):
            assert parse_series_label(series_label(s)) == (s, "")

    def test_no_letter_raises(self):
        with pytest.raises(MalformedToken):
            parse_series_label("1_0_0_0")
        with pytest.raises(MalformedToken):
            parse_series_label("")

    def test_non_ascii_letter_raises(self):
        """Letters that lowercase to ASCII (KELVIN SIGN -> k) are not labels."""
        with pytest.raises(MalformedToken):
            parse_series_label("\u212a0_0_0_0")

    def test_non_ascii_second_letter_not_joined(self):
        """A non-ASCII letter after z is not read as a two-letter label."""
        assert parse_series_label("z\u212a0_0_0_0") == (25, "\u212a0_0_0_0")
