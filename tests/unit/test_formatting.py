"""
Tests for hostvalidate.formatting.human_size.
"""

import pytest

from hostvalidate.formatting import human_size


class TestHumanSizeInvalid:
    """Absent and invalid values render as 0B."""

    @pytest.mark.parametrize("value", [0, None, -1, -4096, "abc", "", "1.5e3", object()])
    def test_renders_zero(self, value):
        """Should render non-positive and non-numeric input as 0B."""
        assert human_size(value) == "0B"


class TestHumanSizeUnits:
    """Unit selection and truncated decimal."""

    @pytest.mark.parametrize("value,expected", [
        (1, "1B"),
        (500, "500B"),
        (1023, "1023B"),
        (1024, "1.0KB"),
        (1536, "1.5KB"),
        (1048575, "1023.9KB"),
        (1048576, "1.0MB"),
        (1073741823, "1023.9MB"),
        (1073741824, "1.0GB"),
        (68719476736, "64.0GB"),
        (2 * 1024 ** 4, "2048.0GB"),
    ])
    def test_formats(self, value, expected):
        assert human_size(value) == expected

    def test_decimal_is_floored(self):
        """1.99KB should truncate to 1.9KB, never round to 2.0KB."""
        assert human_size(2047) == "1.9KB"

    def test_accepts_integer_string(self):
        """Sizes read from tool output may be strings."""
        assert human_size("2048") == "2.0KB"

    def test_no_space_before_unit(self):
        assert " " not in human_size(123456789)
