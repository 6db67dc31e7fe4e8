"""Tests for reading lengths and counts from configuration values."""

import pytest

from swatch_picker.core.length import parse_count, parse_length


class TestParseLength:
    """Tests for parse_length()."""

    def test_numbers_pass_through(self) -> None:
        assert parse_length(18) == 18
        assert parse_length(0) == 0
        assert parse_length(2.5) == 2.5

    def test_strings(self) -> None:
        assert parse_length("18") == 18
        assert parse_length(" 18PX ") == 18
        assert parse_length("2.5px") == 2.5
        assert isinstance(parse_length("18.0"), int)

    @pytest.mark.parametrize("value", [-1, True, None, "", "px", "18em", "-4", [18]])
    def test_invalid(self, value) -> None:
        assert parse_length(value) is None


class TestParseCount:
    """Tests for parse_count()."""

    def test_valid(self) -> None:
        assert parse_count(3) == 3
        assert parse_count("3") == 3
        assert parse_count(4.0) == 4

    @pytest.mark.parametrize("value", [0, "0", 2.5, "2.5", False, "three"])
    def test_invalid(self, value) -> None:
        assert parse_count(value) is None
