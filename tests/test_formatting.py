"""Unit tests for shortest round-trip decimal rendering."""
import pytest

from ffm.utils.formatting import format_decimal


class TestFormatDecimal:
    """Tests for format_decimal."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1.0, "1"),
            (0.0, "0"),
            (0, "0"),
            (0.30, "0.3"),
            (0.5, "0.5"),
            (0.25, "0.25"),
        ],
    )
    def test_minimal_form(self, value, expected):
        assert format_decimal(value) == expected

    def test_round_trip_digits_kept(self):
        """Representation error is rendered, not rounded away."""
        assert format_decimal(0.1 + 0.2) == "0.30000000000000004"

    def test_negative_zero(self):
        assert format_decimal(-0.0) == "0"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (5e-324, "5e-324"),
        ],
    )
    def test_tiny_values_use_exponent(self, value, expected):
        """Magnitudes below 1e-6 render compactly in exponent form."""
        assert format_decimal(value) == expected

    @pytest.mark.parametrize("value,expected", [(1e-6, "0.000001"), (0.00012, "0.00012")])
    def test_small_values_stay_positional(self, value, expected):
        assert format_decimal(value) == expected
