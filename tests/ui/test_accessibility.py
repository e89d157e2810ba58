"""Tests for accessibility value strings."""

import pytest

from betterslider.core.state import Selection
from betterslider.ui.accessibility import (
    accessibility_value, format_number, range_accessibility_value,
)


@pytest.mark.parametrize("value,expected", [
    (50.0, "50"),
    (0.5, "0.5"),
    (1 / 3, "0.333"),
    (-2.25, "-2.25"),
    (-0.0001, "0"),
    (0, "0"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_decimals():
    assert format_number(1 / 3, decimals=1) == "0.3"
    assert format_number(12.0, decimals=0) == "12"


def test_accessibility_value():
    assert accessibility_value(0.75) == "0.75"


def test_range_accessibility_value():
    assert range_accessibility_value(Selection(20, 80)) == "20 to 80"
    assert range_accessibility_value(Selection(0.25, 0.5)) == "0.25 to 0.5"
