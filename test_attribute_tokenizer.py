#!/usr/bin/env python3
"""
Tests for the <font ...> attribute tokenizer.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.attributes import Attribute, consume_attribute, parse_int


def test_double_quoted_value():
    assert consume_attribute('color="Red">', 0) == Attribute('color', 'Red', 11)


def test_single_quoted_value_keeps_spaces():
    attribute = consume_attribute("face='Times New Roman'>", 0)

    assert attribute.name == 'face'
    assert attribute.value == 'Times New Roman'
    assert attribute.end == len("face='Times New Roman'")


def test_spaces_around_equals():
    assert consume_attribute('  size =  "12">', 0) == Attribute('size', '12', 14)


def test_hyphenated_name():
    attribute = consume_attribute('outline-color="Navy">', 0)

    assert attribute.name == 'outline-color'
    assert attribute.value == 'Navy'


def test_unquoted_values_in_sequence():
    text = 'size=20 color="Blue">'

    first = consume_attribute(text, 0)
    assert first == Attribute('size', '20', 7)

    second = consume_attribute(text, first.end)
    assert second == Attribute('color', 'Blue', 20)

    assert consume_attribute(text, second.end) is None


@pytest.mark.parametrize("text", [
    '',
    '>',
    '   >',
    '1size="2">',
    'color="Red',
    'size=20',
    'size=',
    'color>x="y"',
])
def test_no_attribute(text):
    assert consume_attribute(text, 0) is None


def test_position_past_end():
    assert consume_attribute('color="Red">', 50) is None


@pytest.mark.parametrize("value, expected", [
    ("24", 24),
    (" -3", -3),
    ("+7", 7),
    ("12px", 12),
    ("abc", 0),
    ("", 0),
    ("-", 0),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
