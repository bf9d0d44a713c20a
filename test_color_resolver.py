#!/usr/bin/env python3
"""
Tests for HTML color name resolution.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.colors import DEFAULT_COLOR, HTML_COLORS, format_color, resolve_color


@pytest.mark.parametrize("name", ["red", "RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert resolve_color(name) == 0xFF0000


@pytest.mark.parametrize("name, expected", [
    ("Aqua", 0x00FFFF),
    ("Cyan", 0x00FFFF),
    ("DarkGrey", 0xA9A9A9),
    ("DarkSlateGray", 0x2F4F4F),
    ("navy", 0x000080),
    ("white", 0xFFFFFF),
])
def test_known_colors(name, expected):
    assert resolve_color(name) == expected


@pytest.mark.parametrize("name", ["", "notacolor", "#FF0000", "red "])
def test_unknown_names_fall_back_to_black(name):
    assert resolve_color(name) == DEFAULT_COLOR == 0


def test_every_table_entry_resolves():
    for name, value in HTML_COLORS:
        assert resolve_color(name) == value, name


def test_format_color():
    assert format_color(0xFF0000) == "#FF0000"
    assert format_color(0x0000FF) == "#0000FF"
    assert format_color(0) == "#000000"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
