"""
Attribute tokenizer for inline <font ...> tags.

Consumes one ``name=value`` pair at a time from the attribute list of a
tag. Values may be quoted with ``'`` or ``"``; unquoted values are
accepted too. A value that is not terminated before the end of the text
discards the attribute and ends the attribute list.
"""

import string
from typing import NamedTuple, Optional

_ALPHA = frozenset(string.ascii_letters)
_SPACE = frozenset(" \t\n\r\f\v")
_QUOTES = frozenset("'\"")
TAG_END = '>'


class Attribute(NamedTuple):
    """One tag attribute and the cursor position just past it."""
    name: str
    value: str
    end: int


def _is_name_char(char: str) -> bool:
    return char in _ALPHA or char == '-'


def consume_attribute(text: str, pos: int) -> Optional[Attribute]:
    """
    Read the next attribute starting at ``pos``.

    Args:
        text: Full subtitle text
        pos: Cursor inside a tag's attribute list

    Returns:
        The attribute and the position after it, or None when no
        further attribute can be read (the cursor is then left as is)

    Example:
        >>> consume_attribute('<font color="Red">', 6)
        Attribute(name='color', value='Red', end=17)
    """
    length = len(text)

    while pos < length and text[pos] == ' ':
        pos += 1

    if pos >= length or text[pos] not in _ALPHA:
        return None

    start = pos
    while pos < length and _is_name_char(text[pos]):
        pos += 1
    name = text[start:pos]

    # The value must be inside the current tag
    equals = text.find('=', pos)
    tag_end = text.find(TAG_END, pos)
    if equals < 0 or (0 <= tag_end < equals):
        return None
    pos = equals + 1

    while pos < length and text[pos] in _SPACE:
        pos += 1
    if pos >= length:
        return None

    if text[pos] in _QUOTES:
        delimiter = text[pos]
        closing = text.find(delimiter, pos + 1)
        if closing < 0:
            return None
        return Attribute(name, text[pos + 1:closing], closing + 1)

    start = pos
    while pos < length and not (text[pos] in _ALPHA or text[pos] in _SPACE or text[pos] == TAG_END):
        pos += 1
    if pos >= length:
        return None
    return Attribute(name, text[start:pos], pos)


def parse_int(value: str) -> int:
    """
    Read a leading decimal integer the lenient way.

    Leading whitespace and a sign are accepted, trailing garbage is
    ignored, and anything unreadable is 0.

    Example:
        >>> parse_int(" 24px")
        24
    """
    value = value.lstrip()
    sign = 1
    if value[:1] in ('-', '+'):
        sign = -1 if value[0] == '-' else 1
        value = value[1:]
    digits = 0
    while digits < len(value) and value[digits] in string.digits:
        digits += 1
    if not digits:
        return 0
    return sign * int(value[:digits])
