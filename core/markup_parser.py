"""
Inline subtitle markup parser.

This module turns one subtitle payload into styled text segments plus an
alignment value. It recognizes, in priority order at each position:
- HTML-like tags: <br/>, <b>, <i>, <u>, <s>, <font ...> and their closers
- SSA override blocks {\\...}; only {\\anN} is honored, the rest is hidden
- Legacy {Y:...} / {y:...} style blocks
- Other {x:y} directives, which are hidden

Unknown tags are kept as literal text, one character at a time. Malformed
markup never aborts a parse.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple
from core.attributes import consume_attribute, parse_int
from core.colors import resolve_color
from core.style_stack import StyleStack
from core.text_style import ParsedText, StyleFlag, TextSegment, TextStyle
from utils.constants import AN_HORIZONTAL, AN_VERTICAL
from utils.logging_config import get_logger

logger = get_logger(__name__)

LINE_BREAK_TAG = '<br/>'
FONT_TAG = '<font '

FLAG_TAGS: Dict[str, StyleFlag] = {
    '<b>': StyleFlag.BOLD,
    '<i>': StyleFlag.ITALIC,
    '<u>': StyleFlag.UNDERLINE,
    '<s>': StyleFlag.STRIKEOUT,
}

CLOSING_TAGS = frozenset({'b', 'i', 'u', 's', 'font'})

# Checked in this order, each one character further than the last match
LEGACY_BLOCK_FLAGS: Tuple[Tuple[str, StyleFlag], ...] = (
    ('i', StyleFlag.ITALIC),
    ('b', StyleFlag.BOLD),
    ('u', StyleFlag.UNDERLINE),
)

# <font> attribute -> (style field, value converter)
FONT_ATTRIBUTES: Dict[str, Tuple[str, Callable[[str], object]]] = {
    'face': ('font_name', str),
    'family': ('mono_font_name', str),
    'size': ('font_size', parse_int),
    'color': ('font_color', resolve_color),
    'outline-color': ('outline_color', resolve_color),
    'shadow-color': ('shadow_color', resolve_color),
    'back-color': ('background_color', resolve_color),
    'outline-level': ('outline_width', parse_int),
    'shadow-level': ('shadow_width', parse_int),
    'alpha': ('font_alpha', parse_int),
}

_ALIGN_DIRECTIVE = re.compile(r'\{\\an([1-9])\}')
_LITERAL_RUN = re.compile(r'[^<{]+')


class MarkupParseError(Exception):
    """Raised when a payload cannot be parsed at all (out of memory)."""


def alignment_from_an(number: int) -> int:
    """
    Convert an {\\anN} keypad position to alignment bits.

    Args:
        number: Keypad position 1-9 (1 = bottom left, 9 = top right)

    Returns:
        Combined vertical and horizontal alignment bits
    """
    index = number - 1
    return int(AN_VERTICAL[index // 3] | AN_HORIZONTAL[index % 3])


class SegmentBuilder:
    """Accumulates literal text into the active segment of the output."""

    def __init__(self):
        """Start the output with one empty, unstyled segment."""
        self.segments: List[TextSegment] = [TextSegment("")]
        self._pending: List[str] = []

    @property
    def active(self) -> TextSegment:
        """Segment receiving literal text."""
        return self.segments[-1]

    def append_char(self, char: str) -> None:
        """Append one character to the active segment."""
        self._pending.append(char)

    def append_text(self, text: str) -> None:
        """Append a run of literal characters to the active segment."""
        self._pending.append(text)

    def _flush(self) -> None:
        if self._pending:
            self.active.text += "".join(self._pending)
            self._pending = []

    def open_new_segment(self, style: Optional[TextStyle]) -> TextSegment:
        """
        Start a new segment owning ``style`` after the active one.

        Args:
            style: Style handed over to the new segment

        Returns:
            The new active segment
        """
        self._flush()
        segment = TextSegment("", style)
        self.segments.append(segment)
        return segment

    def finish(self) -> List[TextSegment]:
        """Close the active segment and return every segment in order."""
        self._flush()
        return self.segments


class MarkupScanner:
    """Single forward pass over one subtitle payload."""

    def __init__(self, text: str, align: int = 0):
        """
        Initialize the scanner.

        Args:
            text: Decoded subtitle payload
            align: Caller default alignment, kept unless an {\\anN} is found
        """
        self.text = text
        self.align = align
        self.pos = 0
        self._has_align = False
        self._stack = StyleStack()
        self._builder = SegmentBuilder()

    def parse(self) -> ParsedText:
        """
        Scan the whole payload.

        Returns:
            ParsedText with at least one (possibly empty) segment

        Raises:
            MarkupParseError: If memory runs out; no partial result is kept
        """
        try:
            length = len(self.text)
            while self.pos < length:
                char = self.text[self.pos]
                if char == '<':
                    self._scan_tag()
                elif char == '{' and self._scan_brace_block():
                    continue
                else:
                    self._scan_literal()
            segments = self._builder.finish()
        except MemoryError as e:
            self._builder = SegmentBuilder()
            raise MarkupParseError("Out of memory while parsing subtitle markup") from e

        return ParsedText(segments=segments, align=self.align)

    def _scan_literal(self) -> None:
        match = _LITERAL_RUN.match(self.text, self.pos)
        if match:
            self._builder.append_text(match.group())
            self.pos = match.end()
        else:
            self._builder.append_char(self.text[self.pos])
            self.pos += 1

    def _push_style(self) -> TextStyle:
        style = self._stack.push()
        self._builder.open_new_segment(style)
        return style

    def _scan_tag(self) -> None:
        head = self.text[self.pos:self.pos + len(FONT_TAG)].lower()

        if head.startswith(LINE_BREAK_TAG):
            self._builder.append_char('\n')
            self.pos += len(LINE_BREAK_TAG)
        elif head[:3] in FLAG_TAGS:
            style = self._push_style()
            style.flags |= FLAG_TAGS[head[:3]]
            self.pos += 3
        elif head == FONT_TAG:
            self._scan_font_tag()
        elif head.startswith('</'):
            self._scan_closing_tag()
        else:
            # Unknown tag: the rest of it is read back as plain text
            self._builder.append_char('<')
            self.pos += 1

    def _scan_font_tag(self) -> None:
        style = self._push_style()
        self.pos += len(FONT_TAG)

        while True:
            attribute = consume_attribute(self.text, self.pos)
            if attribute is None:
                break
            self._apply_font_attribute(style, attribute.name, attribute.value)
            self.pos = attribute.end

        end = self.text.find('>', self.pos)
        self.pos = len(self.text) if end < 0 else end + 1

    @staticmethod
    def _apply_font_attribute(style: TextStyle, name: str, value: str) -> None:
        target = FONT_ATTRIBUTES.get(name.lower())
        if target is None:
            logger.debug(f"Ignoring unsupported font attribute: {name}={value!r}")
            return
        field_name, convert = target
        setattr(style, field_name, convert(value))

    def _scan_closing_tag(self) -> None:
        end = self.text.find('>', self.pos + 2)
        name = self.text[self.pos + 2:end].lower() if end >= 0 else None

        if name in CLOSING_TAGS:
            self._builder.open_new_segment(self._stack.pop())
            self.pos = end + 1
        else:
            self._builder.append_char('<')
            self.pos += 1

    def _scan_brace_block(self) -> bool:
        """Handle a {...} block at the cursor; False means it is plain text."""
        text = self.text
        pos = self.pos
        closing = text.find('}', pos)
        if closing < 0:
            return False

        marker = text[pos + 1:pos + 2]
        separator = text[pos + 2:pos + 3]

        if marker == '\\':
            if not self._has_align:
                match = _ALIGN_DIRECTIVE.match(text, pos)
                if match:
                    self.align = alignment_from_an(int(match.group(1)))
                    self._has_align = True
            # Every other override code is hidden
        elif marker in ('Y', 'y') and separator == ':':
            # No distinction between Y (whole line) and y (this line only)
            cursor = pos + 3
            for letter, flag in LEGACY_BLOCK_FLAGS:
                if text[cursor:cursor + 1] == letter:
                    style = self._push_style()
                    style.flags |= flag
                    cursor += 1
        elif separator != ':':
            return False

        self.pos = closing + 1
        return True


def parse_subtitles(text: str, align: int = 0) -> ParsedText:
    """
    Parse one subtitle payload into styled segments.

    Args:
        text: Decoded subtitle payload
        align: Default alignment; replaced by the first {\\anN} directive

    Returns:
        ParsedText holding the segments in order and the final alignment

    Raises:
        MarkupParseError: If the parse cannot complete

    Example:
        >>> result = parse_subtitles("<b>bold</b> normal")
        >>> [segment.text for segment in result.segments]
        ['', 'bold', ' normal']
    """
    return MarkupScanner(text, align).parse()
