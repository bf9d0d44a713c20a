"""
Core subtitle markup modules.

This package contains the fundamental components for subtitle decoding:
- Named color resolution and <font> attribute tokenizing
- Text styles, the style stack and the inline markup parser
- Payload encoding detection
- Subtitle packet structures and file intake
"""

from .colors import resolve_color
from .attributes import Attribute, consume_attribute
from .text_style import StyleFlag, TextStyle, TextSegment, ParsedText
from .style_stack import StyleStack
from .markup_parser import MarkupParseError, MarkupScanner, SegmentBuilder, parse_subtitles
from .encoding_detection import EncodingDetector
from .timing_utils import TimeConverter
from .subtitle_formats import BlockFlag, Subpicture, SubtitleBlock, SubtitleCodec, SubtitleFileReader

__all__ = [
    'resolve_color',
    'Attribute',
    'consume_attribute',
    'StyleFlag',
    'TextStyle',
    'TextSegment',
    'ParsedText',
    'StyleStack',
    'MarkupParseError',
    'MarkupScanner',
    'SegmentBuilder',
    'parse_subtitles',
    'EncodingDetector',
    'TimeConverter',
    'BlockFlag',
    'Subpicture',
    'SubtitleBlock',
    'SubtitleCodec',
    'SubtitleFileReader',
]
