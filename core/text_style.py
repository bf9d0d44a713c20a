"""
Styled text data structures.

This module provides:
- Style flags and the per-segment text style
- Text segments, the runs of text sharing one style
- The result of parsing one subtitle payload
"""

import dataclasses
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Dict, List, Optional


class StyleFlag(IntFlag):
    """Additive text decoration flags."""
    NONE = 0
    BOLD = 1 << 0
    ITALIC = 1 << 1
    OUTLINE = 1 << 2
    SHADOW = 1 << 3
    BACKGROUND = 1 << 4
    UNDERLINE = 1 << 5
    STRIKEOUT = 1 << 6


@dataclass
class TextStyle:
    """
    Presentation attributes of a text segment.

    Unset attributes are None and left to the renderer's defaults.
    Colors are 24-bit RGB values (0xRRGGBB).
    """
    flags: StyleFlag = StyleFlag.NONE
    font_name: Optional[str] = None
    mono_font_name: Optional[str] = None
    font_size: Optional[int] = None
    font_color: Optional[int] = None
    font_alpha: Optional[int] = None
    outline_color: Optional[int] = None
    outline_width: Optional[int] = None
    shadow_color: Optional[int] = None
    shadow_width: Optional[int] = None
    background_color: Optional[int] = None

    def duplicate(self) -> 'TextStyle':
        """Return an independent copy of this style."""
        # Every field is immutable, so a field-wise copy is a deep copy
        return dataclasses.replace(self)

    def has_flag(self, flag: StyleFlag) -> bool:
        """Check whether a decoration flag is set."""
        return bool(self.flags & flag)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the set attributes for display or JSON output."""
        result: Dict[str, Any] = {}
        if self.flags:
            result['flags'] = [flag.name.lower() for flag in StyleFlag
                               if flag and self.flags & flag]
        for item in dataclasses.fields(self):
            if item.name == 'flags':
                continue
            value = getattr(self, item.name)
            if value is not None:
                result[item.name] = value
        return result


@dataclass
class TextSegment:
    """One contiguous run of text sharing a single style."""
    text: str = ""
    style: Optional[TextStyle] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the segment for display or JSON output."""
        return {
            'text': self.text,
            'style': self.style.to_dict() if self.style is not None else None,
        }


@dataclass
class ParsedText:
    """Ordered segments of one subtitle payload and its final alignment."""
    segments: List[TextSegment] = field(default_factory=list)
    align: int = 0

    @property
    def plain_text(self) -> str:
        """Concatenated text of every segment, markup removed."""
        return "".join(segment.text for segment in self.segments)

    def non_empty_segments(self) -> List[TextSegment]:
        """Segments that carry at least one character."""
        return [segment for segment in self.segments if segment.text]
