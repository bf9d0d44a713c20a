"""
Shared constants and configurations for the subtitle markup decoder.

This module contains all the constants used across different modules including:
- Supported subtitle file formats
- Subpicture alignment bits and justification settings
- Subtitle character encodings
- Default configuration values
"""

from enum import Enum, IntFlag
from typing import Dict, List, Set, Tuple

# ============================================================================
# FILE FORMAT CONSTANTS
# ============================================================================

class SubtitleFormat(Enum):
    """Subtitle file formats accepted for packet intake."""
    SRT = "srt"
    VTT = "vtt"

    @classmethod
    def from_extension(cls, ext: str) -> 'SubtitleFormat':
        """
        Get format from file extension.

        Args:
            ext: File extension (with or without dot)

        Returns:
            SubtitleFormat enum value

        Raises:
            ValueError: If extension is not supported
        """
        ext = ext.lower().lstrip('.')
        for format_type in cls:
            if format_type.value == ext:
                return format_type
        raise ValueError(f"Unsupported subtitle format: {ext}")


# ============================================================================
# ALIGNMENT CONSTANTS
# ============================================================================

class SubpictureAlign(IntFlag):
    """Alignment bits of a subpicture on the video output."""
    CENTER = 0x0
    LEFT = 0x1
    RIGHT = 0x2
    TOP = 0x4
    BOTTOM = 0x8


# Justification setting -> horizontal alignment bits
JUSTIFICATIONS: Dict[int, str] = {
    0: "center",
    1: "left",
    2: "right",
}

DEFAULT_JUSTIFICATION: int = 0

# {\anN}: (N - 1) // 3 picks the row, (N - 1) % 3 picks the column
AN_VERTICAL: Tuple[int, int, int] = (SubpictureAlign.BOTTOM, 0, SubpictureAlign.TOP)
AN_HORIZONTAL: Tuple[int, int, int] = (SubpictureAlign.LEFT, 0, SubpictureAlign.RIGHT)

# ============================================================================
# ENCODING CONSTANTS
# ============================================================================

# Guess used when neither the demuxer nor the configuration names a charset
DEFAULT_SUBTITLE_ENCODING: str = "CP1252"

# Special configuration values for the subtitle encoding option
SYSTEM_ENCODING: str = "system"
AUTO_ENCODING: str = "auto"

UTF8_ALIASES: Set[str] = {'utf-8', 'utf8'}

# UTF-8 BOM marker
UTF8_BOM: bytes = b"\xef\xbb\xbf"

# Selectable subtitle text encodings: (codec name, description)
SUBTITLE_ENCODINGS: List[Tuple[str, str]] = [
    ("", "Default (Windows-1252)"),
    ("system", "System codeset"),
    ("UTF-8", "Universal (UTF-8)"),
    ("UTF-16", "Universal (UTF-16)"),
    ("UTF-16BE", "Universal (big endian UTF-16)"),
    ("UTF-16LE", "Universal (little endian UTF-16)"),
    ("GB18030", "Universal, Chinese (GB18030)"),
    ("ISO-8859-15", "Western European (Latin-9)"),
    ("Windows-1252", "Western European (Windows-1252)"),
    ("IBM850", "Western European (IBM 00850)"),
    ("ISO-8859-2", "Eastern European (Latin-2)"),
    ("Windows-1250", "Eastern European (Windows-1250)"),
    ("ISO-8859-3", "Esperanto (Latin-3)"),
    ("ISO-8859-10", "Nordic (Latin-6)"),
    ("Windows-1251", "Cyrillic (Windows-1251)"),
    ("KOI8-R", "Russian (KOI8-R)"),
    ("KOI8-U", "Ukrainian (KOI8-U)"),
    ("ISO-8859-6", "Arabic (ISO 8859-6)"),
    ("Windows-1256", "Arabic (Windows-1256)"),
    ("ISO-8859-7", "Greek (ISO 8859-7)"),
    ("Windows-1253", "Greek (Windows-1253)"),
    ("ISO-8859-8", "Hebrew (ISO 8859-8)"),
    ("Windows-1255", "Hebrew (Windows-1255)"),
    ("ISO-8859-9", "Turkish (ISO 8859-9)"),
    ("Windows-1254", "Turkish (Windows-1254)"),
    ("ISO-8859-11", "Thai (TIS 620-2533/ISO 8859-11)"),
    ("Windows-874", "Thai (Windows-874)"),
    ("ISO-8859-13", "Baltic (Latin-7)"),
    ("Windows-1257", "Baltic (Windows-1257)"),
    ("ISO-8859-14", "Celtic (Latin-8)"),
    ("ISO-8859-16", "South-Eastern European (Latin-10)"),
    ("ISO-2022-CN-EXT", "Simplified Chinese (ISO-2022-CN-EXT)"),
    ("EUC-CN", "Simplified Chinese Unix (EUC-CN)"),
    ("ISO-2022-JP-2", "Japanese (7-bits JIS/ISO-2022-JP-2)"),
    ("EUC-JP", "Japanese Unix (EUC-JP)"),
    ("Shift_JIS", "Japanese (Shift JIS)"),
    ("CP949", "Korean (EUC-KR/CP949)"),
    ("ISO-2022-KR", "Korean (ISO-2022-KR)"),
    ("Big5", "Traditional Chinese (Big5)"),
    ("ISO-2022-TW", "Traditional Chinese Unix (EUC-TW)"),
    ("Big5-HKSCS", "Hong-Kong Supplementary (HKSCS)"),
    ("VISCII", "Vietnamese (VISCII)"),
    ("Windows-1258", "Vietnamese (Windows-1258)"),
]

# ============================================================================
# TIMING CONSTANTS
# ============================================================================

# Packet timestamps are expressed in microseconds
MICROSECONDS_PER_SECOND: int = 1_000_000

# ============================================================================
# DEFAULT CONFIGURATION VALUES
# ============================================================================

# Default log format
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOGGER_NAME: str = "subsdec"

# Application metadata
APP_NAME: str = "Subsdec"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
A text subtitle decoder for in-band subtitle payloads with support for:
- HTML-like inline tags (<b>, <i>, <u>, <s>, <font ...>, <br/>)
- SSA alignment overrides ({\\an1} .. {\\an9})
- Legacy {Y:...} style blocks and {x:y} directives
- Charset conversion and UTF-8 autodetection
"""
