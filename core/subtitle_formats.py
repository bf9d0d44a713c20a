"""
Subtitle packet data structures and file intake.

This module provides:
- Core data structures for subtitle packets and decoded subpictures
- A reader that splits SRT and WebVTT files into raw subtitle packets
"""

import re
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from pathlib import Path
from typing import Any, Dict, List, Optional
from core.text_style import TextSegment
from core.timing_utils import TimeConverter
from utils.constants import SubtitleFormat, UTF8_BOM
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SubtitleCodec(Enum):
    """Text subtitle codecs handled by the decoder."""
    SUBT = "subt"          # Generic text subtitles
    ITU_T140 = "t140"      # ITU T.140, always UTF-8


class BlockFlag(IntFlag):
    """Packet state flags set by the demuxer."""
    NONE = 0
    DISCONTINUITY = 1 << 0
    CORRUPTED = 1 << 1


@dataclass
class SubtitleBlock:
    """One undecoded subtitle packet."""
    payload: bytes
    pts: Optional[int] = None  # Presentation time in microseconds
    length: int = 0            # Display duration in microseconds
    flags: BlockFlag = BlockFlag.NONE


@dataclass
class Subpicture:
    """A decoded subtitle ready for rendering."""
    start: int
    stop: int
    ephemeral: bool = False
    absolute: bool = False
    align: int = 0
    segments: List[TextSegment] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Concatenated text of every segment."""
        return "".join(segment.text for segment in self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the subpicture for JSON output."""
        return {
            'start': self.start,
            'stop': self.stop,
            'ephemeral': self.ephemeral,
            'absolute': self.absolute,
            'align': self.align,
            'segments': [segment.to_dict() for segment in self.segments],
        }


class SubtitleFileReader:
    """Splits SRT and WebVTT files into raw subtitle packets."""

    _BLOCK_SEPARATOR = re.compile(rb'\r?\n[ \t]*\r?\n')

    @staticmethod
    def read_blocks(file_path: Path) -> List[SubtitleBlock]:
        """
        Read a subtitle file as a list of packets.

        The cue text stays undecoded so the decoder's charset handling
        applies to it.

        Args:
            file_path: Path to a .srt or .vtt file

        Returns:
            One SubtitleBlock per well-formed cue, in file order

        Raises:
            ValueError: If the file extension is not supported
            IOError: If the file cannot be read
        """
        format_type = SubtitleFormat.from_extension(file_path.suffix)

        try:
            raw = file_path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise IOError(f"Cannot read subtitle file: {e}")

        if raw.startswith(UTF8_BOM):
            raw = raw[len(UTF8_BOM):]

        blocks = []
        for block_idx, chunk in enumerate(SubtitleFileReader._BLOCK_SEPARATOR.split(raw.strip())):
            lines = chunk.replace(b'\r\n', b'\n').split(b'\n')

            timing_idx = next((i for i, line in enumerate(lines) if b'-->' in line), None)
            if timing_idx is None:
                if not (format_type is SubtitleFormat.VTT and lines[0].startswith(b'WEBVTT')):
                    logger.warning(f"Skipping block {block_idx} without cue timing in {file_path.name}")
                continue

            time_line = lines[timing_idx].decode('ascii', 'replace')
            try:
                start, end = TimeConverter.parse_timestamp_line(time_line)
            except ValueError as e:
                logger.warning(f"Invalid timestamp in block {block_idx}: {time_line} - {e}")
                continue

            pts = TimeConverter.seconds_to_microseconds(start)
            stop = TimeConverter.seconds_to_microseconds(end)
            blocks.append(SubtitleBlock(
                payload=b'\n'.join(lines[timing_idx + 1:]),
                pts=pts,
                length=max(stop - pts, 0)
            ))

        logger.info(f"Read {len(blocks)} packets from {format_type.value.upper()} file: {file_path.name}")
        return blocks
