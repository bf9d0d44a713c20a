"""
Time conversion utilities for subtitle packet intake.

This module provides functions for:
- Parsing SRT and WebVTT cue timing lines
- Converting between seconds, microsecond packet timestamps and display strings
"""

import re
from typing import Tuple
from utils.constants import MICROSECONDS_PER_SECOND
from utils.logging_config import get_logger

logger = get_logger(__name__)

# HH:MM:SS,mmm (SRT), HH:MM:SS.mmm or MM:SS.mmm (WebVTT)
_TIMESTAMP = r'(?:\d{1,2}:)?\d{1,2}:\d{2}[,\.]\d{1,3}'
_TIMING_LINE = re.compile(rf'({_TIMESTAMP})\s*-->\s*({_TIMESTAMP})')


class TimeConverter:
    """Handles time format conversions for subtitle cues and packets."""

    @staticmethod
    def time_to_seconds(time_str: str) -> float:
        """
        Convert an SRT or WebVTT timestamp to seconds.

        Args:
            time_str: Timestamp such as "01:23:45,678" or "23:45.678"

        Returns:
            Time in seconds as float

        Raises:
            ValueError: If time string format is invalid

        Example:
            >>> TimeConverter.time_to_seconds("00:01:02,500")
            62.5
        """
        try:
            clock, _, fraction = time_str.strip().replace(',', '.').partition('.')
            parts = [int(part) for part in clock.split(':')]
            if len(parts) == 2:
                parts.insert(0, 0)
            hours, minutes, seconds = parts
            milliseconds = int(fraction.ljust(3, '0')[:3]) if fraction else 0
        except ValueError as e:
            logger.error(f"Failed to parse time string '{time_str}': {e}")
            raise ValueError(f"Invalid time format: {time_str}")
        return hours * 3600 + minutes * 60 + seconds + milliseconds / 1000.0

    @staticmethod
    def parse_timestamp_line(timestamp_line: str) -> Tuple[float, float]:
        """
        Parse a cue timing line to get start and end times in seconds.

        Trailing WebVTT cue settings are ignored.

        Args:
            timestamp_line: e.g. "00:01:23,456 --> 00:01:26,789"

        Returns:
            Tuple of (start_seconds, end_seconds)

        Raises:
            ValueError: If timestamp format is invalid
        """
        match = _TIMING_LINE.match(timestamp_line.strip())
        if not match:
            raise ValueError(f"Invalid cue timing line: {timestamp_line}")

        start_str, end_str = match.groups()
        return TimeConverter.time_to_seconds(start_str), TimeConverter.time_to_seconds(end_str)

    @staticmethod
    def seconds_to_microseconds(seconds: float) -> int:
        """Convert seconds to a packet timestamp in microseconds."""
        return int(round(seconds * MICROSECONDS_PER_SECOND))

    @staticmethod
    def microseconds_to_readable(us: int) -> str:
        """
        Convert a packet timestamp to readable format (HH:MM:SS.mmm).

        Example:
            >>> TimeConverter.microseconds_to_readable(3825678000)
            '01:03:45.678'
        """
        ms = max(us, 0) // 1000
        hours = ms // 3600000
        ms %= 3600000
        minutes = ms // 60000
        ms %= 60000
        seconds = ms // 1000
        milliseconds = ms % 1000
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
