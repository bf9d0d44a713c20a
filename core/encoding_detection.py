"""
Encoding detection utilities for subtitle payloads.

This module works on raw packet bytes: UTF-8 validation, lossy UTF-8
decoding, strict decoding in a named charset, and charset guessing with
charset-normalizer.
"""

import codecs
import locale
from typing import Optional
from charset_normalizer import from_bytes
from utils.constants import UTF8_ALIASES, UTF8_BOM
from utils.logging_config import get_logger

logger = get_logger(__name__)


class EncodingDetector:
    """Handles charset checks and conversion for subtitle packets."""

    @staticmethod
    def has_bom(data: bytes) -> bool:
        """
        Check if a payload starts with a UTF-8 BOM.

        Args:
            data: Raw payload

        Returns:
            True if the payload has a UTF-8 BOM
        """
        return data.startswith(UTF8_BOM)

    @staticmethod
    def is_utf8(data: bytes) -> bool:
        """
        Check whether a payload is valid UTF-8.

        Args:
            data: Raw payload

        Returns:
            True if every byte sequence is valid UTF-8
        """
        try:
            data.decode('utf-8', 'strict')
        except UnicodeDecodeError:
            return False
        return True

    @staticmethod
    def ensure_utf8(data: bytes) -> str:
        """
        Decode a payload as UTF-8, replacing invalid sequences.

        Args:
            data: Raw payload

        Returns:
            Decoded text; never fails
        """
        if EncodingDetector.has_bom(data):
            data = data[len(UTF8_BOM):]
        text = data.decode('utf-8', 'replace')
        if '\ufffd' in text and b'\xef\xbf\xbd' not in data:
            logger.debug("Replaced invalid UTF-8 sequences in subtitle payload")
        return text

    @staticmethod
    def detect_encoding(data: bytes) -> Optional[str]:
        """
        Guess the charset of a payload with charset-normalizer.

        Args:
            data: Raw payload

        Returns:
            Detected encoding name or None if detection failed

        Example:
            >>> EncodingDetector.detect_encoding("Grüße".encode("utf-8"))
            'utf_8'
        """
        if not data:
            return None
        try:
            best = from_bytes(data).best()
        except Exception as e:
            logger.debug(f"charset-normalizer detection failed: {e}")
            return None
        if best is None:
            return None
        logger.debug(f"Detected payload encoding: {best.encoding}")
        return best.encoding

    @staticmethod
    def decode_payload(data: bytes, encoding: str) -> str:
        """
        Strictly decode a payload in the given charset.

        Args:
            data: Raw payload
            encoding: Python codec name

        Returns:
            Decoded text

        Raises:
            UnicodeDecodeError: If the payload is not valid in that charset
            LookupError: If the charset is unknown
        """
        if EncodingDetector.has_bom(data) and EncodingDetector.is_utf8_name(encoding):
            data = data[len(UTF8_BOM):]
        return data.decode(encoding, 'strict')

    @staticmethod
    def is_utf8_name(encoding: str) -> bool:
        """Check whether a charset name designates UTF-8."""
        normalized = encoding.strip().lower().replace('_', '-')
        return normalized in UTF8_ALIASES

    @staticmethod
    def system_encoding() -> str:
        """Return the locale's preferred charset."""
        return locale.getpreferredencoding(False)

    @staticmethod
    def resolve_codec(encoding: str) -> Optional[str]:
        """
        Normalize a charset name to a Python codec name.

        Args:
            encoding: Charset name as configured (e.g. "Windows-1252")

        Returns:
            Codec name, or None if Python has no such codec
        """
        try:
            return codecs.lookup(encoding).name
        except LookupError:
            logger.error(f"Cannot convert from {encoding}: unknown character encoding")
            return None
