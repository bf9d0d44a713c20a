"""
Text subtitle decoder.

This module turns raw subtitle packets into subpictures: it picks the
source charset, converts each payload to text (with optional UTF-8
autodetection), and runs the inline markup parser on the result.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional
from core.encoding_detection import EncodingDetector
from core.markup_parser import MarkupParseError, parse_subtitles
from core.subtitle_formats import BlockFlag, Subpicture, SubtitleBlock, SubtitleCodec
from core.text_style import TextSegment
from utils.constants import (
    AUTO_ENCODING, DEFAULT_JUSTIFICATION, DEFAULT_SUBTITLE_ENCODING,
    JUSTIFICATIONS, SYSTEM_ENCODING, SubpictureAlign
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

_DROPPED_FLAGS = BlockFlag.DISCONTINUITY | BlockFlag.CORRUPTED


@dataclass
class DecoderConfig:
    """User settings of the text subtitle decoder."""
    align: int = DEFAULT_JUSTIFICATION  # 0 center, 1 left, 2 right
    encoding: str = ""                  # "", "system", "auto" or a charset name
    autodetect_utf8: bool = True
    formatted: bool = True

    def __post_init__(self):
        """Validate the justification setting."""
        if self.align not in JUSTIFICATIONS:
            raise ValueError(f"Invalid subtitle justification: {self.align} "
                             f"(expected one of {sorted(JUSTIFICATIONS)})")


class SubtitleDecoder:
    """Decodes text subtitle packets into styled subpictures."""

    def __init__(self, config: Optional[DecoderConfig] = None,
                 codec: SubtitleCodec = SubtitleCodec.SUBT,
                 demux_encoding: Optional[str] = None):
        """
        Open the decoder.

        Args:
            config: Decoder settings (defaults when omitted)
            codec: Codec of the incoming packets
            demux_encoding: Charset announced by the demuxer, if any
        """
        self.config = config or DecoderConfig()
        self.codec = codec
        self.autodetect_utf8 = False
        self.detect_per_packet = False
        self.source_encoding: Optional[str] = None  # None: payloads are UTF-8
        self._closed = False
        self._select_encoding(demux_encoding)

    def __enter__(self) -> 'SubtitleDecoder':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _select_encoding(self, demux_encoding: Optional[str]) -> None:
        if self.codec is SubtitleCodec.ITU_T140:
            encoding = "UTF-8"
        elif demux_encoding:
            encoding = demux_encoding
            logger.debug(f"Trying demuxer-specified character encoding: {encoding}")
        else:
            configured = self.config.encoding
            if configured:
                logger.debug(f"Trying configured character encoding: {configured}")
                if configured.lower() == SYSTEM_ENCODING:
                    encoding = EncodingDetector.system_encoding()
                else:
                    encoding = configured
            else:
                encoding = DEFAULT_SUBTITLE_ENCODING
                logger.debug(f"Trying default character encoding: {encoding}")

            if self.config.autodetect_utf8:
                logger.debug("Using automatic UTF-8 detection")
                self.autodetect_utf8 = True

        if encoding.lower() == AUTO_ENCODING:
            self.detect_per_packet = True
        elif not EncodingDetector.is_utf8_name(encoding):
            self.source_encoding = EncodingDetector.resolve_codec(encoding)

    @property
    def converts(self) -> bool:
        """Whether payloads go through charset conversion."""
        return self.source_encoding is not None or self.detect_per_packet

    def close(self) -> None:
        """Release the charset state; the decoder cannot be used afterwards."""
        self.source_encoding = None
        self.detect_per_packet = False
        self._closed = True

    def _to_text(self, payload: bytes) -> Optional[str]:
        if not self.converts:
            return EncodingDetector.ensure_utf8(payload)

        if self.autodetect_utf8 and not EncodingDetector.is_utf8(payload):
            logger.debug("Invalid UTF-8 sequence: disabling UTF-8 subtitles autodetection")
            self.autodetect_utf8 = False

        if self.autodetect_utf8:
            return EncodingDetector.ensure_utf8(payload)

        encoding = self.source_encoding
        if self.detect_per_packet:
            encoding = EncodingDetector.detect_encoding(payload)
            if encoding is None:
                logger.error("Could not detect the subtitle character encoding")
                return None

        try:
            return EncodingDetector.decode_payload(payload, encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.error(f"Failed to convert subtitle encoding from {encoding}: {e}. "
                         f"Try manually setting a character-encoding before you open the file.")
            return None

    def decode_block(self, block: Optional[SubtitleBlock]) -> Optional[Subpicture]:
        """
        Decode one complete subtitle packet.

        Args:
            block: Packet from the demuxer

        Returns:
            Subpicture, or None when the packet is dropped or unreadable

        Raises:
            RuntimeError: If the decoder was closed
        """
        if self._closed:
            raise RuntimeError("Subtitle decoder is closed")
        if block is None:
            return None
        if block.flags & _DROPPED_FLAGS:
            logger.debug(f"Dropping subtitle packet with flags {block.flags!r}")
            return None
        if block.pts is None or block.pts < 0:
            logger.warning("Subtitle without a date")
            return None
        if not block.payload:
            logger.warning("No subtitle data")
            return None

        # A payload holding only a NUL still yields an (empty) subpicture
        payload = block.payload.split(b'\x00', 1)[0]
        text = self._to_text(payload)
        if text is None:
            return None

        default_align = int(SubpictureAlign.BOTTOM) | self.config.align
        try:
            parsed = parse_subtitles(text, default_align)
        except MarkupParseError as e:
            logger.error(f"Failed to parse subtitle markup: {e}")
            return None

        segments = parsed.segments
        if not self.config.formatted:
            segments = [TextSegment(parsed.plain_text)]

        return Subpicture(
            start=block.pts,
            stop=block.pts + block.length,
            ephemeral=block.length == 0,
            absolute=False,
            align=parsed.align,
            segments=segments
        )

    def decode_blocks(self, blocks: Iterable[SubtitleBlock]) -> Iterator[Subpicture]:
        """Decode packets in order, skipping the ones that are dropped."""
        for block in blocks:
            subpicture = self.decode_block(block)
            if subpicture is not None:
                yield subpicture
