#!/usr/bin/env python3
"""
Tests for the text subtitle decoder.

Checks packet validation, charset selection and conversion (including
UTF-8 autodetection) and the subpictures produced from parsed markup.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.encoding_detection import EncodingDetector
from core.markup_parser import MarkupParseError
from core.subtitle_formats import BlockFlag, SubtitleBlock, SubtitleCodec
from core.text_style import StyleFlag, TextSegment
from processors.decoder import DecoderConfig, SubtitleDecoder
from utils.constants import SubpictureAlign
from utils.logging_config import get_logger

logger = get_logger(__name__)


def block(payload, pts=1_000_000, length=2_000_000, flags=BlockFlag.NONE):
    return SubtitleBlock(payload=payload, pts=pts, length=length, flags=flags)


def test_decode_styled_utf8_payload():
    """Valid UTF-8 is accepted even though the default charset is CP1252."""
    logger.info("🧪 TEST: UTF-8 payload with default settings")
    decoder = SubtitleDecoder()

    subpicture = decoder.decode_block(block("<i>Grüße</i>".encode("utf-8")))

    assert subpicture.start == 1_000_000
    assert subpicture.stop == 3_000_000
    assert not subpicture.ephemeral
    assert not subpicture.absolute
    assert subpicture.align == SubpictureAlign.BOTTOM
    assert subpicture.plain_text == "Grüße"
    assert subpicture.segments[1].style.flags == StyleFlag.ITALIC


def test_default_charset_is_cp1252():
    decoder = SubtitleDecoder()

    assert decoder.source_encoding == "cp1252"
    assert decoder.autodetect_utf8
    assert decoder.converts


def test_utf8_autodetection_is_disabled_for_good():
    decoder = SubtitleDecoder()

    first = decoder.decode_block(block("café".encode("cp1252")))
    assert first.plain_text == "café"
    assert not decoder.autodetect_utf8

    # Valid UTF-8 is now read as CP1252 too
    second = decoder.decode_block(block("é".encode("utf-8")))
    assert second.plain_text == "Ã©"


def test_configured_charset_without_autodetection():
    decoder = SubtitleDecoder(DecoderConfig(encoding="Windows-1251", autodetect_utf8=False))

    subpicture = decoder.decode_block(block("Привет".encode("cp1251")))

    assert subpicture.plain_text == "Привет"


def test_demuxer_charset_takes_precedence():
    decoder = SubtitleDecoder(DecoderConfig(encoding="KOI8-R"), demux_encoding="UTF-8")

    assert not decoder.converts
    assert not decoder.autodetect_utf8
    assert decoder.decode_block(block("ñ".encode("utf-8"))).plain_text == "ñ"


def test_t140_is_always_utf8():
    decoder = SubtitleDecoder(DecoderConfig(encoding="Windows-1252"),
                              codec=SubtitleCodec.ITU_T140,
                              demux_encoding="KOI8-R")

    assert not decoder.converts
    assert decoder.decode_block(block(b"ab\xffcd")).plain_text == "ab\ufffdcd"


def test_system_charset():
    with patch.object(EncodingDetector, 'system_encoding', return_value='UTF-8'):
        decoder = SubtitleDecoder(DecoderConfig(encoding="system"))

    assert not decoder.converts


def test_unknown_charset_falls_back_to_utf8():
    decoder = SubtitleDecoder(DecoderConfig(encoding="no-such-charset"))

    assert decoder.source_encoding is None
    assert decoder.decode_block(block("ü".encode("utf-8"))).plain_text == "ü"


def test_per_packet_detection():
    decoder = SubtitleDecoder(DecoderConfig(encoding="auto", autodetect_utf8=False))
    assert decoder.converts

    with patch.object(EncodingDetector, 'detect_encoding', return_value='cp1251') as detect:
        subpicture = decoder.decode_block(block("Привет".encode("cp1251")))

    detect.assert_called_once()
    assert subpicture.plain_text == "Привет"


def test_per_packet_detection_failure():
    decoder = SubtitleDecoder(DecoderConfig(encoding="auto", autodetect_utf8=False))

    with patch.object(EncodingDetector, 'detect_encoding', return_value=None):
        assert decoder.decode_block(block(b"\xe0\xe1")) is None


def test_conversion_failure_drops_packet():
    decoder = SubtitleDecoder(DecoderConfig(encoding="ascii", autodetect_utf8=False))

    assert decoder.decode_block(block(b"\xff")) is None


@pytest.mark.parametrize("justification, expected", [
    (0, SubpictureAlign.BOTTOM),
    (1, SubpictureAlign.BOTTOM | SubpictureAlign.LEFT),
    (2, SubpictureAlign.BOTTOM | SubpictureAlign.RIGHT),
])
def test_justification(justification, expected):
    decoder = SubtitleDecoder(DecoderConfig(align=justification))

    assert decoder.decode_block(block(b"x")).align == expected


def test_alignment_directive_overrides_justification():
    decoder = SubtitleDecoder(DecoderConfig(align=1))

    subpicture = decoder.decode_block(block(b"{\\an8}top"))

    assert subpicture.align == SubpictureAlign.TOP
    assert subpicture.plain_text == "top"


def test_invalid_justification():
    with pytest.raises(ValueError):
        DecoderConfig(align=3)


@pytest.mark.parametrize("packet", [
    None,
    block(b"text", pts=None),
    block(b"text", pts=-1),
    block(b""),
    block(b"text", flags=BlockFlag.DISCONTINUITY),
    block(b"text", flags=BlockFlag.CORRUPTED),
])
def test_dropped_packets(packet):
    assert SubtitleDecoder().decode_block(packet) is None


def test_packet_at_time_zero_is_kept():
    assert SubtitleDecoder().decode_block(block(b"x", pts=0)).start == 0


def test_payload_ends_at_nul():
    assert SubtitleDecoder().decode_block(block(b"abc\x00def")).plain_text == "abc"


def test_nul_only_payload_gives_empty_subpicture():
    subpicture = SubtitleDecoder().decode_block(block(b"\x00", length=0))

    assert subpicture is not None
    assert subpicture.plain_text == ""
    assert subpicture.ephemeral
    assert subpicture.stop == subpicture.start


def test_formatting_disabled():
    decoder = SubtitleDecoder(DecoderConfig(formatted=False))

    subpicture = decoder.decode_block(block(b"<b>x</b>{\\an7}y"))

    assert subpicture.segments == [TextSegment("xy")]
    assert subpicture.align == SubpictureAlign.TOP | SubpictureAlign.LEFT


def test_parse_failure_drops_packet():
    with patch('processors.decoder.parse_subtitles', side_effect=MarkupParseError("boom")):
        assert SubtitleDecoder().decode_block(block(b"x")) is None


def test_decode_blocks_skips_dropped_packets():
    packets = [block(b"one"), block(b"two", pts=None), block(b"three", pts=5_000_000)]

    subpictures = list(SubtitleDecoder().decode_blocks(packets))

    assert [s.plain_text for s in subpictures] == ["one", "three"]


def test_closed_decoder():
    with SubtitleDecoder() as decoder:
        assert decoder.decode_block(block(b"x")) is not None

    assert not decoder.converts
    with pytest.raises(RuntimeError):
        decoder.decode_block(block(b"x"))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
