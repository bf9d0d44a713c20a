"""
Subtitle processing modules.

This package contains the packet-level processors:
- Text subtitle decoding (charset conversion and markup parsing)
"""

from .decoder import DecoderConfig, SubtitleDecoder

__all__ = [
    'DecoderConfig',
    'SubtitleDecoder'
]
