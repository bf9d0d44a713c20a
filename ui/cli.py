"""
Command-line interface for the subtitle markup decoder.

This module provides CLI access to markup parsing, packet decoding of
subtitle files, color lookup and the supported encoding list.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import List
from core.colors import format_color, resolve_color
from core.markup_parser import parse_subtitles
from core.subtitle_formats import Subpicture, SubtitleFileReader
from core.text_style import TextSegment
from core.timing_utils import TimeConverter
from processors.decoder import DecoderConfig, SubtitleDecoder
from utils.constants import (
    APP_DESCRIPTION, APP_NAME, APP_VERSION, JUSTIFICATIONS, SUBTITLE_ENCODINGS, SubpictureAlign
)
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def setup_cli_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Set up logging for CLI operations."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    return setup_logging(level=level, use_colors=True)


def describe_alignment(align: int) -> str:
    """
    Describe alignment bits in words.

    Example:
        >>> describe_alignment(SubpictureAlign.TOP | SubpictureAlign.LEFT)
        'top-left'
    """
    if align & SubpictureAlign.TOP:
        vertical = "top"
    elif align & SubpictureAlign.BOTTOM:
        vertical = "bottom"
    else:
        vertical = "middle"

    if align & SubpictureAlign.LEFT:
        horizontal = "left"
    elif align & SubpictureAlign.RIGHT:
        horizontal = "right"
    else:
        horizontal = "center"

    return f"{vertical}-{horizontal}"


def format_segments(segments: List[TextSegment]) -> List[str]:
    """Render segments as one readable line each."""
    lines = []
    for i, segment in enumerate(segments):
        style = segment.style.to_dict() if segment.style is not None else None
        if style:
            for key in ('font_color', 'outline_color', 'shadow_color', 'background_color'):
                if key in style:
                    style[key] = format_color(style[key])
        lines.append(f"  [{i}] {segment.text!r} {style if style else '(default)'}")
    return lines


class CLIHandler:
    """Handles command-line interface operations."""

    def create_parser(self) -> argparse.ArgumentParser:
        """
        Create the main argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog='subsdec',
            description=f"{APP_NAME} v{APP_VERSION}\n{APP_DESCRIPTION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Parse inline markup
  subsdec parse '<b>Hello</b> {\\an8}world'

  # Decode every cue of a subtitle file
  subsdec decode movie.srt --encoding Windows-1251 --json

  # Look up color names
  subsdec color red DarkSlateGray
            """
        )

        parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
        parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
        parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        self._add_parse_parser(subparsers)
        self._add_decode_parser(subparsers)
        self._add_color_parser(subparsers)

        subparsers.add_parser(
            'encodings',
            help='List supported subtitle encodings',
            description='List the subtitle text encodings that can be configured'
        )

        return parser

    def _add_parse_parser(self, subparsers):
        """Add parse command parser."""
        parse_parser = subparsers.add_parser(
            'parse',
            help='Parse inline subtitle markup',
            description='Parse one subtitle payload into styled segments'
        )
        parse_parser.add_argument('text', help='Subtitle text with inline markup')
        parse_parser.add_argument('-a', '--align', type=int, default=0,
                                  help='Default alignment bits (default: 0)')
        parse_parser.add_argument('--json', action='store_true', help='Print JSON output')

    def _add_decode_parser(self, subparsers):
        """Add decode command parser."""
        decode_parser = subparsers.add_parser(
            'decode',
            help='Decode the cues of a subtitle file',
            description='Run every cue of an SRT or WebVTT file through the text subtitle decoder'
        )
        decode_parser.add_argument('input', type=Path, help='Subtitle file (.srt or .vtt)')
        decode_parser.add_argument('-e', '--encoding', default='',
                                   help='Subtitle text encoding ("system", "auto" or a charset name)')
        decode_parser.add_argument('-a', '--align', type=int, choices=sorted(JUSTIFICATIONS), default=0,
                                   help='Justification: 0 center, 1 left, 2 right (default: 0)')
        decode_parser.add_argument('--no-autodetect-utf8', action='store_true',
                                   help='Disable UTF-8 autodetection')
        decode_parser.add_argument('--no-formatting', action='store_true',
                                   help='Drop all text formatting')
        decode_parser.add_argument('--json', action='store_true', help='Print JSON output')

    def _add_color_parser(self, subparsers):
        """Add color command parser."""
        color_parser = subparsers.add_parser(
            'color',
            help='Resolve HTML color names',
            description='Resolve HTML color names as used by <font color=...>'
        )
        color_parser.add_argument('names', nargs='+', help='Color names')

    def handle_command(self, args) -> int:
        """
        Handle the parsed command-line arguments.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        setup_cli_logging(args.verbose, args.debug)

        if not args.command:
            logger.error("No command specified. Use --help for usage information.")
            return 1

        try:
            if args.command == 'parse':
                return self._handle_parse(args)
            elif args.command == 'decode':
                return self._handle_decode(args)
            elif args.command == 'color':
                return self._handle_color(args)
            elif args.command == 'encodings':
                return self._handle_encodings(args)
            else:
                logger.error(f"Unknown command: {args.command}")
                return 1

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 1
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.debug:
                import traceback
                traceback.print_exc()
            return 1

    def _handle_parse(self, args) -> int:
        """Handle parse command."""
        result = parse_subtitles(args.text, args.align)

        if args.json:
            print(json.dumps({
                'align': result.align,
                'segments': [segment.to_dict() for segment in result.segments],
            }, ensure_ascii=False, indent=2))
            return 0

        print(f"Alignment: {describe_alignment(result.align)} ({result.align})")
        for line in format_segments(result.segments):
            print(line)
        return 0

    def _handle_decode(self, args) -> int:
        """Handle decode command."""
        if not args.input.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1

        config = DecoderConfig(
            align=args.align,
            encoding=args.encoding,
            autodetect_utf8=not args.no_autodetect_utf8,
            formatted=not args.no_formatting
        )
        blocks = SubtitleFileReader.read_blocks(args.input)

        with SubtitleDecoder(config) as decoder:
            subpictures = list(decoder.decode_blocks(blocks))

        dropped = len(blocks) - len(subpictures)
        if dropped:
            logger.warning(f"{dropped} of {len(blocks)} packets could not be decoded")

        if args.json:
            print(json.dumps([subpicture.to_dict() for subpicture in subpictures],
                             ensure_ascii=False, indent=2))
            return 0

        for subpicture in subpictures:
            self._print_subpicture(subpicture)
        logger.info(f"Decoded {len(subpictures)} subpictures from {args.input.name}")
        return 0

    @staticmethod
    def _print_subpicture(subpicture: Subpicture) -> None:
        start = TimeConverter.microseconds_to_readable(subpicture.start)
        stop = TimeConverter.microseconds_to_readable(subpicture.stop)
        print(f"{start} --> {stop} [{describe_alignment(subpicture.align)}]")
        for line in format_segments(subpicture.segments):
            print(line)
        print()

    def _handle_color(self, args) -> int:
        """Handle color command."""
        for name in args.names:
            print(f"{name}: {format_color(resolve_color(name))}")
        return 0

    def _handle_encodings(self, args) -> int:
        """Handle encodings command."""
        for name, description in SUBTITLE_ENCODINGS:
            print(f"{name or '(default)':<18} {description}")
        return 0
