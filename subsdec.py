#!/usr/bin/env python3
"""
Subsdec - Text Subtitle Decoder Entry Point
===========================================

Decodes in-band text subtitle payloads carrying inline markup into styled
text segments and a screen alignment:
- HTML-like inline tags (<b>, <i>, <u>, <s>, <font ...>, <br/>)
- SSA alignment overrides ({\\an1} .. {\\an9})
- Legacy {Y:...} style blocks and {x:y} directives
- Charset conversion and UTF-8 autodetection

Usage:
    python subsdec.py parse '<i>Hello</i> world'
    python subsdec.py decode movie.srt --encoding Windows-1252
    python subsdec.py color Red
    python subsdec.py encodings

    # Help
    python subsdec.py --help
    python subsdec.py <command> --help
"""

import sys
from pathlib import Path

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from ui.cli import CLIHandler


def main():
    """
    Main application entry point.

    Parses the command line and dispatches to the CLI handler.
    """
    debug_mode = '--debug' in sys.argv or '-d' in sys.argv

    cli_handler = CLIHandler()
    cli_parser = cli_handler.create_parser()

    try:
        args = cli_parser.parse_args()
        exit_code = cli_handler.handle_command(args)
        sys.exit(exit_code)
    except SystemExit:
        # argparse calls sys.exit() for --help, --version, etc.
        raise
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if debug_mode:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
