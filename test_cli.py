#!/usr/bin/env python3
"""
Tests for the command-line interface.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from ui.cli import CLIHandler, describe_alignment
from utils.constants import SubpictureAlign


def run_cli(*argv):
    handler = CLIHandler()
    args = handler.create_parser().parse_args(list(argv))
    return handler.handle_command(args)


@pytest.fixture
def srt_file(tmp_path):
    path = tmp_path / "movie.srt"
    path.write_bytes(
        b"1\n00:00:01,000 --> 00:00:02,000\n<b>Bold</b> caf\xe9\n\n"
        b"2\n00:00:03,000 --> 00:00:04,000\n{\\an8}Top\n"
    )
    return path


@pytest.mark.parametrize("align, expected", [
    (0, "middle-center"),
    (SubpictureAlign.BOTTOM, "bottom-center"),
    (SubpictureAlign.TOP | SubpictureAlign.LEFT, "top-left"),
    (SubpictureAlign.BOTTOM | SubpictureAlign.RIGHT, "bottom-right"),
])
def test_describe_alignment(align, expected):
    assert describe_alignment(align) == expected


def test_parse_json(capsys):
    assert run_cli('parse', '<b>Hi</b>', '--json') == 0

    output = json.loads(capsys.readouterr().out)
    assert output['align'] == 0
    assert output['segments'] == [
        {'text': '', 'style': None},
        {'text': 'Hi', 'style': {'flags': ['bold']}},
        {'text': '', 'style': {}},
    ]


def test_parse_readable(capsys):
    assert run_cli('parse', '{\\an8}<font color="red">x</font>') == 0

    output = capsys.readouterr().out
    assert "Alignment: top-center (4)" in output
    assert "#FF0000" in output
    assert "(default)" in output


def test_decode_json(srt_file, capsys):
    assert run_cli('decode', str(srt_file), '--json') == 0

    subpictures = json.loads(capsys.readouterr().out)
    assert len(subpictures) == 2
    assert subpictures[0]['start'] == 1_000_000
    assert subpictures[0]['stop'] == 2_000_000
    assert subpictures[0]['align'] == SubpictureAlign.BOTTOM
    assert "".join(s['text'] for s in subpictures[0]['segments']) == "Bold café"
    assert subpictures[1]['align'] == SubpictureAlign.TOP


def test_decode_without_formatting(srt_file, capsys):
    assert run_cli('decode', str(srt_file), '--no-formatting', '--json', '-a', '1') == 0

    subpictures = json.loads(capsys.readouterr().out)
    assert subpictures[0]['segments'] == [{'text': 'Bold café', 'style': None}]
    assert subpictures[0]['align'] == SubpictureAlign.BOTTOM | SubpictureAlign.LEFT


def test_decode_readable(srt_file, capsys):
    assert run_cli('decode', str(srt_file), '--encoding', 'Windows-1252') == 0

    output = capsys.readouterr().out
    assert "00:00:01.000 --> 00:00:02.000 [bottom-center]" in output
    assert "00:00:03.000 --> 00:00:04.000 [top-center]" in output


def test_decode_missing_file(tmp_path):
    assert run_cli('decode', str(tmp_path / "missing.srt")) == 1


def test_decode_unsupported_file(tmp_path):
    path = tmp_path / "movie.ass"
    path.write_bytes(b"[Script Info]\n")

    assert run_cli('decode', str(path)) == 1


def test_color(capsys):
    assert run_cli('color', 'red', 'Navy', 'nosuch') == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["red: #FF0000", "Navy: #000080", "nosuch: #000000"]


def test_encodings(capsys):
    assert run_cli('encodings') == 0

    output = capsys.readouterr().out
    assert "Western European (Windows-1252)" in output
    assert "Default (Windows-1252)" in output


def test_no_command():
    assert run_cli() == 1


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
