import re

import pytest

from dynstr.utils.hex_utils import (
    format_offset,
    hexdump,
    hexdump_lines,
    highlight_hexdump,
    to_ascii
)

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def test_format_offset():
    assert format_offset(0) == "00000000"
    assert format_offset(255) == "000000FF"
    assert format_offset(255, width=4) == "00FF"


def test_to_ascii():
    assert to_ascii(b"ab\x00\x7f~ ") == "ab..~ "


def test_hexdump_lines_full_line():
    lines = hexdump_lines(bytes(range(0x41, 0x51)))

    assert lines == [
        "00000000  41 42 43 44 45 46 47 48  49 4A 4B 4C 4D 4E 4F 50  |ABCDEFGHIJKLMNOP|",
        "00000010",
    ]


def test_hexdump_lines_pads_short_line():
    lines = hexdump_lines(b"ABCDEFGHIJKLMNOPQ")

    assert len(lines) == 3
    assert len(lines[1]) == len(lines[0]) - 15
    assert lines[1].startswith("00000010  51 ")
    assert lines[1].endswith("  |Q|")
    assert lines[2] == "00000011"


def test_hexdump_custom_width():
    lines = hexdump_lines(b"abcd", bytes_per_line=2)
    assert lines == ["00000000  61 62  |ab|", "00000002  63 64  |cd|", "00000004"]


def test_hexdump_rejects_bad_width():
    with pytest.raises(ValueError):
        hexdump_lines(b"abc", bytes_per_line=0)


def test_hexdump_joins_lines():
    assert hexdump(b"") == "00000000\n"
    assert hexdump(b"a").endswith("|a|\n00000001\n")


def test_highlight_hexdump_keeps_text():
    dump = hexdump(b"hello world\x00")
    highlighted = highlight_hexdump(dump)

    assert "\x1b[" in highlighted
    assert ANSI_ESCAPE.sub("", highlighted) == dump


def test_format_offset_rejects_negative():
    with pytest.raises(ValueError):
        format_offset(-1)
