"""
Utility functions for inspecting buffer storage as a hex dump.
"""

from typing import Final, List

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

DEFAULT_BYTES_PER_LINE: Final[int] = 16
GROUP_SIZE: Final[int] = 8


def format_offset(offset: int, width: int = 8) -> str:
    """Uppercase, zero-padded hex offset as shown in the dump's first column."""

    if offset < 0:
        raise ValueError("Offset must not be negative")

    return f"{offset:0{width}X}"


def to_ascii(data: bytes) -> str:
    """Printable ASCII representation of ``data``, with '.' for everything else."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)


def _hex_column(chunk: bytes, bytes_per_line: int) -> str:
    groups = []
    for start in range(0, bytes_per_line, GROUP_SIZE):
        cells = [
            f"{chunk[i]:02X}" if i < len(chunk) else "  "
            for i in range(start, min(start + GROUP_SIZE, bytes_per_line))
        ]
        groups.append(' '.join(cells))

    return '  '.join(groups)


def hexdump_lines(data: bytes, bytes_per_line: int = DEFAULT_BYTES_PER_LINE) -> List[str]:
    """
    Build canonical hex dump lines for ``data``.

    Each line holds an offset, the hex bytes split into groups of eight and
    the ASCII column between pipes. A final line carries the total length,
    the same way ``hexdump -C`` ends its output.

    Args:
        data (bytes): Bytes to dump
        bytes_per_line (int): Number of bytes shown per line

    Returns:
        List[str]: Dump lines without trailing newlines
    """

    if bytes_per_line <= 0:
        raise ValueError("bytes_per_line must be positive")

    lines = []
    for offset in range(0, len(data), bytes_per_line):
        chunk = bytes(data[offset:offset + bytes_per_line])
        lines.append(
            f"{format_offset(offset)}  {_hex_column(chunk, bytes_per_line)}  |{to_ascii(chunk)}|"
        )

    lines.append(format_offset(len(data)))
    return lines


def hexdump(data: bytes, bytes_per_line: int = DEFAULT_BYTES_PER_LINE) -> str:
    """Render ``data`` as a multi-line hex dump."""

    return '\n'.join(hexdump_lines(data, bytes_per_line)) + '\n'


def highlight_hexdump(dump: str) -> str:
    """Colorize a hex dump for terminal output using Pygments."""

    return highlight(dump, HexdumpLexer(), TerminalFormatter())
