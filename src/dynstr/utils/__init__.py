"""
Utility package for buffer inspection helpers.
"""

from .hex_utils import (
    format_offset,
    to_ascii,
    hexdump_lines,
    hexdump,
    highlight_hexdump
)

__all__ = [
    'format_offset',
    'to_ascii',
    'hexdump_lines',
    'hexdump',
    'highlight_hexdump'
]
