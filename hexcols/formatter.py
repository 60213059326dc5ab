"""
Formatting of a single hex dump line.

A line is laid out as::

         0 | 41 42 43 44  45 46 47 48  49 4A 4B 4C  4D 4E 4F 50 | ABCDEFGHIJKLMNOP

The offset is uppercase hex right-aligned to six characters. The hex column
always has one slot per configured byte, with an extra space before every
fourth slot; slots past the end of the data are blank. The ASCII column only
covers the bytes actually read.
"""

from .data_models import Line

GROUP_SIZE = 4
OFFSET_WIDTH = 6

# printable ASCII, space through tilde
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126

BLANK_SLOT = '   '


def format_offset(offset: int) -> str:
    return f"{offset:{OFFSET_WIDTH}X}"


def format_hex(data: bytes, bytes_per_line: int) -> str:
    """Hex column for data, padded to bytes_per_line slots."""
    parts = []
    for i in range(bytes_per_line):
        if i > 0 and i % GROUP_SIZE == 0:
            parts.append(' ')
        if i < len(data):
            parts.append(f" {data[i]:02X}")
        else:
            parts.append(BLANK_SLOT)
    return ''.join(parts)


def format_ascii(data: bytes) -> str:
    """Printable bytes as themselves, everything else as '.'."""
    return ''.join(chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else '.' for b in data)


def format_line(data: bytes, offset: int, bytes_per_line: int) -> str:
    """
    Format one line of output without the trailing newline.

    Args:
        data: Bytes read for this line, at most bytes_per_line of them
        offset: Position of the first byte in the input
        bytes_per_line: Number of hex slots to render
    """
    return f"{format_offset(offset)} |{format_hex(data, bytes_per_line)} | {format_ascii(data)}"


def render(line: Line, bytes_per_line: int) -> str:
    return format_line(line.data, line.offset, bytes_per_line)
