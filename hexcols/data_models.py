"""
Data models for hex dumps.
"""

from dataclasses import dataclass

from .errors import ConfigError


__version__ = '0.2.0'

PROG = 'hexcols'

# Sentinel for bytes_to_read: keep reading until end of stream.
UNBOUNDED = -1

DEFAULT_BYTES_PER_LINE = 16

HELP_TEXT = f"""\
Usage: {PROG} [FLAGS] [OPTIONS] ARGUMENTS

Arguments:
  <file>     file to dump (default: stdin)

Options:
  -l <int>   bytes per line in output (default: {DEFAULT_BYTES_PER_LINE})
  -n <int>   number of bytes to read
  -o <int>   byte offset at which to begin reading

Flags:
  --help     display this help text and exit
  --version  display version number and exit
"""


@dataclass(frozen=True)
class DumpConfig:
    """Settings for a single dump, fixed once parsed."""
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE
    bytes_to_read: int = UNBOUNDED
    offset: int = 0

    def __post_init__(self):
        if self.bytes_per_line <= 0:
            raise ConfigError(
                f"bytes per line must be greater than 0, got {self.bytes_per_line}")
        if self.bytes_to_read < UNBOUNDED:
            raise ConfigError(
                f"number of bytes to read must be {UNBOUNDED} or more, got {self.bytes_to_read}")
        if self.offset < 0:
            raise ConfigError(f"offset must not be negative, got {self.offset}")

    @property
    def bounded(self) -> bool:
        """True when only bytes_to_read bytes should be dumped."""
        return self.bytes_to_read != UNBOUNDED


@dataclass(frozen=True)
class Line:
    """One row of output: the bytes read and the offset they started at."""
    offset: int
    data: bytes

    @property
    def num_bytes(self) -> int:
        return len(self.data)

    def __str__(self):
        return f"Line(offset=0x{self.offset:X}, {self.num_bytes} bytes)"
