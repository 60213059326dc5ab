"""
Read loop for hex dumps.
"""

from typing import Iterator, TextIO

from .binary_reader import BinaryReader
from .data_models import DumpConfig, Line
from .formatter import render


class Dumper:
    """Reads an input in line-sized chunks and formats each chunk."""

    def __init__(self, reader: BinaryReader, config: DumpConfig):
        """
        Initialize dumper.

        Args:
            reader: Open reader for the input
            config: Line width, byte budget and starting offset
        """
        self.reader = reader
        self.config = config

    def _read_size(self, remaining: int) -> int:
        if self.config.bounded and remaining < self.config.bytes_per_line:
            return remaining
        return self.config.bytes_per_line

    def iter_lines(self) -> Iterator[Line]:
        """
        Yield one Line per chunk until the input or the byte budget runs out.

        Seeks to the configured offset first when it is non-zero. Raises
        SeekError or ReadError from the reader.
        """
        offset = self.config.offset
        if offset != 0:
            self.reader.seek(offset)

        remaining = self.config.bytes_to_read
        while True:
            size = self._read_size(remaining)
            if size == 0:
                break
            data = self.reader.read_chunk(size)
            if not data:
                break
            yield Line(offset=offset, data=data)
            offset += len(data)
            if self.config.bounded:
                remaining -= len(data)

    def lines(self) -> Iterator[str]:
        """Formatted lines, without newlines."""
        for line in self.iter_lines():
            yield render(line, self.config.bytes_per_line)

    def dump(self, out: TextIO) -> int:
        """Write every formatted line to out and return how many were written."""
        count = 0
        for text in self.lines():
            out.write(text + '\n')
            count += 1
        return count
