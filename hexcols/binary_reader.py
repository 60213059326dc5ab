"""
Binary input reader for hex dumps.
"""

import io
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import OpenError, ReadError, SeekError


class BinaryReader:
    """Owns the input handle for the length of a dump."""

    def __init__(self, file_path: Optional[Path] = None):
        """
        Initialize binary reader.

        Args:
            file_path: Path to the binary file, or None to read standard input
        """
        self.file_path = Path(file_path) if file_path is not None else None
        self.file: Optional[BinaryIO] = None
        self._stream: Optional[BinaryIO] = None
        self._owned = False

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> 'BinaryReader':
        """Wrap an already open binary stream. The stream is not closed on exit."""
        reader = cls()
        reader._stream = stream
        return reader

    @property
    def name(self) -> str:
        """Name of the input for error messages."""
        if self.file_path is not None:
            return str(self.file_path)
        if self._stream is not None:
            return getattr(self._stream, 'name', '<stream>')
        return '<stdin>'

    def __enter__(self):
        """Context manager entry."""
        if self._stream is not None:
            self.file = self._stream
        elif self.file_path is None:
            self.file = sys.stdin.buffer
        else:
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as e:
                raise OpenError(f"cannot open file '{self.file_path}': {e.strerror}") from e
            self._owned = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file and self._owned:
            self.file.close()
        self.file = None
        self._owned = False

    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file

    def seekable(self) -> bool:
        """Whether the input supports random access."""
        try:
            return self._require_open().seekable()
        except ValueError:
            # closed underlying stream
            return False

    def seek(self, position: int) -> int:
        """Seek to an absolute position in the input."""
        file = self._require_open()
        if not self.seekable():
            raise SeekError(f"cannot seek into {self.name}: input is not seekable")
        try:
            return file.seek(position, io.SEEK_SET)
        except (OSError, ValueError, OverflowError) as e:
            raise SeekError(f"cannot locate offset {position} in {self.name}: {e}") from e

    def tell(self) -> int:
        """Get current position in the input."""
        return self._require_open().tell()

    def read_chunk(self, size: int) -> bytes:
        """
        Read up to size bytes.

        Returns fewer bytes near the end of the input and b'' once it is
        exhausted.
        """
        file = self._require_open()
        try:
            data = file.read(size)
        except OSError as e:
            raise ReadError(f"cannot read {self.name}: {e}") from e
        # non-blocking streams return None when no data is ready
        return data or b''
