"""
Tests for binary reader.
"""

import io

import pytest
from hexcols.binary_reader import BinaryReader
from hexcols.errors import OpenError, ReadError, SeekError

from helpers import FailingStream, PipeStream


def test_binary_reader_context_manager(tmp_path):
    """Test that BinaryReader opens and closes the file."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01\x02\x03\x04')

    with BinaryReader(test_file) as reader:
        handle = reader.file
        assert reader.read_chunk(2) == b'\x01\x02'
        assert reader.read_chunk(8) == b'\x03\x04'
        assert reader.read_chunk(8) == b''

    assert handle.closed
    assert reader.file is None


def test_file_closed_when_body_raises(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    with pytest.raises(KeyError):
        with BinaryReader(test_file) as reader:
            handle = reader.file
            raise KeyError('boom')

    assert handle.closed


def test_missing_file_raises_open_error(tmp_path):
    with pytest.raises(OpenError, match="cannot open file"):
        with BinaryReader(tmp_path / "missing.bin"):
            pass


def test_directory_raises_open_error(tmp_path):
    with pytest.raises(OpenError):
        with BinaryReader(tmp_path):
            pass


def test_borrowed_stream_not_closed():
    stream = io.BytesIO(b'data')
    with BinaryReader.from_stream(stream) as reader:
        assert reader.read_chunk(4) == b'data'
    assert not stream.closed


def test_seek_and_tell(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(bytes(range(8)))

    with BinaryReader(test_file) as reader:
        assert reader.seekable()
        reader.seek(5)
        assert reader.tell() == 5
        assert reader.read_chunk(10) == b'\x05\x06\x07'


def test_seek_past_end_reads_nothing(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    with BinaryReader(test_file) as reader:
        reader.seek(100)
        assert reader.read_chunk(16) == b''


def test_seek_on_pipe_raises_seek_error():
    with BinaryReader.from_stream(PipeStream(b'abc')) as reader:
        assert not reader.seekable()
        with pytest.raises(SeekError, match="not seekable"):
            reader.seek(1)


def test_read_failure_raises_read_error():
    with BinaryReader.from_stream(FailingStream(b'abc')) as reader:
        with pytest.raises(ReadError, match="Input/output error"):
            reader.read_chunk(1)


def test_operations_require_open_reader(tmp_path):
    reader = BinaryReader(tmp_path / "never-opened.bin")
    with pytest.raises(RuntimeError):
        reader.read_chunk(1)
    with pytest.raises(RuntimeError):
        reader.seek(0)


def test_stdin_is_default(monkeypatch):
    class FakeStdin:
        buffer = io.BytesIO(b'xyz')

    monkeypatch.setattr('sys.stdin', FakeStdin)
    with BinaryReader() as reader:
        assert reader.name == '<stdin>'
        assert reader.read_chunk(3) == b'xyz'
    assert not FakeStdin.buffer.closed


if __name__ == '__main__':
    pytest.main([__file__])
