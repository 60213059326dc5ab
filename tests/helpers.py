"""
Stream doubles for hex dump tests.
"""

import io


class PipeStream(io.BytesIO):
    """In-memory stream that refuses to seek, like a pipe."""

    def seekable(self):
        return False

    def seek(self, *args):
        raise io.UnsupportedOperation('seek')


class FailingStream(io.BytesIO):
    """Stream whose reads fail after the first good_reads calls."""

    def __init__(self, data=b'', good_reads=0):
        super().__init__(data)
        self.good_reads = good_reads

    def read(self, size=-1):
        if self.good_reads <= 0:
            raise OSError(5, 'Input/output error')
        self.good_reads -= 1
        return super().read(size)
