"""
Size-capped streaming reads.

RestrictedReader enforces an upper bound on the bytes consumed from a
stream whose total length is not known in advance. It is forward-only:
no seeking, no buffering, no retries.
"""
from typing import BinaryIO, Iterable, Iterator, Optional

from fb_fundraisers.errors import MaxSizeExceededError


class RestrictedReader:
    """
    Wrap a binary reader and fail once more than max_size bytes have been read.

    Each call to read() updates bytes_read with the length actually returned
    by the wrapped reader. When bytes_read exceeds max_size the call raises
    MaxSizeExceededError instead of returning, even at end-of-stream. The
    check runs on every call, so once the cap is passed every later read
    raises too. max_size itself is reachable. A None from a non-blocking
    reader is passed through uncounted.

    Example:
        max_size=4, stream of 4 bytes -> b"abcd", then b"" (no error)
        max_size=4, stream of 5 bytes -> MaxSizeExceededError, bytes_read=5
    """

    def __init__(self, reader: BinaryIO, max_size: int):
        self.reader = reader
        self.max_size = max_size
        self.bytes_read = 0

    def read(self, size: int = -1) -> Optional[bytes]:
        data = self.reader.read(size)
        if data is not None:
            self.bytes_read += len(data)
        if self.bytes_read > self.max_size:
            raise MaxSizeExceededError(self.max_size, self.bytes_read)
        return data

    def readable(self) -> bool:
        return True


def is_max_size_exceeded(exc: BaseException) -> bool:
    """Return True if exc is the RestrictedReader cap signal."""
    return isinstance(exc, MaxSizeExceededError)


class IterableReader:
    """Adapt an iterator of byte chunks (e.g. a streamed HTTP body) to read(size)."""

    def __init__(self, chunks: Iterable[bytes]):
        self._chunks: Iterator[bytes] = iter(chunks)
        self._pending = b""

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            data = self._pending + b"".join(self._chunks)
            self._pending = b""
            return data
        while len(self._pending) < size:
            chunk = next(self._chunks, None)
            if chunk is None:
                break
            self._pending += chunk
        data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def readable(self) -> bool:
        return True
