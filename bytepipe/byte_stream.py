"""A bounded, in-memory byte stream with separate reading and writing views."""

from __future__ import annotations

from collections import deque

__all__ = ["ByteStream", "Writer", "Reader", "read"]


class ByteStream:
    """A flow-controlled byte pipe holding at most ``capacity`` unread bytes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._chunks: deque[bytes] = deque()
        self._head_offset = 0
        self._buffered = 0
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        """Return the reading view of this stream."""
        return self._reader

    def writer(self) -> Writer:
        """Return the writing view of this stream."""
        return self._writer

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has suffered an error."""
        return self._error

    def __repr__(self) -> str:
        return (
            f"ByteStream(capacity={self.capacity}, buffered={self._buffered}, "
            f"closed={self._closed}, error={self._error})"
        )


class Writer:
    """The writing end of a :class:`ByteStream`."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def push(self, data: bytes | bytearray | memoryview) -> None:
        """Append as much of ``data`` as the available capacity allows.

        Data pushed after the stream has been closed is discarded.
        """
        stream = self._stream
        if stream._closed:
            return
        chunk = bytes(data)[: self.available_capacity()]
        if not chunk:
            return
        stream._chunks.append(chunk)
        stream._buffered += len(chunk)
        stream._pushed += len(chunk)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._stream._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._stream.capacity - self._stream._buffered

    def bytes_pushed(self) -> int:
        """Total number of bytes ever pushed."""
        return self._stream._pushed

    def set_error(self) -> None:
        """Mark the underlying stream as having suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has suffered an error."""
        return self._stream.has_error()


class Reader:
    """The reading end of a :class:`ByteStream`."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def peek(self) -> bytes:
        """Return the next buffered bytes without removing them.

        The result is non-empty whenever any bytes are buffered, but need not
        hold the whole buffer.
        """
        stream = self._stream
        if not stream._chunks:
            return b""
        return stream._chunks[0][stream._head_offset :]

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must be non-negative")
        stream = self._stream
        remaining = min(length, stream._buffered)
        stream._buffered -= remaining
        stream._popped += remaining
        while remaining:
            head = stream._chunks[0]
            left_in_head = len(head) - stream._head_offset
            if remaining >= left_in_head:
                stream._chunks.popleft()
                stream._head_offset = 0
                remaining -= left_in_head
            else:
                stream._head_offset += remaining
                remaining = 0

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully popped."""
        return self._stream._closed and self._stream._buffered == 0

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        return self._stream._buffered

    def bytes_popped(self) -> int:
        """Total number of bytes ever popped."""
        return self._stream._popped

    def set_error(self) -> None:
        """Mark the underlying stream as having suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has suffered an error."""
        return self._stream.has_error()


def read(reader: Reader, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader`` and return them."""
    parts: list[bytes] = []
    collected = 0
    while reader.bytes_buffered() and collected < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned empty bytes")
        view = view[: max_len - collected]
        parts.append(view)
        collected += len(view)
        reader.pop(len(view))
    return b"".join(parts)