"""A bounded in-memory stream of bytes with a writing and a reading side."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)


class ByteStream:
    """A byte stream of limited capacity: bytes are pushed at one end and popped from the other."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer = bytearray()
        self._capacity = capacity
        self._closed = False
        self._pushed = 0
        self._popped = 0
        self._error = False

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        space = self.available_capacity()
        if self._closed or space == 0:
            if data:
                _log.warning("push ignored: stream is %s", "closed" if self._closed else "full")
            return
        chunk = bytes(data[:space])
        self._buffer += chunk
        self._pushed += len(chunk)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        if not self._buffer:
            _log.warning("pop ignored: stream is empty")
            return
        count = min(length, len(self._buffer))
        del self._buffer[:count]
        self._popped += count

    def is_finished(self) -> bool:
        """True once the stream is closed and every byte has been popped."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed and not yet popped."""
        return len(self._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._popped

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(reader: ByteStream, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader`` and return them."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("peek() returned an empty buffer")
        view = view[: max_len - len(out)]
        out += view
        reader.pop(len(view))
    return bytes(out)