"""Reassembly of indexed, possibly overlapping substrings into an ordered byte stream."""

from __future__ import annotations

from minnowtcp.byte_stream import ByteStream

_U64 = 1 << 64


class Reassembler:
    """Puts substrings that arrive out of order and overlapping back into one ``ByteStream``.

    Bytes that fit within the stream's available capacity but cannot be written yet are
    held internally; bytes beyond that capacity are discarded. The stream is closed once
    the last byte has been written.
    """

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._buf = bytearray()
        self._occupied: list[bool] = []
        self._total_size: int | None = None

    def _resize(self, size: int) -> None:
        current = len(self._buf)
        if size < current:
            del self._buf[size:]
            del self._occupied[size:]
        elif size > current:
            extra = size - current
            self._buf.extend(bytes(extra))
            self._occupied.extend([False] * extra)

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` whose first byte has stream index ``first_index``."""
        data = bytes(data)
        end = (first_index + len(data)) % _U64
        if is_last_substring:
            self._total_size = end

        capacity = self._output.available_capacity()
        self._resize(capacity)

        first_unassembled = self._output.bytes_pushed()
        first_unacceptable = first_unassembled + capacity
        left = max(first_unassembled, first_index)
        right = min(first_unacceptable, end)

        if left < right:
            start_in_buf = left - first_unassembled
            stop_in_buf = right - first_unassembled
            self._buf[start_in_buf:stop_in_buf] = data[left - first_index : right - first_index]
            self._occupied[start_in_buf:stop_in_buf] = [True] * (right - left)

        try:
            count = self._occupied.index(False)
        except ValueError:
            count = len(self._occupied)

        if count:
            self._output.push(bytes(self._buf[:count]))
            del self._buf[:count]
            del self._occupied[:count]

        if self._total_size is not None and self._total_size == self._output.bytes_pushed():
            self._output.close()

    def count_bytes_pending(self) -> int:
        """Number of bytes held in the reassembler and not yet written to the stream."""
        return sum(self._occupied)

    def reader(self) -> ByteStream:
        """The output stream, for reading."""
        return self._output

    def writer(self) -> ByteStream:
        """The output stream, for inspecting its writing side."""
        return self._output