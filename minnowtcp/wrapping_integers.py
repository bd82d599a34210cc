"""32-bit sequence numbers that wrap around at 2**32."""

from __future__ import annotations

_MOD = 1 << 32
_MASK = _MOD - 1
_U64 = 1 << 64


class Wrap32:
    """A 32-bit unsigned integer that starts at an arbitrary zero point and wraps to zero after 2**32 - 1."""

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        self._raw = raw_value & _MASK

    @property
    def raw_value(self) -> int:
        """The underlying 32-bit value."""
        return self._raw

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return Wrap32(n % _MOD + zero_point.raw_value)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number that wraps to this value and lies closest to ``checkpoint``."""
        base = (self._raw - zero_point.raw_value) % _MOD
        if checkpoint <= base:
            return base
        before = base + (checkpoint - base) // _MOD * _MOD
        after = before + _MOD
        if after >= _U64:
            return before
        if checkpoint - before > after - checkpoint:
            return after
        return before

    def __add__(self, n: object) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self._raw + n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"