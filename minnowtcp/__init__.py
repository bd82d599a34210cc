"""Bounded byte streams, 32-bit wrapping sequence numbers and a stream reassembler."""

__version__ = "0.1.0"