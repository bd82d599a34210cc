# minnowtcp

Building blocks for a TCP implementation, in plain Python with no dependencies:

- `minnowtcp.byte_stream.ByteStream`: a bounded, in-order byte buffer with a writing
  side (`push`, `close`, `available_capacity`, `bytes_pushed`) and a reading side
  (`peek`, `pop`, `is_finished`, `bytes_buffered`, `bytes_popped`), plus an error flag
  (`set_error`, `has_error`).
- `minnowtcp.byte_stream.read`: peeks and pops up to a given number of bytes from a stream.
- `minnowtcp.wrapping_integers.Wrap32`: 32-bit wrapping sequence numbers, with conversion
  to and from absolute 64-bit positions.
- `minnowtcp.reassembler.Reassembler`: puts indexed, possibly out-of-order and overlapping
  substrings back into a `ByteStream`.

## Installing

```
pip install .
```

## Byte streams

```python
from minnowtcp.byte_stream import ByteStream, read

stream = ByteStream(8)
stream.push(b"hello, world")     # only as much as fits is accepted: b"hello, w"
stream.available_capacity()      # 0
read(stream, 5)                  # b"hello"
stream.close()
stream.is_finished()             # False: b", w" is still buffered
```

Pushing to a closed or full stream, or popping from an empty one, is ignored and
logged as a warning through the `logging` module. A negative capacity or pop length
raises `ValueError`.

## Sequence numbers

```python
from minnowtcp.wrapping_integers import Wrap32

isn = Wrap32(2**32 - 2)
seqno = Wrap32.wrap(5, isn)      # Wrap32(3)
seqno.unwrap(isn, 0)             # 5
seqno + 1 == Wrap32(4)           # True
```

`unwrap` returns the absolute sequence number that wraps to the value and lies
closest to the given checkpoint.

## Reassembly

```python
from minnowtcp.byte_stream import ByteStream
from minnowtcp.reassembler import Reassembler

reassembler = Reassembler(ByteStream(10))
reassembler.insert(2, b"cd", False)
reassembler.count_bytes_pending()    # 2
reassembler.insert(0, b"ab", False)  # b"abcd" is now written to the stream
reassembler.insert(4, b"", True)     # end of stream: the stream is closed
reassembler.reader().peek()          # b"abcd"
reassembler.writer().is_closed()     # True
```

Bytes beyond the stream's available capacity are discarded; bytes within it that
cannot be written yet are held until the gap before them is filled.

## What the package does not do

It has no TCP receiver or sender, no segment or message types, no retransmission
timers, and no sockets or network I/O. It provides the stream, sequence-number and
reassembly pieces on which those would be built.

## Running the tests

```
pip install .[test]
pytest
```