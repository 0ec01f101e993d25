"""Growable reply buffer shared by both transports."""
from __future__ import annotations


class GrowableBuffer:
    """Append-only byte accumulator that is always zero-terminated.

    The terminator is kept in storage but is not counted by len() nor returned
    by getvalue(). append() is the only mutator; the buffer never shrinks.
    Growth goes through the interpreter's allocator, so exhaustion surfaces as
    MemoryError from append().
    """

    def __init__(self) -> None:
        self._data = bytearray(b"\0")

    def append(self, chunk: bytes) -> int:
        """Append chunk and return the number of bytes taken (write-callback contract)."""
        if not chunk:
            return 0
        self._data[-1:] = chunk
        self._data.append(0)
        return len(chunk)

    def __len__(self) -> int:
        return len(self._data) - 1

    def getvalue(self) -> bytes:
        return bytes(self._data[:-1])

    def terminated(self) -> bytes:
        """Contents including the trailing zero byte."""
        return bytes(self._data)
