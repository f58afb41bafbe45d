from __future__ import annotations
from ..errors import DecodeError

class Cursor:
    """MSB-first bit reader over an immutable byte buffer."""
    __slots__ = ("buf", "pos", "_bitbuf", "_bitcnt")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(bytes(data))
        self.pos = 0
        self._bitbuf = 0
        self._bitcnt = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def bits_remaining(self) -> int: return self.remaining() * 8 + self._bitcnt
    def tell_bits(self) -> int: return self.pos * 8 - self._bitcnt

    def u8(self) -> int:
        if self.pos >= len(self.buf): raise DecodeError(f"underrun: need 1 byte at {self.pos}")
        val = self.buf[self.pos]
        self.pos += 1
        return val

    def bits(self, n: int) -> int:
        if not (0 <= n <= 32): raise ValueError("bits 0..32")
        if n > self.bits_remaining():
            raise DecodeError(f"bit underrun: need {n} bits, {self.bits_remaining()} left")
        while self._bitcnt < n:
            self._bitbuf = (self._bitbuf << 8) | self.u8()
            self._bitcnt += 8
        shift = self._bitcnt - n
        val = (self._bitbuf >> shift) & ((1 << n) - 1)
        self._bitbuf &= (1 << shift) - 1
        self._bitcnt = shift
        return val
