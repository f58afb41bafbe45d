from __future__ import annotations
from typing import List

from .codecs.alphanumeric_codec import ALPHANUMERIC_CHARS
from .codecs.charset import SHIFT_JIS
from .codecs.mode import Mode, VersionLike


class BitWriter:
    """MSB-first bit accumulator; the inverse of Cursor.bits()."""
    __slots__ = ("_bits",)

    def __init__(self):
        self._bits: List[int] = []

    def __len__(self) -> int: return len(self._bits)

    def put(self, value: int, n: int) -> "BitWriter":
        if value < 0 or value >= (1 << n):
            raise ValueError(f"{value} does not fit in {n} bits")
        for shift in range(n - 1, -1, -1):
            self._bits.append((value >> shift) & 1)
        return self

    def to_bytes(self) -> bytes:
        """Zero-pad to a byte boundary and pack."""
        bits = self._bits + [0] * (-len(self._bits) % 8)
        out = bytearray()
        for i in range(0, len(bits), 8):
            byte = 0
            for b in bits[i:i + 8]:
                byte = (byte << 1) | b
            out.append(byte)
        return bytes(out)


def _header(w: BitWriter, mode: Mode, count: int, version: VersionLike) -> None:
    width = mode.character_count_bits(version)
    if count >= (1 << width):
        raise ValueError(f"{mode.name} segment too long for version: {count}")
    w.put(mode.bits, 4)
    w.put(count, width)


def encode_numeric(w: BitWriter, text: str, version: VersionLike) -> None:
    if any(c not in "0123456789" for c in text):
        raise ValueError(f"not numeric: {text!r}")
    _header(w, Mode.NUMERIC, len(text), version)
    for i in range(0, len(text), 3):
        group = text[i:i + 3]
        w.put(int(group), {3: 10, 2: 7, 1: 4}[len(group)])


def encode_alphanumeric(w: BitWriter, text: str, version: VersionLike) -> None:
    try:
        values = [ALPHANUMERIC_CHARS.index(c) for c in text]
    except ValueError:
        raise ValueError(f"not alphanumeric: {text!r}") from None
    _header(w, Mode.ALPHANUMERIC, len(values), version)
    for i in range(0, len(values) - 1, 2):
        w.put(values[i] * 45 + values[i + 1], 11)
    if len(values) % 2:
        w.put(values[-1], 6)


def encode_byte(w: BitWriter, data: bytes, version: VersionLike) -> None:
    _header(w, Mode.BYTE, len(data), version)
    for b in data:
        w.put(b, 8)


def encode_kanji(w: BitWriter, text: str, version: VersionLike) -> None:
    raw = text.encode(SHIFT_JIS)
    if len(raw) % 2:
        raise ValueError(f"not double-byte Shift_JIS: {text!r}")
    _header(w, Mode.KANJI, len(raw) // 2, version)
    for i in range(0, len(raw), 2):
        code = (raw[i] << 8) | raw[i + 1]
        if 0x8140 <= code <= 0x9FFC:
            code -= 0x8140
        elif 0xE040 <= code <= 0xEBBF:
            code -= 0xC140
        else:
            raise ValueError(f"outside Kanji mode ranges: 0x{code:04X}")
        w.put((code >> 8) * 0xC0 + (code & 0xFF), 13)


def encode_segment(mode: Mode, text: str, version: VersionLike) -> bytes:
    """
    Build a single-segment payload followed by the terminator. Byte segments
    are written as ISO-8859-1.
    """
    w = BitWriter()
    if mode is Mode.NUMERIC:
        encode_numeric(w, text, version)
    elif mode is Mode.ALPHANUMERIC:
        encode_alphanumeric(w, text, version)
    elif mode is Mode.BYTE:
        encode_byte(w, text.encode("ISO-8859-1"), version)
    elif mode is Mode.KANJI:
        encode_kanji(w, text, version)
    else:
        raise ValueError(f"cannot encode {mode.name} segments")
    w.put(Mode.TERMINATOR.bits, 4)
    return w.to_bytes()
