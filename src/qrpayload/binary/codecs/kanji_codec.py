from __future__ import annotations
from typing import List

from .bitcursor import Cursor
from .charset import SHIFT_JIS
from ..errors import DecodeError


def kanji_unit_to_sjis(value: int) -> int:
    """Map a 13-bit Kanji mode value to its two-byte Shift_JIS code (ISO 18004:2006, 6.4.6)."""
    assembled = ((value // 0x0C0) << 8) | (value % 0x0C0)
    if assembled < 0x01F00:
        # 0x8140 .. 0x9FFC
        return assembled + 0x08140
    # 0xE040 .. 0xEBBF
    return assembled + 0x0C140


def decode_kanji_segment(cur: Cursor, result: List[str], count: int) -> None:
    buf = bytearray()
    for _ in range(count):
        code = kanji_unit_to_sjis(cur.bits(13))
        buf.append((code >> 8) & 0xFF)
        buf.append(code & 0xFF)
    # decoded as a whole: Shift_JIS characters only make sense as byte pairs
    try:
        result.append(bytes(buf).decode(SHIFT_JIS, errors="replace"))
    except LookupError as e:
        raise DecodeError(f"Can't decode SHIFT_JIS string: {e}") from e
