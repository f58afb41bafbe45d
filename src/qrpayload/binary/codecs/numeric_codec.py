from __future__ import annotations
from typing import List
from .bitcursor import Cursor
from .alphanumeric_codec import ALPHANUMERIC_CHARS
from ..errors import DecodeError


def decode_numeric_segment(cur: Cursor, result: List[str], count: int) -> None:
    """
    Digits are packed in groups of three (10 bits). A trailing group of two
    takes 7 bits, a trailing single digit 4 bits (ISO 18004:2006, 6.4.3).
    """
    while count >= 3:
        three = cur.bits(10)
        if three >= 1000:
            raise DecodeError(f"Illegal value for 3-digit unit: {three}")
        result.append(ALPHANUMERIC_CHARS[three // 100])
        result.append(ALPHANUMERIC_CHARS[(three // 10) % 10])
        result.append(ALPHANUMERIC_CHARS[three % 10])
        count -= 3

    if count == 2:
        two = cur.bits(7)
        if two >= 100:
            raise DecodeError(f"Illegal value for 2-digit unit: {two}")
        result.append(ALPHANUMERIC_CHARS[two // 10])
        result.append(ALPHANUMERIC_CHARS[two % 10])
    elif count == 1:
        one = cur.bits(4)
        if one >= 10:
            raise DecodeError(f"Illegal value for digit unit: {one}")
        result.append(ALPHANUMERIC_CHARS[one])
