from __future__ import annotations
from typing import List
from .bitcursor import Cursor
from ..errors import DecodeError

# ISO 18004:2006, 6.4.4 Table 5
ALPHANUMERIC_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"


def _symbol(value: int) -> str:
    if value >= len(ALPHANUMERIC_CHARS):
        raise DecodeError(f"Illegal alphanumeric value: {value}")
    return ALPHANUMERIC_CHARS[value]


def decode_alphanumeric_segment(cur: Cursor, result: List[str], count: int) -> None:
    """Two symbols per 11 bits (v // 45, v % 45); an odd trailing symbol takes 6 bits."""
    while count > 1:
        pair = cur.bits(11)
        result.append(_symbol(pair // 45))
        result.append(_symbol(pair % 45))
        count -= 2
    if count == 1:
        result.append(_symbol(cur.bits(6)))
