from __future__ import annotations
from typing import List, Optional

from .bitcursor import Cursor
from .charset import guess_encoding
from ..errors import DecodeError
from ...config import DecoderConfig


def decode_byte_segment(
    cur: Cursor,
    result: List[str],
    count: int,
    config: Optional[DecoderConfig] = None,
) -> str:
    """
    Read `count` 8-bit values and append them as text.
    Returns the name of the charset the bytes were decoded with.
    """
    if count * 8 > cur.bits_remaining():
        raise DecodeError(f"Count too large: {count}")
    raw = bytes(cur.bits(8) for _ in range(count))

    encoding = guess_encoding(raw, config)
    try:
        result.append(raw.decode(encoding, errors="replace"))
    except LookupError as e:
        raise DecodeError(f"Unsupported encoding {encoding!r}: {e}") from e
    return encoding
