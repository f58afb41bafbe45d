from __future__ import annotations
import logging
from typing import Optional

from ...config import DecoderConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

SHIFT_JIS = "Shift_JIS"
ISO_8859_1 = "ISO-8859-1"


def guess_encoding(data: bytes, config: Optional[DecoderConfig] = None) -> str:
    """
    Pick the charset for a byte segment. ISO 18004 does not say which one to
    assume; ISO-8859-1 and Shift_JIS are both seen in the wild without an ECI
    designator.

    ISO-8859-1 has no printable characters in 0x80..0x9F, while Shift_JIS uses
    that range for lead bytes. A lead byte followed by a plausible trail byte
    selects Shift_JIS; anything else falls back to ISO-8859-1.
    """
    config = config or DEFAULT_CONFIG
    if config.assume_shift_jis:
        return SHIFT_JIS

    last = len(data) - 1
    for i, value in enumerate(data):
        if 0x80 <= value <= 0x9F and i < last:
            nxt = data[i + 1]
            if value & 0x1 == 0:
                if 0x40 <= nxt <= 0x9E:
                    logger.debug("Shift_JIS pair 0x%02X 0x%02X at %d", value, nxt, i)
                    return SHIFT_JIS
            else:
                # Empty range: odd lead bytes never select Shift_JIS.
                if 0x9F <= nxt <= 0x7C:
                    return SHIFT_JIS
    return ISO_8859_1
