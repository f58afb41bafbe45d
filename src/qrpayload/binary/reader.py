from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from .codecs.bitcursor import Cursor
from .codecs.mode import Mode, VersionLike, mode_for_bits
from .codecs.numeric_codec import decode_numeric_segment
from .codecs.alphanumeric_codec import decode_alphanumeric_segment
from .codecs.byte_codec import decode_byte_segment
from .codecs.kanji_codec import decode_kanji_segment
from .errors import DecodeError
from ..config import DecoderConfig, DEFAULT_CONFIG
from ..models.segment import DecodedPayload, Segment

BytesLike = Union[str, Path, bytes, bytearray, memoryview]

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _check_trailing_bits(cur: Cursor) -> None:
    # Only the partial byte after the terminator is inspected; pad codewords follow it.
    bits_left = cur.bits_remaining() % 8
    if bits_left > 0 and cur.bits(bits_left) != 0:
        raise DecodeError("Non-zero bits after terminator mode indicator")


# -----------------------------
# Segment loop
# -----------------------------

def parse_payload(
    data: BytesLike,
    version: VersionLike,
    config: Optional[DecoderConfig] = None,
) -> DecodedPayload:
    """
    Walk the segments of a QR Code data bit stream (ISO 18004:2006, 6.4.3 - 6.4.7)
    until the terminator, decoding each into text. Returns the text together
    with the segment layout.
    """
    config = config or DEFAULT_CONFIG
    cur = Cursor(_load_bytes(data))
    result: List[str] = []
    segments: List[Segment] = []

    while True:
        seg_start = cur.tell_bits()
        mode = mode_for_bits(cur.bits(4))
        if mode is Mode.TERMINATOR:
            break

        count = cur.bits(mode.character_count_bits(version))
        logger.debug("segment %s count=%d at bit %d", mode.name, count, seg_start)

        text_start = len(result)
        encoding = None
        if mode is Mode.NUMERIC:
            decode_numeric_segment(cur, result, count)
        elif mode is Mode.ALPHANUMERIC:
            decode_alphanumeric_segment(cur, result, count)
        elif mode is Mode.BYTE:
            encoding = decode_byte_segment(cur, result, count, config)
        elif mode is Mode.KANJI:
            decode_kanji_segment(cur, result, count)
        else:
            raise DecodeError(f"Unsupported mode indicator: {mode.name}")

        segments.append(Segment(
            mode=mode.name,
            count=count,
            text="".join(result[text_start:]),
            bit_offset=seg_start,
            bit_length=cur.tell_bits() - seg_start,
            encoding=encoding,
        ))

    if config.check_trailing_bits:
        _check_trailing_bits(cur)

    return DecodedPayload(text="".join(result), segments=segments)


def decode(
    data: BytesLike,
    version: VersionLike,
    config: Optional[DecoderConfig] = None,
) -> str:
    """Decode the data codewords of a QR Code symbol into text."""
    return parse_payload(data, version, config).text
