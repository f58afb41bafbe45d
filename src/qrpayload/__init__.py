"""
Decoding of QR Code data bit streams (ISO 18004 segments) into text.
"""

from .binary.errors import DecodeError
from .binary.reader import decode, parse_payload
from .binary.codecs.mode import Mode, mode_for_bits
from .config import DecoderConfig
from .models.segment import DecodedPayload, Segment
from .models.version import Version

__all__ = [
    "DecodeError",
    "decode",
    "parse_payload",
    "Mode",
    "mode_for_bits",
    "DecoderConfig",
    "DecodedPayload",
    "Segment",
    "Version",
]
