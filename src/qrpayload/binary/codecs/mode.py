from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

from ..errors import DecodeError
from ...models.version import Version

VersionLike = Union[Version, int]


class Mode(Enum):
    """
    Segment mode indicators (ISO 18004:2006, 6.4.1, Table 2).
    Each value is (4-bit indicator, count-field widths for versions 1-9, 10-26, 27-40).
    """
    TERMINATOR = (0x00, (0, 0, 0))
    NUMERIC = (0x01, (10, 12, 14))
    ALPHANUMERIC = (0x02, (9, 11, 13))
    STRUCTURED_APPEND = (0x03, (0, 0, 0))
    BYTE = (0x04, (8, 16, 16))
    FNC1_FIRST_POSITION = (0x05, (0, 0, 0))
    ECI = (0x07, (0, 0, 0))
    KANJI = (0x08, (8, 10, 12))
    FNC1_SECOND_POSITION = (0x09, (0, 0, 0))

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def _count_widths(self) -> Tuple[int, int, int]:
        return self.value[1]

    def character_count_bits(self, version: VersionLike) -> int:
        number = version.number if isinstance(version, Version) else int(version)
        if not 1 <= number <= 40:
            raise DecodeError(f"Unsupported version: {number}")
        if number <= 9:
            return self._count_widths[0]
        if number <= 26:
            return self._count_widths[1]
        return self._count_widths[2]


_BY_BITS = {m.bits: m for m in Mode}


def mode_for_bits(bits: int) -> Mode:
    try:
        return _BY_BITS[bits]
    except KeyError:
        raise DecodeError(f"Unknown mode indicator: 0x{bits:X}") from None
