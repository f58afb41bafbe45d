from __future__ import annotations
from pydantic import BaseModel, Field

from ..binary.errors import DecodeError

class Version(BaseModel):
    """QR Code symbol version (1..40). Only the number matters for decoding."""
    number: int = Field(..., ge=1, le=40)

    @classmethod
    def for_number(cls, number: int) -> "Version":
        if not 1 <= number <= 40:
            raise DecodeError(f"Unsupported version: {number}")
        return cls(number=number)

    @property
    def dimension(self) -> int:
        return 17 + 4 * self.number
