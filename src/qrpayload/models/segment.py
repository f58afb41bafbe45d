from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Optional

class Segment(BaseModel):
    mode: str
    count: int = Field(..., ge=0)
    text: str = ""
    bit_offset: int = Field(..., ge=0)   # position of the mode indicator
    bit_length: int = Field(..., ge=0)   # indicator + count field + data
    encoding: Optional[str] = None       # byte segments only

class DecodedPayload(BaseModel):
    text: str
    segments: List[Segment] = Field(default_factory=list)
