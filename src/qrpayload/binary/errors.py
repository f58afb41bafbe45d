from __future__ import annotations


class DecodeError(ValueError):
    """Raised when a QR Code bit stream cannot be turned into text."""
