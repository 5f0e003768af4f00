"""Validation errors raised by the auxiliary-text codec and its callers."""

from __future__ import annotations


class AuxTextError(ValueError):
    """Auxiliary text cannot be stored or read back."""


class OversizeAuxTextError(AuxTextError):
    """Encoded auxiliary text does not fit behind a one-byte length prefix."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"auxiliary text is {length} bytes, limit is {limit}")
        self.length = length
        self.limit = limit


class NonAsciiAuxTextError(AuxTextError):
    """Auxiliary text contains characters outside 7-bit ASCII."""


class CorruptAuxBufferError(AuxTextError):
    """A length-prefixed buffer disagrees with its own length byte."""


__all__ = [
    "AuxTextError",
    "CorruptAuxBufferError",
    "NonAsciiAuxTextError",
    "OversizeAuxTextError",
]
