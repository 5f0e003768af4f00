"""Length-prefixed ASCII encoding used for annotation auxiliary text.

A buffer is one length byte (0-255) followed by exactly that many ASCII
bytes, with no terminator.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from .errors import CorruptAuxBufferError, NonAsciiAuxTextError, OversizeAuxTextError

logger = logging.getLogger(__name__)

AUX_MAX_LENGTH = 0xFF

BufferLike = Union[bytes, bytearray, memoryview]


def encode_aux_text(text: Optional[str]) -> Optional[bytes]:
    """Return the length-prefixed buffer for `text`, or None when empty."""
    if text is None:
        return None
    if not isinstance(text, str):
        raise TypeError("auxiliary text must be a string")
    if not text:
        return None
    try:
        payload = text.encode("ascii")
    except UnicodeEncodeError as exc:
        logger.debug("Rejected non-ASCII auxiliary text at offset %d", exc.start)
        raise NonAsciiAuxTextError(
            f"auxiliary text contains a non-ASCII character at offset {exc.start}"
        ) from exc
    if len(payload) > AUX_MAX_LENGTH:
        raise OversizeAuxTextError(len(payload), AUX_MAX_LENGTH)
    return bytes((len(payload),)) + payload


def decode_aux_text(buffer: Optional[BufferLike], *, strict: bool = True) -> str:
    """
    Decode a length-prefixed buffer.

    The stated length is checked against the buffer before anything is
    copied. With `strict`, trailing bytes past the stated length are an
    error; otherwise they are ignored.
    """
    if buffer is None:
        return ""
    view = memoryview(buffer).cast("B")
    if len(view) == 0:
        raise CorruptAuxBufferError("auxiliary buffer is missing its length byte")
    length = view[0]
    available = len(view) - 1
    if length > available:
        raise CorruptAuxBufferError(
            f"auxiliary buffer states {length} bytes but holds {available}"
        )
    if strict and length != available:
        raise CorruptAuxBufferError(
            f"auxiliary buffer states {length} bytes but holds {available}"
        )
    payload = bytes(view[1 : 1 + length])
    try:
        return payload.decode("ascii")
    except UnicodeDecodeError as exc:
        raise CorruptAuxBufferError("auxiliary buffer holds non-ASCII bytes") from exc


__all__ = ["AUX_MAX_LENGTH", "decode_aux_text", "encode_aux_text"]
