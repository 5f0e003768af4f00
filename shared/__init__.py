"""
Shared value types: sample times, annotation codes and the annotation record.
"""

from .annotation import Annotation
from .aux_text import AUX_MAX_LENGTH, decode_aux_text, encode_aux_text
from .errors import AuxTextError, CorruptAuxBufferError, NonAsciiAuxTextError, OversizeAuxTextError
from .models import ACMAX, AnnotationCode, Time
from .settings import AnnotationSettings, AnnotationSettingsStore, default_settings

__all__ = [
    "ACMAX",
    "AUX_MAX_LENGTH",
    "Annotation",
    "AnnotationCode",
    "AnnotationSettings",
    "AnnotationSettingsStore",
    "AuxTextError",
    "CorruptAuxBufferError",
    "NonAsciiAuxTextError",
    "OversizeAuxTextError",
    "Time",
    "decode_aux_text",
    "default_settings",
    "encode_aux_text",
]
