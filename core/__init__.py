"""Operations over annotation records: comparison, buffering, interchange."""

from .annotation_buffer import AnnotationBuffer
from .compare import (
    compare_by_time,
    deduplicate,
    equals,
    merge_streams,
    sort_annotations,
    structural_key,
    structurally_equal,
)
from .layout import ANNOTATION_DTYPE, AUX_NONE, FIELD_LAYOUT, pack_annotations, unpack_annotations
from shared.annotation import Annotation
from shared.models import ACMAX, AnnotationCode, Time

__all__ = [
    "ACMAX",
    "ANNOTATION_DTYPE",
    "AUX_NONE",
    "Annotation",
    "AnnotationBuffer",
    "AnnotationCode",
    "FIELD_LAYOUT",
    "Time",
    "compare_by_time",
    "deduplicate",
    "equals",
    "merge_streams",
    "pack_annotations",
    "sort_annotations",
    "structural_key",
    "structurally_equal",
    "unpack_annotations",
]
