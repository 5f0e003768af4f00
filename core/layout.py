"""Native interchange layout for annotation records.

Records cross the native boundary as a NumPy structured array that mirrors
the C annotation struct field by field, with the struct's alignment padding.
The auxiliary pointer becomes an offset into a separate byte pool holding
length-prefixed ASCII strings; `AUX_NONE` marks a record without aux text.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from shared.annotation import Annotation
from shared.errors import CorruptAuxBufferError

logger = logging.getLogger(__name__)

AUX_NONE = -1

# (field, native type, width in bytes), in struct order
FIELD_LAYOUT: Tuple[Tuple[str, str, int], ...] = (
    ("time", "int32", 4),
    ("anntyp", "uint8", 1),
    ("subtyp", "uint8", 1),
    ("chan", "uint8", 1),
    ("num", "uint8", 1),
    ("aux", "intp", np.dtype(np.intp).itemsize),
)

ANNOTATION_DTYPE = np.dtype([(name, kind) for name, kind, _ in FIELD_LAYOUT], align=True)

_INT32 = np.iinfo(np.int32)


def pack_annotations(annotations: Iterable[Annotation]) -> Tuple[np.ndarray, bytes]:
    """
    Encode records into a native-layout array plus the aux pool it points into.
    """
    records = list(annotations)
    array = np.zeros(len(records), dtype=ANNOTATION_DTYPE)
    pool = bytearray()

    for idx, ann in enumerate(records):
        samples = ann.time.samples
        if not _INT32.min <= samples <= _INT32.max:
            raise OverflowError(f"annotation {idx}: time {samples} does not fit in int32")

        buffer = ann.aux_buffer
        if buffer is None:
            offset = AUX_NONE
        else:
            offset = len(pool)
            pool.extend(buffer)

        array[idx] = (
            samples,
            ann.type.value,
            ann.sub_type.value,
            ann.channel_number,
            ann.annotator_number,
            offset,
        )

    logger.debug("Packed %d annotations (%d aux bytes)", len(records), len(pool))
    return array, bytes(pool)


def unpack_annotations(array: np.ndarray, pool: bytes = b"") -> List[Annotation]:
    """
    Decode a native-layout array back into records.

    Every aux offset and length byte is checked against the pool before it is
    read; inconsistencies raise `CorruptAuxBufferError`.
    """
    arr = np.asarray(array)
    if arr.dtype != ANNOTATION_DTYPE:
        raise ValueError(f"expected dtype {ANNOTATION_DTYPE}, got {arr.dtype}")
    if arr.ndim != 1:
        raise ValueError(f"array must be 1D, got {arr.ndim}D")

    view = memoryview(pool).cast("B")
    records: List[Annotation] = []
    for idx, row in enumerate(arr):
        ann = Annotation(
            int(row["time"]),
            int(row["anntyp"]),
            int(row["subtyp"]),
            int(row["chan"]),
            int(row["num"]),
        )
        offset = int(row["aux"])
        if offset != AUX_NONE:
            ann.load_aux_buffer(_slice_aux(view, offset, idx))
        records.append(ann)

    logger.debug("Unpacked %d annotations", len(records))
    return records


def _slice_aux(pool: memoryview, offset: int, idx: int) -> memoryview:
    if not 0 <= offset < len(pool):
        raise CorruptAuxBufferError(f"annotation {idx}: aux offset {offset} outside pool of {len(pool)} bytes")
    end = offset + 1 + pool[offset]
    if end > len(pool):
        raise CorruptAuxBufferError(f"annotation {idx}: aux length {pool[offset]} runs past end of pool")
    return pool[offset:end]


__all__ = [
    "ANNOTATION_DTYPE",
    "AUX_NONE",
    "FIELD_LAYOUT",
    "pack_annotations",
    "unpack_annotations",
]
