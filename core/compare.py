"""Named comparisons over Annotation records.

Two notions of sameness are kept apart on purpose:

- `equals` is the narrow identity used for deduplication: the same event
  (time, type, annotator), regardless of subtype, channel or aux text.
- `structurally_equal` compares every field, for callers that key maps on
  full record identity.

Ordering (`compare_by_time`, `sort_annotations`) uses time alone and is not
consistent with either notion of equality.
"""
from __future__ import annotations

import heapq
from typing import Hashable, Iterable, List, Sequence, Set, Tuple

from shared.annotation import Annotation


def compare_by_time(a: Annotation, b: Annotation) -> int:
    return a.compare_to(b)


def equals(a: Annotation, b: Annotation) -> bool:
    return a == b


def structural_key(annotation: Annotation) -> Tuple[int, int, int, int, int, str]:
    return (
        annotation.time.samples,
        annotation.type.value,
        annotation.sub_type.value,
        annotation.channel_number,
        annotation.annotator_number,
        annotation.aux,
    )


def structurally_equal(a: Annotation, b: Annotation) -> bool:
    return structural_key(a) == structural_key(b)


def sort_annotations(annotations: Iterable[Annotation]) -> List[Annotation]:
    """Stable time-order sort; records at equal times keep their input order."""
    return sorted(annotations, key=lambda ann: ann.time)


def deduplicate(annotations: Iterable[Annotation]) -> List[Annotation]:
    """Keep the first record of each (time, type, annotator) group, in input order."""
    seen: Set[Hashable] = set()
    unique: List[Annotation] = []
    for annotation in annotations:
        if annotation in seen:
            continue
        seen.add(annotation)
        unique.append(annotation)
    return unique


def merge_streams(*streams: Sequence[Annotation]) -> List[Annotation]:
    """
    Merge already time-ordered streams into one time-ordered list.

    Ties are broken by stream position, then by position within the stream.
    """
    keyed = (
        [(ann.time, stream_idx, pos, ann) for pos, ann in enumerate(stream)]
        for stream_idx, stream in enumerate(streams)
    )
    return [item[-1] for item in heapq.merge(*keyed)]


__all__ = [
    "compare_by_time",
    "deduplicate",
    "equals",
    "merge_streams",
    "sort_annotations",
    "structural_key",
    "structurally_equal",
]
