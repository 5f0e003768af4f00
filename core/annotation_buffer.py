from __future__ import annotations

import logging
from collections import deque
from threading import Lock
from typing import Deque, Iterable, List, Optional

from shared.annotation import Annotation
from shared.settings import default_settings

from .compare import deduplicate, sort_annotations

logger = logging.getLogger(__name__)


class AnnotationBuffer:
    """
    Thread-safe, bounded buffer of Annotation records.

    Readers (annotators, file writers) push records as they are produced;
    consumers either snapshot the buffer in time order or drain it. The
    lock guards the container only, not the records inside it.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = default_settings.get().buffer_capacity
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._buffer: Deque[Annotation] = deque(maxlen=self._capacity)
        self._lock = Lock()
        self._dropped = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dropped(self) -> int:
        with self._lock:
            return self._dropped

    def push(self, annotation: Annotation) -> None:
        """
        Append a record, dropping the oldest entry if the buffer is full.
        """
        if not isinstance(annotation, Annotation):
            raise TypeError("AnnotationBuffer only holds Annotation records")
        with self._lock:
            if len(self._buffer) == self._capacity:
                self._buffer.popleft()
                self._dropped += 1
                if self._dropped == 1:
                    logger.warning("AnnotationBuffer full (capacity=%d); dropping oldest records", self._capacity)
            self._buffer.append(annotation)

    def extend(self, annotations: Iterable[Annotation]) -> None:
        for annotation in annotations:
            self.push(annotation)

    def drain(self) -> List[Annotation]:
        """
        Remove and return all buffered records in arrival order.
        """
        with self._lock:
            annotations = list(self._buffer)
            self._buffer.clear()
            return annotations

    def peek_all(self) -> List[Annotation]:
        with self._lock:
            return list(self._buffer)

    def sorted_snapshot(self) -> List[Annotation]:
        """Time-ordered copy of the buffer; ties keep arrival order."""
        return sort_annotations(self.peek_all())

    def deduplicated(self) -> List[Annotation]:
        """Time-ordered snapshot with repeated (time, type, annotator) records removed."""
        return deduplicate(self.sorted_snapshot())

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)


__all__ = ["AnnotationBuffer"]
