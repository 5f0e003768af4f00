from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
import threading
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotationSettings:
    sampling_frequency: float = 250.0
    buffer_capacity: int = 10000

    def __post_init__(self) -> None:
        freq = float(self.sampling_frequency)
        if not math.isfinite(freq) or freq <= 0:
            raise ValueError("sampling_frequency must be positive and finite")
        if int(self.buffer_capacity) <= 0:
            raise ValueError("buffer_capacity must be positive")
        object.__setattr__(self, "sampling_frequency", freq)
        object.__setattr__(self, "buffer_capacity", int(self.buffer_capacity))


class AnnotationSettingsStore:
    """Thread-safe holder for the settings used by time formatting and annotation buffers."""

    def __init__(self, initial: Optional[AnnotationSettings] = None) -> None:
        self._settings = initial or AnnotationSettings()
        self._lock = threading.Lock()

    def get(self) -> AnnotationSettings:
        with self._lock:
            return self._settings

    def update(self, **kwargs) -> AnnotationSettings:
        """Replace the named fields; invalid values leave the current settings in place."""
        with self._lock:
            self._settings = replace(self._settings, **kwargs)
            new_settings = self._settings
        logger.debug("Annotation settings updated: %s", new_settings)
        return new_settings


default_settings = AnnotationSettingsStore()


__all__ = ["AnnotationSettings", "AnnotationSettingsStore", "default_settings"]
