from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .settings import default_settings


# ----------------------------
# Sample-position time
# ----------------------------

@dataclass(frozen=True, order=True)
class Time:
    """Position in a record, counted in sample intervals from its beginning."""

    samples: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.samples, bool) or not isinstance(self.samples, int):
            raise TypeError("samples must be an integer")

    def __int__(self) -> int:
        return self.samples

    def __index__(self) -> int:
        return self.samples

    def seconds(self, sampling_frequency: Optional[float] = None) -> float:
        return self.samples / _resolve_frequency(sampling_frequency)

    def to_ms_string(self, sampling_frequency: Optional[float] = None) -> str:
        """Format as ``m:ss.mmm``, or ``h:mm:ss.mmm`` past the first hour."""
        freq = _resolve_frequency(sampling_frequency)
        sign = "-" if self.samples < 0 else ""
        total_ms = int(round(abs(self.samples) * 1000.0 / freq))
        seconds, ms = divmod(total_ms, 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        if hours:
            return f"{sign}{hours}:{minutes:02d}:{seconds:02d}.{ms:03d}"
        return f"{sign}{minutes}:{seconds:02d}.{ms:03d}"

    def __str__(self) -> str:
        return self.to_ms_string()


def _resolve_frequency(sampling_frequency: Optional[float]) -> float:
    if sampling_frequency is None:
        sampling_frequency = default_settings.get().sampling_frequency
    freq = float(sampling_frequency)
    if not freq > 0:
        raise ValueError("sampling_frequency must be positive")
    return freq


# ----------------------------
# Annotation codes
# ----------------------------

ACMAX = 49

# code -> (mnemonic, description), standard MIT/WFDB table
_CODE_TABLE: Dict[int, Tuple[str, str]] = {
    0: ("", ""),
    1: ("N", "Normal beat"),
    2: ("L", "Left bundle branch block beat"),
    3: ("R", "Right bundle branch block beat"),
    4: ("a", "Aberrated atrial premature beat"),
    5: ("V", "Premature ventricular contraction"),
    6: ("F", "Fusion of ventricular and normal beat"),
    7: ("J", "Nodal (junctional) premature beat"),
    8: ("A", "Atrial premature beat"),
    9: ("S", "Supraventricular premature or ectopic beat"),
    10: ("E", "Ventricular escape beat"),
    11: ("j", "Nodal (junctional) escape beat"),
    12: ("/", "Paced beat"),
    13: ("Q", "Unclassifiable beat"),
    14: ("~", "Change in signal quality"),
    16: ("|", "Isolated QRS-like artifact"),
    18: ("s", "ST segment change"),
    19: ("T", "T-wave change"),
    20: ("*", "Systole"),
    21: ("D", "Diastole"),
    22: ('"', "Comment annotation"),
    23: ("=", "Measurement annotation"),
    24: ("p", "P-wave peak"),
    25: ("B", "Left or right bundle branch block"),
    26: ("^", "Non-conducted pacer spike"),
    27: ("t", "T-wave peak"),
    28: ("+", "Rhythm change"),
    29: ("u", "U-wave peak"),
    30: ("?", "Learning"),
    31: ("!", "Ventricular flutter wave"),
    32: ("[", "Start of ventricular flutter/fibrillation"),
    33: ("]", "End of ventricular flutter/fibrillation"),
    34: ("e", "Atrial escape beat"),
    35: ("n", "Supraventricular escape beat"),
    36: ("@", "Link to external data (aux contains URL)"),
    37: ("x", "Non-conducted P-wave (blocked APB)"),
    38: ("f", "Fusion of paced and normal beat"),
    39: ("(", "Waveform onset"),
    40: (")", "Waveform end"),
    41: ("r", "R-on-T premature ventricular contraction"),
}

_MNEMONIC_TABLE: Dict[str, int] = {
    mnemonic: code for code, (mnemonic, _) in _CODE_TABLE.items() if mnemonic
}


@dataclass(frozen=True, order=True)
class AnnotationCode:
    """One-byte annotation type (or subtype) code."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("annotation code must be an integer")
        if not 0 <= self.value <= 0xFF:
            raise ValueError("annotation code must fit in one unsigned byte")

    @classmethod
    def from_mnemonic(cls, mnemonic: str) -> "AnnotationCode":
        return cls(_MNEMONIC_TABLE[mnemonic])

    @property
    def is_valid(self) -> bool:
        return 1 <= self.value <= ACMAX

    @property
    def mnemonic(self) -> str:
        entry = _CODE_TABLE.get(self.value)
        return entry[0] if entry else ""

    @property
    def description(self) -> str:
        entry = _CODE_TABLE.get(self.value)
        return entry[1] if entry else ""

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AnnotationCode):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.mnemonic or f"[{self.value}]"


__all__ = [
    "ACMAX",
    "AnnotationCode",
    "Time",
]
