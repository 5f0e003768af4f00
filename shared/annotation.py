from __future__ import annotations

from typing import Optional, Tuple, Union

from .aux_text import BufferLike, decode_aux_text, encode_aux_text
from .models import AnnotationCode, Time

TimeLike = Union[Time, int]
CodeLike = Union[AnnotationCode, int]


def _as_time(value: TimeLike) -> Time:
    return value if isinstance(value, Time) else Time(value)


def _as_code(value: CodeLike) -> AnnotationCode:
    return value if isinstance(value, AnnotationCode) else AnnotationCode(value)


def _as_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one unsigned byte")
    return value


class Annotation:
    """
    One or more attributes of one or more signals at a given time.

    Field order mirrors the native annotation struct: time, type, subtype,
    channel, annotator, auxiliary text. The record owns its auxiliary
    buffer (length-prefixed ASCII) and replaces it wholesale on every write.

    Equality and hashing look at (time, type, annotator_number) only.
    ``<`` and ``>`` look at time only, so two records at the same time are
    neither less nor greater than each other even when they differ. Use
    `core.compare.structurally_equal` for full-field identity.

    Instances are plain values with no internal locking.
    """

    __slots__ = ("_time", "_type", "_sub_type", "_channel_number", "_annotator_number", "_aux")

    def __init__(
        self,
        time: TimeLike = 0,
        type: CodeLike = 0,
        sub_type: CodeLike = 0,
        channel_number: int = 0,
        annotator_number: int = 0,
        aux: Optional[str] = None,
    ) -> None:
        self._aux: Optional[bytes] = None
        self.time = time
        self.type = type
        self.sub_type = sub_type
        self.channel_number = channel_number
        self.annotator_number = annotator_number
        self.aux = aux

    # ----------------------------
    # Plain fields
    # ----------------------------

    @property
    def time(self) -> Time:
        """Annotation time, in sample intervals from the beginning of the record."""
        return self._time

    @time.setter
    def time(self, value: TimeLike) -> None:
        self._time = _as_time(value)

    @property
    def type(self) -> AnnotationCode:
        """Annotation code, normally between 1 and ACMAX."""
        return self._type

    @type.setter
    def type(self, value: CodeLike) -> None:
        self._type = _as_code(value)

    @property
    def sub_type(self) -> AnnotationCode:
        return self._sub_type

    @sub_type.setter
    def sub_type(self, value: CodeLike) -> None:
        self._sub_type = _as_code(value)

    @property
    def channel_number(self) -> int:
        return self._channel_number

    @channel_number.setter
    def channel_number(self, value: int) -> None:
        self._channel_number = _as_byte("channel_number", value)

    @property
    def annotator_number(self) -> int:
        return self._annotator_number

    @annotator_number.setter
    def annotator_number(self, value: int) -> None:
        self._annotator_number = _as_byte("annotator_number", value)

    # ----------------------------
    # Auxiliary text
    # ----------------------------

    @property
    def aux(self) -> str:
        """Auxiliary text, empty when the record owns no buffer."""
        if self._aux is None:
            return ""
        return decode_aux_text(self._aux)

    @aux.setter
    def aux(self, value: Optional[str]) -> None:
        # Release first so a rejected value leaves the record without aux.
        self._aux = None
        self._aux = encode_aux_text(value)

    @property
    def has_aux(self) -> bool:
        return self._aux is not None

    @property
    def aux_buffer(self) -> Optional[bytes]:
        """The owned length-prefixed buffer, or None."""
        return self._aux

    def load_aux_buffer(self, buffer: Optional[BufferLike]) -> None:
        """Replace the auxiliary text from a foreign length-prefixed buffer."""
        self._aux = None
        text = decode_aux_text(buffer)
        self._aux = encode_aux_text(text)

    # ----------------------------
    # Comparison
    # ----------------------------

    def _identity(self) -> Tuple[Time, AnnotationCode, int]:
        return (self._time, self._type, self._annotator_number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self._identity() == other._identity()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "Annotation") -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self._time < other._time

    def __gt__(self, other: "Annotation") -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        return self._time > other._time

    def compare_to(self, other: "Annotation") -> int:
        """Time-based three-way comparison, consistent with ``<`` and ``>``."""
        if self._time < other._time:
            return -1
        if self._time > other._time:
            return 1
        return 0

    # ----------------------------
    # Copying / display
    # ----------------------------

    def copy(self) -> "Annotation":
        return Annotation(
            self._time,
            self._type,
            self._sub_type,
            self._channel_number,
            self._annotator_number,
            self.aux,
        )

    def __reduce__(self):
        return (
            self.__class__,
            (
                self._time,
                self._type,
                self._sub_type,
                self._channel_number,
                self._annotator_number,
                self.aux,
            ),
        )

    def __str__(self) -> str:
        return f"{self._time.to_ms_string()} - {self._type}, {self._type.description}"

    def __repr__(self) -> str:
        return (
            f"Annotation(time={self._time.samples}, type={self._type.value}, "
            f"sub_type={self._sub_type.value}, channel_number={self._channel_number}, "
            f"annotator_number={self._annotator_number}, aux={self.aux!r})"
        )


__all__ = ["Annotation"]
