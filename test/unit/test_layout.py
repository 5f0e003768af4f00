"""
Unit tests for the native interchange layout.

These tests verify:
1. The structured dtype reproduces the native struct (order, widths, padding)
2. Records and their aux text survive a pack/unpack cycle
3. Corrupt offsets and length bytes are rejected before any copy
"""
from __future__ import annotations

import numpy as np
import pytest

from core.compare import structurally_equal
from core.layout import ANNOTATION_DTYPE, AUX_NONE, FIELD_LAYOUT, pack_annotations, unpack_annotations
from shared.annotation import Annotation
from shared.errors import CorruptAuxBufferError


class TestDtype:
    def test_field_order_matches_struct(self):
        assert ANNOTATION_DTYPE.names == ("time", "anntyp", "subtyp", "chan", "num", "aux")
        assert [name for name, _, _ in FIELD_LAYOUT] == list(ANNOTATION_DTYPE.names)

    def test_field_widths_and_offsets(self):
        fields = ANNOTATION_DTYPE.fields
        assert fields["time"][0].itemsize == 4
        assert fields["time"][1] == 0
        assert [fields[name][1] for name in ("anntyp", "subtyp", "chan", "num")] == [4, 5, 6, 7]
        for name in ("anntyp", "subtyp", "chan", "num"):
            assert fields[name][0].itemsize == 1

    def test_pointer_field_is_aligned(self):
        pointer_size = np.dtype(np.intp).itemsize
        offset = ANNOTATION_DTYPE.fields["aux"][1]
        assert offset % pointer_size == 0
        assert ANNOTATION_DTYPE.itemsize == offset + pointer_size
        assert ANNOTATION_DTYPE.isalignedstruct


class TestPackUnpack:
    def test_pack_writes_fields_and_pool(self):
        records = [
            Annotation(time=10, type=1, sub_type=2, channel_number=3, annotator_number=4),
            Annotation(time=20, type=28, aux="(AFIB"),
        ]

        array, pool = pack_annotations(records)

        assert array.dtype == ANNOTATION_DTYPE
        assert array["time"].tolist() == [10, 20]
        assert array["anntyp"].tolist() == [1, 28]
        assert array["subtyp"][0] == 2
        assert array["chan"][0] == 3
        assert array["num"][0] == 4
        assert array["aux"][0] == AUX_NONE
        assert array["aux"][1] == 0
        assert pool == b"\x05(AFIB"

    def test_roundtrip_preserves_all_fields(self):
        records = [
            Annotation(time=0, type=1),
            Annotation(time=250, type=28, sub_type=1, aux="(N"),
            Annotation(time=500, type=22, channel_number=1, annotator_number=2, aux="x" * 255),
        ]

        restored = unpack_annotations(*pack_annotations(records))

        assert len(restored) == len(records)
        for original, back in zip(records, restored):
            assert structurally_equal(original, back)

    def test_empty_input(self):
        array, pool = pack_annotations([])
        assert array.shape == (0,)
        assert pool == b""
        assert unpack_annotations(array, pool) == []

    def test_time_outside_int32_rejected(self):
        with pytest.raises(OverflowError):
            pack_annotations([Annotation(time=2**31)])


class TestCorruption:
    def _single(self, aux_offset: int) -> np.ndarray:
        array = np.zeros(1, dtype=ANNOTATION_DTYPE)
        array["aux"][0] = aux_offset
        return array

    def test_offset_outside_pool(self):
        with pytest.raises(CorruptAuxBufferError):
            unpack_annotations(self._single(10), b"\x01a")

    def test_length_runs_past_pool(self):
        with pytest.raises(CorruptAuxBufferError):
            unpack_annotations(self._single(0), b"\x09abc")

    def test_wrong_dtype_rejected(self):
        with pytest.raises(ValueError):
            unpack_annotations(np.zeros(3, dtype=np.int32))

    def test_wrong_ndim_rejected(self):
        with pytest.raises(ValueError):
            unpack_annotations(np.zeros((2, 2), dtype=ANNOTATION_DTYPE))
