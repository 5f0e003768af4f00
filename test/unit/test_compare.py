from __future__ import annotations

import pytest

from core.compare import (
    compare_by_time,
    deduplicate,
    equals,
    merge_streams,
    sort_annotations,
    structural_key,
    structurally_equal,
)
from shared.annotation import Annotation


def test_compare_by_time():
    a = Annotation(time=50, type=9)
    b = Annotation(time=100, type=1)
    c = Annotation(time=100, type=2, annotator_number=4)

    assert compare_by_time(a, b) == -1
    assert compare_by_time(b, a) == 1
    assert compare_by_time(b, c) == 0


def test_narrow_and_structural_equality_differ():
    a = Annotation(time=100, type=1, sub_type=0, channel_number=0, annotator_number=0, aux="x")
    b = Annotation(time=100, type=1, sub_type=5, channel_number=1, annotator_number=0, aux="")

    assert equals(a, b)
    assert not structurally_equal(a, b)
    assert structurally_equal(a, a.copy())


@pytest.mark.parametrize(
    "change",
    [
        {"sub_type": 1},
        {"channel_number": 1},
        {"aux": "note"},
    ],
)
def test_structural_key_sees_every_field(change):
    base = Annotation(time=7, type=1)
    other = base.copy()
    for name, value in change.items():
        setattr(other, name, value)

    assert base == other
    assert structural_key(base) != structural_key(other)


def test_structural_key_usable_as_map_key():
    table = {structural_key(Annotation(time=1, type=1, aux="a")): "first"}
    assert table[structural_key(Annotation(time=1, type=1, aux="a"))] == "first"
    assert structural_key(Annotation(time=1, type=1, aux="b")) not in table


def test_sort_is_stable_for_equal_times():
    first = Annotation(time=10, type=1, annotator_number=0)
    second = Annotation(time=10, type=5, annotator_number=1)
    earliest = Annotation(time=2, type=1)

    result = sort_annotations([first, second, earliest])

    assert result[0] is earliest
    assert result[1] is first
    assert result[2] is second


def test_deduplicate_keeps_first_of_each_identity():
    a = Annotation(time=10, type=1, annotator_number=0, aux="from A")
    a_again = Annotation(time=10, type=1, annotator_number=0, channel_number=1, aux="from B")
    other_annotator = Annotation(time=10, type=1, annotator_number=1)

    result = deduplicate([a, a_again, other_annotator])

    assert result == [a, other_annotator]
    assert result[0].aux == "from A"


def test_merge_streams_orders_by_time_then_stream():
    stream_a = [Annotation(time=1, annotator_number=0), Annotation(time=5, annotator_number=0)]
    stream_b = [Annotation(time=1, annotator_number=1), Annotation(time=3, annotator_number=1)]

    merged = merge_streams(stream_a, stream_b)

    assert [m.time.samples for m in merged] == [1, 1, 3, 5]
    assert merged[0] is stream_a[0]
    assert merged[1] is stream_b[0]


def test_merge_streams_empty():
    assert merge_streams() == []
    assert merge_streams([], []) == []
