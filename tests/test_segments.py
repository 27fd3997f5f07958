import random

import pytest

from cgbasics.point import Point, intersection_test_count, reset_intersection_test_count
from cgbasics.segments import Segment, intersecting_pairs, random_segments


def test_random_segment_start_is_integer_within_limit():
    rng = random.Random(1)
    for _ in range(200):
        seg = Segment.random(100, 10, rng)
        assert 0 <= seg.x1 < 100 and 0 <= seg.y1 < 100
        assert seg.x1 == int(seg.x1) and seg.y1 == int(seg.y1)


def test_random_segment_length_bounded():
    rng = random.Random(2)
    for _ in range(200):
        seg = Segment.random(100, 10, rng)
        assert abs(seg.x2 - seg.x1) <= 10
        assert abs(seg.y2 - seg.y1) <= 10


def test_random_segment_is_reproducible_with_seed():
    a = Segment.random(50, 5, random.Random(7))
    b = Segment.random(50, 5, random.Random(7))
    assert a == b


def test_random_segment_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        Segment.random(0, 10, random.Random(0))


def test_start_and_end_points():
    seg = Segment(1, 2, 3, 4)
    assert seg.start() == Point(1, 2, 0)
    assert seg.end() == Point(3, 4, 0)


def test_random_segments_count():
    segs = random_segments(50, 100, 10, random.Random(3))
    assert len(segs) == 50
    assert all(isinstance(s, Segment) for s in segs)


def test_crossing_segments_found_both_ways():
    segs = [Segment(0, 0, 10, 10), Segment(0, 10, 10, 0)]
    assert intersecting_pairs(segs) == [(0, 1), (1, 0)]


def test_parallel_segments_do_not_intersect():
    segs = [Segment(0, 0, 10, 0), Segment(0, 1, 10, 1)]
    assert intersecting_pairs(segs) == []


def test_far_apart_segments_do_not_intersect():
    segs = [Segment(0, 0, 1, 1), Segment(5, 0, 6, -1)]
    assert intersecting_pairs(segs) == []


def test_pairs_are_symmetric_and_counted():
    segs = random_segments(20, 100, 30, random.Random(5))
    reset_intersection_test_count()
    pairs = intersecting_pairs(segs)
    assert intersection_test_count() == len(segs) * len(segs)
    assert set(pairs) == {(j, i) for i, j in pairs}
    assert all(i != j for i, j in pairs)