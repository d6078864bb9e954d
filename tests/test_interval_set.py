import sys

from lkmath.interval import I32_BOUNDS, ORD_F32_BOUNDS, ORD_F64_BOUNDS, Interval
from lkmath.interval_set import IntervalSet
from lkmath.ord_float import OrdF32, OrdF64

I32_MIN = -2147483648
I32_MAX = 2147483647
F32_MAX = 3.4028234663852886e38
F32_EPSILON = 1.1920929e-07


def test_empty():
    s = IntervalSet()
    assert s.measure() == 0
    assert s.bounds() is None
    assert s.negation_within_bounds().intervals == []
    assert s.negation(I32_BOUNDS).intervals == [Interval(I32_MIN, I32_MAX)]
    assert s.negation(I32_BOUNDS).negation(I32_BOUNDS) == s
    for value in (I32_MIN, -1, 0, 1, I32_MAX):
        assert not s.contains(value)


def test_i32():
    s = IntervalSet()
    s.union(Interval(0, 2))
    s.union(Interval(1, 3))
    assert s.measure() == 3
    assert s.negation(I32_BOUNDS).intervals == [
        Interval(I32_MIN, 0),
        Interval(3, I32_MAX),
    ]
    assert s.negation(I32_BOUNDS).negation(I32_BOUNDS) == s
    assert not s.contains(I32_MIN)
    assert not s.contains(-1)
    assert s.contains(0)
    assert s.contains(1)
    assert s.contains(2)
    assert not s.contains(3)
    assert not s.contains(I32_MAX)


def test_f32():
    s = IntervalSet()
    s.union(Interval(OrdF32(0.0), OrdF32(2.0)))
    s.union(Interval(OrdF32(1.0), OrdF32(3.0)))
    assert s.measure() == OrdF32(3.0)
    assert s.negation(ORD_F32_BOUNDS).intervals == [
        Interval(OrdF32.NEG_INFINITY, OrdF32(0.0)),
        Interval(OrdF32(3.0), OrdF32.INFINITY),
    ]
    assert s.negation(ORD_F32_BOUNDS).negation(ORD_F32_BOUNDS) == s
    assert not s.contains(OrdF32.NEG_INFINITY)
    assert not s.contains(OrdF32(-F32_MAX))
    assert not s.contains(OrdF32(-1.0))
    assert not s.contains(OrdF32(-F32_EPSILON))
    assert s.contains(OrdF32(0.0))
    assert s.contains(OrdF32(1.0))
    assert s.contains(OrdF32(2.0))
    assert s.contains(OrdF32(2.999))
    assert not s.contains(OrdF32(3.0))
    assert not s.contains(OrdF32(F32_MAX))
    assert not s.contains(OrdF32.INFINITY)


def test_f64():
    s = IntervalSet()
    s.union(Interval(OrdF64(0.0), OrdF64(2.0)))
    s.union(Interval(OrdF64(1.0), OrdF64(3.0)))
    assert s.measure() == OrdF64(3.0)
    assert s.negation(ORD_F64_BOUNDS).intervals == [
        Interval(OrdF64.NEG_INFINITY, OrdF64(0.0)),
        Interval(OrdF64(3.0), OrdF64.INFINITY),
    ]
    assert s.negation(ORD_F64_BOUNDS).negation(ORD_F64_BOUNDS) == s
    assert not s.contains(OrdF64.NEG_INFINITY)
    assert not s.contains(OrdF64(-sys.float_info.max))
    assert not s.contains(OrdF64(-1.0))
    assert not s.contains(OrdF64(-sys.float_info.epsilon))
    assert s.contains(OrdF64(0.0))
    assert s.contains(OrdF64(1.0))
    assert s.contains(OrdF64(2.0))
    assert s.contains(OrdF64(2.999))
    assert not s.contains(OrdF64(3.0))
    assert not s.contains(OrdF64(sys.float_info.max))
    assert not s.contains(OrdF64.INFINITY)


def test_union_keeps_disjoint_sorted():
    s = IntervalSet()
    s.union(Interval(10, 12))
    s.union(Interval(0, 2))
    s.union(Interval(5, 7))
    assert s.intervals == [Interval(0, 2), Interval(5, 7), Interval(10, 12)]


def test_union_bridges_neighbours():
    s = IntervalSet([Interval(0, 2), Interval(5, 7)])
    s.union(Interval(2, 5))
    assert s.intervals == [Interval(0, 7)]


def test_union_swallows_covered_intervals():
    s = IntervalSet([Interval(1, 2), Interval(3, 4), Interval(6, 7)])
    s.union(Interval(0, 5))
    assert s.intervals == [Interval(0, 5), Interval(6, 7)]


def test_union_inside_existing_is_noop():
    s = IntervalSet([Interval(0, 10)])
    s.union(Interval(2, 5))
    assert s.intervals == [Interval(0, 10)]


def test_union_ignores_empty_interval():
    s = IntervalSet([Interval(0, 1)])
    s.union(Interval(5, 5))
    s.union(Interval(7, 3))
    assert s.intervals == [Interval(0, 1)]


def test_union_extends_right_neighbour():
    s = IntervalSet([Interval(5, 8)])
    s.union(Interval(3, 6))
    assert s.intervals == [Interval(3, 8)]


def test_bounds_and_gaps():
    s = IntervalSet([Interval(0, 2), Interval(5, 7), Interval(10, 12)])
    assert s.bounds() == Interval(0, 12)
    assert s.negation_within_bounds().intervals == [Interval(2, 5), Interval(7, 10)]
    assert s.measure() == 6


def test_intersect_clips():
    s = IntervalSet([Interval(0, 4), Interval(6, 10)])
    s.intersect(Interval(2, 8))
    assert s.intervals == [Interval(2, 4), Interval(6, 8)]


def test_retain_intersecting_keeps_whole_intervals():
    s = IntervalSet([Interval(0, 4), Interval(6, 10), Interval(20, 30)])
    s.retain_intersecting(Interval(2, 8))
    assert s.intervals == [Interval(0, 4), Interval(6, 10)]


def test_containing_interval():
    s = IntervalSet([Interval(0, 4), Interval(6, 10)])
    assert s.containing_interval(7) == Interval(6, 10)
    assert s.containing_interval(4) is None
    assert s.containing_interval(11) is None
    assert 0 in s
    assert 5 not in s