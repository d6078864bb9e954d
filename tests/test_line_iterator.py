import pytest

from lkmath.line_iterator import LineIterator
from lkmath.vector import Vector


def _unit_steps(points):
    return all(
        all(abs(c) <= 1 for c in (b - a)) and any(c != 0 for c in (b - a))
        for a, b in zip(points, points[1:])
    )


def test_single_point_inclusive():
    p = Vector.from_xy(3, 4)
    assert list(LineIterator(p, p, True)) == [p]


def test_single_point_exclusive():
    p = Vector.from_xy(3, 4)
    assert list(LineIterator(p, p, False)) == []


def test_horizontal_line():
    start, end = Vector.from_xy(0, 0), Vector.from_xy(3, 0)
    points = list(LineIterator(start, end, True))
    assert points == [Vector.from_xy(x, 0) for x in range(4)]


@pytest.mark.parametrize(
    "start,end",
    [
        (Vector.from_xy(0, 0), Vector.from_xy(4, 4)),
        (Vector.from_xy(5, 5), Vector.from_xy(0, 0)),
        (Vector.from_xy(0, 0), Vector.from_xy(0, -6)),
        (Vector.from_xy(0, 0), Vector.from_xy(1, 3)),
        (Vector.from_xy(2, 1), Vector.from_xy(-1, -2)),
        (Vector.from_xyz(0, 0, 0), Vector.from_xyz(2, 2, 2)),
    ],
)
def test_inclusive_walk_invariants(start, end):
    points = list(LineIterator(start, end, True))
    assert points[0] == start
    assert points[-1] == end
    assert _unit_steps(points)
    assert len(points) == max(abs(c) for c in (end - start)) + 1


@pytest.mark.parametrize(
    "start,end",
    [
        (Vector.from_xy(0, 0), Vector.from_xy(4, 4)),
        (Vector.from_xy(0, 0), Vector.from_xy(1, 3)),
        (Vector.from_xy(7, 0), Vector.from_xy(2, 0)),
    ],
)
def test_exclusive_drops_only_end(start, end):
    inclusive = list(LineIterator(start, end, True))
    exclusive = list(LineIterator(start, end, False))
    assert exclusive == inclusive[:-1]
    assert end not in exclusive


def test_diagonal_3d():
    start, end = Vector.from_xyz(0, 0, 0), Vector.from_xyz(2, 2, 2)
    points = list(LineIterator(start, end))
    assert points == [Vector.from_xyz(i, i, i) for i in range(3)]


def test_iterating_twice_gives_same_points():
    start, end = Vector.from_xy(0, 0), Vector.from_xy(2, 5)
    it = LineIterator(start, end)
    first = list(it)
    assert first[0] == start
    assert first[-1] == end
    assert len(first) == 6
    assert list(it) == first


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        list(LineIterator(Vector.from_xy(0, 0), Vector.from_xyz(1, 1, 1)))