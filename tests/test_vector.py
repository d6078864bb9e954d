import math

import pytest

from lkmath.vector import I32_MAX, I32_MIN, Vector


def test_v3_eq():
    a = Vector.from_xyz(0, 0, 0)
    b = Vector.from_xyz(0, 0, 0)
    assert a == b
    assert hash(a) == hash(b)


def test_v3_basis_vectors():
    assert Vector.ONE == Vector.X + Vector.Y
    assert Vector.X == Vector.X + Vector.ZERO
    assert Vector.ONE == Vector.from_xy(1, 1)
    assert Vector.X == Vector.from_xy(1, 0)


def test_v3_linear_index():
    bitmap = Vector.from_xy(8, 8)
    pixel = Vector.from_xy(4, 4)
    pixel_index = 4 * 8 + 4
    assert bitmap.unindex(pixel_index) == pixel
    assert bitmap.index(pixel) == pixel_index


def test_v3_modular_decompose():
    count, residue = Vector.from_xy(0, 0).modular_decompose(Vector.from_xy(2, 2))
    assert count == Vector.from_xy(0, 0)
    assert residue == Vector.from_xy(0, 0)


def test_v3_modular_decompose2():
    count, residue = Vector.from_xy(1, -1).modular_decompose(Vector.from_xy(2, 2))
    assert count == Vector.from_xy(0, -1)
    assert residue == Vector.from_xy(1, 1)


def test_v3_modular_decompose3():
    count, residue = Vector.from_xy(-1, 0).modular_decompose(Vector.from_xy(16, 16))
    assert count == Vector.from_xy(-1, 0)
    assert residue == Vector.from_xy(15, 0)


def test_modular_decompose_recombines():
    n = Vector(3, 5, 7)
    for a in (Vector(-10, 4, 22), Vector(0, -1, 100)):
        count, residue = a.modular_decompose(n)
        assert count.elementwise_binary(n, lambda q, m: q * m) + residue == a
        assert all(0 <= r < m for r, m in zip(residue, n))


def test_display_format():
    assert str(Vector(1, 2, 3)) == "Vector(1, 2, 3)"


def test_parse_round_trip():
    v = Vector(4, -7, 12)
    assert Vector.parse(str(v)[len("Vector("):-1]) == v
    assert Vector.parse(" 1.5 , 2 ", float) == Vector(1.5, 2.0)


def test_parse_invalid_raises():
    with pytest.raises(ValueError):
        Vector.parse("1,x")


def test_all():
    assert Vector.all(5, 3) == Vector(5, 5, 5)


def test_arithmetic_round_trip():
    a = Vector(3, -2)
    b = Vector(7, 11)
    assert (a + b) - b == a
    assert a * 2 == 2 * a == a + a


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        Vector(1, 2) + Vector(1, 2, 3)


def test_elementwise_min_max():
    a = Vector(1, 5)
    b = Vector(3, 2)
    assert a.elementwise_min(b) == Vector(1, 2)
    assert a.elementwise_max(b) == Vector(3, 5)


def test_inner_and_winding():
    assert Vector.X.inner(Vector.Y) == 0
    assert Vector.X.winding(Vector.Y) == 1
    assert Vector.Y.winding(Vector.X) == -1


def test_perp_is_orthogonal():
    v = Vector(3, 8)
    assert v.inner(v.perp()) == 0
    assert Vector.X.perp() == Vector.Y


def test_normalized_has_unit_length():
    assert math.isclose(Vector(3.0, 4.0).normalized().magn(), 1.0)
    assert Vector(0.0, 0.0).normalized() == Vector(0.0, 0.0)


def test_distances():
    a = Vector(1, 1)
    b = Vector(4, -3)
    assert a.manhattan_distance(b) == 7
    assert a.euclidean_distance_squared(b) == 25
    assert a.manhattan_distance(b) == b.manhattan_distance(a)


def test_neighbours_order():
    assert Vector(0, 0).neighbours() == [
        Vector(1, 0),
        Vector(-1, 0),
        Vector(0, 1),
        Vector(0, -1),
    ]


def test_neighbours_filtered_by_context():
    grid = Vector(2, 2)
    assert Vector(0, 0).neighbours(grid) == [Vector(1, 0), Vector(0, 1)]


def test_neighbours_respect_i32_range():
    assert Vector(I32_MAX).neighbours() == [Vector(I32_MAX - 1)]


def test_steps_at_range_limits():
    assert Vector(I32_MAX, 0).step_right() is None
    assert Vector(0, I32_MIN).step_down() is None
    assert Vector(0, 0).step_left().step_right() == Vector(0, 0)
    assert Vector(0, 0).step_up_n(3).step_down_n(3) == Vector(0, 0)


def test_step_needs_two_dimensions():
    with pytest.raises(ValueError):
        Vector(1, 2, 3).step_right()


def test_index_unindex_round_trip():
    dims = Vector(3, 4, 2)
    for i in range(dims.cardinality()):
        p = dims.unindex(i)
        assert dims.is_in_bounds(p)
        assert dims.index(p) == i


def test_out_of_bounds_index_is_none():
    dims = Vector(3, 4)
    assert dims.index(Vector(-1, 0)) is None
    assert dims.index(Vector(3, 0)) is None
    assert not dims.is_in_bounds(Vector(0, 4))


def test_index_unchecked_rejects_negative():
    with pytest.raises(ValueError):
        Vector(3, 4).index_unchecked(Vector(-1, 0))