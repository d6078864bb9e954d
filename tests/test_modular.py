import pytest

from lkmath.modular import Modular, add_n, mod_n, modular_decompose, mul_n, sub_n
from lkmath.vector import Vector


def test_modular_reduces_value():
    assert Modular(13, 5) == Modular(3, 5)


def test_modular_negative():
    assert Modular(-3, 5) == Modular(2, 5)


def test_modular_add():
    assert Modular(3, 5) + Modular(4, 5) == Modular(2, 5)


def test_modular_sub_and_mul_consistent():
    for a in range(-7, 8):
        for b in range(-7, 8):
            x, y = Modular(a, 5), Modular(b, 5)
            assert (x - y) + y == x
            assert x * y == y * x


def test_modular_str():
    assert str(Modular(13, 5)) == "3 (mod 5)"


def test_modular_mismatched_moduli():
    with pytest.raises(ValueError):
        Modular(1, 5) + Modular(1, 6)


def test_modular_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        Modular(1, 0)


def test_modular_decompose_reconstructs():
    for value in range(-20, 21):
        for n in (1, 2, 3, 7, -4):
            q, r = modular_decompose(value, n)
            assert q * n + r == value
            assert 0 <= r < abs(n)


def test_mod_n_non_negative():
    assert mod_n(-1, 16) == 15
    assert mod_n(-3, 5) == 2


def test_add_n_pinned():
    assert add_n(3, 4, 5) == 2


def test_sub_n_inverts_add_n():
    for a in range(-10, 11):
        for b in range(-10, 11):
            assert add_n(sub_n(a, b, 7), b, 7) == mod_n(a, 7)


def test_mul_n_identity_and_symmetry():
    for a in range(-10, 11):
        assert mul_n(a, 1, 6) == mod_n(a, 6)
        for b in range(-3, 4):
            assert mul_n(a, b, 6) == mul_n(b, a, 6)


def test_vector_decompose():
    assert modular_decompose(Vector(1, -1), Vector(2, 2)) == (Vector(0, -1), Vector(1, 1))
    assert modular_decompose(Vector(-1, 0), Vector(16, 16)) == (Vector(-1, 0), Vector(15, 0))


def test_vector_add_n_and_sub_n():
    v = add_n(Vector(3, 1), Vector(4, 1), Vector(5, 5))
    assert v == Vector(2, 2)
    assert sub_n(v, Vector(4, 1), Vector(5, 5)) == Vector(3, 1)


def test_vector_dimension_mismatch():
    with pytest.raises(ValueError):
        add_n(Vector(1, 2), Vector(1, 2, 3), Vector(5, 5))