import pytest

from lkmath.permutations import Perm


def test1():
    assert Perm([0]) == Perm.from_id(0, 1)


def test2():
    assert Perm([0, 1]) == Perm.from_id(0, 2)
    assert Perm([1, 0]) == Perm.from_id(1, 2)


def test3():
    assert Perm([0, 1, 2]) == Perm.from_id(0, 3)
    assert Perm([0, 2, 1]) == Perm.from_id(1, 3)
    assert Perm([1, 0, 2]) == Perm.from_id(2, 3)
    assert Perm([1, 2, 0]) == Perm.from_id(3, 3)
    assert Perm([2, 0, 1]) == Perm.from_id(4, 3)
    assert Perm([2, 1, 0]) == Perm.from_id(5, 3)


def test2_chain():
    e = Perm([0, 1])
    a = Perm([1, 0])
    assert e == e.chain(e)
    assert a == e.chain(a)
    assert a == a.chain(e)
    assert e == a.chain(a)


def test3_chain():
    e = Perm([0, 1, 2])
    f = Perm([0, 2, 1])
    fr = Perm([1, 0, 2])
    r = Perm([1, 2, 0])
    rr = Perm([2, 0, 1])
    y = Perm([2, 1, 0])
    assert e == f.chain(f)
    assert e == fr.chain(fr)
    assert e == y.chain(y)
    assert e == r.chain(rr)
    assert e == rr.chain(r)
    assert rr == r.chain(r)
    assert r == rr.chain(rr)
    assert fr == r.chain(f)
    assert e == rr.chain(rr).chain(rr)
    assert e == r.chain(r).chain(r)


def test_mul_is_chain():
    r = Perm([1, 2, 0])
    f = Perm([0, 2, 1])
    assert r * f == Perm([1, 0, 2])


@pytest.mark.parametrize("index, size", [(1, 1), (2, 2), (6, 3)])
def test_oob(index, size):
    with pytest.raises(ValueError):
        Perm.from_id(index, size)


def test_rejects_non_permutation():
    with pytest.raises(ValueError):
        Perm([0, 0, 1])


def test_chain_size_mismatch():
    with pytest.raises(ValueError):
        Perm([0, 1]).chain(Perm([0, 1, 2]))