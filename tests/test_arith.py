import random

import pytest

from lockpick.arith import Ordering, add, compare, mul, sub

WORD = 64
MAX_WORD = (1 << WORD) - 1


def test_add_small_values():
    assert add(2, 3, WORD) == 5


def test_add_wraps_at_width():
    assert add(MAX_WORD, 1, WORD) == 0


def test_add_carries_into_next_word():
    assert add(MAX_WORD, 1, 2 * WORD) == 1 << WORD


def test_sub_borrow_wraps():
    assert sub(0, 1, WORD) == MAX_WORD


def test_sub_wider_result_extends_borrow():
    assert sub(0, 1, 2 * WORD) == (1 << (2 * WORD)) - 1


def test_mul_truncates():
    assert mul(1 << WORD, 1 << WORD, 2 * WORD) == 0
    assert mul(MAX_WORD, MAX_WORD, 2 * WORD) == MAX_WORD * MAX_WORD


@pytest.mark.parametrize("seed", range(10))
def test_add_sub_round_trip(seed):
    rng = random.Random(seed)
    width = rng.choice([64, 128, 256, 512])
    a = rng.getrandbits(width)
    b = rng.getrandbits(width)
    assert sub(add(a, b, width), b, width) == a
    assert add(sub(a, b, width), b, width) == a


@pytest.mark.parametrize("seed", range(10))
def test_add_and_mul_commute(seed):
    rng = random.Random(seed)
    width = rng.choice([64, 128, 256])
    a = rng.getrandbits(width)
    b = rng.getrandbits(width)
    assert add(a, b, width) == add(b, a, width)
    assert mul(a, b, width) == mul(b, a, width)


@pytest.mark.parametrize("seed", range(5))
def test_results_fit_width(seed):
    rng = random.Random(seed)
    width = 128
    a = rng.getrandbits(256)
    b = rng.getrandbits(256)
    for op in (add, sub, mul):
        assert op(a, b, width).bit_length() <= width


def test_mul_by_one_and_zero():
    value = random.Random(1).getrandbits(256)
    assert mul(value, 1, 256) == value
    assert mul(value, 0, 256) == 0


def test_compare():
    assert compare(5, 5) is Ordering.EQUAL
    assert compare(4, 5) is Ordering.LESS
    assert compare(1 << 200, MAX_WORD) is Ordering.GREATER


@pytest.mark.parametrize("seed", range(5))
def test_compare_antisymmetric(seed):
    rng = random.Random(seed)
    a, b = rng.getrandbits(128), rng.getrandbits(128)
    forward, backward = compare(a, b), compare(b, a)
    if forward is Ordering.LESS:
        assert backward is Ordering.GREATER
    elif forward is Ordering.GREATER:
        assert backward is Ordering.LESS
    else:
        assert backward is Ordering.EQUAL


@pytest.mark.parametrize("op", [add, sub, mul])
def test_negative_operand_rejected(op):
    with pytest.raises(ValueError):
        op(-1, 1, WORD)
    with pytest.raises(ValueError):
        op(1, -1, WORD)


@pytest.mark.parametrize("op", [add, sub, mul])
def test_non_positive_width_rejected(op):
    with pytest.raises(ValueError):
        op(1, 1, 0)


def test_compare_negative_rejected():
    with pytest.raises(ValueError):
        compare(-1, 0)