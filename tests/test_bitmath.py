import pytest

from lockpick.bitmath import (
    ceil_log2,
    ceil_pow2,
    div_pow_2,
    exact_log2,
    floor_log2,
    is_pow_2,
    mod_pow_2,
)


@pytest.mark.parametrize("k", range(64))
def test_powers_of_two_are_detected(k):
    assert is_pow_2(1 << k)
    assert exact_log2(1 << k) == k
    assert floor_log2(1 << k) == k
    assert ceil_log2(1 << k) == k


@pytest.mark.parametrize("x", [0, 3, 5, 6, 7, 12, 1000, (1 << 40) + 1])
def test_non_powers_are_rejected(x):
    assert not is_pow_2(x)


def test_exact_log2_of_zero():
    assert exact_log2(0) == -1


@pytest.mark.parametrize("x", [1, 2, 3, 7, 9, 100, 1023, 1024, 1025, 2**63 - 1])
def test_floor_log2_bounds(x):
    f = floor_log2(x)
    assert 2**f <= x < 2 ** (f + 1)


@pytest.mark.parametrize("x", [2, 3, 5, 100, 1023, 1025, 2**50 + 3])
def test_ceil_pow2_bounds(x):
    p = ceil_pow2(x)
    assert is_pow_2(p)
    assert p >= x
    assert p // 2 < x
    assert p == 1 << ceil_log2(x)


@pytest.mark.parametrize("a", [0, 1, 17, 255, 1000, 123456789])
@pytest.mark.parametrize("b", [1, 2, 8, 64, 1024])
def test_div_and_mod_match_integer_division(a, b):
    assert div_pow_2(a, b) == a // b
    assert mod_pow_2(a, b) == a % b


def test_floor_log2_of_zero_raises():
    with pytest.raises(ValueError):
        floor_log2(0)


def test_negative_input_raises():
    with pytest.raises(ValueError):
        is_pow_2(-4)