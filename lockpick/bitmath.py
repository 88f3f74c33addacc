"""Bit-level helpers for powers of two and base-2 logarithms."""


def _require_non_negative(x: int) -> None:
    if x < 0:
        raise ValueError(f"expected a non-negative integer, got {x}")


def _require_positive(x: int) -> None:
    if x <= 0:
        raise ValueError(f"expected a positive integer, got {x}")


def is_pow_2(x: int) -> bool:
    """Return True if exactly one bit of ``x`` is set."""
    _require_non_negative(x)
    return x.bit_count() == 1 if hasattr(x, "bit_count") else bin(x).count("1") == 1


def exact_log2(x: int) -> int:
    """Return the index of the lowest set bit of ``x``, or -1 for zero."""
    _require_non_negative(x)
    return (x & -x).bit_length() - 1


def floor_log2(x: int) -> int:
    """Return the index of the highest set bit of ``x``."""
    _require_positive(x)
    return x.bit_length() - 1


def ceil_log2(x: int) -> int:
    """Return the smallest ``k`` such that ``2**k >= x``."""
    return floor_log2(x) + (0 if is_pow_2(x) else 1)


def ceil_pow2(x: int) -> int:
    """Return the smallest power of two not less than ``x``."""
    return 1 << ceil_log2(x)


def div_pow_2(a: int, b: int) -> int:
    """Divide ``a`` by the power of two ``b`` using a shift."""
    _require_non_negative(a)
    return a >> floor_log2(b)


def mod_pow_2(a: int, b: int) -> int:
    """Return ``a`` modulo the power of two ``b`` using a mask."""
    _require_non_negative(a)
    _require_non_negative(b)
    return a & (b - 1)