"""Fixed-width unsigned arithmetic and three-way comparison.

Results wrap modulo ``2**width``, as they would in a register of
``width`` bits.
"""

from enum import Enum


class Ordering(Enum):
    """Outcome of a three-way comparison."""

    EQUAL = 0
    LESS = 1
    GREATER = 2


def _check_operand(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")


def _mask(width: int) -> int:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return (1 << width) - 1


def add(a: int, b: int, width: int) -> int:
    """Return ``a + b`` truncated to ``width`` bits."""
    _check_operand(a, "left-side argument")
    _check_operand(b, "right-side argument")
    return (a + b) & _mask(width)


def sub(a: int, b: int, width: int) -> int:
    """Return ``a - b`` modulo ``2**width`` (borrows wrap around)."""
    _check_operand(a, "left-side argument")
    _check_operand(b, "right-side argument")
    return (a - b) & _mask(width)


def mul(a: int, b: int, width: int) -> int:
    """Return ``a * b`` truncated to ``width`` bits."""
    _check_operand(a, "left-side argument")
    _check_operand(b, "right-side argument")
    return (a * b) & _mask(width)


def compare(a: int, b: int) -> Ordering:
    """Compare two unsigned integers."""
    _check_operand(a, "left-side argument")
    _check_operand(b, "right-side argument")
    if a == b:
        return Ordering.EQUAL
    return Ordering.LESS if a < b else Ordering.GREATER