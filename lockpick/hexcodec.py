"""Conversion between hexadecimal strings and unsigned integers of fixed width."""

from typing import Optional

BITS_PER_HEX = 4

_DIGITS = "0123456789abcdef"


def hex_digit_value(char: str) -> int:
    """Return the value of a single hex digit (``0-9``, ``a-f``, ``A-F``)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    raise ValueError(f"invalid hex character: {char!r}")


def parse_hex(hex_str: str, width: int) -> int:
    """Parse ``hex_str`` into an unsigned integer of ``width`` bits.

    Digits are read from the right; digits above the width are dropped
    without being inspected. An empty string parses as zero.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    max_digits = -(-width // BITS_PER_HEX)
    tail = hex_str[-max_digits:] if hex_str else ""
    value = 0
    for char in tail:
        try:
            digit = hex_digit_value(char)
        except ValueError:
            raise ValueError(f"Failed to parse hex string: {hex_str}") from None
        value = (value << BITS_PER_HEX) | digit
    return value & ((1 << width) - 1)


def format_hex(value: int, limit: Optional[int] = None) -> str:
    """Render ``value`` as lower-case hex without leading zeros.

    Zero renders as ``"0"``. When ``limit`` is given, at most that many
    leading characters of the representation are returned.
    """
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    digits = []
    remaining = value
    while remaining:
        digits.append(_DIGITS[remaining & 0xF])
        remaining >>= BITS_PER_HEX
    text = "".join(reversed(digits)) or "0"
    return text if limit is None else text[:limit]