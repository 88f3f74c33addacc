# lockpick

Fixed-width unsigned arithmetic on plain Python integers, hexadecimal conversion,
a growable vector with explicit capacity, and a few small bit-math and text helpers.

## What is inside

- `lockpick.arith`: `add(a, b, width)`, `sub(a, b, width)` and `mul(a, b, width)`
  return results modulo `2**width`, the way a register of `width` bits would hold
  them. `compare(a, b)` returns an `Ordering` (`EQUAL`, `LESS` or `GREATER`).
  Negative operands and non-positive widths raise `ValueError`.
- `lockpick.hexcodec`: `hex_digit_value(char)` gives the value of one hex digit.
  `parse_hex(hex_str, width)` reads a hex string from the right into a `width`-bit
  integer. Digits above the width are dropped, and an empty string is zero.
  `format_hex(value, limit=None)` renders lower-case hex without leading zeros, with
  zero rendered as `"0"`. It can cut the result to `limit` leading characters.
- `lockpick.vector`: `Vector`, a dynamic array with a `capacity` property. The capacity
  doubles when the vector is full. It shrinks when the vector is used at less than a
  quarter of it, and resets to 1 on `clear()`. The class has `append`, `pop`, `back`,
  `clear`, `reserve` and `remove_at`, and supports `len()`, indexing, iteration and
  truth testing.
- `lockpick.bitmath`: `is_pow_2`, `exact_log2`, `floor_log2`, `ceil_log2`,
  `ceil_pow2`, `div_pow_2`, `mod_pow_2`.
- `lockpick.utility`: `digit_to_char(digit)` for digits 0-9. `uni_hash(x)` is a hash
  using wrapping 64-bit arithmetic. `shuffle(items, rng=None)` shuffles a list in place
  by swapping each slot with a random one.
- `lockpick.styling`: `styled(text, color, style)` wraps text in ANSI escape codes. It
  takes values of the `Color` and `Style` enums.

## Installation

```
pip install .
```

## Example

```python
from lockpick.arith import add, sub, compare, Ordering
from lockpick.hexcodec import parse_hex, format_hex

a = parse_hex("ffffffffffffffff", 128)
total = add(a, 1, 128)
print(format_hex(total))          # 10000000000000000
print(sub(0, 1, 8))               # 255
print(compare(1, 2) is Ordering.LESS)  # True

from lockpick.vector import Vector

vec = Vector(0)
for i in range(5):
    vec.append(i)
print(vec.back(), len(vec), vec.capacity)   # 4 5 8

from lockpick.styling import styled, Color, Style

print(styled("done", Color.GREEN, Style.BOLD))
```

## What it does not do

The package has no fixed-width integer object type. Every operation works on plain
Python `int` values, and the caller passes the width each time. There are no bitwise
or shift operations, and no random-value generation for fixed widths.

## Running the tests

```
pip install .[test]
pytest
```