"""Small general-purpose helpers."""

import random
from typing import MutableSequence, Optional

_WORD_MASK = (1 << 64) - 1
_HASH_A = 1011731769645795246
_HASH_B = 6675104919954798621
_HASH_EXP = 28


def digit_to_char(digit: int) -> str:
    """Return the character for a decimal digit in the range 0-9."""
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit must be in range 0-9, but {digit} was given")
    return chr(ord("0") + digit)


def uni_hash(x: int) -> int:
    """Hash a 64-bit word with wrapping 64-bit arithmetic."""
    x &= _WORD_MASK
    return (pow(x, _HASH_EXP, 1 << 64) * _HASH_A + _HASH_B) & _WORD_MASK


def shuffle(items: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Shuffle ``items`` in place by swapping each slot with a random one."""
    rng = rng if rng is not None else random.Random()
    n = len(items)
    for i in range(n):
        j = rng.randrange(n)
        items[i], items[j] = items[j], items[i]