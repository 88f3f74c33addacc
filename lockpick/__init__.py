"""Fixed-width unsigned arithmetic, hex conversion, a growable vector and bit-math helpers."""

__version__ = "0.1.0"

__all__ = ["arith", "bitmath", "hexcodec", "styling", "utility", "vector"]