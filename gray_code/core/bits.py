"""Scalar bit primitives: encode, decode and parity on W-bit patterns.

Every function takes the pattern as a Python int plus the Width it lives in.
Inputs are reduced to W bits first, so all of them are total.
"""

import numpy as np

from gray_code.core.types import Width


def encode(binary: int, width: Width) -> int:
    """Binary value -> Gray pattern."""
    binary = width.wrap(binary)
    return binary ^ (binary >> 1)


def decode(gray: int, width: Width) -> int:
    """Gray pattern -> binary value, the exact inverse of encode()."""
    gray = width.wrap(gray)
    mask = width.bits // 2
    while mask:
        gray ^= gray >> mask
        mask >>= 1
    return gray


def lowest_set_bit(pattern: int, width: Width) -> int:
    """pattern & -pattern in W-bit two's complement; 0 for 0."""
    pattern = width.wrap(pattern)
    return pattern & width.wrap(-pattern)


def parity_fold(pattern: int, width: Width) -> bool:
    """Odd population count, by XOR-folding down to bit 0.

    This is the reference the faster backends are checked against.
    """
    pattern = width.wrap(pattern)
    mask = width.bits // 2
    while mask:
        pattern ^= pattern >> mask
        mask >>= 1
    return bool(pattern & 1)


def parity_bit_count(pattern: int, width: Width) -> bool:
    return bool(width.wrap(pattern).bit_count() & 1)


def parity_numpy(pattern: int, width: Width) -> bool:
    return bool(np.bitwise_count(width.scalar(width.wrap(pattern))) & 1)
