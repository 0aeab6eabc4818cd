"""Vectorised Gray-code helpers for numpy arrays.

Same transforms as gray_code.core.bits, applied element-wise. Arrays keep
their unsigned dtype so shifts and XORs wrap exactly as the scalar code does.
"""

from typing import Any

import numpy as np

from gray_code.core.types import Width, resolve_width


def _as_unsigned(values: Any, dtype: Any = None) -> tuple[np.ndarray, Width]:
    arr = np.asarray(values)
    if arr.dtype.kind not in 'biu':
        raise TypeError(f'Expected an integer array, got dtype {arr.dtype.name}')
    if dtype is None:
        # Signed and bool input reuse their item size, so nothing is narrowed
        width = resolve_width(np.dtype(f'u{arr.dtype.itemsize}'))
    else:
        width = resolve_width(dtype)
    # astype wraps out-of-range values modulo 2**W, like the scalar Width.wrap
    return arr.astype(width.dtype, copy=True), width


def encode_array(values: Any, dtype: Any = None) -> np.ndarray:
    """Element-wise binary -> Gray.

    Without a dtype the result is the unsigned type of the input's item size
    (int64 -> uint64, bool -> uint8); negative values wrap modulo 2**W.
    """
    arr, _width = _as_unsigned(values, dtype)
    return arr ^ (arr >> 1)


def decode_array(codes: Any, dtype: Any = None) -> np.ndarray:
    """Element-wise Gray -> binary, XOR-folding from W/2 down to 1."""
    arr, width = _as_unsigned(codes, dtype)
    mask = width.bits // 2
    while mask:
        arr ^= arr >> mask
        mask >>= 1
    return arr


def parity_array(codes: Any, dtype: Any = None) -> np.ndarray:
    """Boolean array, True where the pattern has an odd number of set bits."""
    arr, _width = _as_unsigned(codes, dtype)
    return (np.bitwise_count(arr) & 1).astype(bool)


def gray_sequence(count: int, dtype: Any = None) -> np.ndarray:
    """The first `count` Gray codes in counting order, wrapping after 2**W."""
    width = resolve_width(dtype)
    if count < 0:
        raise ValueError(f'count must be non-negative, got {count}')
    binary = np.arange(count, dtype=np.uint64).astype(width.dtype)
    return binary ^ (binary >> 1)
