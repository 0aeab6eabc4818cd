"""Shared types for gray-code: Width and the dtype resolution behind it."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np

DEFAULT_DTYPE = np.dtype(np.uint32)


@dataclass(frozen=True)
class Width:
    """The fixed-width unsigned integer type a Gray code is stored in."""

    dtype: np.dtype
    bits: int  # W
    mask: int  # 2**W - 1
    msb: int  # 1 << (W - 1)

    @property
    def name(self) -> str:
        return self.dtype.name

    def wrap(self, value: int) -> int:
        """Reduce an arbitrary Python int to W bits (unsigned conversion)."""
        return value & self.mask

    def scalar(self, value: int) -> np.unsignedinteger:
        """Box an in-range int as a numpy scalar of this width."""
        return self.dtype.type(value)


@lru_cache(maxsize=None)
def _width_for(dtype: np.dtype) -> Width:
    bits = dtype.itemsize * 8
    return Width(dtype=dtype, bits=bits, mask=(1 << bits) - 1, msb=1 << (bits - 1))


def resolve_width(dtype: Any = None) -> Width:
    """Return the Width for a numpy unsigned dtype spec.

    Accepts anything numpy.dtype() accepts (np.uint16, 'uint8', 'u2', a dtype
    instance) or an existing Width. None means the default, uint32.
    """
    if isinstance(dtype, Width):
        return dtype
    resolved = DEFAULT_DTYPE if dtype is None else np.dtype(dtype)
    if resolved.kind != 'u':
        raise TypeError(f'Gray codes need an unsigned integer dtype, got {resolved.name}')
    return _width_for(resolved)
