"""The GrayCode value type.

A GrayCode holds one W-bit pattern, `representation`, which is the Gray code
of the binary value it stands for:

    code = GrayCode(24, dtype=np.uint16)
    int(code)             # 24 (0b11000)
    code.representation   # 20 (0b10100)

Named methods (increment, bit_and, equals, ...) carry the behaviour; the
operator overloads are thin wrappers over them.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

import numpy as np

from gray_code import registry
from gray_code.core.bits import decode, encode, lowest_set_bit
from gray_code.core.types import resolve_width

_BOOLS = (bool, np.bool_)
_INTS = (int, np.integer)


class GrayCode:
    """Unsigned fixed-width integer stored in Gray code.

    Construction:
      GrayCode()                 zero
      GrayCode(5)                binary 5, stored as 0b0111
      GrayCode(True)             pattern 1 (0 and 1 are their own Gray codes)
      GrayCode(np.uint8(5))      width taken from the numpy scalar
      GrayCode.from_bits(bits)   raw pattern, stored verbatim
    """

    __slots__ = ('_rep', '_width')

    # Make numpy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    # Mutable, and equal to plain ints with a different hash
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = 0, dtype: Any = None) -> None:
        if isinstance(value, GrayCode):
            self._width = value._width if dtype is None else resolve_width(dtype)
            if self._width == value._width:
                self._rep = value._rep
            else:
                # A truncated pattern would stand for another number; convert by value
                self._rep = encode(value.value, self._width)
        elif isinstance(value, _BOOLS):
            self._width = resolve_width(dtype)
            self._rep = int(bool(value))
        elif isinstance(value, np.unsignedinteger):
            self._width = resolve_width(value.dtype if dtype is None else dtype)
            self._rep = encode(int(value), self._width)
        elif isinstance(value, _INTS):
            self._width = resolve_width(dtype)
            self._rep = encode(int(value), self._width)
        else:
            raise TypeError(f'Cannot build a GrayCode from {type(value).__name__}')

    # ── Alternate constructors ──────────────────────────────────

    @classmethod
    def from_representation(cls, pattern: int, dtype: Any = None) -> GrayCode:
        """Take an int as the Gray pattern itself, no encoding."""
        code = cls(0, dtype)
        code._rep = code._width.wrap(operator.index(pattern))
        return code

    @classmethod
    def from_bits(cls, pattern: Any, dtype: Any = None) -> GrayCode:
        """Take a bit array (index i = bit i) as the Gray pattern, no encoding.

        The array must hold at least W bits; bits past W are dropped.
        """
        width = resolve_width(dtype)
        arr = np.asarray(pattern)
        if arr.ndim != 1:
            raise ValueError(f'Bit pattern must be one-dimensional, got shape {arr.shape}')
        if arr.shape[0] < width.bits:
            raise ValueError(f'Bit pattern has {arr.shape[0]} bits, {width.name} needs at least {width.bits}')
        rep = 0
        for i in np.flatnonzero(arr[: width.bits].astype(bool)):
            rep |= 1 << int(i)
        return cls.from_representation(rep, width.dtype)

    # ── Fields and conversions ──────────────────────────────────

    @property
    def representation(self) -> int:
        return self._rep

    @representation.setter
    def representation(self, pattern: int) -> None:
        self._rep = self._width.wrap(operator.index(pattern))

    @property
    def value(self) -> int:
        """The binary value this code stands for."""
        return decode(self._rep, self._width)

    @property
    def dtype(self) -> np.dtype:
        return self._width.dtype

    @property
    def width(self) -> int:
        return self._width.bits

    def to_bits(self) -> np.ndarray:
        """The raw pattern as a length-W bool array, least significant bit first."""
        w = self._width
        shifts = np.arange(w.bits, dtype=w.dtype)
        return ((w.scalar(self._rep) >> shifts) & w.dtype.type(1)).astype(bool)

    def copy(self) -> GrayCode:
        return GrayCode(self)

    def __copy__(self) -> GrayCode:
        return self.copy()

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self._rep != 0

    def __repr__(self) -> str:
        return f"GrayCode({self.value}, dtype='{self._width.name}')"

    # ── Assignment ──────────────────────────────────────────────

    def assign(self, other: Any) -> GrayCode:
        """Replace the value: a GrayCode is copied, an int encoded, a bool taken as 0/1."""
        if isinstance(other, GrayCode):
            self._rep = self._pattern_of(other)
        elif isinstance(other, _BOOLS):
            self._rep = int(bool(other))
        elif isinstance(other, _INTS):
            self._rep = encode(int(other), self._width)
        else:
            raise TypeError(f'Cannot assign {type(other).__name__} to a GrayCode')
        return self

    # ── Increment / decrement ───────────────────────────────────

    def increment(self) -> GrayCode:
        """Step to the code of value + 1 in place, wrapping max -> 0."""
        w = self._width
        if is_odd(self):
            if self._rep == w.msb:
                self._rep = 0
            else:
                self._rep = w.wrap(self._rep ^ (lowest_set_bit(self._rep, w) << 1))
        else:
            self._rep ^= 1
        return self

    def decrement(self) -> GrayCode:
        """Step to the code of value - 1 in place, wrapping 0 -> max."""
        w = self._width
        if is_odd(self):
            self._rep ^= 1
        elif self._rep == 0:
            self._rep = w.msb
        else:
            self._rep = w.wrap(self._rep ^ (lowest_set_bit(self._rep, w) << 1))
        return self

    def post_increment(self) -> GrayCode:
        """Increment in place and return the value from before the step."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> GrayCode:
        """Decrement in place and return the value from before the step."""
        before = self.copy()
        self.decrement()
        return before

    # ── Comparison ──────────────────────────────────────────────

    def equals(self, other: Any) -> bool:
        """Same pattern as another code, or stands for the given binary int."""
        if isinstance(other, GrayCode):
            return other._width == self._width and other._rep == self._rep
        return self.equals_raw(other)

    def equals_raw(self, other: Any) -> bool:
        if isinstance(other, _BOOLS):
            return self._rep == int(bool(other))
        if isinstance(other, _INTS):
            n = int(other)
            return 0 <= n <= self._width.mask and encode(n, self._width) == self._rep
        raise TypeError(f'Cannot compare GrayCode with {type(other).__name__}')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (GrayCode, *_BOOLS, *_INTS)):
            return NotImplemented
        return self.equals(other)

    def _unordered(self, other: object) -> bool:
        raise TypeError('Gray codes have no numeric order; compare int(code) values instead')

    __lt__ = __le__ = __gt__ = __ge__ = _unordered

    # ── Bitwise operations ──────────────────────────────────────

    def _pattern_of(self, other: Any) -> int:
        """Raw W-bit pattern of an operand: a code's representation, an int's own bits."""
        if isinstance(other, GrayCode):
            if other._width != self._width:
                raise TypeError(f'Cannot combine {self._width.name} and {other._width.name} Gray codes')
            return other._rep
        if isinstance(other, _BOOLS):
            return int(bool(other))
        if isinstance(other, _INTS):
            return self._width.wrap(int(other))
        raise TypeError(f'Unsupported operand for GrayCode: {type(other).__name__}')

    def _shift_count(self, pos: Any) -> int:
        pos = operator.index(pos)
        if pos < 0:
            raise ValueError(f'negative shift count {pos}')
        return pos

    def and_assign(self, other: Any) -> GrayCode:
        self._rep &= self._pattern_of(other)
        return self

    def or_assign(self, other: Any) -> GrayCode:
        self._rep |= self._pattern_of(other)
        return self

    def xor_assign(self, other: Any) -> GrayCode:
        self._rep ^= self._pattern_of(other)
        return self

    def shift_left_assign(self, pos: Any) -> GrayCode:
        pos = self._shift_count(pos)
        self._rep = 0 if pos >= self._width.bits else self._width.wrap(self._rep << pos)
        return self

    def shift_right_assign(self, pos: Any) -> GrayCode:
        pos = self._shift_count(pos)
        self._rep = 0 if pos >= self._width.bits else self._rep >> pos
        return self

    def bit_and(self, other: Any) -> GrayCode:
        return self.copy().and_assign(other)

    def bit_or(self, other: Any) -> GrayCode:
        return self.copy().or_assign(other)

    def bit_xor(self, other: Any) -> GrayCode:
        return self.copy().xor_assign(other)

    def bit_not(self) -> GrayCode:
        return GrayCode.from_representation(self._rep ^ self._width.mask, self._width.dtype)

    def shift_left(self, pos: Any) -> GrayCode:
        return self.copy().shift_left_assign(pos)

    def shift_right(self, pos: Any) -> GrayCode:
        return self.copy().shift_right_assign(pos)

    def _supports(self, other: object) -> bool:
        return isinstance(other, (GrayCode, *_BOOLS, *_INTS))

    def __and__(self, other: Any) -> GrayCode:
        return self.bit_and(other) if self._supports(other) else NotImplemented

    def __or__(self, other: Any) -> GrayCode:
        return self.bit_or(other) if self._supports(other) else NotImplemented

    def __xor__(self, other: Any) -> GrayCode:
        return self.bit_xor(other) if self._supports(other) else NotImplemented

    def __iand__(self, other: Any) -> GrayCode:
        return self.and_assign(other) if self._supports(other) else NotImplemented

    def __ior__(self, other: Any) -> GrayCode:
        return self.or_assign(other) if self._supports(other) else NotImplemented

    def __ixor__(self, other: Any) -> GrayCode:
        return self.xor_assign(other) if self._supports(other) else NotImplemented

    # bool on the left gives a GrayCode; a plain integer on the left stays an
    # integer, so `n &= code` updates n in place
    def __rand__(self, other: Any) -> Any:
        if isinstance(other, _BOOLS):
            return self.bit_and(other)
        return raw_and(other, self) if isinstance(other, _INTS) else NotImplemented

    def __ror__(self, other: Any) -> Any:
        if isinstance(other, _BOOLS):
            return self.bit_or(other)
        return raw_or(other, self) if isinstance(other, _INTS) else NotImplemented

    def __rxor__(self, other: Any) -> Any:
        if isinstance(other, _BOOLS):
            return self.bit_xor(other)
        return raw_xor(other, self) if isinstance(other, _INTS) else NotImplemented

    def __invert__(self) -> GrayCode:
        return self.bit_not()

    def __lshift__(self, pos: Any) -> GrayCode:
        return self.shift_left(pos)

    def __rshift__(self, pos: Any) -> GrayCode:
        return self.shift_right(pos)

    def __ilshift__(self, pos: Any) -> GrayCode:
        return self.shift_left_assign(pos)

    def __irshift__(self, pos: Any) -> GrayCode:
        return self.shift_right_assign(pos)


def gray(value: Any, dtype: Any = None) -> GrayCode:
    """Build a GrayCode, taking the width from a numpy scalar when no dtype is given."""
    return GrayCode(value, dtype)


def gray_range(start: Any, stop: Any, dtype: Any = None) -> Iterator[GrayCode]:
    """Yield the codes of binary start, start + 1, ... up to but excluding stop.

    Steps with increment(), so a stop below start wraps through max -> 0.
    A stop of start + 2**W walks one full cycle.
    """
    code = GrayCode(start, dtype)
    span = int(stop) - int(start)
    steps = span % (code._width.mask + 1)
    if steps == 0 and span != 0:
        steps = code._width.mask + 1
    for _ in range(steps):
        yield code.copy()
        code.increment()


def raw_and(lhs: Any, rhs: GrayCode) -> int:
    """Plain integer `lhs & rhs.representation`, lhs reduced to the code's width."""
    return rhs._width.wrap(int(lhs)) & rhs._rep


def raw_or(lhs: Any, rhs: GrayCode) -> int:
    return rhs._width.wrap(int(lhs)) | rhs._rep


def raw_xor(lhs: Any, rhs: GrayCode) -> int:
    return rhs._width.wrap(int(lhs)) ^ rhs._rep


def swap(lhs: GrayCode, rhs: GrayCode) -> None:
    """Exchange two codes' patterns in place."""
    lhs._rep, rhs._rep = rhs._rep, lhs._rep
    lhs._width, rhs._width = rhs._width, lhs._width


def is_odd(code: GrayCode) -> bool:
    """True when the pattern has an odd number of set bits, i.e. the value is odd."""
    return registry.active()(code._rep, code._width)


def is_even(code: GrayCode) -> bool:
    return not is_odd(code)
