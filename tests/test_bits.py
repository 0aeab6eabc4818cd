"""Tests for gray_code.core.bits — encode/decode and the parity primitives."""

import numpy as np
import pytest
from gray_code.core.bits import (
    decode,
    encode,
    lowest_set_bit,
    parity_bit_count,
    parity_fold,
    parity_numpy,
)
from gray_code.core.types import resolve_width

U8 = resolve_width('uint8')
U16 = resolve_width('uint16')


def _samples(dtype: str, count: int = 2000) -> list[int]:
    """Seeded random values plus the edges for widths too big to walk."""
    width = resolve_width(dtype)
    rng = np.random.default_rng(1234)
    drawn = rng.integers(0, np.iinfo(width.dtype).max, size=count, dtype=width.dtype, endpoint=True)
    edges = [0, 1, 2, width.msb - 1, width.msb, width.msb + 1, width.mask - 1, width.mask]
    return edges + drawn.tolist()


class TestEncode:
    def test_known_values(self) -> None:
        assert encode(0, U8) == 0b0000
        assert encode(5, U8) == 0b0111
        assert encode(24, U16) == 0b10100
        assert encode(42, U8) == 0b111111

    def test_wraps_input(self) -> None:
        assert encode(256 + 5, U8) == encode(5, U8)

    def test_injective_uint16(self) -> None:
        codes = {encode(n, U16) for n in range(U16.mask + 1)}
        assert len(codes) == U16.mask + 1

    def test_adjacent_values_differ_in_one_bit(self) -> None:
        for n in range(U16.mask):
            assert (encode(n, U16) ^ encode(n + 1, U16)).bit_count() == 1


class TestDecode:
    @pytest.mark.parametrize('width', [U8, U16])
    def test_round_trip_exhaustive(self, width) -> None:
        for n in range(width.mask + 1):
            assert decode(encode(n, width), width) == n

    @pytest.mark.parametrize('dtype', ['uint32', 'uint64'])
    def test_round_trip_sampled(self, dtype: str) -> None:
        width = resolve_width(dtype)
        for n in _samples(dtype):
            assert decode(encode(n, width), width) == n

    def test_all_ones(self) -> None:
        assert decode(0xFF, U8) == 0b10101010


class TestLowestSetBit:
    def test_values(self) -> None:
        assert lowest_set_bit(0, U8) == 0
        assert lowest_set_bit(12, U8) == 4
        assert lowest_set_bit(0x80, U8) == 0x80
        assert lowest_set_bit(0xFF, U8) == 1


class TestParity:
    @pytest.mark.parametrize('backend', [parity_bit_count, parity_numpy])
    def test_backends_match_fold_uint16(self, backend) -> None:
        for pattern in range(U16.mask + 1):
            assert backend(pattern, U16) == parity_fold(pattern, U16)

    @pytest.mark.parametrize('backend', [parity_bit_count, parity_numpy])
    @pytest.mark.parametrize('dtype', ['uint32', 'uint64'])
    def test_backends_match_fold_sampled(self, backend, dtype: str) -> None:
        width = resolve_width(dtype)
        for pattern in _samples(dtype):
            assert backend(pattern, width) == parity_fold(pattern, width)

    def test_fold_counts_bits(self) -> None:
        assert parity_fold(0b0111, U8) is True
        assert parity_fold(0b0110, U8) is False
        assert parity_fold(0, U8) is False

    def test_parity_of_code_is_low_bit_of_value(self) -> None:
        for n in range(U8.mask + 1):
            assert parity_fold(encode(n, U8), U8) == bool(n & 1)
