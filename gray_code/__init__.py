"""gray-code — fixed-width unsigned integers stored in Gray code.

    from gray_code import GrayCode, gray, is_odd

    code = gray(np.uint8(5))   # pattern 0b0111
    code.increment()           # now stands for 6, pattern 0b0101
"""

from gray_code.core.arrays import decode_array, encode_array, gray_sequence, parity_array
from gray_code.core.bits import decode, encode
from gray_code.core.types import Width, resolve_width
from gray_code.gray import (
    GrayCode,
    gray,
    gray_range,
    is_even,
    is_odd,
    raw_and,
    raw_or,
    raw_xor,
    swap,
)

__all__ = [
    'GrayCode',
    'Width',
    'decode',
    'decode_array',
    'encode',
    'encode_array',
    'gray',
    'gray_range',
    'gray_sequence',
    'is_even',
    'is_odd',
    'parity_array',
    'raw_and',
    'raw_or',
    'raw_xor',
    'resolve_width',
    'swap',
]
