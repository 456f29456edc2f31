"""Constant-time comparison of fixed-width unsigned integers.

Python ints are unbounded, so each width is a range-checked int subclass and
the comparators reject operands outside that width. Loop counts depend only on the width.
"""

import operator

from ctderive.core.capability import DEFAULT_REGISTRY, FieldComparator
from ctderive.core.choice import Choice


class Unsigned(int):
    """Base for fixed-width unsigned integer field types."""

    BITS = 0

    def __new__(cls, value: int = 0):
        value = operator.index(value)
        if not 0 <= value < (1 << cls.BITS):
            raise ValueError(f"{value} out of range for {cls.__name__}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"{type(self).__name__}({int(self)})"


class U8(Unsigned):
    BITS = 8


class U16(Unsigned):
    BITS = 16


class U32(Unsigned):
    BITS = 32


class U64(Unsigned):
    BITS = 64


class U128(Unsigned):
    BITS = 128


class UnsignedComparator(FieldComparator):
    """ct_eq / ct_gt / conditional_select for unsigned integers of `bits` width."""

    def __init__(self, bits: int):
        assert bits > 0
        self.bits = bits
        self.mask = (1 << bits) - 1

    def _check(self, a: int, b: int):
        # Out-of-range operands would be cut to the width and collide.
        if not (0 <= a <= self.mask and 0 <= b <= self.mask):
            raise ValueError(f"operand out of range for {self.bits}-bit comparison")

    def ct_eq(self, a: int, b: int) -> Choice:
        self._check(a, b)
        # x | -x has its top bit set iff x != 0
        x = a ^ b
        y = ((x | (-x & self.mask)) >> (self.bits - 1)) & 1
        return Choice(y ^ 1)

    def ct_gt(self, a: int, b: int) -> Choice:
        self._check(a, b)
        gtb = a & ~b & self.mask
        ltb = ~a & b & self.mask

        # Smear every a<b bit down over all lower positions.
        shift = 1
        while shift < self.bits:
            ltb |= ltb >> shift
            shift += shift

        # Keep the a>b bits not below any a<b bit, then smear to bit 0.
        bit = gtb & ~ltb
        shift = 1
        while shift < self.bits:
            bit |= bit >> shift
            shift += shift

        return Choice(bit & 1)

    def conditional_select(self, a: int, b: int, choice: Choice) -> int:
        """Return a if choice is 0, b if choice is 1."""
        mask = -choice.value & self.mask
        return (a ^ (mask & (a ^ b))) & self.mask


DEFAULT_REGISTRY.register(bool, UnsignedComparator(1))
for _t in (U8, U16, U32, U64, U128):
    DEFAULT_REGISTRY.register(_t, UnsignedComparator(_t.BITS))
