"""Test utilities: cleartext reference oracle, sample record types."""

import random
from dataclasses import dataclass
from typing import NamedTuple

from ctderive import U8, U16, FieldComparator, UnsignedComparator, derive_ct_ord


@derive_ct_ord
@dataclass(frozen=True)
class Version:
    major: U16
    minor: U16


@derive_ct_ord
class Triple(NamedTuple):
    a: U8
    b: U8
    c: U8


class EqualityOnly(FieldComparator):
    """Comparator with ct_eq but no ordering."""

    orderable = False

    def ct_eq(self, a, b):
        return UnsignedComparator(8).ct_eq(a, b)


def reference_equal(a, b) -> bool:
    return tuple(a) == tuple(b)


def reference_greater(a, b) -> bool:
    """Cleartext oracle: Python tuple comparison is lexicographic."""
    return tuple(a) > tuple(b)


def random_tuples(seed, count, width, high):
    """`count` tuples of `width` values in [0, high). Small `high` forces ties."""
    r = random.Random(seed)
    return [tuple(r.randrange(high) for _ in range(width)) for _ in range(count)]
