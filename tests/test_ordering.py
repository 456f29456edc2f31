"""Tests for lexicographic ordering derivation."""

import pytest

from ctderive.circuits.composite import CompositeType
from ctderive.circuits.equality import CompositeEqualityBuilder
from ctderive.circuits.ordering import CompositeOrderingBuilder
from ctderive.core.capability import CapabilityRegistry
from ctderive.core.ct_int import U8, U16, UnsignedComparator
from ctderive.core.errors import MissingFieldCapability
from tests.utils import EqualityOnly, random_tuples, reference_greater


def build_all(types, name="T"):
    composite = CompositeType.positional(name, types)
    ordering = CompositeOrderingBuilder()
    return (CompositeEqualityBuilder().build(composite),
            ordering.build(composite),
            ordering.build_less(composite))


def test_empty_composite_not_greater():
    equal, greater, less = build_all([])
    assert equal((), ()).to_bool()
    assert not greater((), ()).to_bool()
    assert not less((), ()).to_bool()

def test_major_minor_scenarios():
    equal, greater, less = build_all([U16, U16], "Version")

    a, b = (1, 5), (1, 3)
    assert greater(a, b).to_bool()
    assert not greater(b, a).to_bool()
    assert not equal(a, b).to_bool()
    assert less(b, a).to_bool()

    # major decides even though minor points the other way
    a, b = (2, 0), (1, 9)
    assert greater(a, b).to_bool()
    assert not greater(b, a).to_bool()
    assert less(b, a).to_bool()

    a = b = (1, 5)
    assert equal(a, b).to_bool()
    assert not greater(a, b).to_bool()
    assert not less(a, b).to_bool()

def test_single_field_reduces_to_field_gt():
    _, greater, _ = build_all([U8])
    cmp = UnsignedComparator(8)
    for x in range(0, 256, 17):
        for y in range(0, 256, 13):
            assert greater((x,), (y,)).unwrap_u8() == cmp.ct_gt(x, y).unwrap_u8()

def test_all_fields_equal_is_not_greater():
    _, greater, _ = build_all([U8, U8, U8, U8])
    assert greater((9, 9, 9, 9), (9, 9, 9, 9)).unwrap_u8() == 0

def test_irreflexive():
    _, greater, less = build_all([U8, U8, U8])
    for value in random_tuples(11, 50, 3, 256):
        assert not greater(value, value).to_bool()
        assert not less(value, value).to_bool()

def test_matches_reference_and_trichotomy():
    equal, greater, less = build_all([U8, U8, U8])
    values = random_tuples(5, 30, 3, 3)
    for a in values:
        for b in values:
            gt = greater(a, b).to_bool()
            lt = greater(b, a).to_bool()
            eq = equal(a, b).to_bool()
            assert gt == reference_greater(a, b)
            assert less(a, b).to_bool() == lt
            assert [gt, lt, eq].count(True) == 1

def test_least_significant_field_breaks_tie():
    _, greater, _ = build_all([U8, U8, U8])
    assert greater((1, 1, 2), (1, 1, 1)).to_bool()
    assert not greater((1, 1, 1), (1, 1, 2)).to_bool()
    assert not greater((1, 1, 200), (1, 2, 0)).to_bool()

def test_missing_capability_fails_at_build_time():
    with pytest.raises(MissingFieldCapability) as exc:
        CompositeOrderingBuilder().build(CompositeType.positional("Bad", [int]))
    assert exc.value.ordering is True

def test_equality_only_field_cannot_be_ordered():
    reg = CapabilityRegistry()
    reg.register(str, EqualityOnly())
    composite = CompositeType.positional("Tagged", [str])
    CompositeEqualityBuilder(reg).build(composite)
    with pytest.raises(MissingFieldCapability):
        CompositeOrderingBuilder(reg).build(composite)
    with pytest.raises(MissingFieldCapability):
        CompositeOrderingBuilder(reg).build_less(composite)
