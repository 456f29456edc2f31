"""Tests that derived operations issue value-independent comparator calls."""

from ctderive.audit.counting import CallMetrics, instrument
from ctderive.circuits.composite import CompositeType
from ctderive.circuits.equality import CompositeEqualityBuilder
from ctderive.circuits.ordering import CompositeOrderingBuilder
from ctderive.core.capability import DEFAULT_REGISTRY
from ctderive.core.ct_int import U8
from tests.utils import random_tuples


def instrumented(n):
    metrics = CallMetrics()
    composite = CompositeType.positional("T", [U8] * n).resolve(
        DEFAULT_REGISTRY, ordering=True)
    return instrument(composite, metrics), metrics


def test_equality_calls_each_field_once():
    composite, metrics = instrumented(3)
    equal = CompositeEqualityBuilder().build(composite)
    seen = set()
    for a in random_tuples(2, 10, 3, 4):
        for b in random_tuples(3, 10, 3, 4):
            metrics.reset()
            equal(a, b)
            assert metrics.calls == 3
            assert metrics.by_op["ct_eq"] == 3
            assert metrics.by_op["ct_gt"] == 0
            seen.add(tuple(metrics.trace))
    assert len(seen) == 1

def test_greater_calls_each_field_once_per_op():
    composite, metrics = instrumented(4)
    greater = CompositeOrderingBuilder().build(composite)
    seen = set()
    values = random_tuples(4, 12, 4, 3) + [(0, 0, 0, 0), (255, 255, 255, 255)]
    for a in values:
        for b in values:
            metrics.reset()
            greater(a, b)
            assert metrics.by_op["ct_eq"] == 4
            assert metrics.by_op["ct_gt"] == 4
            seen.add(tuple(metrics.trace))
    assert len(seen) == 1
    # least significant field first
    assert next(iter(seen))[0] == ("ct_eq", "3")

def test_less_calls_each_field_once_per_op():
    composite, metrics = instrumented(2)
    less = CompositeOrderingBuilder().build_less(composite)
    for a in random_tuples(6, 8, 2, 3):
        for b in random_tuples(7, 8, 2, 3):
            metrics.reset()
            less(a, b)
            assert metrics.calls == 4

def test_empty_composite_makes_no_calls():
    composite, metrics = instrumented(0)
    CompositeOrderingBuilder().build(composite)((), ())
    CompositeEqualityBuilder().build(composite)((), ())
    assert metrics.calls == 0
