"""Class decorators that install constant-time comparison methods on records.

    @derive_ct_ord
    @dataclass(frozen=True)
    class Version:
        major: U16
        minor: U16

    Version(1, 5).ct_gt(Version(1, 3)).to_bool()   # True

Derived classes are registered as field types, so they nest inside other
derived records.
"""

import logging

from ctderive.circuits.equality import CompositeEqualityBuilder
from ctderive.circuits.ordering import CompositeOrderingBuilder
from ctderive.core.capability import CapabilityRegistry, DEFAULT_REGISTRY, FieldComparator
from ctderive.core.choice import Choice
from ctderive.frontend.shapes import describe

logger = logging.getLogger(__name__)


class DerivedComparator(FieldComparator):
    """Capability backed by the derived operations of a record class."""

    def __init__(self, equal, greater=None):
        self._equal = equal
        self._greater = greater
        self.orderable = greater is not None

    def ct_eq(self, a, b) -> Choice:
        return self._equal(a, b)

    def ct_gt(self, a, b) -> Choice:
        if self._greater is None:
            raise TypeError("derived with equality only; no ct_gt available")
        return self._greater(a, b)


def _install(cls, name: str, op):
    def method(self, other):
        if type(self) is not cls or type(other) is not cls:
            raise TypeError(
                f"{name}() compares two {cls.__name__} values, "
                f"got {type(self).__name__} and {type(other).__name__}")
        return op(self, other)

    method.__name__ = name
    method.__qualname__ = f"{cls.__qualname__}.{name}"
    setattr(cls, name, method)


def _negate(op):
    def negated(a, b):
        return ~op(a, b)
    return negated


def derive_ct_eq(cls=None, *, registry: CapabilityRegistry | None = None):
    """Install ct_eq and ct_ne on a record class."""
    def wrap(cls):
        reg = registry if registry is not None else DEFAULT_REGISTRY
        equal = CompositeEqualityBuilder(reg).build(describe(cls))
        _install(cls, 'ct_eq', equal)
        _install(cls, 'ct_ne', _negate(equal))
        # Keep an orderable registration from a derive_ct_ord applied first.
        if cls not in reg:
            reg.register(cls, DerivedComparator(equal))
        logger.debug("derived ct_eq for %s", cls.__qualname__)
        return cls

    if cls is None:
        return wrap
    return wrap(cls)


def derive_ct_ord(cls=None, *, registry: CapabilityRegistry | None = None):
    """Install ct_eq, ct_ne, ct_gt and ct_lt on a record class."""
    def wrap(cls):
        reg = registry if registry is not None else DEFAULT_REGISTRY
        composite = describe(cls)
        equal = CompositeEqualityBuilder(reg).build(composite)
        ordering = CompositeOrderingBuilder(reg)
        greater = ordering.build(composite)
        less = ordering.build_less(composite)
        _install(cls, 'ct_eq', equal)
        _install(cls, 'ct_ne', _negate(equal))
        _install(cls, 'ct_gt', greater)
        _install(cls, 'ct_lt', less)
        reg.register(cls, DerivedComparator(equal, greater))
        logger.debug("derived ct_eq/ct_gt/ct_lt for %s", cls.__qualname__)
        return cls

    if cls is None:
        return wrap
    return wrap(cls)
