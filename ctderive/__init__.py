"""Constant-time equality and lexicographic ordering for composite records."""

from ctderive.core import (
    Choice, MissingFieldCapability, UnsupportedShape,
    FieldComparator, CapabilityRegistry, DEFAULT_REGISTRY,
    U8, U16, U32, U64, U128, UnsignedComparator,
)
from ctderive.circuits import (
    FieldDescriptor, CompositeType, CompositeEqualityBuilder, CompositeOrderingBuilder,
)
from ctderive.frontend import describe, derive_ct_eq, derive_ct_ord
