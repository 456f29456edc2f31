"""Core primitives: Choice masks, comparator capabilities, fixed-width integers."""

from ctderive.core.choice import Choice
from ctderive.core.errors import MissingFieldCapability, UnsupportedShape
from ctderive.core.capability import (
    FieldComparator, ChoiceComparator, CapabilityRegistry, DEFAULT_REGISTRY,
)
from ctderive.core.ct_int import (
    Unsigned, U8, U16, U32, U64, U128, UnsignedComparator,
)
