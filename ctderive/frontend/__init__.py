"""Front end: record class introspection and derive decorators."""

from ctderive.frontend.shapes import describe, is_named_tuple
from ctderive.frontend.derive import DerivedComparator, derive_ct_eq, derive_ct_ord
