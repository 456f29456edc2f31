"""Composite equality: AND-reduction of per-field constant-time equality."""

import logging

from ctderive.circuits.combine import and_reduce
from ctderive.circuits.composite import CompositeType
from ctderive.core.capability import CapabilityRegistry, DEFAULT_REGISTRY

logger = logging.getLogger(__name__)


class CompositeEqualityBuilder:
    """Build equal(a, b) -> Choice for a composite record type."""

    def __init__(self, registry: CapabilityRegistry | None = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def build(self, composite: CompositeType):
        """Return the derived equality operation.

        Every field's ct_eq is evaluated exactly once per call, with no early
        exit. Field order does not affect the result. Raises
        MissingFieldCapability if a field type has no comparator.
        """
        fields = composite.resolve(self.registry).fields

        def equal(a, b):
            return and_reduce(
                f.capability.ct_eq(f.accessor_left(a), f.accessor_right(b))
                for f in fields)

        equal.__name__ = equal.__qualname__ = f"{composite.name}_ct_eq"
        logger.debug("built ct_eq for %s over %d field(s)", composite.name, len(fields))
        return equal
