"""Composite ordering: lexicographic constant-time greater-than / less-than.

Fields are compared in declared order, field 0 most significant. The fold runs
from the last field to the first:

    acc = false
    for i = n-1 .. 0:
        acc = gt_i | (eq_i & acc)

so a strict difference in a more significant field decides outright, and a tie
defers to the suffix already folded. Every field contributes exactly one ct_eq
and one ct_gt evaluation regardless of the operand values.
"""

import logging

from ctderive.circuits.combine import lexicographic_step
from ctderive.circuits.composite import CompositeType
from ctderive.core.capability import CapabilityRegistry, DEFAULT_REGISTRY
from ctderive.core.choice import Choice

logger = logging.getLogger(__name__)


class CompositeOrderingBuilder:
    """Build greater(a, b) and less(a, b) for a composite record type."""

    def __init__(self, registry: CapabilityRegistry | None = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def _resolve(self, composite: CompositeType):
        return tuple(reversed(composite.resolve(self.registry, ordering=True).fields))

    def build(self, composite: CompositeType):
        """Return greater(a, b) -> Choice, true iff a > b lexicographically."""
        suffix_first = self._resolve(composite)

        def greater(a, b):
            acc = Choice.false()
            for f in suffix_first:
                x, y = f.accessor_left(a), f.accessor_right(b)
                eq = f.capability.ct_eq(x, y)
                gt = f.capability.ct_gt(x, y)
                acc = lexicographic_step(acc, eq, gt)
            return acc

        greater.__name__ = greater.__qualname__ = f"{composite.name}_ct_gt"
        logger.debug("built ct_gt for %s over %d field(s)",
                     composite.name, len(suffix_first))
        return greater

    def build_less(self, composite: CompositeType):
        """Return less(a, b) -> Choice, computed as not (a > b or a == b).

        Equality and greater-than accumulate in the same pass, so each field
        still sees one ct_eq and one ct_gt call.
        """
        suffix_first = self._resolve(composite)

        def less(a, b):
            acc = Choice.false()
            all_eq = Choice.true()
            for f in suffix_first:
                x, y = f.accessor_left(a), f.accessor_right(b)
                eq = f.capability.ct_eq(x, y)
                gt = f.capability.ct_gt(x, y)
                acc = lexicographic_step(acc, eq, gt)
                all_eq = all_eq & eq
            return ~(acc | all_eq)

        less.__name__ = less.__qualname__ = f"{composite.name}_ct_lt"
        logger.debug("built ct_lt for %s over %d field(s)",
                     composite.name, len(suffix_first))
        return less
