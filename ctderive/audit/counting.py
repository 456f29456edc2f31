"""Call-pattern audit: count and trace comparator invocations.

The derived operations must issue the same comparator calls, in the same
order, whatever the operand values. Wrapping each field's capability in a
CountingComparator makes that observable.
"""

from collections import defaultdict
from dataclasses import replace

from ctderive.circuits.composite import CompositeType
from ctderive.core.capability import FieldComparator


class CallMetrics:
    """Track comparator calls including per-operation counts and call order."""

    def __init__(self):
        self.calls = 0
        self.by_op: dict[str, int] = defaultdict(int)
        self.trace: list[tuple[str, str]] = []

    def record(self, op: str, label: str):
        self.calls += 1
        self.by_op[op] += 1
        self.trace.append((op, label))

    def reset(self):
        self.calls = 0
        self.by_op.clear()
        self.trace.clear()


class CountingComparator(FieldComparator):
    """Delegate to another comparator, recording every call in `metrics`."""

    def __init__(self, inner: FieldComparator, metrics: CallMetrics, label: str = ""):
        self.inner = inner
        self.metrics = metrics
        self.label = label

    @property
    def orderable(self):
        return self.inner.orderable

    def ct_eq(self, a, b):
        self.metrics.record("ct_eq", self.label)
        return self.inner.ct_eq(a, b)

    def ct_gt(self, a, b):
        self.metrics.record("ct_gt", self.label)
        return self.inner.ct_gt(a, b)


def instrument(composite: CompositeType, metrics: CallMetrics) -> CompositeType:
    """Wrap every bound field capability of a resolved composite.

    Fields must already carry a capability (see CompositeType.resolve).
    """
    fields = []
    for field in composite.fields:
        assert field.capability is not None, f"{composite.name}.{field.name} is unresolved"
        fields.append(replace(
            field, capability=CountingComparator(field.capability, metrics, field.name)))
    return CompositeType(composite.name, tuple(fields))
