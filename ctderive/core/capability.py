"""Field comparator capabilities and the registry that resolves them by type."""

from ctderive.core.choice import Choice
from ctderive.core.errors import MissingFieldCapability


class FieldComparator:
    """Constant-time comparison capability for one field type.

    Subclasses implement ct_eq and, when orderable, ct_gt. Both must run in
    time independent of the operand values.
    """

    orderable = True

    def ct_eq(self, a, b) -> Choice:
        raise NotImplementedError

    def ct_gt(self, a, b) -> Choice:
        raise NotImplementedError


class ChoiceComparator(FieldComparator):
    """Compare Choice bits: equal when both bits match, greater when 1 > 0."""

    def ct_eq(self, a: Choice, b: Choice) -> Choice:
        return ~(a ^ b)

    def ct_gt(self, a: Choice, b: Choice) -> Choice:
        return a & ~b


class CapabilityRegistry:
    """Maps declared field types to their FieldComparator.

    Lookup is by exact type. A subclass never inherits its base's comparator,
    since a subclass may carry fields the base comparator does not see.
    A child registry falls back to its parent for types it does not define.
    """

    def __init__(self, parent: 'CapabilityRegistry | None' = None):
        self.parent = parent
        self._comparators: dict[object, FieldComparator] = {}

    def register(self, declared_type, comparator: FieldComparator):
        self._comparators[declared_type] = comparator

    def unregister(self, declared_type):
        self._comparators.pop(declared_type, None)

    def get(self, declared_type) -> FieldComparator | None:
        comparator = self._comparators.get(declared_type)
        if comparator is None and self.parent is not None:
            return self.parent.get(declared_type)
        return comparator

    def __contains__(self, declared_type) -> bool:
        return self.get(declared_type) is not None

    def lookup(self, declared_type, ordering: bool = False,
               composite: str = "?", field: str = "?") -> FieldComparator:
        """Resolve the comparator for declared_type or raise MissingFieldCapability."""
        comparator = self.get(declared_type)
        if comparator is None or (ordering and not comparator.orderable):
            raise MissingFieldCapability(composite, field, declared_type, ordering)
        return comparator

    def child(self) -> 'CapabilityRegistry':
        return CapabilityRegistry(parent=self)


DEFAULT_REGISTRY = CapabilityRegistry()
DEFAULT_REGISTRY.register(Choice, ChoiceComparator())
