"""Descriptor tables for composite records: ordered fields and their accessors."""

import operator
from dataclasses import dataclass, replace
from typing import Any, Callable

from ctderive.core.capability import CapabilityRegistry, FieldComparator
from ctderive.core.errors import MissingFieldCapability


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a composite: how to read it from each operand, and its comparator."""
    name: str
    declared_type: Any
    accessor_left: Callable[[Any], Any]
    accessor_right: Callable[[Any], Any]
    capability: FieldComparator | None = None

    @classmethod
    def attribute(cls, name: str, declared_type,
                  capability: FieldComparator | None = None) -> 'FieldDescriptor':
        getter = operator.attrgetter(name)
        return cls(name, declared_type, getter, getter, capability)

    @classmethod
    def item(cls, index: int, declared_type, name: str | None = None,
             capability: FieldComparator | None = None) -> 'FieldDescriptor':
        getter = operator.itemgetter(index)
        return cls(name if name is not None else str(index),
                   declared_type, getter, getter, capability)


@dataclass(frozen=True)
class CompositeType:
    """Ordered field list of one record type. Field 0 is the most significant."""
    name: str
    fields: tuple[FieldDescriptor, ...] = ()

    def __len__(self):
        return len(self.fields)

    @classmethod
    def positional(cls, name: str, types) -> 'CompositeType':
        """Describe a tuple-shaped record whose i-th item has type types[i]."""
        return cls(name, tuple(FieldDescriptor.item(i, t) for i, t in enumerate(types)))

    def resolve(self, registry: CapabilityRegistry,
                ordering: bool = False) -> 'CompositeType':
        """Bind a comparator to every field.

        Fields that already carry a capability keep it. When ordering is
        requested that capability must itself be orderable. Raises
        MissingFieldCapability on the first field that cannot be compared.
        """
        bound = []
        for field in self.fields:
            capability = field.capability
            if capability is not None and ordering and not capability.orderable:
                raise MissingFieldCapability(self.name, field.name,
                                             field.declared_type, ordering)
            if capability is None:
                capability = registry.lookup(field.declared_type, ordering,
                                             composite=self.name, field=field.name)
            bound.append(replace(field, capability=capability))
        return CompositeType(self.name, tuple(bound))
