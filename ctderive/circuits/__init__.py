"""Composite circuits: descriptor tables, mask combinators, equality and ordering builders."""

from ctderive.circuits.composite import FieldDescriptor, CompositeType
from ctderive.circuits.combine import and_reduce, lexicographic_step
from ctderive.circuits.equality import CompositeEqualityBuilder
from ctderive.circuits.ordering import CompositeOrderingBuilder
