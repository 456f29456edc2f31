"""Describe record classes as CompositeType descriptor tables."""

import dataclasses
import enum
import typing

from ctderive.circuits.composite import CompositeType, FieldDescriptor
from ctderive.core.errors import UnsupportedShape


def _type_hints(cls) -> dict:
    try:
        return typing.get_type_hints(cls)
    except NameError:
        # Forward references that do not resolve stay as strings and fail lookup.
        return dict(getattr(cls, '__annotations__', {}))


def is_named_tuple(cls) -> bool:
    return isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, '_fields')


def describe(cls) -> CompositeType:
    """Build the ordered field table for a dataclass or a typed NamedTuple.

    Dataclass fields are read by attribute, NamedTuple fields by position.
    Every field takes part, including dataclass fields marked compare=False.
    """
    if not isinstance(cls, type):
        raise UnsupportedShape(f"expected a record class, got {cls!r}")
    if issubclass(cls, enum.Enum):
        raise UnsupportedShape(
            f"{cls.__name__}: enums have no fixed field list to compare")

    if dataclasses.is_dataclass(cls):
        hints = _type_hints(cls)
        return CompositeType(cls.__name__, tuple(
            FieldDescriptor.attribute(f.name, hints.get(f.name, f.type))
            for f in dataclasses.fields(cls)))

    if is_named_tuple(cls):
        hints = _type_hints(cls)
        return CompositeType(cls.__name__, tuple(
            FieldDescriptor.item(i, hints.get(name), name=name)
            for i, name in enumerate(cls._fields)))

    raise UnsupportedShape(
        f"{cls.__name__}: only dataclasses and typed NamedTuples can be derived")
