"""Generation-time errors raised while deriving composite comparators."""


class MissingFieldCapability(Exception):
    """A field's declared type has no usable constant-time comparator.

    Raised while building a derived operation, never while running one.
    Skipping the field instead would leave it out of the comparison, so the
    whole derivation is aborted.

    Attributes
    ----------
    composite : str
    field : str
    declared_type : object
    ordering : bool
        True when a ct_gt capability was required (ordering derivation).
    """

    def __init__(self, composite: str, field: str, declared_type,
                 ordering: bool = False):
        self.composite = composite
        self.field = field
        self.declared_type = declared_type
        self.ordering = ordering
        kind = "ordering" if ordering else "equality"
        type_name = getattr(declared_type, '__name__', repr(declared_type))
        super().__init__(
            f"{composite}.{field}: no constant-time {kind} comparator "
            f"registered for type {type_name}")


class UnsupportedShape(TypeError):
    """The class is not a fixed-shape record (dataclass or typed NamedTuple)."""
