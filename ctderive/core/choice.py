"""Choice: an opaque single-bit mask produced by constant-time comparisons."""


class Choice:
    """Result bit of a constant-time comparison (1 = true, 0 = false).

    Combine with &, |, ^ and ~. Never branch on a Choice inside comparison
    code: boolean contexts raise TypeError. The final consumer reads the bit
    with unwrap_u8() or to_bool().
    """

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value & 1

    def __and__(self, other: 'Choice') -> 'Choice':
        return Choice(self.value & other.value)

    def __or__(self, other: 'Choice') -> 'Choice':
        return Choice(self.value | other.value)

    def __xor__(self, other: 'Choice') -> 'Choice':
        return Choice(self.value ^ other.value)

    def __invert__(self) -> 'Choice':
        return Choice(self.value ^ 1)

    def __bool__(self):
        raise TypeError(
            "Choice cannot be used in a boolean context; "
            "call to_bool() on the final result")

    def __repr__(self):
        return f"Choice({self.value})"

    def unwrap_u8(self) -> int:
        return self.value

    def to_bool(self) -> bool:
        """Reveal the bit. Only the caller of a derived operation should do this."""
        return self.value == 1

    @staticmethod
    def conditional_select(a: 'Choice', b: 'Choice', choice: 'Choice') -> 'Choice':
        """Return a if choice is 0, b if choice is 1, without branching."""
        mask = -choice.value
        return Choice(a.value ^ (mask & (a.value ^ b.value)))

    @staticmethod
    def true():
        return Choice(1)

    @staticmethod
    def false():
        return Choice(0)
