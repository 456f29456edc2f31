"""Branch-free mask combinators shared by the composite builders."""

from ctderive.core.choice import Choice


def and_reduce(masks) -> Choice:
    """AND every mask together. The empty reduction is true."""
    acc = Choice.true()
    for mask in masks:
        acc = acc & mask
    return acc


def lexicographic_step(acc: Choice, eq: Choice, gt: Choice) -> Choice:
    """Fold one more-significant field into the already-resolved suffix.

    Greater here if this field is greater, or if it ties and the suffix is greater.
    """
    return gt | (eq & acc)
