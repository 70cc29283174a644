"""Jaccard similarity between two label sets."""

from fractions import Fraction
from typing import Iterable


def jaccard_ratio(a: Iterable[str], b: Iterable[str]) -> Fraction:
    """Return |a & b| / |a | b| as an exact fraction in [0, 1].

    Two empty sets have similarity 0 rather than an undefined ratio.
    """
    set_a = frozenset(a)
    set_b = frozenset(b)

    union = set_a | set_b
    if not union:
        return Fraction(0)

    return Fraction(len(set_a & set_b), len(union))


def similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Jaccard similarity scaled to a 0-100 percentage.

    Labels are matched by exact string equality: "Coffee" and "coffee"
    are different labels.

    Args:
        a: First label collection (duplicates are ignored)
        b: Second label collection

    Returns:
        Percentage from 0.0 to 100.0
    """
    return float(jaccard_ratio(a, b) * 100)
