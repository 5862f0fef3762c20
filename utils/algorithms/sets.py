"""
Functions for working with sets.
"""

import itertools
import math
from collections.abc import Set
from typing import TypeVar

T = TypeVar("T")


def power_set(elements: Set[T]) -> list[frozenset[T]]:
    """
    Every subset of `elements`, smallest first.

    Subsets are grouped by size level: the empty set, then all
    singletons, then all pairs, etc. Within a level the order follows
    `itertools.combinations` over the iteration order of `elements`.

    Example:
        >>> power_set({1, 2})
        [frozenset(), frozenset({1}), frozenset({2}), frozenset({1, 2})]
    """
    items = list(elements)
    return [
        frozenset(subset)
        for size in range(len(items) + 1)
        for subset in itertools.combinations(items, size)
    ]


def binomial(n: int, k: int) -> int:
    """Number of subsets of size k in a set of size n. 0 outside 0 <= k <= n."""
    if k < 0 or k > n:
        return 0
    return math.comb(n, k)
