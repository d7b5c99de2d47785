from __future__ import annotations
import math
import numbers
from collections.abc import Sequence as SequenceABC
from typing import Any, Iterator, List, Sequence, Tuple

import numpy as np

from combikit.array_util import array_or_array_like


def check_items(items: Any) -> int:
    """
    Items must be indexable by position (list, tuple, str, range, 1-D ndarray).
    Returns len(items).
    """
    if not isinstance(items, (SequenceABC, np.ndarray)):
        raise TypeError(f"items must be an indexable sequence, got {type(items).__name__}")
    return len(items)


def check_combination_size(n: int, k: Any) -> int:
    """
    Validates a combination size against the number of items.
    Size 0 is not a valid request. Returns k as plain int.
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise TypeError(f"k must be an int, got {type(k).__name__}")
    k = int(k)
    if k < 1:
        raise ValueError(f"k must be >= 1, got k={k}")
    if k > n:
        raise ValueError(f"k={k} exceeds the number of items (n={n})")
    return k


class LazyCombinations:
    """
    All k-sized combinations of items, in lexicographic order of their index tuples.
    Iterative: the state is a single index cursor, so k is not bounded by the recursion limit.
    Every iter() is a new pass over the (not snapshotted) items.
    """

    def __init__(self, items: Sequence[Any], k: int, yield_copy: bool = True):
        self.items: Sequence[Any] = items
        self.k: int = check_combination_size(check_items(items), k)
        self.yield_copy: bool = yield_copy

    def __len__(self) -> int:
        return math.comb(len(self.items), self.k)

    def indices(self) -> Iterator[Tuple[int, ...]]:
        k = self.k
        m = len(self.items)
        r = list(range(k))

        yield tuple(r)

        while True:
            i = k - 1
            while i >= 0 and r[i] == i + (m - k):
                i -= 1
            if i < 0:
                break  # last combination reached
            r[i] += 1
            for j in range(i + 1, k):
                r[j] = r[j - 1] + 1
            yield tuple(r)

    def __iter__(self) -> Iterator[List[Any]]:
        arr = self.items
        buf: List[Any] = []
        for r in self.indices():
            buf[:] = [arr[i] for i in r]
            # without copy, every step rewrites the same list
            yield array_or_array_like(buf) if self.yield_copy else buf
