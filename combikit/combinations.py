from __future__ import annotations
import math
from typing import Any, Iterator, List, Optional, Sequence

import numpy as np
from tqdm.auto import tqdm

from combikit.array_util import array_or_array_like
from combikit.combinations_conf import CombinationsConfig
from combikit.lazy_combinations import LazyCombinations, check_combination_size, check_items


def _pbar(iterable, cfg: CombinationsConfig, **kwargs):
    return tqdm(iterable, **kwargs) if cfg.progress else iterable


def _resolve_cfg(cfg: Optional[CombinationsConfig]) -> CombinationsConfig:
    cfg = cfg if cfg is not None else CombinationsConfig()
    cfg.validate()
    return cfg


def yield_combinations_without_repetition(
        items: Sequence[Any],
        k: int,
        yield_copy: Optional[bool] = None,
        cfg: Optional[CombinationsConfig] = None,
) -> Iterator[List[Any]]:
    """
    Yields all combinations of k items without repetition (C(n, k) of them),
    in lexicographic order of their index tuples.

    items: indexable sequence, never mutated
    k: 1 <= k <= len(items), checked right away (TypeError / ValueError)
    yield_copy: True -> each combination is a new list, safe to keep.
                False -> the internal prefix buffer is yielded every time; its
                content changes as soon as the generator continues.
                None -> cfg.yield_copy
    Sizes above cfg.max_recursive_size are produced by LazyCombinations, same order.
    """
    cfg = _resolve_cfg(cfg)
    if yield_copy is None:
        yield_copy = cfg.yield_copy
    n = check_items(items)
    k = check_combination_size(n, k)

    if k > cfg.max_recursive_size:
        if cfg.verbose:
            print(f"[Comb] k={k} > max_recursive_size={cfg.max_recursive_size} -> iterative")
        return iter(LazyCombinations(items, k, yield_copy=yield_copy))

    if cfg.verbose:
        print(f"[Comb] n={n} k={k} -> {math.comb(n, k)} combinations")
    return _recurse(items, n, [], k, 0, yield_copy)


def _recurse(
        items: Sequence[Any],
        n: int,
        prefix: List[Any],
        k: int,
        next_index: int,
        yield_copy: bool,
) -> Iterator[List[Any]]:
    if len(prefix) == k:
        yield array_or_array_like(prefix) if yield_copy else prefix
        return

    i = next_index
    # remaining needed <= remaining available
    while i < n and k - len(prefix) <= n - i:
        prefix.append(items[i])
        yield from _recurse(items, n, prefix, k, i + 1, yield_copy)
        prefix.pop()
        i += 1


def unique_progressive_incremental_combinations(
        items: Sequence[Any],
        cfg: Optional[CombinationsConfig] = None,
) -> List[List[Any]]:
    """
    All non-empty combinations of items (2**n - 1 of them), materialized:
    singletons in input order, then sizes 2..n-1 in lexicographic order,
    then a copy of the whole input as the last element.
    [] -> [], [a] -> [[a]], [a, b] -> [[a], [b], [a, b]].
    Every returned combination is an independent list, cfg.yield_copy is ignored.
    """
    cfg = _resolve_cfg(cfg)
    n = check_items(items)
    if n == 0:
        return []

    last = array_or_array_like(items)
    if n == 1:
        return [last]

    ret = [[item] for item in items]
    if n > 2:
        for k in _pbar(range(2, n), cfg, desc="combination sizes", leave=False):
            for combination in yield_combinations_without_repetition(items, k, yield_copy=True, cfg=cfg):
                ret.append(combination)

    ret.append(last)
    if cfg.verbose:
        print(f"[Progressive] n={n} -> {len(ret)} combinations")
    return ret


def yield_progressive_incremental_combinations(
        items: Sequence[Any],
        cfg: Optional[CombinationsConfig] = None,
) -> Iterator[List[Any]]:
    """
    Lazy counterpart of unique_progressive_incremental_combinations, same order and count.
    Sizes 2..n-1 follow cfg.yield_copy; singletons and the final full copy are always new lists.
    """
    cfg = _resolve_cfg(cfg)
    return _progressive(items, check_items(items), cfg)


def _progressive(items: Sequence[Any], n: int, cfg: CombinationsConfig) -> Iterator[List[Any]]:
    if n == 0:
        return
    if n > 1:
        for i in range(n):
            yield [items[i]]
        for k in range(2, n):
            yield from yield_combinations_without_repetition(items, k, cfg=cfg)
    yield array_or_array_like(items)


def yield_subsequences(items: Sequence[Any]) -> Iterator[List[Any]]:
    """
    Contiguous subsequences, size 1..n ascending, by start index within a size.
    n * (n + 1) / 2 lists, each a new list.
    """
    return _subsequences(items, check_items(items))


def _subsequences(items: Sequence[Any], n: int) -> Iterator[List[Any]]:
    for size in range(1, n + 1):
        for start in range(0, n - size + 1):
            yield [items[i] for i in range(start, start + size)]


def _same_element(x: Any, y: Any) -> bool:
    if x is y:
        return True
    if isinstance(x, np.ndarray) or isinstance(y, np.ndarray):
        return bool(np.array_equal(x, y))
    eq = x == y
    if isinstance(eq, (bool, np.bool_)):
        return bool(eq)
    # element-wise result (array-likes)
    return bool(np.array_equal(x, y))


def _same_subsequence(a: List[Any], b: List[Any]) -> bool:
    return len(a) == len(b) and all(_same_element(x, y) for x, y in zip(a, b))


def unique_subsequences(
        items: Sequence[Any],
        cfg: Optional[CombinationsConfig] = None,
) -> List[List[Any]]:
    """
    Contiguous subsequences without value duplicates ("aab" has "a" only once),
    first occurrence kept, otherwise in yield_subsequences order.
    Unhashable elements (lists, numpy arrays, ...) are compared one by one,
    arrays by np.array_equal.
    """
    cfg = _resolve_cfg(cfg)
    ret: List[List[Any]] = []
    seen = set()
    seen_unhashable: List[List[Any]] = []
    total = 0

    for sub in yield_subsequences(items):
        total += 1
        try:
            key = tuple(sub)
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            if any(_same_subsequence(sub, other) for other in seen_unhashable):
                continue
            seen_unhashable.append(sub)
        ret.append(sub)

    if cfg.verbose:
        print(f"[Subseq] subsequences={total} -> unique={len(ret)}")
    return ret


def count_combinations(n: int, k: int) -> int:
    """C(n, k) for a valid size 1 <= k <= n, same checks as the generators."""
    return math.comb(n, check_combination_size(n, k))


def count_progressive_combinations(n: int) -> int:
    if n < 0:
        raise ValueError(f"n must be >= 0, got n={n}")
    return 2 ** n - 1


def combination_index_array(n: int, k: int) -> np.ndarray:
    """
    (C(n, k), k) int64 matrix of index tuples in lexicographic order.
    Row r selects the r-th combination: arr[idx[r]] for a numpy array arr.
    """
    k = check_combination_size(n, k)
    out = np.empty((math.comb(n, k), k), dtype=np.int64)
    for row, idx in enumerate(LazyCombinations(range(n), k).indices()):
        out[row] = idx
    return out
