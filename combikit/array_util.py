from __future__ import annotations
from typing import Any, Iterable, List


def array_or_array_like(arg: Iterable[Any]) -> List[Any]:
    """
    Shallow copy of a sequence (or any iterable) into a new list.
    The elements themselves are shared, only the container is new.
    """
    return list(arg)
