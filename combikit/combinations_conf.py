from __future__ import annotations
from dataclasses import dataclass


@dataclass
class CombinationsConfig:
    yield_copy: bool = True  # False -> shared buffer, caller must copy
    max_recursive_size: int = 256  # k above this -> iterative LazyCombinations

    # output
    progress: bool = False
    verbose: bool = False

    def validate(self) -> None:
        if self.max_recursive_size < 1:
            raise ValueError("max_recursive_size must be >= 1.")
