"""Execution policies: run work items sequentially or on a thread pool."""

from __future__ import annotations

import enum
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

_T = TypeVar("_T")
_R = TypeVar("_R")


class ExecutionPolicy(enum.Enum):
    """How a batch of independent work items is executed."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"

    def map(self, func: Callable[[_T], _R], items: Iterable[_T]) -> list[_R]:
        """Apply ``func`` to every item and return the results in input order."""
        if self is ExecutionPolicy.SEQUENTIAL:
            return [func(item) for item in items]
        with ThreadPoolExecutor() as pool:
            return list(pool.map(func, items))