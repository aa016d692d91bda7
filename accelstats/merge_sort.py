"""Bottom-up merge sort that also accumulates the sum and sum of squares."""

from __future__ import annotations

import heapq
import os
from typing import MutableSequence, Sequence

import numpy as np

from .policy import ExecutionPolicy

_STRIDE = 4  # lanes of a 256-bit register holding doubles


def _chunk_bounds(size: int) -> list[tuple[int, int]]:
    """Split ``range(size)`` into one chunk per CPU; the last chunk takes the rest."""
    workers = os.cpu_count() or 1
    chunk_size = size // workers
    return [
        (chunk * chunk_size, size if chunk == workers - 1 else (chunk + 1) * chunk_size)
        for chunk in range(workers)
    ]


def _combine(
    parts: list[tuple[list[float], float, float]],
) -> tuple[list[float], float, float]:
    copy: list[float] = []
    total = 0.0
    total_sq = 0.0
    for values, part_sum, part_sq in parts:
        copy.extend(values)
        total += part_sum
        total_sq += part_sq
    return copy, total, total_sq


def sum_and_copy(
    arr: Sequence[float],
    start: int,
    size: int,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> tuple[list[float], float, float]:
    """Copy ``arr[start:start + size]`` and return ``(copy, sum, sum_of_squares)``."""

    def work(bounds: tuple[int, int]) -> tuple[list[float], float, float]:
        lo, hi = bounds
        values = list(arr[start + lo:start + hi])
        part_sum = 0.0
        part_sq = 0.0
        for value in values:
            part_sum += value
            part_sq += value * value
        return values, part_sum, part_sq

    return _combine(policy.map(work, _chunk_bounds(size)))


def sum_and_copy_vec(
    arr: Sequence[float],
    start: int,
    size: int,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> tuple[list[float], float, float]:
    """Like :func:`sum_and_copy`, accumulating four lanes at a time with numpy."""

    def work(bounds: tuple[int, int]) -> tuple[list[float], float, float]:
        lo, hi = bounds
        block = np.asarray(arr[start + lo:start + hi], dtype=np.float64)
        full = (len(block) // _STRIDE) * _STRIDE
        lanes = block[:full].reshape(-1, _STRIDE)
        part_sum = float(lanes.sum(axis=0).sum())
        part_sq = float((lanes * lanes).sum(axis=0).sum())
        for value in block[full:].tolist():
            part_sum += value
            part_sq += value * value
        return block.tolist(), part_sum, part_sq

    return _combine(policy.map(work, _chunk_bounds(size)))


def merge(
    arr: MutableSequence[float],
    l: int,
    left: Sequence[float],
    right: Sequence[float],
) -> None:
    """Merge the ascending runs ``left`` and ``right`` into ``arr`` starting at ``l``."""
    arr[l:l + len(left) + len(right)] = list(heapq.merge(left, right))


def merge_no_count(arr: MutableSequence[float], l: int, m: int, r: int) -> None:
    """Merge the sorted halves ``arr[l..m]`` and ``arr[m+1..r]`` in place."""
    merge(arr, l, list(arr[l:m + 1]), list(arr[m + 1:r + 1]))


def merge_and_count(
    arr: MutableSequence[float],
    l: int,
    m: int,
    r: int,
    is_vectorized: bool = False,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> tuple[float, float]:
    """Merge ``arr[l..m]`` with ``arr[m+1..r]``; return the sum and sum of squares."""
    copier = sum_and_copy_vec if is_vectorized else sum_and_copy
    left, left_sum, left_sq = copier(arr, l, m - l + 1, policy)
    right, right_sum, right_sq = copier(arr, m + 1, r - m, policy)
    merge(arr, l, left, right)
    return left_sum + right_sum, left_sq + right_sq


def merge_sort(
    arr: MutableSequence[float],
    is_vectorized: bool = False,
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> tuple[float, float]:
    """Sort ``arr`` in place and return ``(sum, sum_of_squares)``.

    The sums are gathered during the final merge pass, so a single-element
    sequence, which needs no merge, yields zero sums.
    """
    n = len(arr)
    if n == 0:
        raise ValueError("cannot sort an empty sequence")

    curr_size = 1
    while curr_size <= (n - 1) // 2:
        width = curr_size

        def merge_pass(left_start: int, width: int = width) -> None:
            mid = min(left_start + width - 1, n - 1)
            right_end = min(left_start + 2 * width - 1, n - 1)
            merge_no_count(arr, left_start, mid, right_end)

        policy.map(merge_pass, range(0, n - 1, 2 * width))
        curr_size *= 2

    def final_pass(left_start: int) -> tuple[float, float]:
        mid = min(left_start + curr_size - 1, n - 1)
        right_end = min(left_start + 2 * curr_size - 1, n - 1)
        return merge_and_count(arr, left_start, mid, right_end, is_vectorized, policy)

    total = 0.0
    total_sq = 0.0
    for part_sum, part_sq in policy.map(final_pass, range(0, n - 1, 2 * curr_size)):
        total += part_sum
        total_sq += part_sq
    return total, total_sq