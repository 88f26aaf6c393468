"""Memoized numeric recursions: Fibonacci and the target-sum family.

All four solvers share one shape:

    def solver(target, ...):
        memo = MemoTable()
        return _solver(target, ..., memo)

    def _solver(target, ..., memo):
        if memo.has(target):   return memo[target]
        if <base case>:        return <base answer>
        ... recurse on smaller targets, threading memo ...
        return memo.store(target, answer)

The memo key is the remaining target, which is the only thing that
varies between sub-problems (the list of numbers is fixed for the
whole call).  Without the memo the sum solvers branch len(numbers)
ways per level and are exponential in target; with it each remaining
target is solved at most once, giving O(target * len(numbers)) calls.

Every solver recurses once per level of the sub-problem chain, so the
interpreter recursion limit caps n for fib and target / min(numbers)
for the sum solvers.  Past that cap the call raises RecursionError
rather than returning a wrong answer.

The sum solvers need strictly positive numbers.  A zero would recurse
on the same target forever and a negative one would walk away from the
base cases, so both are rejected up front.

Combinations are returned as tuples.  None means "no combination
exists"; () means "the empty combination", which is the answer for a
target of 0.  Memoized tuples are shared between branches, and being
immutable they cannot be corrupted by a later append.
"""
from __future__ import annotations

import logging
from typing import Iterable

from graphmemo.memo.table import MemoTable

log = logging.getLogger(__name__)

Combination = tuple[int, ...]


def fib(n: int) -> int:
    """n-th term of 1, 1, 2, 3, 5, 8, ... (fib(0) == fib(1) == 1).

    Linear time, but the helper recurses n levels deep, so n must stay
    below sys.getrecursionlimit() (1000 by default) minus the caller's
    own stack.  Larger indices raise RecursionError.
    """
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    memo: MemoTable[int, int] = MemoTable()
    result = _fib(n, memo)
    log.debug("fib(%d): %r", n, memo)
    return result


def _fib(n: int, memo: MemoTable[int, int]) -> int:
    if memo.has(n):
        return memo[n]
    if n <= 1:
        return 1
    return memo.store(n, _fib(n - 1, memo) + _fib(n - 2, memo))


def can_sum(target: int, numbers: Iterable[int]) -> bool:
    """True if *target* is a sum of *numbers*, each usable any number of times.

    Recursion goes target // min(numbers) levels deep; past the
    interpreter recursion limit this raises RecursionError, as do
    how_sum and best_sum.
    """
    nums = _positive(numbers)
    memo: MemoTable[int, bool] = MemoTable()
    result = _can_sum(target, nums, memo)
    log.debug("can_sum(%d): %r", target, memo)
    return result


def _can_sum(target: int, nums: tuple[int, ...], memo: MemoTable[int, bool]) -> bool:
    if memo.has(target):
        return memo[target]
    if target == 0:
        return True
    if target < 0:
        return False
    for num in nums:
        if _can_sum(target - num, nums, memo):
            return memo.store(target, True)
    return memo.store(target, False)


def how_sum(target: int, numbers: Iterable[int]) -> Combination | None:
    """Any combination of *numbers* summing to *target*, or None.

    Returns the first combination found when trying *numbers* in order.
    """
    nums = _positive(numbers)
    memo: MemoTable[int, Combination | None] = MemoTable()
    result = _how_sum(target, nums, memo)
    log.debug("how_sum(%d): %r", target, memo)
    return result


def _how_sum(
    target: int, nums: tuple[int, ...], memo: MemoTable[int, Combination | None]
) -> Combination | None:
    if memo.has(target):
        return memo[target]
    if target == 0:
        return ()
    if target < 0:
        return None
    for num in nums:
        rest = _how_sum(target - num, nums, memo)
        if rest is not None:
            return memo.store(target, rest + (num,))
    return memo.store(target, None)


def best_sum(target: int, numbers: Iterable[int]) -> Combination | None:
    """The shortest combination of *numbers* summing to *target*, or None.

    Ties go to the combination found first.
    """
    nums = _positive(numbers)
    memo: MemoTable[int, Combination | None] = MemoTable()
    result = _best_sum(target, nums, memo)
    log.debug("best_sum(%d): %r", target, memo)
    return result


def _best_sum(
    target: int, nums: tuple[int, ...], memo: MemoTable[int, Combination | None]
) -> Combination | None:
    if memo.has(target):
        return memo[target]
    if target == 0:
        return ()
    if target < 0:
        return None
    shortest: Combination | None = None
    for num in nums:
        rest = _best_sum(target - num, nums, memo)
        if rest is None:
            continue
        combo = rest + (num,)
        if shortest is None or len(combo) < len(shortest):
            shortest = combo
    return memo.store(target, shortest)


def _positive(numbers: Iterable[int]) -> tuple[int, ...]:
    nums = tuple(numbers)
    for num in nums:
        if num <= 0:
            raise ValueError(f"Numbers must be positive, got {num}")
    return nums
