"""Memoized recursive solvers."""

from graphmemo.memo.construct import (
    Decomposition,
    all_construct,
    can_construct,
    count_construct,
)
from graphmemo.memo.numeric import (
    Combination,
    best_sum,
    can_sum,
    fib,
    how_sum,
)
from graphmemo.memo.table import MemoOverwriteError, MemoTable

__all__ = [
    "Combination",
    "Decomposition",
    "MemoOverwriteError",
    "MemoTable",
    "all_construct",
    "best_sum",
    "can_construct",
    "can_sum",
    "count_construct",
    "fib",
    "how_sum",
]
