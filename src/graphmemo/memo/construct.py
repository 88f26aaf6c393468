"""Memoized string segmentation over a reusable word bank.

Each solver asks the same question at a different strength:

  can_construct    is there at least one way to spell target?
  count_construct  how many ways are there?
  all_construct    list every way.

A "way" is a sequence of bank words whose concatenation is exactly the
target.  Words may be reused.  At every step only words that are a
prefix of the remaining target are tried, and the recursion continues
on whatever suffix is left; the empty string is the base case (one
way: use no words).  The memo is keyed by that remaining suffix.

Empty words are rejected: an empty prefix leaves the suffix unchanged
and the recursion would never reach the base case.
"""
from __future__ import annotations

import logging
from typing import Iterable

from graphmemo.memo.table import MemoTable

log = logging.getLogger(__name__)

Decomposition = tuple[str, ...]


def can_construct(target: str, word_bank: Iterable[str]) -> bool:
    words = _non_empty(word_bank)
    memo: MemoTable[str, bool] = MemoTable()
    result = _can_construct(target, words, memo)
    log.debug("can_construct(%r): %r", target, memo)
    return result


def _can_construct(target: str, words: tuple[str, ...], memo: MemoTable[str, bool]) -> bool:
    if memo.has(target):
        return memo[target]
    if target == "":
        return True
    for word in words:
        if target.startswith(word):
            if _can_construct(target[len(word):], words, memo):
                return memo.store(target, True)
    return memo.store(target, False)


def count_construct(target: str, word_bank: Iterable[str]) -> int:
    """Number of distinct word sequences from *word_bank* that spell *target*."""
    words = _non_empty(word_bank)
    memo: MemoTable[str, int] = MemoTable()
    result = _count_construct(target, words, memo)
    log.debug("count_construct(%r): %r", target, memo)
    return result


def _count_construct(target: str, words: tuple[str, ...], memo: MemoTable[str, int]) -> int:
    if memo.has(target):
        return memo[target]
    if target == "":
        return 1
    total = 0
    for word in words:
        if target.startswith(word):
            total += _count_construct(target[len(word):], words, memo)
    return memo.store(target, total)


def all_construct(target: str, word_bank: Iterable[str]) -> list[Decomposition]:
    """Every word sequence from *word_bank* that spells *target*.

    Sequences are grouped by their first word, in word-bank order.
    An empty target has exactly one decomposition, the empty one; a
    target that cannot be spelled returns [].

    The result can be exponentially long in len(target) (think
    target "aaaa...a" with bank ["a", "aa"]); memoization bounds the
    number of recursive calls, not the size of the answer.
    """
    words = _non_empty(word_bank)
    memo: MemoTable[str, list[Decomposition]] = MemoTable()
    result = _all_construct(target, words, memo)
    log.debug("all_construct(%r): %r", target, memo)
    return list(result)


def _all_construct(
    target: str, words: tuple[str, ...], memo: MemoTable[str, list[Decomposition]]
) -> list[Decomposition]:
    if memo.has(target):
        return memo[target]
    if target == "":
        return [()]
    ways: list[Decomposition] = []
    for word in words:
        if target.startswith(word):
            for rest in _all_construct(target[len(word):], words, memo):
                ways.append((word,) + rest)
    return memo.store(target, ways)


def _non_empty(word_bank: Iterable[str]) -> tuple[str, ...]:
    words = tuple(word_bank)
    if "" in words:
        raise ValueError("Word bank must not contain the empty string")
    return words
