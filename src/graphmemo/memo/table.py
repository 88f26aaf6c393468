"""Write-once memo table shared by every recursive solver.

A MemoTable lives for exactly one top-level solver call.  The public
solver creates it, hands it down the recursion, and drops it on return,
so two calls never see each other's results.

Entries are final: once a sub-problem is solved its answer never
changes, and storing a second answer for the same key is a bug in the
solver, reported as MemoOverwriteError.

The table also counts lookups.  A miss is a sub-problem the solver had
to work out; a hit is one it got for free.  hits + misses is the number
of helper invocations, which is how the tests check that memoized
Fibonacci runs in linear time.
"""
from __future__ import annotations

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoOverwriteError(RuntimeError):
    """Raised when a solver stores a second result for the same key."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Memo entry for {key!r} is already final")


class MemoTable(Generic[K, V]):
    """Sub-problem key -> final result, with hit/miss counters.

    A stored value may itself be None (e.g. "no combination exists"),
    so presence is always checked with has(), never by comparing the
    looked-up value against None.
    """

    __slots__ = ("_entries", "hits", "misses")

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self.hits = 0
        self.misses = 0

    def has(self, key: K) -> bool:
        """Check for *key* and count the lookup as a hit or a miss."""
        if key in self._entries:
            self.hits += 1
            return True
        self.misses += 1
        return False

    def store(self, key: K, value: V) -> V:
        """Record the final *value* for *key* and return it."""
        if key in self._entries:
            raise MemoOverwriteError(key)
        self._entries[key] = value
        return value

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    def __getitem__(self, key: K) -> V:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"MemoTable(entries={len(self)}, lookups={self.lookups}, "
            f"hits={self.hits})"
        )
