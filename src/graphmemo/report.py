"""Plain-text rendering of traversal and solver results.

The algorithms return values; turning them into console output is the
caller's job and lives here so the CLI and any other front end print
the same thing.
"""
from __future__ import annotations

from typing import Iterable, Sequence


def format_order(order: Iterable[object]) -> str:
    """Visit order as space-separated node ids: 'a b d f c e'."""
    return " ".join(str(node) for node in order)


def format_path(path: Sequence[object]) -> str:
    """A path as 'a -> b -> c', or a note when there is none."""
    if not path:
        return "(no path)"
    return " -> ".join(str(node) for node in path)


def format_combination(combo: Sequence[int] | None) -> str:
    """A sum combination as '3 + 2 + 2'.

    None (no combination) and () (the empty combination) print
    differently on purpose.
    """
    if combo is None:
        return "(none)"
    if not combo:
        return "(empty)"
    return " + ".join(str(n) for n in combo)


def format_decompositions(ways: Sequence[Sequence[str]]) -> str:
    """One decomposition per line, words joined by ' | '."""
    if not ways:
        return "(none)"
    lines = []
    for way in ways:
        lines.append(" | ".join(way) if way else "(empty)")
    return "\n".join(lines)
