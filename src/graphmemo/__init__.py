"""graphmemo: graph traversal and memoized recursion."""

__version__ = "0.1.0"
