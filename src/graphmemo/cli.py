"""graphmemo CLI entry point.

Usage: uv run graphmemo [-v] {graph,memo} ...
"""
from __future__ import annotations

import argparse
import logging
import sys

from graphmemo.graph import (
    EXAMPLE_GRAPH,
    MissingNodeError,
    breadth_first_traverse,
    build_adjacency_map,
    connected_components,
    depth_first_traverse,
    has_path,
    is_symmetric,
    largest_component,
    recursive_depth_first_traverse,
    shortest_path,
)
from graphmemo.memo import (
    all_construct,
    best_sum,
    can_construct,
    can_sum,
    count_construct,
    fib,
    how_sum,
)
from graphmemo.report import (
    format_combination,
    format_decompositions,
    format_order,
    format_path,
)

log = logging.getLogger(__name__)

GRAPH_ALGORITHMS = (
    "dfs", "dfs-recursive", "bfs", "has-path", "shortest-path",
    "components", "largest",
)
NUMERIC_SOLVERS = ("fib", "can-sum", "how-sum", "best-sum")
STRING_SOLVERS = ("can-construct", "count-construct", "all-construct")


def _add_graph_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "graph",
        help="Traverse an adjacency map.",
    )
    p.add_argument("algorithm", choices=GRAPH_ALGORITHMS)
    p.add_argument(
        "--edge", action="append", default=[], metavar="A:B",
        help="Undirected edge between A and B (repeatable). "
             "Without edges the built-in directed example graph is used.",
    )
    p.add_argument(
        "--start",
        help="Start node (default: first node of the graph)",
    )
    p.add_argument(
        "--target",
        help="Target node for has-path and shortest-path",
    )


def _add_memo_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "memo",
        help="Run a memoized recursive solver.",
    )
    p.add_argument("solver", choices=NUMERIC_SOLVERS + STRING_SOLVERS)
    p.add_argument(
        "target",
        help="Fibonacci index, target sum, or target string",
    )
    p.add_argument(
        "items", nargs="*",
        help="Numbers (sum solvers) or words (construct solvers)",
    )


def _parse_edge(text: str) -> tuple[str, str]:
    a, sep, b = text.partition(":")
    if not sep or not a or not b:
        raise ValueError(f"Edge {text!r} must look like A:B")
    return a, b


def _run_graph(args: argparse.Namespace) -> None:
    if args.edge:
        graph = build_adjacency_map(_parse_edge(e) for e in args.edge)
    else:
        graph = EXAMPLE_GRAPH
    log.info("graph has %d node(s)", len(graph))

    if args.algorithm in ("components", "largest") and not is_symmetric(graph):
        log.warning(
            "graph is directed; components depend on key order and are "
            "not connectivity classes (pass --edge to build an undirected map)"
        )

    if args.algorithm == "components":
        for component in connected_components(graph):
            print(format_order(component))
        return
    if args.algorithm == "largest":
        print(largest_component(graph))
        return

    start = args.start if args.start is not None else next(iter(graph), None)
    if start is None:
        raise ValueError("Graph is empty")

    if args.algorithm == "dfs":
        print(format_order(depth_first_traverse(graph, start)))
    elif args.algorithm == "dfs-recursive":
        print(format_order(recursive_depth_first_traverse(graph, start)))
    elif args.algorithm == "bfs":
        print(format_order(breadth_first_traverse(graph, start)))
    else:
        if args.target is None:
            raise ValueError(f"{args.algorithm} needs --target")
        if args.algorithm == "has-path":
            print(str(has_path(graph, start, args.target)).lower())
        else:
            print(format_path(shortest_path(graph, start, args.target)))


def _run_memo(args: argparse.Namespace) -> None:
    if args.solver in STRING_SOLVERS:
        target, words = args.target, args.items
        if args.solver == "can-construct":
            print(str(can_construct(target, words)).lower())
        elif args.solver == "count-construct":
            print(count_construct(target, words))
        else:
            print(format_decompositions(all_construct(target, words)))
        return

    try:
        n = int(args.target)
        numbers = [int(item) for item in args.items]
    except ValueError:
        raise ValueError(f"{args.solver} takes integers only") from None

    if args.solver == "fib":
        print(fib(n))
    elif args.solver == "can-sum":
        print(str(can_sum(n, numbers)).lower())
    elif args.solver == "how-sum":
        print(format_combination(how_sum(n, numbers)))
    else:
        print(format_combination(best_sum(n, numbers)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graphmemo",
        description="Graph traversal and memoized recursion -- pure Python.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging (memo statistics, path lengths)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_graph_parser(subparsers)
    _add_memo_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.command == "graph":
            _run_graph(args)
        elif args.command == "memo":
            _run_memo(args)
    except (MissingNodeError, ValueError) as exc:
        print(f"graphmemo: error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print(
            "graphmemo: error: input too deep for the recursive solver "
            f"(recursion limit {sys.getrecursionlimit()})",
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
