"""Graph traversal over adjacency maps."""

from graphmemo.graph.adjacency import (
    EXAMPLE_GRAPH,
    EdgeList,
    Graph,
    MissingNodeError,
    build_adjacency_map,
    is_symmetric,
    neighbors,
    validate_graph,
)
from graphmemo.graph.components import (
    connected_components,
    connected_components_count,
    largest_component,
)
from graphmemo.graph.traversal import (
    breadth_first_traverse,
    depth_first_traverse,
    has_path,
    recursive_depth_first_traverse,
    shortest_path,
)

__all__ = [
    "EXAMPLE_GRAPH",
    "EdgeList",
    "Graph",
    "MissingNodeError",
    "breadth_first_traverse",
    "build_adjacency_map",
    "connected_components",
    "connected_components_count",
    "depth_first_traverse",
    "has_path",
    "is_symmetric",
    "largest_component",
    "neighbors",
    "recursive_depth_first_traverse",
    "shortest_path",
    "validate_graph",
]
