"""Core graph construction and shortest-path search."""

# Submodules are available for import but not loaded at package level
# Import submodules explicitly when needed:
#   from proxroute.core.vertex import Vertex, euclidean_distance
#   from proxroute.core.graph import build_graph
#   from proxroute.core.dijkstra import shortest_paths

__all__ = [
    "dijkstra",
    "graph",
    "metrics",
    "vertex",
]
