"""
proxroute - Proximity Graph Shortest Paths

Shortest-path distances over point clouds in 3D space, where two points
are connected only when they lie within a fixed Euclidean distance of
each other.
"""

from .__version__ import __version__

__author__ = "proxroute Team"
__email__ = "proxroute@example.com"

# Submodules are available for import but not loaded at package level
# This prevents circular import issues during installation
# Import submodules explicitly when needed:
#   from proxroute.core.graph import build_graph
#   from proxroute.core.dijkstra import shortest_paths
#   from proxroute.data.loaders import parse_vertex_text

__all__ = [
    "__version__",
]
