"""Proximity graph construction over 3D point sets."""

import logging
import math
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple, Union

import numpy as np
from tqdm import tqdm

from .vertex import DEFAULT_THRESHOLD, Vertex, euclidean_distance
from ..utils.math_utils import squared_distances_from

logger = logging.getLogger(__name__)

# Slack on the vectorised prefilter; candidates are confirmed exactly afterwards
_PREFILTER_SLACK = 1e-9


class EmptyInputError(ValueError):
    """Raised when a graph is requested for an empty vertex list."""


class ProximityGraph:
    """Read-only adjacency over a fixed vertex list.

    Vertices are addressed by their position in the input, so repeated
    names or coordinates stay distinct vertices.
    """

    def __init__(self, vertices: Tuple[Vertex, ...],
                 adjacency: Dict[int, Tuple[int, ...]],
                 origin: int, threshold: float):
        self._vertices = vertices
        self._adjacency = MappingProxyType(adjacency)
        self._origin = origin
        self._threshold = threshold

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def adjacency(self) -> Mapping[int, Tuple[int, ...]]:
        return self._adjacency

    @property
    def origin(self) -> int:
        """Index of the vertex searches start from by default."""
        return self._origin

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(n) for n in self._adjacency.values()) // 2

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return (f"ProximityGraph(vertices={len(self)}, edges={self.edge_count}, "
                f"threshold={self._threshold})")

    def neighbors(self, index: int) -> Tuple[int, ...]:
        """Indices adjacent to ``index``, in input order."""
        return self._adjacency[index]

    def is_adjacent(self, u: int, v: int) -> bool:
        return v in self._adjacency[u]

    def index_of(self, vertex: Union[int, Vertex]) -> int:
        """Resolve a vertex or an index to a validated index.

        A ``Vertex`` is matched by identity first, then by equality, so the
        first of several equal vertices is returned.

        Raises:
            ValueError: If the vertex is not part of this graph
        """
        return _resolve_index(self._vertices, vertex)


def _resolve_index(vertices: Sequence[Vertex], vertex: Union[int, Vertex]) -> int:
    if isinstance(vertex, Vertex):
        for i, v in enumerate(vertices):
            if v is vertex:
                return i
        for i, v in enumerate(vertices):
            if v == vertex:
                return i
        raise ValueError(f"Vertex {vertex} is not part of the graph")

    index = int(vertex)
    if not 0 <= index < len(vertices):
        raise ValueError(f"Vertex index {index} out of range for {len(vertices)} vertices")
    return index


def build_graph(vertices: Sequence[Vertex],
                origin: Union[int, Vertex] = 0,
                threshold: float = DEFAULT_THRESHOLD,
                show_progress: bool = False) -> ProximityGraph:
    """Connect every pair of vertices that are within ``threshold`` of each other.

    Every ordered pair is tested, so the adjacency lists are symmetric and
    each list keeps the input order of its neighbours. A numpy pass over
    squared distances narrows the candidates for each vertex; each candidate
    is then confirmed with ``euclidean_distance`` so the adjacency test and
    the edge weights used during search agree exactly.

    Args:
        vertices: Ordered vertices; the first is the default origin
        origin: Index or vertex that searches start from
        threshold: Maximum edge length
        show_progress: Display a progress bar while testing pairs

    Returns:
        ProximityGraph over the given vertices

    Raises:
        EmptyInputError: If ``vertices`` is empty
        ValueError: If ``origin`` or ``threshold`` is invalid
    """
    vertices = tuple(vertices)
    if not vertices:
        raise EmptyInputError("Empty vertex list")

    threshold = float(threshold)
    if math.isnan(threshold) or threshold < 0 or math.isinf(threshold):
        raise ValueError(f"Threshold must be a finite non-negative number, got {threshold}")

    origin_index = _resolve_index(vertices, origin)

    coords = np.array([v.coords for v in vertices], dtype=float)
    limit_squared = (threshold + _PREFILTER_SLACK) ** 2

    adjacency: Dict[int, Tuple[int, ...]] = {}
    indices = range(len(vertices))
    if show_progress:
        indices = tqdm(indices, desc="Building proximity graph", unit="vertex")

    for i in indices:
        v = vertices[i]
        candidates = np.flatnonzero(squared_distances_from(coords, coords[i]) <= limit_squared)
        adjacency[i] = tuple(
            int(j) for j in candidates
            if j != i and euclidean_distance(vertices[j], v) <= threshold
        )

    graph = ProximityGraph(vertices, adjacency, origin_index, threshold)
    logger.debug(f"Built {graph!r} with origin {vertices[origin_index].name}")
    return graph
