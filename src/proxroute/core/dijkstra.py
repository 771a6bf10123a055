"""Single-source shortest paths over a proximity graph (Dijkstra).

Each run keeps its own state table, indexed by vertex position, holding
the best known distance, the lifecycle state and the predecessor of every
vertex. The graph and its vertices are never mutated, so a graph can be
searched repeatedly, from different origins, without rebuilding it.

The priority queue is a binary heap with lazy deletion. A shorter distance
for a queued vertex pushes a second entry instead of reordering the first;
entries that no longer match the vertex's current distance, or that belong
to an already finalized vertex, are discarded when popped. Heap entries
carry an insertion sequence number, so vertices with equal distances are
finalized in the order they were (last) queued.
"""

import heapq
import itertools
import logging
import math
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

from .graph import ProximityGraph
from .vertex import Vertex, VertexState, edge_weight_via

logger = logging.getLogger(__name__)


class PathResult(NamedTuple):
    """A finalized vertex and its shortest distance from the origin."""
    name: str
    distance: float


class RunState:
    """Mutable per-run bookkeeping, one slot per graph vertex."""

    def __init__(self, size: int, origin: int):
        self.origin = origin
        self.best_distance: List[float] = [math.inf] * size
        self.state: List[VertexState] = [VertexState.UNVISITED] * size
        self.predecessor: List[Optional[int]] = [None] * size
        self.finalized_order: List[int] = []
        self.best_distance[origin] = 0.0

    def is_finalized(self, index: int) -> bool:
        return self.state[index] is VertexState.FINALIZED

    def is_queued(self, index: int) -> bool:
        return self.state[index] is VertexState.QUEUED

    def reachable(self, index: int) -> bool:
        return self.is_finalized(index)


def _run(graph: ProximityGraph, run: RunState) -> Iterator[int]:
    """Drive one search, yielding vertex indices as they are finalized."""
    vertices = graph.vertices
    threshold = graph.threshold
    counter = itertools.count()

    heap: List[Tuple[float, int, int]] = [(0.0, next(counter), run.origin)]
    run.state[run.origin] = VertexState.QUEUED

    while heap:
        distance, _, v = heapq.heappop(heap)
        if run.is_finalized(v) or distance != run.best_distance[v]:
            continue

        run.state[v] = VertexState.FINALIZED
        run.finalized_order.append(v)
        yield v

        for n in graph.neighbors(v):
            if run.is_finalized(n):
                continue

            d = edge_weight_via(vertices[n], vertices[v], distance, threshold)
            if d is None:
                continue

            if run.state[n] is VertexState.UNVISITED:
                run.best_distance[n] = d
                run.predecessor[n] = v
                run.state[n] = VertexState.QUEUED
                heapq.heappush(heap, (d, next(counter), n))
            elif d < run.best_distance[n]:
                run.best_distance[n] = d
                run.predecessor[n] = v
                heapq.heappush(heap, (d, next(counter), n))


def shortest_paths(graph: ProximityGraph,
                   origin: Union[int, Vertex, None] = None) -> Iterator[PathResult]:
    """Yield ``(name, distance)`` for every vertex reachable from ``origin``.

    Results come in the order vertices are finalized, which is
    non-decreasing distance. The origin itself is not reported, and
    vertices that cannot be reached are never reported.

    Args:
        graph: Graph built by ``build_graph``
        origin: Index or vertex to search from; defaults to ``graph.origin``

    Yields:
        PathResult tuples
    """
    origin_index = graph.origin if origin is None else graph.index_of(origin)
    run = RunState(len(graph), origin_index)
    vertices = graph.vertices

    emitted = 0
    for index in _run(graph, run):
        if index == origin_index:
            continue
        emitted += 1
        yield PathResult(vertices[index].name, run.best_distance[index])

    logger.debug(f"Search from {vertices[origin_index].name} reached {emitted} "
                 f"of {len(graph) - 1} other vertices")


def finalize_all(graph: ProximityGraph,
                 origin: Union[int, Vertex, None] = None) -> RunState:
    """Run a complete search and return its state table."""
    origin_index = graph.origin if origin is None else graph.index_of(origin)
    run = RunState(len(graph), origin_index)
    for _ in _run(graph, run):
        pass
    return run


def reconstruct_path(graph: ProximityGraph, run: RunState,
                     target: Union[int, Vertex]) -> List[Vertex]:
    """Vertices on the shortest path from the run's origin to ``target``.

    Returns:
        Vertices from origin to target inclusive, or an empty list if
        ``target`` was not reached
    """
    index = graph.index_of(target)
    if not run.reachable(index):
        return []

    path = []
    current: Optional[int] = index
    while current is not None:
        path.append(graph.vertices[current])
        current = run.predecessor[current]
    path.reverse()
    return path


def run_results(graph: ProximityGraph, run: RunState) -> List[PathResult]:
    """Results of a completed run in finalization order, origin excluded."""
    return [
        PathResult(graph.vertices[i].name, run.best_distance[i])
        for i in run.finalized_order if i != run.origin
    ]
