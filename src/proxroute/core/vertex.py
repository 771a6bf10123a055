"""Vertex model and the distance rule that defines graph edges."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..utils.math_utils import distance_3d

# Two vertices are connected when they are at most this far apart
DEFAULT_THRESHOLD = 3.0


class VertexState(Enum):
    """Lifecycle of a vertex during one shortest-path run."""
    UNVISITED = "unvisited"
    QUEUED = "queued"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class Vertex:
    """A named point in 3D space.

    Vertices only carry identity and coordinates. Distances found during a
    search live in the run state of that search, so the same vertices can
    back any number of runs.
    """
    name: str
    x: float
    y: float
    z: float

    @property
    def coords(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"{self.name}({self.x}, {self.y}, {self.z})"


def create_vertex(name: str, x: float, y: float, z: float) -> Vertex:
    """Create a vertex, coercing coordinates to float."""
    return Vertex(str(name), float(x), float(y), float(z))


def euclidean_distance(a: Vertex, b: Vertex) -> float:
    """Straight-line distance between two vertices."""
    return distance_3d(a.coords, b.coords)


def edge_weight_via(candidate: Vertex,
                    predecessor: Vertex,
                    predecessor_distance: float,
                    threshold: float = DEFAULT_THRESHOLD) -> Optional[float]:
    """Tentative distance to ``candidate`` when reached through ``predecessor``.
    
    Args:
        candidate: Vertex being relaxed
        predecessor: Vertex the path arrives from
        predecessor_distance: Current best distance of ``predecessor``
        threshold: Maximum length of a single edge
        
    Returns:
        ``None`` when the two vertices are further apart than ``threshold``
        (no edge), otherwise the edge length plus ``predecessor_distance``
    """
    distance = euclidean_distance(candidate, predecessor)
    if distance > threshold:
        return None
    return distance + predecessor_distance
