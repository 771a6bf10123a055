"""Summary metrics for a completed shortest-path run."""

from typing import Any, Dict

from .dijkstra import RunState
from .graph import ProximityGraph


def calculate_run_metrics(graph: ProximityGraph, run: RunState) -> Dict[str, Any]:
    """Calculate reachability and distance metrics for a finished run.
    
    Distances are taken over the vertices reached from the origin, the
    origin itself excluded.
    
    Args:
        graph: Graph the run searched
        run: Completed run state from ``finalize_all``
        
    Returns:
        Dictionary containing run metrics
    """
    distances = [
        run.best_distance[i] for i in run.finalized_order if i != run.origin
    ]
    vertex_count = len(graph)
    reachable_count = len(distances)
    
    return {
        'origin': graph.vertices[run.origin].name,
        'vertex_count': vertex_count,
        'edge_count': graph.edge_count,
        'threshold': graph.threshold,
        'reachable_count': reachable_count,
        'unreachable_count': vertex_count - 1 - reachable_count,
        'max_distance': max(distances) if distances else 0.0,
        'mean_distance': sum(distances) / reachable_count if distances else 0.0,
    }
