#!/usr/bin/env python3
"""
Basic shortest-path example for proxroute.

This example demonstrates how to:
1. Generate a random point cloud
2. Build the proximity graph
3. Stream shortest distances from the first point
4. Recover the path to the furthest reachable point
"""

import numpy as np

from proxroute.core.dijkstra import finalize_all, reconstruct_path, run_results
from proxroute.core.graph import build_graph
from proxroute.core.metrics import calculate_run_metrics
from proxroute.core.vertex import create_vertex


def main():
    rng = np.random.default_rng(42)
    points = rng.uniform(0, 20, size=(200, 3))
    vertices = [create_vertex(f"P{i}", *point) for i, point in enumerate(points)]

    print(f"🚀 Building proximity graph for {len(vertices)} points")
    graph = build_graph(vertices, show_progress=True)
    print(f"📊 {graph.edge_count} edges within {graph.threshold}")

    run = finalize_all(graph)
    results = run_results(graph, run)
    for name, distance in results[:10]:
        print(f"{name}:{distance}")

    metrics = calculate_run_metrics(graph, run)
    print(f"\n🎯 Reached {metrics['reachable_count']} of {metrics['vertex_count'] - 1} points")

    if results:
        furthest = results[-1]
        target = next(i for i, v in enumerate(vertices) if v.name == furthest.name)
        path = reconstruct_path(graph, run, target)
        print(f"📂 Path to {furthest.name} ({furthest.distance:.3f}): "
              + " -> ".join(v.name for v in path))


if __name__ == "__main__":
    main()
