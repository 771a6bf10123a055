"""Shortest-path CLI command."""

import click
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

import pandas as pd

from ..configs.base import OUTPUT_FORMATS, SearchConfig
from ..configs.config_loader import load_config, merge_overrides
from ..core.dijkstra import finalize_all, run_results, shortest_paths
from ..core.graph import EmptyInputError, build_graph
from ..core.metrics import calculate_run_metrics
from ..core.vertex import Vertex
from ..data.loaders import load_vertices_from_stream, vertices_from_dataframe
from ..data.writers import write_results, write_results_tsv

logger = logging.getLogger(__name__)


def resolve_origin(vertices: List[Vertex], origin: Union[int, str]) -> int:
    """Turn a configured origin into a vertex index.

    A string is matched against vertex names first. Only a string of
    digits that names no vertex is read as an index.
    """
    if isinstance(origin, str):
        for i, vertex in enumerate(vertices):
            if vertex.name == origin:
                return i
        if not origin.isdigit():
            raise click.ClickException(f"No vertex named {origin!r} in input")
        origin = int(origin)

    if origin >= len(vertices):
        raise click.ClickException(
            f"Origin {origin} matches no vertex name and is out of range "
            f"for {len(vertices)} vertices")
    return origin


@click.command()
@click.argument('input_file', type=click.File('r'), default='-')
@click.option('--config', '-c', 'config_path',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='JSON configuration file')
@click.option('--threshold', '-t', type=float,
              help='Maximum distance between connected points (default: 3.0)')
@click.option('--origin',
              help='Origin vertex name, or its index when no vertex has that name (default: first vertex)')
@click.option('--input-format', type=click.Choice(['text', 'tsv']), default='text',
              help='Input format: name,x,y,z records or TSV with name/x/y/z columns')
@click.option('--output', '-o', type=click.File('w'), default='-',
              help='Output file (default: stdout)')
@click.option('--format', 'output_format', type=click.Choice(list(OUTPUT_FORMATS)),
              help='Output format (default: text)')
@click.option('--progress', 'show_progress', is_flag=True,
              help='Show a progress bar while building the graph')
@click.option('--summary', is_flag=True,
              help='Print run metrics to stderr after the results')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
def paths_cmd(
    input_file: TextIO,
    config_path: Optional[Path],
    threshold: Optional[float],
    origin: Optional[str],
    input_format: str,
    output: TextIO,
    output_format: Optional[str],
    show_progress: bool,
    summary: bool,
    verbose: bool
):
    """Print the shortest distance from the origin to each reachable point.

    INPUT_FILE holds one name,x,y,z record per line (default: stdin).
    Results are printed as name:distance in order of increasing distance;
    the origin and unreachable points are omitted.

    Examples:

    \b
    # Read points from stdin
    printf 'A,0,0,0\\nB,1,0,0\\nC,4,0,0\\n' | proxroute paths

    \b
    # Larger connection radius, TSV output
    proxroute paths points.txt --threshold 5 --format tsv -o distances.tsv
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        config = load_config(config_path) if config_path else SearchConfig()
        config = merge_overrides(config, {
            'threshold': threshold,
            'origin': origin,
            'output_format': output_format,
            'show_progress': show_progress or None,
        })
    except ValueError as e:
        raise click.ClickException(str(e))

    try:
        if input_format == 'tsv':
            df = pd.read_csv(input_file, sep='\t', dtype={'name': str})
            vertices = vertices_from_dataframe(df)
        else:
            vertices = load_vertices_from_stream(input_file)
    except ValueError as e:
        raise click.ClickException(str(e))

    logger.info(f"Loaded {len(vertices)} vertices")

    try:
        origin_index = resolve_origin(vertices, config.origin) if vertices else 0
        graph = build_graph(vertices, origin=origin_index, threshold=config.threshold,
                            show_progress=config.show_progress)
    except EmptyInputError:
        raise click.ClickException("No vertices in input")

    if summary:
        run = finalize_all(graph)
        results = run_results(graph, run)
    else:
        results = shortest_paths(graph)

    if config.output_format == 'tsv':
        count = write_results_tsv(results, output)
    else:
        count = write_results(results, output)

    logger.info(f"Wrote {count} results")

    if summary:
        metrics = calculate_run_metrics(graph, run)
        click.echo("=" * 40, err=True)
        click.echo(f"Origin: {metrics['origin']}", err=True)
        click.echo(f"Vertices: {metrics['vertex_count']:,}", err=True)
        click.echo(f"Edges: {metrics['edge_count']:,} (threshold {metrics['threshold']})", err=True)
        click.echo(f"Reachable: {metrics['reachable_count']:,}", err=True)
        click.echo(f"Unreachable: {metrics['unreachable_count']:,}", err=True)
        click.echo(f"Max distance: {metrics['max_distance']:.3f}", err=True)
        click.echo(f"Mean distance: {metrics['mean_distance']:.3f}", err=True)
