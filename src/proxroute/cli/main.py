"""Main CLI entry point for proxroute package."""

import click

from ..core.vertex import DEFAULT_THRESHOLD
from .paths import paths_cmd

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(prog_name='proxroute')
def main():
    """Shortest distances through clouds of 3D points.

    Input points are name,x,y,z records. Two points are joined by an edge
    when they are at most the connection threshold apart (3.0 unless
    --threshold says otherwise), and the length of a route is the sum of
    its edge lengths. `proxroute paths` reports, for every point that can
    be reached from the origin, the length of its shortest route.
    """


main.add_command(paths_cmd, name='paths')


@main.command()
def version():
    """Show version and the default connection threshold."""
    from ..__version__ import __version__
    click.echo(f"proxroute version {__version__}")
    click.echo(f"default threshold {DEFAULT_THRESHOLD}")


if __name__ == '__main__':
    main()
