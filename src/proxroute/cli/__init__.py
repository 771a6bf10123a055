"""Command line interfaces."""

# Import submodules explicitly when needed:
#   from proxroute.cli.main import main
#   from proxroute.cli.paths import paths_cmd

__all__ = [
    "main",
    "paths",
]
