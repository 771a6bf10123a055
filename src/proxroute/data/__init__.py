"""Vertex input parsing and result output."""

# Import submodules explicitly when needed:
#   from proxroute.data.loaders import parse_vertex_text
#   from proxroute.data.writers import write_results
#   from proxroute.data.validators import validate_record

__all__ = [
    "loaders",
    "validators",
    "writers",
]
