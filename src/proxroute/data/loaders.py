"""Vertex loading for text and tabular inputs.

Text input is a stream of ``name,x,y,z`` records. Fields are separated by
commas and records by newlines, but any mix works: the input is read as a
flat sequence of fields that is consumed four at a time. Blank lines are
ignored. Input order is preserved, so the first record is the default
search origin.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

import pandas as pd

from ..core.vertex import Vertex, create_vertex
from .validators import RECORD_FIELDS, validate_record

logger = logging.getLogger(__name__)


class InvalidRecordError(ValueError):
    """Raised when an input record cannot be turned into a vertex."""

    def __init__(self, record_number: int, errors: List[str]):
        self.record_number = record_number
        self.errors = errors
        super().__init__(f"Invalid record {record_number}: {'; '.join(errors)}")


def _iter_fields(text: str) -> Iterator[str]:
    for line in text.splitlines():
        if not line.strip():
            continue
        for field in line.split(','):
            yield field.strip()


def parse_vertex_text(text: str) -> List[Vertex]:
    """Parse ``name,x,y,z`` records into vertices.
    
    Args:
        text: Raw input text
        
    Returns:
        Vertices in input order
        
    Raises:
        InvalidRecordError: If a record is incomplete or has bad coordinates
    """
    fields = list(_iter_fields(text))
    width = len(RECORD_FIELDS)
    vertices = []
    
    for start in range(0, len(fields), width):
        record = fields[start:start + width]
        record_number = start // width + 1
        is_valid, errors = validate_record(record)
        if not is_valid:
            raise InvalidRecordError(record_number, errors)
        vertices.append(create_vertex(*record))
    
    logger.debug(f"Parsed {len(vertices)} vertices from {len(fields)} fields")
    return vertices


def load_vertices_from_stream(stream: TextIO) -> List[Vertex]:
    """Read and parse vertex records from an open text stream."""
    return parse_vertex_text(stream.read())


def load_vertices_from_file(file_path: Path) -> List[Vertex]:
    """Load vertex records from a text file.
    
    Raises:
        FileNotFoundError: If file doesn't exist
        InvalidRecordError: If a record is malformed
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    
    with open(file_path, 'r', encoding='utf-8') as f:
        return load_vertices_from_stream(f)


def vertices_from_dataframe(df: pd.DataFrame,
                            columns: Optional[List[str]] = None) -> List[Vertex]:
    """Convert DataFrame rows into vertices, keeping row order.
    
    Args:
        df: DataFrame with name and coordinate columns
        columns: Column names for name, x, y, z (default: name, x, y, z)
        
    Returns:
        Vertices in row order
        
    Raises:
        ValueError: If required columns are missing
        InvalidRecordError: If a row has bad values
    """
    columns = columns or RECORD_FIELDS
    missing_cols = [col for col in columns if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")
    
    vertices = []
    for record_number, row in enumerate(df[columns].itertuples(index=False), 1):
        record = ['' if pd.isna(value) else str(value) for value in row]
        is_valid, errors = validate_record(record)
        if not is_valid:
            raise InvalidRecordError(record_number, errors)
        vertices.append(create_vertex(*record))
    
    return vertices


def load_vertices_from_tsv(file_path: Path,
                           columns: Optional[List[str]] = None) -> List[Vertex]:
    """Load vertices from a TSV file with a header row.
    
    Args:
        file_path: Path to TSV file
        columns: Column names for name, x, y, z (default: name, x, y, z)
        
    Returns:
        Vertices in row order
        
    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If required columns are missing
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    
    df = pd.read_csv(file_path, sep='\t', dtype={(columns or RECORD_FIELDS)[0]: str})
    return vertices_from_dataframe(df, columns)
