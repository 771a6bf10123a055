"""Validation of raw vertex records."""

import math
from typing import List, Sequence, Tuple

RECORD_FIELDS = ['name', 'x', 'y', 'z']


def validate_coordinate(field: str, value: str) -> List[str]:
    """Check that a coordinate field holds a finite decimal number."""
    try:
        number = float(value)
    except (ValueError, TypeError):
        return [f"Coordinate {field} must be numeric, got: {value!r}"]
    if not math.isfinite(number):
        return [f"Coordinate {field} must be finite, got: {value!r}"]
    return []


def validate_record(fields: Sequence[str]) -> Tuple[bool, List[str]]:
    """Validate one ``name,x,y,z`` record.
    
    Args:
        fields: Record split into its fields
        
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    if len(fields) != len(RECORD_FIELDS):
        errors.append(f"Expected {len(RECORD_FIELDS)} fields (name,x,y,z), got {len(fields)}")
        return False, errors
    
    name, *coords = fields
    if not isinstance(name, str) or not name.strip():
        errors.append("Vertex name must be a non-empty string")
    
    for field, value in zip(RECORD_FIELDS[1:], coords):
        errors.extend(validate_coordinate(field, value))
    
    return len(errors) == 0, errors
