"""Output of shortest-path results."""

import math
from decimal import Decimal
from pathlib import Path
from typing import Iterable, TextIO, Tuple, Union

import pandas as pd

RESULT_COLUMNS = ['name', 'distance']


def format_distance(distance: float) -> str:
    """Render a distance the way Java's ``Double.toString`` does.
    
    Magnitudes in [1e-3, 1e7) use plain decimal notation with at least one
    fractional digit (``4.0``); anything else uses ``<d>.<digits>E<exp>``
    (``1.0E-5``, ``1.2345678E7``). Digits are the shortest round-trip
    digits of the float.
    
    Args:
        distance: Distance to render
        
    Returns:
        Formatted distance
    """
    if math.isnan(distance):
        return 'NaN'
    if math.isinf(distance):
        return 'Infinity' if distance > 0 else '-Infinity'
    if distance == 0 or 1e-3 <= abs(distance) < 1e7:
        return repr(float(distance))
    
    sign, digits, exponent = Decimal(repr(float(distance))).normalize().as_tuple()
    mantissa = str(digits[0]) + '.' + (''.join(map(str, digits[1:])) or '0')
    return f"{'-' if sign else ''}{mantissa}E{len(digits) - 1 + exponent}"


def format_result(name: str, distance: float) -> str:
    """Render a result as ``name:distance``."""
    return f"{name}:{format_distance(distance)}"


def write_results(results: Iterable[Tuple[str, float]], stream: TextIO) -> int:
    """Write one ``name:distance`` line per result, in the order received.
    
    Args:
        results: Iterable of (name, distance) pairs
        stream: Writable text stream
        
    Returns:
        Number of results written
    """
    count = 0
    for name, distance in results:
        stream.write(format_result(name, distance) + '\n')
        count += 1
    return count


def results_to_dataframe(results: Iterable[Tuple[str, float]]) -> pd.DataFrame:
    """Collect results into a DataFrame with ``name`` and ``distance`` columns."""
    return pd.DataFrame(list(results), columns=RESULT_COLUMNS)


def write_results_tsv(results: Iterable[Tuple[str, float]],
                      output: Union[Path, TextIO]) -> int:
    """Write results as TSV with a header row to a path or open stream.
    
    Returns:
        Number of results written
    """
    df = results_to_dataframe(results)
    df.to_csv(output, sep='\t', index=False)
    return len(df)
