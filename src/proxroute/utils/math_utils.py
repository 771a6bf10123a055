"""Mathematical utilities for point-set distance calculations."""

import math
from typing import Sequence, Tuple

import numpy as np


def distance_3d(p1: Tuple[float, float, float], p2: Tuple[float, float, float]) -> float:
    """Calculate 3D Euclidean distance between two points.
    
    Args:
        p1: First point as (x, y, z) tuple
        p2: Second point as (x, y, z) tuple
        
    Returns:
        Euclidean distance between the points
    """
    return math.sqrt((p1[0] - p2[0])**2 + (p1[1] - p2[1])**2 + (p1[2] - p2[2])**2)


def squared_distances_from(coords: np.ndarray, point: Sequence[float]) -> np.ndarray:
    """Squared distances from one point to every row of an (N, 3) array.
    
    Args:
        coords: Coordinates as numpy array (N, 3)
        point: Reference point as (x, y, z)
        
    Returns:
        Array of N squared distances
    """
    return np.sum((coords - np.asarray(point, dtype=float)) ** 2, axis=1)
