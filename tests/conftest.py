"""Pytest configuration and shared fixtures."""

import pytest
import pandas as pd
import numpy as np
from pathlib import Path

from proxroute.core.vertex import create_vertex


@pytest.fixture
def line_vertices():
    """A(0,0,0), B(1,0,0), C(4,0,0): A-B and B-C connected, A-C not."""
    return [
        create_vertex('A', 0, 0, 0),
        create_vertex('B', 1, 0, 0),
        create_vertex('C', 4, 0, 0),
    ]


@pytest.fixture
def disconnected_vertices(line_vertices):
    """The line vertices plus D, far away from everything."""
    return line_vertices + [create_vertex('D', 100, 100, 100)]


@pytest.fixture
def sample_text():
    """Vertex records in name,x,y,z text form."""
    return "A,0,0,0\nB,1,0,0\nC,4,0,0\nD,100,100,100\n"


@pytest.fixture
def sample_vertices_df():
    """Sample vertex DataFrame for testing."""
    data = {
        'name': ['A', 'B', 'C', 'D'],
        'x': [0.0, 1.0, 4.0, 100.0],
        'y': [0.0, 0.0, 0.0, 100.0],
        'z': [0.0, 0.0, 0.0, 100.0]
    }
    return pd.DataFrame(data)


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for test files."""
    return tmp_path


@pytest.fixture
def sample_text_file(temp_dir, sample_text):
    """Create a temporary text file with vertex records."""
    file_path = temp_dir / "points.txt"
    file_path.write_text(sample_text, encoding='utf-8')
    return file_path


@pytest.fixture
def sample_tsv_file(temp_dir, sample_vertices_df):
    """Create a temporary TSV file with sample data."""
    file_path = temp_dir / "points.tsv"
    sample_vertices_df.to_csv(file_path, sep='\t', index=False)
    return file_path


def random_cloud(seed, count=40, extent=10.0):
    """Random vertices in a cube; dense enough to form several components."""
    rng = np.random.default_rng(seed)
    points = rng.uniform(0, extent, size=(count, 3))
    return [create_vertex(f"P{i}", *point) for i, point in enumerate(points)]


@pytest.fixture(params=[1, 7, 42, 2024])
def random_vertices(request):
    """Seeded random point clouds."""
    return random_cloud(request.param)
