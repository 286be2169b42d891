"""
Pytest configuration and fixtures for polyhedron volume tests.
"""

import pytest
import numpy as np
from polyvolume.data_models import Point3
from polyvolume.shapes.solids import HEXAHEDRON_FACES, PYRAMID_FACES
from polyvolume.utils.config_manager import ConfigManager


@pytest.fixture
def config_manager():
    """Fixture providing a configuration manager instance."""
    return ConfigManager()


@pytest.fixture
def pyramid_mesh():
    """Fixture providing the 4-vertex pyramid with volume 1/6."""
    vertices = [
        Point3(0, 0, 0),
        Point3(1, 0, 0),
        Point3(0, 1, 0),
        Point3(1, 1, 1)
    ]
    return vertices, list(PYRAMID_FACES)


@pytest.fixture
def cube_vertices():
    """Fixture providing the 8 vertices of a 2x2x2 cube in hexahedron order."""
    return [
        Point3(0, 0, 0),  # 0
        Point3(2, 0, 0),  # 1
        Point3(2, 2, 0),  # 2
        Point3(0, 2, 0),  # 3
        Point3(0, 0, 2),  # 4
        Point3(2, 0, 2),  # 5
        Point3(2, 2, 2),  # 6
        Point3(0, 2, 2)   # 7
    ]


@pytest.fixture
def cube_mesh(cube_vertices):
    """Fixture providing the 2x2x2 cube as (vertices, faces)."""
    return cube_vertices, list(HEXAHEDRON_FACES)


@pytest.fixture
def prism_vertices():
    """Fixture providing a right-triangle prism with legs 4, 4 and height 6."""
    return [
        Point3(0, 0, 0),  # 0
        Point3(4, 0, 0),  # 1
        Point3(0, 4, 0),  # 2
        Point3(0, 0, 6),  # 3
        Point3(4, 0, 6),  # 4
        Point3(0, 4, 6)   # 5
    ]


@pytest.fixture
def cube_array(cube_vertices):
    """Fixture providing the cube vertices as an 8x3 numpy array."""
    return np.array([tuple(v) for v in cube_vertices], dtype=np.float64)


@pytest.fixture
def mesh_file(tmp_path):
    """Fixture writing the pyramid to a YAML mesh file."""
    path = tmp_path / "pyramid.yaml"
    path.write_text(
        "vertices:\n"
        "  - [0, 0, 0]\n"
        "  - [1, 0, 0]\n"
        "  - [0, 1, 0]\n"
        "  - [1, 1, 1]\n"
        "faces:\n"
        "  - [1, 0, 2]\n"
        "  - [1, 3, 0]\n"
        "  - [2, 3, 0]\n"
        "  - [1, 2, 3]\n"
    )
    return path
