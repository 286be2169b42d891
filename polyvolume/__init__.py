"""
Polyhedron Volume Calculator

Computes the volume enclosed by a triangulated polyhedron with the discrete
divergence theorem: one signed tetrahedron per face, all sharing the first
vertex as their apex.

This package implements:
- Signed tetrahedron volume via the scalar triple product
- Accumulation over a face list, sequential or numpy-vectorized
- Face tables for hexahedra, prisms and pyramids
- YAML configuration and mesh files
"""

__version__ = "1.0.0"
__author__ = "Polyhedron Volume Team"

from .volume import (
    tetrahedron_volume, tetrahedron_volumes,
    polyhedron_volume, polyhedron_volume_vectorized, VolumeCalculator
)
from .shapes import hexahedron_volume, prism_volume
from .data_models import Point3, Face, VolumeResult
from .errors import (
    PolyhedronVolumeError, FaceIndexError, InvalidFaceError,
    InvalidVertexError, MeshFileError
)

__all__ = [
    # Volume
    'tetrahedron_volume', 'tetrahedron_volumes',
    'polyhedron_volume', 'polyhedron_volume_vectorized', 'VolumeCalculator',
    # Shapes
    'hexahedron_volume', 'prism_volume',
    # Data Models
    'Point3', 'Face', 'VolumeResult',
    # Errors
    'PolyhedronVolumeError', 'FaceIndexError', 'InvalidFaceError',
    'InvalidVertexError', 'MeshFileError'
]
