"""
Volume Calculation Module

Implements signed tetrahedron volumes and their accumulation over a
triangulated polyhedron boundary.
"""

from .tetrahedron import tetrahedron_volume, tetrahedron_volumes
from .polyhedron import polyhedron_volume, polyhedron_volume_vectorized
from .volume_calculator import VolumeCalculator

__all__ = ['tetrahedron_volume', 'tetrahedron_volumes',
           'polyhedron_volume', 'polyhedron_volume_vectorized', 'VolumeCalculator']
