"""
Canonical Solids Module

Ready-made vertex and face tables for hexahedra, prisms and pyramids.
"""

from .solids import (
    HEXAHEDRON_FACES, PRISM_FACES, PYRAMID_FACES, SOLID_NAMES,
    hexahedron_volume, prism_volume, pyramid, box, cube,
    slanted_parallelepiped, trapezium_3d, triangular_prism, canonical_solids
)

__all__ = [
    'HEXAHEDRON_FACES', 'PRISM_FACES', 'PYRAMID_FACES', 'SOLID_NAMES',
    'hexahedron_volume', 'prism_volume', 'pyramid', 'box', 'cube',
    'slanted_parallelepiped', 'trapezium_3d', 'triangular_prism', 'canonical_solids'
]
