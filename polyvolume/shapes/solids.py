"""
Canonical Solids

Face tables and builders for common solids. Every builder returns a fresh
(vertices, faces) pair; the face tables are immutable module constants.

Hexahedron vertex numbering (cube shown)::

         4  .__________. 7
           /|      6  /|
      5  ./_|_______./ |
         |  |       |  |
         |  |0      |  |
         |  |_______|__|3
         | /        | /
      1  |/_________|/ 2

Prism vertex numbering; top and bottom need not be parallel::

          3 .
           /|\\
       4 ./_|_\\. 5
         |  |  |
         |  |0 |
         |  |  |
         | / \\ |
      1  |/___\\| 2
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..data_models import Face, Point3
from ..errors import InvalidVertexError
from ..volume.polyhedron import polyhedron_volume

Mesh = Tuple[List[Point3], List[Face]]

HEXAHEDRON_FACES: Tuple[Face, ...] = (
    Face(0, 2, 1), Face(0, 3, 2),  # base
    Face(4, 5, 6), Face(4, 6, 7),  # top
    Face(0, 5, 4), Face(0, 1, 5),  # left
    Face(1, 6, 5), Face(1, 2, 6),  # front
    Face(3, 6, 2), Face(3, 7, 6),  # right
    Face(0, 7, 3), Face(0, 4, 7),  # back
)

PRISM_FACES: Tuple[Face, ...] = (
    Face(0, 2, 1),  # base
    Face(3, 4, 5),  # top
    Face(0, 4, 3), Face(0, 1, 4),  # left
    Face(1, 5, 4), Face(1, 2, 5),  # front
    Face(0, 3, 5), Face(0, 5, 2),  # right
)

# Face (2, 3, 0) winds inward; it touches vertex 0, so it adds nothing to the total
PYRAMID_FACES: Tuple[Face, ...] = (
    Face(1, 0, 2),
    Face(1, 3, 0),
    Face(2, 3, 0),
    Face(1, 2, 3),
)


def _points(coords: Sequence[Sequence[float]]) -> List[Point3]:
    return [Point3.from_sequence(c) for c in coords]


def _require_vertex_count(vertices: Sequence, expected: int, solid: str) -> None:
    if len(vertices) != expected:
        raise InvalidVertexError(
            f"A {solid} needs exactly {expected} vertices",
            details={"expected": expected, "got": len(vertices)}
        )


def hexahedron_volume(vertices: Sequence) -> float:
    """
    Volume of a quadrilateral-faced hexahedron.

    Args:
        vertices: 8 points in the hexahedron numbering shown in the module docstring

    Returns:
        Enclosed volume
    """
    _require_vertex_count(vertices, 8, "hexahedron")
    return polyhedron_volume(vertices, HEXAHEDRON_FACES)


def prism_volume(vertices: Sequence) -> float:
    """
    Volume of a triangular prism.

    Args:
        vertices: 6 points in the prism numbering shown in the module docstring

    Returns:
        Enclosed volume
    """
    _require_vertex_count(vertices, 6, "prism")
    return polyhedron_volume(vertices, PRISM_FACES)


def pyramid() -> Mesh:
    """Triangular pyramid with apex (1, 1, 1) over the unit right triangle; volume 1/6."""
    vertices = _points([(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 1)])
    return vertices, list(PYRAMID_FACES)


def box(lx: float, ly: float, lz: float,
        origin: Sequence[float] = (0.0, 0.0, 0.0)) -> Mesh:
    """
    Axis-aligned rectangular box.

    Args:
        lx, ly, lz: Edge lengths along x, y and z
        origin: Position of vertex 0

    Returns:
        Tuple of (vertices, faces) with volume lx * ly * lz
    """
    ox, oy, oz = origin
    vertices = _points([
        (ox, oy, oz),
        (ox + lx, oy, oz),
        (ox + lx, oy + ly, oz),
        (ox, oy + ly, oz),
        (ox, oy, oz + lz),
        (ox + lx, oy, oz + lz),
        (ox + lx, oy + ly, oz + lz),
        (ox, oy + ly, oz + lz),
    ])
    return vertices, list(HEXAHEDRON_FACES)


def cube(edge: float) -> Mesh:
    """Axis-aligned cube with vertex 0 at the origin."""
    return box(edge, edge, edge)


def slanted_parallelepiped(lx: float, ly: float, lz: float, shift: float) -> Mesh:
    """
    Box whose top face is sheared by ``shift`` along y.

    Cross-section and height match box(lx, ly, lz), so the volume is the same.
    """
    vertices, faces = box(lx, ly, lz)
    sheared = [v if i < 4 else v.translate(0.0, shift, 0.0) for i, v in enumerate(vertices)]
    return sheared, faces


def trapezium_3d() -> Mesh:
    """4 x 2 x 2 box with a wedge of height 2 on top along its back edge; volume 24."""
    vertices = _points([
        (0, 0, 0), (4, 0, 0), (4, 2, 0), (0, 2, 0),
        (0, 0, 2), (4, 0, 2), (4, 2, 4), (0, 2, 4),
    ])
    return vertices, list(HEXAHEDRON_FACES)


def triangular_prism(a: float, b: float, height: float) -> Mesh:
    """
    Right prism over a right triangle with legs ``a`` (x) and ``b`` (y).

    Returns:
        Tuple of (vertices, faces) with volume a * b * height / 2
    """
    vertices = _points([
        (0, 0, 0), (a, 0, 0), (0, b, 0),
        (0, 0, height), (a, 0, height), (0, b, height),
    ])
    return vertices, list(PRISM_FACES)


def canonical_solids(params: Optional[Dict[str, Any]] = None) -> Dict[str, Callable[[], Mesh]]:
    """
    Named builders for the solids reported by the command line tool.

    Args:
        params: Solid dimensions (the 'solids' configuration section)

    Returns:
        Mapping of solid name to a zero-argument builder
    """
    params = params or {}
    edge = float(params.get('cube_edge', 2.0))
    lx, ly, lz = (float(d) for d in params.get('box_dimensions', [4.0, 2.0, 2.0]))
    shift = float(params.get('slant_shift', 1.0))
    a, b = (float(d) for d in params.get('prism_legs', [4.0, 4.0]))
    height = float(params.get('prism_height', 6.0))

    return {
        'pyramid': pyramid,
        'cube': lambda: cube(edge),
        'parallelepiped': lambda: box(lx, ly, lz),
        'slanted_parallelepiped': lambda: slanted_parallelepiped(lx, ly, lz, shift),
        'prism': lambda: triangular_prism(a, b, height),
        'trapezium_3d': trapezium_3d,
    }


SOLID_NAMES: Tuple[str, ...] = tuple(canonical_solids())
