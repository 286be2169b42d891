"""
Signed Tetrahedron Volume

Computes the signed volume of a tetrahedron by translating its fourth vertex
to the origin and taking the scalar triple product of the remaining edges
(O'Rourke, Computational Geometry in C, 2nd ed., Code 4.16).
"""

import numpy as np


def tetrahedron_volume(p0, p1, p2, p3) -> float:
    """
    Signed volume of the tetrahedron (p0, p1, p2, p3).

    Args:
        p0, p1, p2: Face vertices, any iterable of three numbers (Point3, tuple, array row)
        p3: Apex; moved to the origin before the triple product

    Returns:
        Positive volume when p0, p1, p2 wind counter-clockwise as seen from the
        side opposite p3, negative for the reverse winding, zero when coplanar
    """
    x0, y0, z0 = p0
    x1, y1, z1 = p1
    x2, y2, z2 = p2
    x3, y3, z3 = p3

    ax = float(x0) - float(x3)
    ay = float(y0) - float(y3)
    az = float(z0) - float(z3)
    bx = float(x1) - float(x3)
    by = float(y1) - float(y3)
    bz = float(z1) - float(z3)
    cx = float(x2) - float(x3)
    cy = float(y2) - float(y3)
    cz = float(z2) - float(z3)

    # Term order must not change: callers compare results bit for bit
    return (ax * (by * cz - bz * cy)
            + ay * (bz * cx - bx * cz)
            + az * (bx * cy - by * cx)) / 6.0


def tetrahedron_volumes(p0: np.ndarray, p1: np.ndarray,
                        p2: np.ndarray, p3: np.ndarray) -> np.ndarray:
    """
    Vectorized signed volumes for many tetrahedra at once.

    Args:
        p0, p1, p2: Mx3 arrays of face vertices
        p3: Mx3 array (or a single 3-vector broadcast to all rows) of apexes

    Returns:
        Array of M signed volumes, element-wise equal to tetrahedron_volume
    """
    p3 = np.asarray(p3, dtype=np.float64)
    a = np.asarray(p0, dtype=np.float64) - p3
    b = np.asarray(p1, dtype=np.float64) - p3
    c = np.asarray(p2, dtype=np.float64) - p3

    return (a[..., 0] * (b[..., 1] * c[..., 2] - b[..., 2] * c[..., 1])
            + a[..., 1] * (b[..., 2] * c[..., 0] - b[..., 0] * c[..., 2])
            + a[..., 2] * (b[..., 0] * c[..., 1] - b[..., 1] * c[..., 0])) / 6.0
