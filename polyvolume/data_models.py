"""
Data Models for Polyhedron Volume Calculation

Defines the value types shared by the volume modules and shape builders.
"""

from dataclasses import dataclass
from typing import NamedTuple, Sequence


@dataclass(frozen=True)
class Point3:
    """Immutable point (or vector) in 3D space."""
    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def translate(self, dx: float, dy: float, dz: float) -> "Point3":
        """Return this point moved by (dx, dy, dz)."""
        return Point3(self.x + dx, self.y + dy, self.z + dz)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point3":
        """Build a point from any length-3 sequence of numbers."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


class Face(NamedTuple):
    """Triangular face given as three vertex indices, counter-clockwise from outside."""
    i: int
    j: int
    k: int


@dataclass
class VolumeResult:
    """Results from polyhedron volume calculation."""
    volume: float
    num_vertices: int
    num_faces: int
    calculation_method: str  # "sequential" or "vectorized"
