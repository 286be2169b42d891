"""
Exception hierarchy for polyhedron volume calculation.

Every error carries an optional ``details`` dict describing the offending
input, so callers can report precisely which face or vertex was rejected.
"""

from typing import Any, Dict, Optional


class PolyhedronVolumeError(Exception):
    """Base class for all errors raised by the polyvolume package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({detail_str})"


class FaceIndexError(PolyhedronVolumeError, IndexError):
    """A face references a vertex position outside the vertex array."""


class InvalidFaceError(PolyhedronVolumeError, ValueError):
    """A face list cannot be split into triangles."""


class InvalidVertexError(PolyhedronVolumeError, ValueError):
    """A vertex array is not made of 3-component points."""


class MeshFileError(PolyhedronVolumeError):
    """A mesh file could not be read or lacks vertices/faces."""
