"""
Polyhedron Volume Accumulator

Sums one signed tetrahedron per triangular face, each closed off by the first
vertex of the vertex array. With a consistently counter-clockwise (seen from
outside) face list the contributions telescope to the enclosed volume, by the
discrete form of the divergence theorem.
"""

from typing import Any, Tuple

import numpy as np

from ..errors import FaceIndexError, InvalidFaceError, InvalidVertexError
from .tetrahedron import tetrahedron_volume, tetrahedron_volumes


def as_vertex_array(vertices: Any) -> np.ndarray:
    """
    Normalize a vertex array to an Nx3 float64 numpy array.

    Args:
        vertices: Sequence of Point3 / 3-sequences, or an Nx3 array

    Returns:
        Nx3 float64 array (a copy; the caller's data is never modified)
    """
    try:
        if not isinstance(vertices, np.ndarray):
            vertices = [tuple(v) for v in vertices]
        array = np.array(vertices, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidVertexError("Vertices must be numeric 3D points", details={"error": str(e)})

    if array.size == 0:
        return array.reshape(0, 3)

    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidVertexError(
            "Invalid vertex array dimensions",
            details={"expected": "Nx3", "got": array.shape}
        )

    return array


def as_face_array(faces: Any) -> np.ndarray:
    """
    Normalize a face list to an Mx3 integer numpy array.

    Args:
        faces: Sequence of index triples, a flat index sequence of length 3*M,
               or an Mx3 integer array

    Returns:
        Mx3 int64 array of vertex indices
    """
    try:
        if not isinstance(faces, np.ndarray):
            faces = [tuple(f) if not np.isscalar(f) else f for f in faces]
        array = np.array(faces)
    except (TypeError, ValueError) as e:
        raise InvalidFaceError("Faces must all be triangles", details={"error": str(e)})

    if array.size == 0:
        return np.zeros((0, 3), dtype=np.int64)

    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidFaceError(
            "Face indices must be integers",
            details={"dtype": str(array.dtype)}
        )

    if array.ndim == 1:
        if array.shape[0] % 3 != 0:
            raise InvalidFaceError(
                "Flat face list length must be a multiple of 3",
                details={"length": array.shape[0]}
            )
        array = array.reshape(-1, 3)
    elif array.ndim != 2 or array.shape[1] != 3:
        raise InvalidFaceError(
            "Faces must all be triangles",
            details={"expected": "Mx3", "got": array.shape}
        )

    return array.astype(np.int64)


def check_face_indices(faces: np.ndarray, num_vertices: int) -> None:
    """
    Ensure every face index lies in [0, num_vertices).

    Negative indices are rejected rather than wrapped around.

    Raises:
        FaceIndexError: On the first face (in list order) with an invalid index
    """
    invalid = (faces < 0) | (faces >= num_vertices)
    if np.any(invalid):
        face_position, corner = np.argwhere(invalid)[0]
        raise FaceIndexError(
            "Face index out of range",
            details={
                "face": int(face_position),
                "index": int(faces[face_position, corner]),
                "num_vertices": num_vertices,
            }
        )


def prepare_mesh(vertices: Any, faces: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Normalize and bounds-check a (vertices, faces) pair."""
    vertex_array = as_vertex_array(vertices)
    face_array = as_face_array(faces)
    check_face_indices(face_array, vertex_array.shape[0])
    return vertex_array, face_array


def polyhedron_volume(vertices: Any, faces: Any) -> float:
    """
    Volume enclosed by a triangulated polyhedron.

    Faces are visited in list order and each contributes the signed volume of
    the tetrahedron (face[0], face[1], face[2], vertices[0]). The reference
    point is always the first vertex, even when it is not part of the face.

    Args:
        vertices: Vertex array (Point3 sequence, 3-sequences or Nx3 array)
        faces: Face list (index triples, flat indices or Mx3 array)

    Returns:
        Sum of signed tetrahedron volumes; 0.0 for an empty face list

    Raises:
        FaceIndexError: If a face references a missing vertex
        InvalidFaceError: If the faces are not triangles
        InvalidVertexError: If the vertices are not 3D points
    """
    return sum_sequential(*prepare_mesh(vertices, faces))


def sum_sequential(vertex_array: np.ndarray, face_array: np.ndarray) -> float:
    """Sum face contributions in list order over arrays from prepare_mesh."""
    points = vertex_array.tolist()
    total = 0.0
    if not face_array.shape[0]:
        return total

    reference = points[0]
    for i, j, k in face_array.tolist():
        total += tetrahedron_volume(points[i], points[j], points[k], reference)

    return total


def polyhedron_volume_vectorized(vertices: Any, faces: Any) -> float:
    """
    Vectorized polyhedron volume for large face lists.

    Same contributions as polyhedron_volume but reduced with numpy's pairwise
    summation, so the total can differ from the sequential one in the last bits.
    """
    return sum_vectorized(*prepare_mesh(vertices, faces))


def sum_vectorized(vertex_array: np.ndarray, face_array: np.ndarray) -> float:
    """Sum face contributions with one numpy reduction over arrays from prepare_mesh."""
    if not face_array.shape[0]:
        return 0.0

    contributions = tetrahedron_volumes(
        vertex_array[face_array[:, 0]],
        vertex_array[face_array[:, 1]],
        vertex_array[face_array[:, 2]],
        vertex_array[0]
    )

    return float(np.sum(contributions))
