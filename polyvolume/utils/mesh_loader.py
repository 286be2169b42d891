"""
Mesh file loading.

A mesh file is YAML with two keys::

    vertices: [[0, 0, 0], [1, 0, 0], ...]
    faces: [[1, 0, 2], [1, 3, 0], ...]
"""

from pathlib import Path
from typing import List, Tuple, Union

import yaml

from ..data_models import Face, Point3
from ..errors import MeshFileError


def load_mesh(path: Union[str, Path]) -> Tuple[List[Point3], List[Face]]:
    """
    Read a triangulated mesh from a YAML file.

    Args:
        path: Mesh file path

    Returns:
        Tuple of (vertices, faces)

    Raises:
        MeshFileError: If the file is missing, unparsable or malformed
    """
    try:
        with open(path, 'r') as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        raise MeshFileError("Mesh file not found", details={"path": str(path)})
    except yaml.YAMLError as e:
        raise MeshFileError("Error parsing mesh file", details={"path": str(path), "error": str(e)})

    if not isinstance(data, dict) or 'vertices' not in data or 'faces' not in data:
        raise MeshFileError("Mesh file must define 'vertices' and 'faces'", details={"path": str(path)})

    try:
        vertices = [Point3.from_sequence(v) for v in data['vertices']]
        faces = [Face(*(int(i) for i in f)) for f in data['faces'] or []]
    except (TypeError, ValueError) as e:
        raise MeshFileError("Malformed mesh entry", details={"path": str(path), "error": str(e)})

    return vertices, faces
