"""
Volume Calculator

Configurable front-end over the polyhedron volume accumulator.
"""

import logging
import math
from typing import Any, Optional

from ..data_models import VolumeResult
from ..utils.config_manager import ConfigManager, VALID_METHODS
from .polyhedron import prepare_mesh, sum_sequential, sum_vectorized


class VolumeCalculator:
    """Polyhedron volume calculator driven by configuration."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """
        Initialize volume calculator.

        Args:
            config_manager: Configuration manager instance
        """
        self.config = config_manager or ConfigManager()
        self.logger = logging.getLogger(__name__)

        volume_config = self.config.get_volume_params()

        self.method = volume_config.get('method', 'sequential')
        self.tolerance = float(volume_config.get('tolerance', 1e-4))

        if self.method not in VALID_METHODS:
            raise ValueError(f"Unknown volume method: {self.method!r}")

        self.logger.info(f"Volume calculator initialized: method={self.method}, tolerance={self.tolerance}")

    def calculate(self, vertices: Any, faces: Any) -> VolumeResult:
        """
        Compute the enclosed volume of a triangulated polyhedron.

        Args:
            vertices: Vertex array; the first vertex is the reference point
            faces: Triangular faces, counter-clockwise seen from outside

        Returns:
            VolumeResult with the signed total and mesh sizes
        """
        vertex_array, face_array = prepare_mesh(vertices, faces)

        if self.method == 'sequential':
            volume = sum_sequential(vertex_array, face_array)
        elif self.method == 'vectorized':
            volume = sum_vectorized(vertex_array, face_array)
        else:
            raise ValueError(f"Unknown volume method: {self.method!r}")

        self.logger.debug(f"Volume computed: {volume:.6f} from {face_array.shape[0]} faces "
                          f"and {vertex_array.shape[0]} vertices ({self.method})")

        return VolumeResult(
            volume=volume,
            num_vertices=vertex_array.shape[0],
            num_faces=face_array.shape[0],
            calculation_method=self.method
        )

    def calculate_volume(self, vertices: Any, faces: Any) -> float:
        """Compute the enclosed volume and return it as a plain float."""
        return self.calculate(vertices, faces).volume

    def matches(self, volume: float, expected: float) -> bool:
        """
        Check a computed volume against an expected one.

        Args:
            volume: Computed volume
            expected: Reference volume

        Returns:
            True when the two differ by at most the configured tolerance
        """
        return abs(volume - expected) <= self.tolerance

    def set_method(self, method: str) -> None:
        """
        Switch between sequential and vectorized summation.

        Args:
            method: "sequential" or "vectorized"
        """
        if method not in VALID_METHODS:
            raise ValueError(f"Unknown volume method: {method!r}")

        self.method = method
        self.logger.info(f"Volume method updated to {method}")

    def set_tolerance(self, tolerance: float) -> None:
        """
        Update comparison tolerance.

        Args:
            tolerance: New absolute tolerance
        """
        if not math.isfinite(tolerance) or tolerance < 0:
            raise ValueError("Volume tolerance must be finite and non-negative")

        self.tolerance = tolerance
        self.logger.info(f"Volume tolerance updated to {tolerance}")
