"""
Tests for Signed Tetrahedron Volume
"""

import math

import pytest
import numpy as np
from hypothesis import given, strategies as st

from polyvolume.data_models import Point3
from polyvolume.volume.tetrahedron import tetrahedron_volume, tetrahedron_volumes


# Integer-valued coordinates keep every intermediate product exact
coordinate = st.integers(min_value=-100, max_value=100).map(float)
point = st.builds(Point3, coordinate, coordinate, coordinate)


class TestTetrahedronVolume:
    """Test suite for the signed tetrahedron volume."""

    @pytest.fixture
    def unit_tetrahedron(self):
        """Right-handed unit corner tetrahedron; apex at the origin."""
        return Point3(1, 0, 0), Point3(0, 1, 0), Point3(0, 0, 1), Point3(0, 0, 0)

    def test_unit_tetrahedron_volume(self, unit_tetrahedron):
        """Test the corner tetrahedron of the unit cube."""
        assert tetrahedron_volume(*unit_tetrahedron) == 1 / 6.0

    def test_reverse_winding_is_negative(self, unit_tetrahedron):
        """Test that clockwise winding yields a negative volume."""
        p0, p1, p2, p3 = unit_tetrahedron
        assert tetrahedron_volume(p1, p0, p2, p3) == -1 / 6.0

    def test_accepts_plain_sequences(self):
        """Test that tuples and numpy rows behave like Point3."""
        points = np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1], [0, 0, 0]], dtype=np.float64)

        assert tetrahedron_volume(*points) == 1 / 6.0
        assert tetrahedron_volume((1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, 0)) == 1 / 6.0

    def test_returns_python_float(self):
        """Test that the result is a builtin float even for numpy input."""
        points = np.eye(4, 3)
        assert type(tetrahedron_volume(*points)) is float

    def test_scaled_volume(self):
        """Test that scaling every edge by k scales the volume by k^3."""
        volume = tetrahedron_volume(Point3(3, 0, 0), Point3(0, 3, 0), Point3(0, 0, 3), Point3(0, 0, 0))
        assert volume == pytest.approx(27 / 6.0)

    def test_nan_propagates(self):
        """Test that non-finite coordinates give a non-finite result, not an error."""
        volume = tetrahedron_volume(Point3(math.nan, 0, 0), Point3(0, 1, 0), Point3(0, 0, 1), Point3(0, 0, 0))
        assert math.isnan(volume)

    def test_infinity_propagates(self):
        """Test that infinite coordinates propagate."""
        volume = tetrahedron_volume(Point3(math.inf, 0, 0), Point3(0, 1, 0), Point3(0, 0, 1), Point3(0, 0, 0))
        assert not math.isfinite(volume)

    def test_inputs_not_modified(self):
        """Test that input sequences are left untouched."""
        points = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [0.5, 0.5, 0.5]]
        snapshot = [p[:] for p in points]

        tetrahedron_volume(*points)

        assert points == snapshot

    @pytest.mark.property
    @given(p0=point, p1=point, p2=point, p3=point)
    def test_property_swap_negates(self, p0, p1, p2, p3):
        """Property test: swapping two face vertices negates the volume."""
        volume = tetrahedron_volume(p0, p1, p2, p3)

        assert tetrahedron_volume(p1, p0, p2, p3) == -volume
        assert tetrahedron_volume(p0, p2, p1, p3) == -volume
        assert tetrahedron_volume(p2, p1, p0, p3) == -volume

    @pytest.mark.property
    @given(p0=point, p1=point, p2=point, p3=point, offset=st.tuples(coordinate, coordinate, coordinate))
    def test_property_translation_invariance(self, p0, p1, p2, p3, offset):
        """Property test: translating all four points leaves the volume unchanged."""
        moved = [p.translate(*offset) for p in (p0, p1, p2, p3)]

        assert tetrahedron_volume(*moved) == tetrahedron_volume(p0, p1, p2, p3)

    @pytest.mark.property
    @given(
        p0=point, p1=point, p2=point,
        s=st.integers(min_value=-5, max_value=5),
        t=st.integers(min_value=-5, max_value=5)
    )
    def test_property_coplanar_is_zero(self, p0, p1, p2, s, t):
        """Property test: four coplanar points give zero volume."""
        u = p1 - p0
        v = p2 - p0
        p3 = Point3(p0.x + s * u.x + t * v.x,
                    p0.y + s * u.y + t * v.y,
                    p0.z + s * u.z + t * v.z)

        assert tetrahedron_volume(p0, p1, p2, p3) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.property
    @given(p0=point, p1=point, p2=point, p3=point)
    def test_property_matches_determinant(self, p0, p1, p2, p3):
        """Property test: volume equals det([a, b, c]) / 6 with p3 at the origin."""
        matrix = np.array([tuple(p0 - p3), tuple(p1 - p3), tuple(p2 - p3)])
        expected = np.linalg.det(matrix) / 6.0

        assert tetrahedron_volume(p0, p1, p2, p3) == pytest.approx(expected, rel=1e-9, abs=1e-6)


class TestTetrahedronVolumesVectorized:
    """Test suite for the vectorized tetrahedron volumes."""

    def test_matches_scalar_version(self):
        """Test element-wise agreement with tetrahedron_volume."""
        rng = np.random.default_rng(42)
        p0, p1, p2, p3 = (rng.uniform(-10, 10, (50, 3)) for _ in range(4))

        volumes = tetrahedron_volumes(p0, p1, p2, p3)

        assert volumes.shape == (50,)
        for i in range(50):
            assert volumes[i] == tetrahedron_volume(p0[i], p1[i], p2[i], p3[i])

    def test_broadcast_apex(self):
        """Test that a single apex is shared by every row."""
        p0 = np.array([[1, 0, 0], [0, 1, 0]], dtype=np.float64)
        p1 = np.array([[0, 1, 0], [1, 0, 0]], dtype=np.float64)
        p2 = np.array([[0, 0, 1], [0, 0, 1]], dtype=np.float64)

        volumes = tetrahedron_volumes(p0, p1, p2, np.zeros(3))

        np.testing.assert_array_equal(volumes, [1 / 6.0, -1 / 6.0])

    def test_empty_input(self):
        """Test that zero tetrahedra give an empty result."""
        empty = np.zeros((0, 3))
        assert tetrahedron_volumes(empty, empty, empty, np.zeros(3)).shape == (0,)
