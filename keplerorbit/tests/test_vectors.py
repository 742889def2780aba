import unittest
import warnings

import numpy as np
from numpy.testing import assert_allclose

from keplerorbit import (
    DegenerateNodeVector,
    OrbitalElements,
    VECTOR_LENGTH,
    angle_arcs,
    build_rotation,
    derive_vectors,
    label_anchors,
    sample_trajectory,
)
from keplerorbit.constants import AXIS_LABEL_DISTANCE, NODE_LABEL_HEIGHT, RAAN_ARC_OFFSET

Z_AXIS = np.array([0.0, 0.0, 1.0])


class TestDeriveVectors(unittest.TestCase):

    def setUp(self):
        self.elements = OrbitalElements.create(a=7000.0, e=0.3, i=51.6, omega=40.0, Omega=130.0, dt=10.0)
        self.trajectory = sample_trajectory(self.elements)
        self.vectors = derive_vectors(self.elements, periapsis=self.trajectory[0])

    def test_lengths(self):
        for vec in self.vectors[:3]:
            self.assertAlmostEqual(np.linalg.norm(vec), VECTOR_LENGTH, places=9)
        self.assertFalse(self.vectors.node_degenerate)

    def test_h_normal_to_orbit_plane(self):
        h_hat = self.vectors.h / VECTOR_LENGTH
        cosines = self.trajectory @ h_hat / np.linalg.norm(self.trajectory, axis=1)
        assert_allclose(cosines, 0.0, atol=1e-12)

    def test_h_matches_elements(self):
        i, Omega = np.radians(51.6), np.radians(130.0)
        expected = np.array([np.sin(Omega) * np.sin(i), -np.cos(Omega) * np.sin(i), np.cos(i)])
        assert_allclose(self.vectors.h, expected * VECTOR_LENGTH, atol=1e-9)

    def test_h_is_prograde(self):
        # Angular momentum of the sampled motion points along h
        r0, r1 = self.trajectory[0], self.trajectory[1]
        self.assertGreater(np.dot(np.cross(r0, r1), self.vectors.h), 0.0)

    def test_e_points_to_periapsis(self):
        assert_allclose(self.vectors.e,
                        self.trajectory[0] / np.linalg.norm(self.trajectory[0]) * VECTOR_LENGTH,
                        atol=1e-9)
        # Same result when the periapsis is not supplied
        assert_allclose(derive_vectors(self.elements).e, self.vectors.e, atol=1e-9)

    def test_node(self):
        n_expected = np.cross(Z_AXIS, self.vectors.h)
        n_expected = n_expected / np.linalg.norm(n_expected) * VECTOR_LENGTH
        assert_allclose(self.vectors.n, n_expected, atol=1e-9)
        self.assertEqual(self.vectors.n[2], 0.0)
        # The ascending node lies along the RAAN direction
        Omega = np.radians(130.0)
        assert_allclose(self.vectors.n, [np.cos(Omega) * VECTOR_LENGTH, np.sin(Omega) * VECTOR_LENGTH, 0.0],
                        atol=1e-9)

    def test_custom_length(self):
        vectors = derive_vectors(self.elements, length=1.0)
        for vec in vectors[:3]:
            self.assertAlmostEqual(np.linalg.norm(vec), 1.0, places=12)

    def test_equatorial_reference_orbit(self):
        elements = OrbitalElements.create(a=5137.0, e=0.6)
        with self.assertWarns(DegenerateNodeVector):
            vectors = derive_vectors(elements)
        assert_allclose(vectors.h, [0.0, 0.0, VECTOR_LENGTH], atol=1e-12)
        assert_allclose(vectors.e, [VECTOR_LENGTH, 0.0, 0.0], atol=1e-12)
        assert_allclose(vectors.n, [VECTOR_LENGTH, 0.0, 0.0], atol=1e-12)
        self.assertTrue(vectors.node_degenerate)


class TestDegenerateNode(unittest.TestCase):

    def test_fallback_to_raan_direction(self):
        for i in (0.0, 180.0):
            with self.subTest(i=i):
                elements = OrbitalElements.create(a=7000.0, e=0.1, i=i, omega=10.0, Omega=60.0)
                with self.assertWarns(DegenerateNodeVector):
                    vectors = derive_vectors(elements)
                Omega = np.radians(60.0)
                assert_allclose(vectors.n, np.array([np.cos(Omega), np.sin(Omega), 0.0]) * VECTOR_LENGTH,
                                atol=1e-9)
                self.assertTrue(vectors.node_degenerate)

    def test_strict(self):
        elements = OrbitalElements.create(a=7000.0, e=0.1, i=0.0)
        with self.assertRaises(DegenerateNodeVector):
            derive_vectors(elements, strict=True)

    def test_small_inclination_is_continuous(self):
        # Slider resolution is 0.01 deg, that is still a well defined node
        elements = OrbitalElements.create(a=7000.0, e=0.1, i=0.01, Omega=60.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error", DegenerateNodeVector)
            vectors = derive_vectors(elements)
        Omega = np.radians(60.0)
        assert_allclose(vectors.n, np.array([np.cos(Omega), np.sin(Omega), 0.0]) * VECTOR_LENGTH, atol=1e-6)
        self.assertFalse(vectors.node_degenerate)


class TestLabelAnchors(unittest.TestCase):

    def test_positions(self):
        elements = OrbitalElements.create(a=7000.0, e=0.2, i=30.0, omega=20.0, Omega=50.0)
        vectors = derive_vectors(elements)
        labels = label_anchors(vectors)
        assert_allclose(labels.h, vectors.h * 1.1)
        assert_allclose(labels.e, vectors.e * 1.1)
        assert_allclose(labels.n[:2], vectors.n[:2] * 1.1)
        self.assertEqual(labels.n[2], NODE_LABEL_HEIGHT)
        self.assertEqual(labels.z_axis[2], AXIS_LABEL_DISTANCE)
        # vectors themselves are not modified
        self.assertEqual(vectors.n[2], 0.0)


class TestAngleArcs(unittest.TestCase):

    def setUp(self):
        self.elements = OrbitalElements.create(a=7000.0, e=0.2, i=35.0, omega=75.0, Omega=160.0)
        self.rotation = build_rotation(35.0, 75.0, 160.0)
        self.arcs = angle_arcs(self.elements, self.rotation, radius=1000.0, segments=50)
        self.vectors = derive_vectors(self.elements, self.rotation)

    def test_shapes(self):
        for arc in self.arcs:
            self.assertEqual(arc.shape, (51, 3))

    def test_raan_arc(self):
        Omega = np.radians(160.0)
        assert_allclose(self.arcs.raan[0], [1000.0, 0.0, RAAN_ARC_OFFSET], atol=1e-9)
        assert_allclose(self.arcs.raan[-1], [1000.0 * np.cos(Omega), 1000.0 * np.sin(Omega), RAAN_ARC_OFFSET],
                        atol=1e-9)
        assert_allclose(np.linalg.norm(self.arcs.raan[:, :2], axis=1), 1000.0)

    def test_inclination_arc(self):
        # From the Z axis to the orbit normal
        assert_allclose(self.arcs.inclination[0], [0.0, 0.0, 1000.0], atol=1e-9)
        assert_allclose(self.arcs.inclination[-1], self.vectors.h / VECTOR_LENGTH * 1000.0, atol=1e-9)
        # Perpendicular to the node line
        assert_allclose(self.arcs.inclination @ self.vectors.n, 0.0, atol=1e-6)

    def test_periapsis_arc(self):
        # From periapsis back to the ascending node, inside the orbit plane
        assert_allclose(self.arcs.argument_of_periapsis[0], self.vectors.e / VECTOR_LENGTH * 1000.0, atol=1e-9)
        assert_allclose(self.arcs.argument_of_periapsis[-1], self.vectors.n / VECTOR_LENGTH * 1000.0, atol=1e-9)
        assert_allclose(self.arcs.argument_of_periapsis @ self.vectors.h, 0.0, atol=1e-6)

    def test_zero_angles(self):
        elements = OrbitalElements.create(a=7000.0, e=0.2)
        arcs = angle_arcs(elements)
        for arc in (arcs.inclination, arcs.argument_of_periapsis):
            assert_allclose(arc, np.repeat(arc[:1], len(arc), axis=0))


if __name__ == '__main__':
    unittest.main()
