"""
Reference frame rotations between the perifocal (PQW) frame and the inertial frame.
"""
import numpy as np


def R1(angle: float) -> np.ndarray:
    """
    Elemental frame rotation about the X axis by ``angle`` (radians).

    This is the coordinate transformation (ROT1 in Vallado), so R1(-a)
    rotates a vector by +a about X.
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, s],
        [0.0, -s, c],
    ])


def R3(angle: float) -> np.ndarray:
    """Elemental frame rotation about the Z axis by ``angle`` (radians), ROT3 in Vallado."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, s, 0.0],
        [-s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def build_rotation(i: float, omega: float, Omega: float) -> np.ndarray:
    """
    Build the rotation carrying perifocal coordinates into the inertial frame.

    R = R3(-Omega) @ R1(-i) @ R3(-omega)

    The columns of R are the perifocal P (towards periapsis), Q and W (orbit
    normal) axes expressed in the inertial frame.

    Args:
        i: Inclination (degrees)
        omega: Argument of periapsis (degrees)
        Omega: Right ascension of the ascending node (degrees)

    Returns:
        3x3 orthonormal rotation matrix
    """
    # Angles are used as given, no wrapping to [0, 360)
    return R3(-np.radians(Omega)) @ R1(-np.radians(i)) @ R3(-np.radians(omega))


def perifocal_to_inertial(points: np.ndarray, rotation: np.ndarray) -> np.ndarray:
    """Rotate an (n, 3) array of perifocal points into the inertial frame."""
    points = np.asarray(points, dtype=float)
    return points @ rotation.T
