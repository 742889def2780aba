"""
Direction vectors shown alongside the orbit: angular momentum h, eccentricity e and node n.
"""
from typing import NamedTuple, Optional
import warnings

import numpy as np

from keplerorbit.config import DEFAULT_NODE_TOL
from keplerorbit.constants import AXIS_LABEL_DISTANCE, AXIS_LABEL_HEIGHT, LABEL_SCALE, NODE_LABEL_HEIGHT, VECTOR_LENGTH
from keplerorbit.frames import build_rotation
from keplerorbit.orbital_elements import OrbitalElements

Z_AXIS = np.array([0.0, 0.0, 1.0])


class DegenerateNodeVector(UserWarning):
    """Issued when the orbit lies in the reference plane and the ascending node is undefined."""


class DisplayVectors(NamedTuple):
    """
    Display directions scaled to a common length.

    Attributes:
        h: Orbit normal, direction of the specific angular momentum
        e: Direction of periapsis (eccentricity vector)
        n: Direction of the ascending node
        node_degenerate: True when n could not be computed from Z x h and
            the RAAN direction was used instead
    """
    h: np.ndarray
    e: np.ndarray
    n: np.ndarray
    node_degenerate: bool = False


class LabelAnchors(NamedTuple):
    """Positions of the text labels for the display vectors and the inertial axes."""
    h: np.ndarray
    e: np.ndarray
    n: np.ndarray
    x_axis: np.ndarray
    y_axis: np.ndarray
    z_axis: np.ndarray


def _scaled(vec: np.ndarray, length: float, eps: float = 1e-12) -> np.ndarray:
    norm = np.linalg.norm(vec)
    if norm < eps:
        raise ValueError("Zero vector cannot be normalized.")
    return vec / norm * length


def derive_vectors(elements: OrbitalElements,
                   rotation: Optional[np.ndarray] = None,
                   periapsis: Optional[np.ndarray] = None,
                   length: float = VECTOR_LENGTH,
                   node_tol: float = DEFAULT_NODE_TOL,
                   strict: bool = False) -> DisplayVectors:
    """
    Compute the h, e and n display vectors for a set of elements.

    h is the perifocal vector (0, 0, |h|) rotated into the inertial frame. It
    only gives the orbit normal for display, it is not a state vector.

    Args:
        elements: Orbital elements
        rotation: Perifocal to inertial rotation, built from the elements if omitted
        periapsis: Inertial periapsis position (first trajectory sample). If
            omitted it is taken along the perifocal P axis.
        length: Length of the returned vectors
        node_tol: Threshold on |Z x h_hat| below which the node is degenerate
        strict: Raise DegenerateNodeVector instead of warning

    Returns:
        DisplayVectors
    """
    if rotation is None:
        rotation = build_rotation(elements.i, elements.omega, elements.Omega)
    if periapsis is None:
        periapsis = rotation @ np.array([elements.periapsis_radius, 0.0, 0.0])

    h_vec = rotation @ np.array([0.0, 0.0, elements.angular_momentum])
    h_dir = _scaled(h_vec, length)
    e_dir = _scaled(np.asarray(periapsis, dtype=float), length)

    n_vec = np.cross(Z_AXIS, h_dir / length)
    node_degenerate = bool(np.linalg.norm(n_vec) < node_tol)
    if node_degenerate:
        message = (
            f"Ascending node is undefined for i={elements.i:.6f} deg; "
            f"using the RAAN direction Omega={elements.Omega:.2f} deg"
        )
        if strict:
            raise DegenerateNodeVector(message)
        warnings.warn(message, DegenerateNodeVector, stacklevel=2)
        # Limit of Z x h_hat as the inclination goes to zero
        Omega = np.radians(elements.Omega)
        n_dir = np.array([np.cos(Omega), np.sin(Omega), 0.0]) * length
    else:
        n_dir = _scaled(n_vec, length)

    return DisplayVectors(h=h_dir, e=e_dir, n=n_dir, node_degenerate=node_degenerate)


def label_anchors(vectors: DisplayVectors, scale: float = LABEL_SCALE) -> LabelAnchors:
    """Label positions just beyond each vector tip, the node label is kept above the XY plane."""
    n_anchor = vectors.n * scale
    n_anchor[2] = NODE_LABEL_HEIGHT
    return LabelAnchors(
        h=vectors.h * scale,
        e=vectors.e * scale,
        n=n_anchor,
        x_axis=np.array([AXIS_LABEL_DISTANCE, 0.0, AXIS_LABEL_HEIGHT]),
        y_axis=np.array([0.0, AXIS_LABEL_DISTANCE, AXIS_LABEL_HEIGHT]),
        z_axis=np.array([0.0, 0.0, AXIS_LABEL_DISTANCE]),
    )
