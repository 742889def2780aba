"""
Polylines for the angle wedges that annotate the inclination, argument of periapsis and RAAN.
"""
from typing import NamedTuple, Optional

import numpy as np

from keplerorbit.constants import ANGLE_ARC_RADIUS, ARC_SEGMENTS, RAAN_ARC_OFFSET
from keplerorbit.frames import build_rotation, perifocal_to_inertial
from keplerorbit.orbital_elements import OrbitalElements


class AngleArcs(NamedTuple):
    """Arc points, each of shape (segments + 1, 3). The wedge apex is the origin."""
    inclination: np.ndarray
    argument_of_periapsis: np.ndarray
    raan: np.ndarray


def _planar_arc(sweep: float, radius: float, segments: int) -> np.ndarray:
    theta = np.linspace(0.0, sweep, segments + 1)
    return np.column_stack([radius * np.cos(theta), radius * np.sin(theta), np.zeros_like(theta)])


def raan_arc(Omega: float, radius: float = ANGLE_ARC_RADIUS, segments: int = ARC_SEGMENTS) -> np.ndarray:
    """Arc in the XY plane from the X axis to the ascending node."""
    points = _planar_arc(np.radians(Omega), radius, segments)
    points[:, 2] = RAAN_ARC_OFFSET
    return points


def inclination_arc(i: float, Omega: float, radius: float = ANGLE_ARC_RADIUS,
                    segments: int = ARC_SEGMENTS) -> np.ndarray:
    """
    Arc from the Z axis to the orbit normal.

    It lies in the plane spanned by Z and h, perpendicular to the node line,
    so it ends on the h vector.
    """
    theta = np.linspace(0.0, np.radians(i), segments + 1)
    Omega = np.radians(Omega)
    return np.column_stack([
        radius * np.sin(theta) * np.sin(Omega),
        -radius * np.sin(theta) * np.cos(Omega),
        radius * np.cos(theta),
    ])


def periapsis_arc(omega: float, rotation: np.ndarray, radius: float = ANGLE_ARC_RADIUS,
                  segments: int = ARC_SEGMENTS) -> np.ndarray:
    """Arc in the orbit plane from periapsis back to the ascending node."""
    return perifocal_to_inertial(_planar_arc(-np.radians(omega), radius, segments), rotation)


def angle_arcs(elements: OrbitalElements, rotation: Optional[np.ndarray] = None,
               radius: float = ANGLE_ARC_RADIUS, segments: int = ARC_SEGMENTS) -> AngleArcs:
    if rotation is None:
        rotation = build_rotation(elements.i, elements.omega, elements.Omega)
    return AngleArcs(
        inclination=inclination_arc(elements.i, elements.Omega, radius, segments),
        argument_of_periapsis=periapsis_arc(elements.omega, rotation, radius, segments),
        raan=raan_arc(elements.Omega, radius, segments),
    )
