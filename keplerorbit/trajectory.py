"""
Sampling of a full closed orbit at uniform time steps.
"""
import math
from typing import Optional, Tuple

import numpy as np

from keplerorbit.config import DEFAULT_KEPLER_TOL, DEFAULT_MAX_ITER
from keplerorbit.frames import build_rotation, perifocal_to_inertial
from keplerorbit.kepler import orbit_radius, solve_kepler
from keplerorbit.orbital_elements import OrbitalElements


def sample_times(elements: OrbitalElements) -> np.ndarray:
    """
    Sample epochs covering exactly one period.

    Returns ceil(T / dt) + 1 epochs spaced by dt, the last one clamped to T
    so that the sampled orbit closes on itself.
    """
    T = elements.period
    n_samples = math.ceil(T / elements.dt) + 1
    return np.minimum(np.arange(n_samples) * elements.dt, T)


def propagate_perifocal(elements: OrbitalElements, times: np.ndarray,
                        tol: float = DEFAULT_KEPLER_TOL,
                        max_iter: int = DEFAULT_MAX_ITER) -> Tuple[np.ndarray, np.ndarray]:
    """
    True anomaly and radius at each epoch, measured from periapsis passage at t=0.

    Returns:
        nu: True anomaly (rad), shape (n,)
        r: Orbit radius (km), shape (n,)
    """
    M = elements.mean_motion * np.asarray(times, dtype=float)
    nu = solve_kepler(M, elements.e, tol=tol, max_iter=max_iter).nu
    r = orbit_radius(nu, elements.a, elements.e, elements.mu)
    return nu, r


def sample_trajectory(elements: OrbitalElements,
                      rotation: Optional[np.ndarray] = None,
                      tol: float = DEFAULT_KEPLER_TOL,
                      max_iter: int = DEFAULT_MAX_ITER) -> np.ndarray:
    """
    Sample one full orbit in the inertial frame.

    Args:
        elements: Orbital elements of the orbit
        rotation: Perifocal to inertial rotation, built from the elements if omitted
        tol: Kepler solver tolerance (rad)
        max_iter: Kepler solver iteration cap

    Returns:
        Array of shape (ceil(T/dt) + 1, 3) with inertial positions in km,
        ordered in time from periapsis (t=0) back to periapsis (t=T)

    Raises:
        ConvergenceFailure: if Kepler's equation cannot be solved for some epoch
    """
    if rotation is None:
        rotation = build_rotation(elements.i, elements.omega, elements.Omega)

    nu, r = propagate_perifocal(elements, sample_times(elements), tol=tol, max_iter=max_iter)

    # Position in orbital plane (perifocal frame)
    points_pqw = np.column_stack([r * np.cos(nu), r * np.sin(nu), np.zeros_like(r)])
    return perifocal_to_inertial(points_pqw, rotation)
