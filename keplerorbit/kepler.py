"""
Kepler's equation and the conic relations used to place a body on its orbit.
"""
import functools
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import jit
import numpy as np

from keplerorbit.config import DEFAULT_KEPLER_TOL, DEFAULT_MAX_ITER

# The jitted solver is compiled once per input length. Inputs are padded to
# power-of-two buckets so that slider changes to a or dt reuse a compiled
# program instead of recompiling on every new sample count.
MIN_BUCKET = 64


class ConvergenceFailure(RuntimeError):
    """Raised when Newton-Raphson iteration on Kepler's equation runs out of iterations."""

    def __init__(self, e: float, iterations: int, step: float):
        self.e = e
        self.iterations = iterations
        self.step = step
        super().__init__(
            f"Kepler's equation did not converge for e={e:.6f} after {iterations} "
            f"iterations (last correction {step:.3e} rad)"
        )


class KeplerSolution(NamedTuple):
    """
    Solution of Kepler's equation.

    Attributes:
        E: Eccentric anomaly (rad), same shape as the mean anomaly
        nu: True anomaly (rad), same shape as the mean anomaly
        iterations: Number of Newton-Raphson iterations performed
    """
    E: np.ndarray
    nu: np.ndarray
    iterations: int


@functools.partial(jit, static_argnames=('tol', 'max_iter'))
def _newton_raphson(M, e, tol, max_iter):
    """
    Bounded Newton-Raphson iteration for E - e*sin(E) = M.

    Seeded with E = M below e = 0.8 and with E = pi above, where starting
    from M overshoots near periapsis and can diverge. All samples iterate
    together until every correction is below ``tol`` or ``max_iter``
    iterations have been taken.
    """
    def cond_fn(carry):
        _, step, k = carry
        # NaN corrections never count as converged
        converged = jnp.all(jnp.abs(step) < tol)
        return jnp.logical_and(jnp.logical_not(converged), k < max_iter)

    def body_fn(carry):
        E, _, k = carry
        E_new = E + (M - E + e * jnp.sin(E)) / (1.0 - e * jnp.cos(E))
        return E_new, E_new - E, k + 1

    E0 = jnp.where(e < 0.8, M, jnp.pi * jnp.ones_like(M))
    init = (E0, jnp.full_like(M, jnp.inf), jnp.array(0))
    return jax.lax.while_loop(cond_fn, body_fn, init)


def _bucket_size(n: int) -> int:
    """Padded length for ``n`` samples: the next power of two, at least MIN_BUCKET."""
    return max(MIN_BUCKET, 1 << max(n - 1, 0).bit_length())


def true_anomaly(E, e):
    """True anomaly from eccentric anomaly, using the half-angle form."""
    return 2.0 * jnp.arctan2(
        jnp.sqrt(1.0 + e) * jnp.sin(E / 2.0),
        jnp.sqrt(1.0 - e) * jnp.cos(E / 2.0)
    )


def solve_kepler(M, e: float, tol: float = DEFAULT_KEPLER_TOL,
                 max_iter: int = DEFAULT_MAX_ITER) -> KeplerSolution:
    """
    Solve Kepler's equation M = E - e*sin(E) for the eccentric and true anomaly.

    Parameters
    ----------
    M : float or array_like
        Mean anomaly (rad).
    e : float
        Eccentricity, 0 <= e < 1.
    tol : float, optional
        Convergence threshold on the Newton correction |E_k+1 - E_k| (rad).
    max_iter : int, optional
        Maximum number of Newton-Raphson iterations.

    Returns
    -------
    KeplerSolution
        Eccentric anomaly, true anomaly and the number of iterations taken.

    Raises
    ------
    ConvergenceFailure
        If the correction is still above ``tol`` after ``max_iter`` iterations.
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")
    M = np.asarray(M, dtype=float)
    n_samples = M.size
    # Padded entries use M = 0, the periapsis every trajectory already contains
    padded = np.zeros(_bucket_size(n_samples))
    padded[:n_samples] = M.ravel()
    E, step, k = _newton_raphson(jnp.asarray(padded), float(e), tol=float(tol), max_iter=int(max_iter))

    E = np.asarray(E)[:n_samples].reshape(M.shape)
    step = np.abs(np.asarray(step)[:n_samples])
    if not np.all(step < tol):
        worst = float('nan') if np.all(np.isnan(step)) else float(np.nanmax(step))
        raise ConvergenceFailure(float(e), int(k), worst)

    nu = true_anomaly(E, e)
    return KeplerSolution(E=np.asarray(E), nu=np.asarray(nu), iterations=int(k))


def orbit_radius(nu, a: float, e: float, mu: float):
    """
    Orbit radius at true anomaly ``nu`` from the conic equation.

    r = (l^2 / mu) / (1 + e*cos(nu)),  with l = sqrt(mu * a * (1 - e^2))
    """
    l = np.sqrt(mu * a * (1.0 - e**2))
    return (l * l / mu) / (1.0 + e * np.cos(nu))
