"""
Orbital elements representation for the orbit viewer.
"""
import math

import pydantic
from pydantic import ConfigDict, Field

from keplerorbit.constants import MU_EARTH


class InvalidElements(ValueError):
    """Raised when a set of orbital elements cannot describe an elliptical orbit."""


class OrbitalElements(pydantic.BaseModel):
    """
    Keplerian orbital elements of the displayed orbit.

    Unlike most astrodynamics code the angles are kept in degrees, since they
    come straight from the UI sliders. They are converted to radians only
    where the rotations are built.

    Attributes:
        a: Semi-major axis (km)
        e: Eccentricity (dimensionless, 0 ≤ e < 1)
        i: Inclination relative to the XY reference plane (degrees)
        omega: Argument of periapsis (degrees)
        Omega: Right ascension of the ascending node (degrees)
        mu: Gravitational parameter of the central body (km^3/s^2)
        dt: Sampling time step along the orbit (s)

    Note:
        Parabolic and hyperbolic orbits (e ≥ 1) are rejected, the sampling
        relies on a finite period.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    a: float = Field(..., gt=0.0, description="Semi-major axis (km)")
    e: float = Field(..., ge=0.0, lt=1.0, description="Eccentricity")
    i: float = Field(0.0, description="Inclination (deg)")
    omega: float = Field(0.0, description="Argument of periapsis (deg)")
    Omega: float = Field(0.0, description="Right ascension of the ascending node (deg)")
    mu: float = Field(MU_EARTH, gt=0.0, description="Gravitational parameter (km^3/s^2)")
    dt: float = Field(1.0, gt=0.0, description="Sampling time step (s)")

    @staticmethod
    def create(**kwargs) -> 'OrbitalElements':
        """
        Create validated orbital elements.

        Same keyword arguments as the model itself, but any validation problem
        is reported as InvalidElements instead of a pydantic ValidationError.
        """
        try:
            return OrbitalElements(**kwargs)
        except pydantic.ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise InvalidElements(f"Invalid orbital elements ({problems})") from exc

    def updated(self, **changes) -> 'OrbitalElements':
        """Return a new validated set of elements with ``changes`` applied."""
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise InvalidElements(f"Unknown orbital element(s): {', '.join(sorted(unknown))}")
        return OrbitalElements.create(**{**self.model_dump(), **changes})

    @property
    def mean_motion(self) -> float:
        """Mean motion n = sqrt(mu / a^3) (rad/s)"""
        return math.sqrt(self.mu / self.a**3)

    @property
    def period(self) -> float:
        """Orbital period from Kepler's third law, T = 2π sqrt(a^3 / mu) (s)"""
        return 2.0 * math.pi * math.sqrt(self.a**3 / self.mu)

    @property
    def semi_latus_rectum(self) -> float:
        return self.a * (1.0 - self.e**2)

    @property
    def angular_momentum(self) -> float:
        """Magnitude of the specific angular momentum h = sqrt(mu a (1 - e^2)) (km^2/s)"""
        return math.sqrt(self.mu * self.semi_latus_rectum)

    @property
    def periapsis_radius(self) -> float:
        return self.a * (1.0 - self.e)

    @property
    def apoapsis_radius(self) -> float:
        return self.a * (1.0 + self.e)

    def __str__(self) -> str:
        return (
            f"a={self.a:.3f} km, e={self.e:.4f}, i={self.i:.2f} deg, "
            f"w={self.omega:.2f} deg, RAAN={self.Omega:.2f} deg"
        )
