"""
Short explanations shown when the user focuses an angle wedge or a display vector.
"""
from typing import Tuple

from keplerorbit.orbital_elements import OrbitalElements

DEG = "\N{DEGREE SIGN}"

_DESCRIPTIONS = {
    "inclination": (
        "Inclination, i: {i}",
        "Angle between the Z axis and the specific angular momentum vector h.\n"
        "How much the orbit is rotated about the node vector n.",
    ),
    "argument_of_periapsis": (
        "Argument of periapsis, \N{GREEK SMALL LETTER OMEGA}: {omega}",
        "Angle between the node vector n and the eccentricity vector e.\n"
        "How much the orbit is rotated about the h axis.",
    ),
    "raan": (
        "Right ascension of the ascending node, \N{GREEK CAPITAL LETTER OMEGA}: {Omega}",
        "Angle between the X axis and the node vector n.\n"
        "How much the orbit is rotated about the Z axis.",
    ),
    "h": (
        "Specific angular momentum, h [km^2/s]",
        "The angular momentum of the orbiting body with mass divided out.\n"
        "It is always perpendicular to the orbit plane.",
    ),
    "e": (
        "Eccentricity, e [dimensionless]",
        "Eccentricity defines the shape of an orbit.\n"
        "The eccentricity vector points in the direction of periapsis.",
    ),
    "n": (
        "Node vector, n",
        "The node vector points toward the ascending node.\n"
        "This is the point where the orbiting body passes up through the XY plane of the central body.",
    ),
}

TARGETS = tuple(_DESCRIPTIONS)


def _angle(value: float) -> str:
    return f"{round(value, 2):g}{DEG}"


def describe(target: str, elements: OrbitalElements) -> Tuple[str, str]:
    """
    Heading and body text for a focused scene element.

    Angles are rounded to two decimals. Unknown targets (including None)
    give empty strings so the caller can clear its text box.
    """
    entry = _DESCRIPTIONS.get(target)
    if entry is None:
        return "", ""
    heading, body = entry
    heading = heading.format(i=_angle(elements.i), omega=_angle(elements.omega), Omega=_angle(elements.Omega))
    return heading, body
