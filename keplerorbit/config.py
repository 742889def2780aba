from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from keplerorbit.constants import ANGLE_ARC_RADIUS, ARC_SEGMENTS, MU_EARTH, VECTOR_LENGTH

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_ELEMENTS = {
    "a": 5137.0,
    "e": 0.6,
    "i": 0.0,
    "omega": 0.0,
    "Omega": 0.0,
    "mu": MU_EARTH,
    "dt": 1.0,
}
DEFAULT_SPEED = 100.0  # animation speed factor (simulated seconds per wall second)
DEFAULT_KEPLER_TOL = 1.0e-3  # rad, on the Newton correction
DEFAULT_MAX_ITER = 100
DEFAULT_NODE_TOL = 1.0e-9  # |Z x h_hat| below this makes the node direction undefined

# (min, max, step) of the viewer controls. These are enforced by the UI, the
# geometry code only rejects elements that cannot describe an ellipse.
SLIDER_RANGES: Dict[str, Tuple[float, float, float]] = {
    "a": (1000.0, 10000.0, 1.0),
    "e": (0.0, 1.0, 0.01),
    "i": (0.0, 180.0, 0.01),
    "omega": (0.0, 360.0, 0.01),
    "Omega": (0.0, 360.0, 0.01),
    "speed": (1.0, 1000.0, 1.0),
}


@dataclass(frozen=True, slots=True)
class SnapshotConfig:
    tol: float = DEFAULT_KEPLER_TOL
    max_iter: int = DEFAULT_MAX_ITER
    vector_length: float = VECTOR_LENGTH
    arc_radius: float = ANGLE_ARC_RADIUS
    arc_segments: int = ARC_SEGMENTS
    node_tol: float = DEFAULT_NODE_TOL
    strict_node: bool = False  # raise DegenerateNodeVector instead of warning


def make_snapshot_config(
    tol: Optional[float] = None,
    max_iter: Optional[int] = None,
    *,
    vector_length: Optional[float] = None,
    arc_radius: Optional[float] = None,
    arc_segments: Optional[int] = None,
    node_tol: Optional[float] = None,
    strict_node: bool = False,
) -> SnapshotConfig:
    """Normalize CLI-style inputs into a SnapshotConfig, non-positive values fall back to defaults."""
    def _positive(value, default):
        return default if value is None or value <= 0 else value

    return SnapshotConfig(
        tol=float(_positive(tol, DEFAULT_KEPLER_TOL)),
        max_iter=int(_positive(max_iter, DEFAULT_MAX_ITER)),
        vector_length=float(_positive(vector_length, VECTOR_LENGTH)),
        arc_radius=float(_positive(arc_radius, ANGLE_ARC_RADIUS)),
        arc_segments=int(_positive(arc_segments, ARC_SEGMENTS)),
        node_tol=float(_positive(node_tol, DEFAULT_NODE_TOL)),
        strict_node=bool(strict_node),
    )


def clamp_to_slider(name: str, value: float) -> float:
    """Clamp ``value`` into the slider range of control ``name`` and snap it to the slider step."""
    try:
        lo, hi, step = SLIDER_RANGES[name]
    except KeyError:
        raise ValueError(f"Unknown control '{name}'. Must be one of: {', '.join(SLIDER_RANGES)}") from None
    snapped = lo + round((float(value) - lo) / step) * step
    return min(hi, max(lo, snapped))
