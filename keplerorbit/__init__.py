# Configure JAX to use double precision (64-bit floats) throughout the package
import jax
jax.config.update("jax_enable_x64", True)

from .constants import (
    # Constants
    MU_EARTH,
    VECTOR_LENGTH,
    ANGLE_ARC_RADIUS,
    ARC_SEGMENTS,
)

from .orbital_elements import OrbitalElements, InvalidElements

from .config import (
    DEFAULT_ELEMENTS,
    DEFAULT_SPEED,
    SLIDER_RANGES,
    SnapshotConfig,
    make_snapshot_config,
    clamp_to_slider,
)

from .frames import R1, R3, build_rotation

from .kepler import (
    # Kepler's equation
    ConvergenceFailure,
    KeplerSolution,
    solve_kepler,
    true_anomaly,
    orbit_radius,
)

from .trajectory import sample_times, sample_trajectory

from .vectors import (
    DegenerateNodeVector,
    DisplayVectors,
    LabelAnchors,
    derive_vectors,
    label_anchors,
)

from .arcs import AngleArcs, angle_arcs

from .clock import AnimationClock, advance

from .snapshot import (
    # Snapshots
    OrbitSnapshot,
    OrbitModel,
    compute_orbit_snapshot,
)

from .annotations import describe
from .logging_config import setup_logging
