"""
Orbit snapshots: every derived quantity the viewer needs for one set of elements.

A snapshot is built in one call from the elements and is never modified
afterwards. OrbitModel keeps the current snapshot and swaps in a new one only
once it has been fully computed, so a failed update leaves the previous
orbit on screen.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Optional, Tuple

import numpy as np

from keplerorbit.arcs import AngleArcs, angle_arcs
from keplerorbit.clock import AnimationClock
from keplerorbit.config import DEFAULT_ELEMENTS, DEFAULT_SPEED, SnapshotConfig
from keplerorbit.frames import build_rotation
from keplerorbit.kepler import ConvergenceFailure
from keplerorbit.orbital_elements import InvalidElements, OrbitalElements
from keplerorbit.trajectory import sample_trajectory
from keplerorbit.vectors import DegenerateNodeVector, DisplayVectors, LabelAnchors, derive_vectors, label_anchors

logger = logging.getLogger(__name__)

# Recoverable failures of a recompute, the previous snapshot stays valid
SNAPSHOT_ERRORS = (InvalidElements, ConvergenceFailure, DegenerateNodeVector)


def _frozen(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=float)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, slots=True)
class OrbitSnapshot:
    """Immutable result of one orbit computation."""

    elements: OrbitalElements
    rotation: np.ndarray  # (3, 3) perifocal -> inertial
    trajectory: np.ndarray  # (N, 3) inertial positions, km
    vectors: DisplayVectors
    arcs: AngleArcs
    labels: LabelAnchors

    def __len__(self) -> int:
        return len(self.trajectory)

    @property
    def flat_positions(self) -> list[float]:
        """Trajectory as [x0, y0, z0, x1, ...] for line-strip geometry."""
        return self.trajectory.ravel().tolist()

    def position(self, index: int) -> np.ndarray:
        return self.trajectory[index]


def compute_orbit_snapshot(elements: OrbitalElements,
                           config: Optional[SnapshotConfig] = None) -> OrbitSnapshot:
    """
    Compute the trajectory, frame rotation, display vectors, angle arcs and
    label anchors for ``elements``.

    Raises:
        ConvergenceFailure: if Kepler's equation cannot be solved
        DegenerateNodeVector: if the node is undefined and ``config.strict_node`` is set
    """
    config = config or SnapshotConfig()
    t_start = time.perf_counter()

    rotation = build_rotation(elements.i, elements.omega, elements.Omega)
    trajectory = sample_trajectory(elements, rotation, tol=config.tol, max_iter=config.max_iter)
    vectors = derive_vectors(
        elements,
        rotation=rotation,
        periapsis=trajectory[0],
        length=config.vector_length,
        node_tol=config.node_tol,
        strict=config.strict_node,
    )
    arcs = angle_arcs(elements, rotation, radius=config.arc_radius, segments=config.arc_segments)
    labels = label_anchors(vectors)

    snapshot = OrbitSnapshot(
        elements=elements,
        rotation=_frozen(rotation),
        trajectory=_frozen(trajectory),
        vectors=DisplayVectors(*(_frozen(v) for v in vectors[:3]), node_degenerate=vectors.node_degenerate),
        arcs=AngleArcs(*(_frozen(arc) for arc in arcs)),
        labels=LabelAnchors(*(_frozen(p) for p in labels)),
    )
    logger.debug(
        "Computed orbit snapshot (%s): %d samples in %.3f s",
        elements, len(snapshot), time.perf_counter() - t_start,
    )
    return snapshot


class OrbitModel:
    """
    Current orbit state of the viewer.

    Holds the elements, the snapshot derived from them and the animation
    clock. The renderer reads ``snapshot`` and calls ``tick`` once per frame;
    the UI calls ``update`` and ``set_speed`` when controls change.
    """

    def __init__(self, elements: Optional[OrbitalElements] = None,
                 config: Optional[SnapshotConfig] = None,
                 speed: float = DEFAULT_SPEED,
                 now: Optional[float] = None):
        self.config = config or SnapshotConfig()
        elements = elements or OrbitalElements.create(**DEFAULT_ELEMENTS)
        self._snapshot = compute_orbit_snapshot(elements, self.config)
        self.clock = AnimationClock(epoch=time.time() if now is None else now, speed=speed)
        self.last_error: Optional[Exception] = None

    @property
    def snapshot(self) -> OrbitSnapshot:
        return self._snapshot

    @property
    def elements(self) -> OrbitalElements:
        return self._snapshot.elements

    def update(self, **changes) -> bool:
        """
        Apply element changes and recompute the snapshot.

        Returns:
            True if the new snapshot was published, False if the change was
            rejected. On rejection the previous snapshot is kept and the error
            is stored in ``last_error``.
        """
        try:
            elements = self.elements.updated(**changes)
            snapshot = compute_orbit_snapshot(elements, self.config)
        except SNAPSHOT_ERRORS as exc:
            logger.warning("Rejected orbit update %s: %s", changes, exc)
            self.last_error = exc
            return False

        self._snapshot = snapshot
        self.last_error = None
        return True

    def set_speed(self, speed: float, now: Optional[float] = None) -> None:
        now = time.time() if now is None else now
        self.clock = self.clock.with_speed(speed, now)

    def tick(self, now: Optional[float] = None) -> Tuple[int, np.ndarray]:
        """Advance the animation clock, returning the marker's sample index and position."""
        now = time.time() if now is None else now
        snapshot = self._snapshot
        # The last sample repeats periapsis, so a lap is len - 1 steps
        lap_length = max(1, len(snapshot) - 1)
        self.clock, index = self.clock.advance(now, lap_length, snapshot.elements.dt)
        return index, snapshot.position(index)
