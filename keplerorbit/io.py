"""I/O helpers: JSON export of orbit snapshots for an external renderer."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import json

import numpy as np

from keplerorbit.orbital_elements import OrbitalElements
from keplerorbit.snapshot import OrbitSnapshot


def _vec(values: np.ndarray) -> list[float]:
    return [float(x) for x in values]


def serialize_snapshot(snapshot: OrbitSnapshot) -> Dict[str, Any]:
    elements = snapshot.elements
    return {
        "elements": elements.model_dump(),
        "period_s": elements.period,
        "periapsis_km": elements.periapsis_radius,
        "apoapsis_km": elements.apoapsis_radius,
        "n_samples": len(snapshot),
        "positions_km": snapshot.flat_positions,
        "rotation": snapshot.rotation.tolist(),
        "vectors": {
            "h": _vec(snapshot.vectors.h),
            "e": _vec(snapshot.vectors.e),
            "n": _vec(snapshot.vectors.n),
            "node_degenerate": snapshot.vectors.node_degenerate,
        },
        "arcs": {name: arc.tolist() for name, arc in snapshot.arcs._asdict().items()},
        "labels": {name: _vec(pos) for name, pos in snapshot.labels._asdict().items()},
    }


def write_snapshot(output_path: Path, snapshot: OrbitSnapshot) -> None:
    payload = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "orbit": serialize_snapshot(snapshot),
    }
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)


def load_elements(input_path: Path) -> OrbitalElements:
    """Read back the elements of a snapshot written by write_snapshot."""
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Snapshot file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    orbit = payload.get("orbit") or {}
    elements = orbit.get("elements")
    if not elements:
        raise ValueError("Snapshot file does not contain orbital elements.")
    return OrbitalElements.create(**elements)


__all__ = [
    "serialize_snapshot",
    "write_snapshot",
    "load_elements",
]
