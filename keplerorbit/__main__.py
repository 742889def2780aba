"""
Command-line interface: compute an orbit snapshot and optionally export it as JSON.

Usage:
    # Default orbit (a=5137 km, e=0.6, equatorial)
    python -m keplerorbit

    # Inclined orbit, exported for the viewer
    python -m keplerorbit -a 7000 -e 0.1 -i 51.6 -w 30 --raan 120 --output orbit.json
"""

import argparse
import logging
from pathlib import Path

from keplerorbit.config import DEFAULT_ELEMENTS, DEFAULT_KEPLER_TOL, DEFAULT_MAX_ITER, make_snapshot_config
from keplerorbit.io import write_snapshot
from keplerorbit.kepler import ConvergenceFailure
from keplerorbit.logging_config import setup_logging
from keplerorbit.orbital_elements import InvalidElements, OrbitalElements
from keplerorbit.snapshot import compute_orbit_snapshot
from keplerorbit.vectors import DegenerateNodeVector


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m keplerorbit",
        description="Sample a Keplerian orbit and derive its display vectors.",
    )
    parser.add_argument("-a", type=float, default=DEFAULT_ELEMENTS["a"], help="Semi-major axis (km).")
    parser.add_argument("-e", type=float, default=DEFAULT_ELEMENTS["e"], help="Eccentricity, 0 <= e < 1.")
    parser.add_argument("-i", type=float, default=DEFAULT_ELEMENTS["i"], help="Inclination (deg).")
    parser.add_argument("-w", type=float, default=DEFAULT_ELEMENTS["omega"], help="Argument of periapsis (deg).")
    parser.add_argument("--raan", type=float, default=DEFAULT_ELEMENTS["Omega"],
                        help="Right ascension of the ascending node (deg).")
    parser.add_argument("--mu", type=float, default=DEFAULT_ELEMENTS["mu"],
                        help="Gravitational parameter (km^3/s^2).")
    parser.add_argument("--dt", type=float, default=DEFAULT_ELEMENTS["dt"], help="Sampling time step (s).")
    parser.add_argument("--tol", type=float, default=DEFAULT_KEPLER_TOL, help="Kepler solver tolerance (rad).")
    parser.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITER, help="Kepler solver iteration cap.")
    parser.add_argument("--strict-node", action="store_true",
                        help="Fail instead of warning when the ascending node is undefined.")
    parser.add_argument("--output", default=None, help="Optional path for the JSON snapshot.")
    parser.add_argument("--log-file", default=None, help="Optional log file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        elements = OrbitalElements.create(
            a=args.a, e=args.e, i=args.i, omega=args.w, Omega=args.raan, mu=args.mu, dt=args.dt,
        )
        config = make_snapshot_config(args.tol, args.max_iter, strict_node=args.strict_node)
        snapshot = compute_orbit_snapshot(elements, config)
    except (InvalidElements, ConvergenceFailure, DegenerateNodeVector) as exc:
        raise SystemExit(str(exc)) from exc

    vectors = snapshot.vectors
    print(f"Orbit: {elements}")
    print(f"  period    = {elements.period:.3f} s")
    print(f"  periapsis = {elements.periapsis_radius:.3f} km")
    print(f"  apoapsis  = {elements.apoapsis_radius:.3f} km")
    print(f"  samples   = {len(snapshot)} (dt = {elements.dt} s)")
    print(f"  h_dir     = {vectors.h}")
    print(f"  e_dir     = {vectors.e}")
    print(f"  n_dir     = {vectors.n}{' (degenerate, RAAN direction)' if vectors.node_degenerate else ''}")

    if args.output:
        output_path = Path(args.output)
        write_snapshot(output_path, snapshot)
        print(f"Wrote snapshot to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
