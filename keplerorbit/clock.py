"""
Animation clock mapping wall time onto the sampled trajectory.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Tuple


@dataclass(frozen=True, slots=True)
class AnimationClock:
    """
    Epoch-based clock driving the marker along the orbit.

    Attributes:
        epoch: Wall-clock time (s) at which the marker was at the first sample
        speed: Simulated seconds per wall-clock second
    """

    epoch: float
    speed: float = 1.0

    def __post_init__(self):
        if not self.speed > 0.0:
            raise ValueError(f"speed must be positive, got {self.speed}")

    def elapsed(self, now: float) -> float:
        """Simulated time (s) since the epoch."""
        return (now - self.epoch) * self.speed

    def advance(self, now: float, trajectory_length: int, dt: float) -> Tuple[AnimationClock, int]:
        """
        Sample index for wall-clock time ``now``.

        index = floor(elapsed / dt) mod trajectory_length. When the marker has
        run past the end of the trajectory the returned clock has its epoch
        moved forward by the completed laps, which keeps the elapsed time bounded.

        Returns:
            (clock, index) where clock is this clock or its rebased copy
        """
        if trajectory_length < 1:
            raise ValueError("trajectory_length must be at least 1")
        if not dt > 0.0:
            raise ValueError(f"dt must be positive, got {dt}")

        raw_index = math.floor(self.elapsed(now) / dt)
        laps, index = divmod(raw_index, trajectory_length)
        if laps == 0:
            return self, index
        lap_duration = trajectory_length * dt / self.speed
        return replace(self, epoch=self.epoch + laps * lap_duration), index

    def with_speed(self, speed: float, now: float) -> AnimationClock:
        """Change the speed without moving the marker: the elapsed time at ``now`` is preserved."""
        elapsed = self.elapsed(now)
        return AnimationClock(epoch=now - elapsed / speed, speed=speed)


def advance(clock: AnimationClock, now: float, trajectory_length: int, dt: float) -> Tuple[AnimationClock, int]:
    """Functional form of AnimationClock.advance."""
    return clock.advance(now, trajectory_length, dt)
