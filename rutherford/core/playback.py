"""Animation playback state for precomputed trajectories.

The frame counter advances one tick at a time while playing. The index
into a trajectory grows faster than the counter according to the speed
multiplier, and stops at the trajectory's last point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rutherford.constants import (
    DEFAULT_PLAYBACK_SPEED,
    PLAYBACK_FRAME_WRAP,
    PLAYBACK_SPEED_GAIN,
    TRAIL_LENGTH,
)


@dataclass
class PlaybackState:
    """Frame counter, play flag and speed multiplier.

    Attributes:
        frame: Current tick counter.
        playing: Whether ``tick`` advances the counter.
        speed: Speed multiplier (>= 0).
        frame_wrap: Counter value after which it restarts at 0.
        trail_length: Number of earlier points drawn behind a particle.
    """
    frame: int = 0
    playing: bool = False
    speed: float = DEFAULT_PLAYBACK_SPEED
    frame_wrap: int = PLAYBACK_FRAME_WRAP
    trail_length: int = TRAIL_LENGTH

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def reset(self) -> None:
        self.playing = False
        self.frame = 0

    def set_speed(self, speed: float) -> None:
        self.speed = max(0.0, speed)

    def tick(self) -> None:
        """Advance one frame when playing, wrapping past ``frame_wrap``."""
        if not self.playing:
            return
        self.frame += 1
        if self.frame > self.frame_wrap:
            self.frame = 0

    def frame_index(self, trajectory_length: int) -> int:
        """Trajectory index shown at the current frame.

        idx = floor(frame × (1 + speed × gain)), clamped to the last point.
        """
        if trajectory_length <= 0:
            return 0
        index = math.floor(self.frame * (1.0 + self.speed * PLAYBACK_SPEED_GAIN))
        return min(index, trajectory_length - 1)

    def trail_range(self, trajectory_length: int) -> range:
        """Indices of the trail ending at the current point, inclusive."""
        index = self.frame_index(trajectory_length)
        return range(max(0, index - self.trail_length), index + 1)
