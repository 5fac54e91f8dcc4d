"""Discretized particle trajectories for animation.

A trajectory is an incoming straight segment at height y₀ = sign·b that
ends just before the target plane, followed by an outgoing straight
segment from (0, y₀) at the deflection angle. Nothing is integrated
under a force field; the path is precomputed.

All lengths in m, time in s, angles in radian (core units).
"""

from __future__ import annotations

import math

import numpy as np

from rutherford.constants import (
    FRAME_DT_S,
    POST_FRAME_COUNT,
    PRE_FRAME_COUNT,
    RENDER_WIDTH_PX,
    START_X_FRACTION,
)
from rutherford.models.simulation import Position


def initial_speed(energy_J: float, mass_kg: float) -> float:
    """Non-relativistic speed v₀ = √(2E/m) [m/s]."""
    return math.sqrt(2.0 * energy_J / mass_kg)


def start_position_x(
    pixels_per_meter: float,
    render_width_px: float = RENDER_WIDTH_PX,
    fraction: float = START_X_FRACTION,
) -> float:
    """Incoming start x [m], left of the target plane.

    The left half of the render surface, scaled by ``fraction``, mapped
    back to meters. An infinite scale gives -0.0.
    """
    return -(render_width_px / 2.0) / pixels_per_meter * fraction


class TrajectoryGenerator:
    """Builds fixed-length trajectories.

    Args:
        pre_frame_count: Points on the incoming segment.
        post_frame_count: Points on the outgoing segment.
        frame_dt_s: Time advanced per outgoing point [s].
    """

    def __init__(
        self,
        pre_frame_count: int = PRE_FRAME_COUNT,
        post_frame_count: int = POST_FRAME_COUNT,
        frame_dt_s: float = FRAME_DT_S,
    ) -> None:
        self.pre_frame_count = pre_frame_count
        self.post_frame_count = post_frame_count
        self.frame_dt_s = frame_dt_s

    @property
    def length(self) -> int:
        return self.pre_frame_count + self.post_frame_count

    def generate(
        self,
        b_m: float,
        sign: int,
        theta_signed_rad: float,
        start_x_m: float,
        v0_m_s: float,
    ) -> tuple[Position, ...]:
        """Generate one trajectory.

        Incoming points: x_f = start_x + f·(0 − start_x)/pre_frame_count for
        f = 0 … pre_frame_count−1, y = y₀.
        Outgoing points: (0, y₀) + (f+1)·dt·v₀·(cos θ, sin θ) for
        f = 0 … post_frame_count−1.

        Args:
            b_m: Impact parameter [m].
            sign: Transverse side, +1 or -1.
            theta_signed_rad: Signed deflection angle [radian].
            start_x_m: Incoming start x [m].
            v0_m_s: Projectile speed [m/s].

        Returns:
            Tuple of pre_frame_count + post_frame_count positions.
        """
        y0 = sign * b_m

        pre_x = start_x_m + (0.0 - start_x_m) / self.pre_frame_count * np.arange(self.pre_frame_count)

        steps = np.arange(1, self.post_frame_count + 1) * self.frame_dt_s
        post_x = v0_m_s * math.cos(theta_signed_rad) * steps
        post_y = y0 + v0_m_s * math.sin(theta_signed_rad) * steps

        positions = [Position(float(x), y0) for x in pre_x]
        positions.extend(Position(float(x), float(y)) for x, y in zip(post_x, post_y))
        return tuple(positions)
