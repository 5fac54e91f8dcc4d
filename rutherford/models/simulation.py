"""Simulation parameter, configuration and result data models.

All physical quantities are SI (J, m, s, rad) unless the field name
says otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rutherford.constants import (
    FRAME_DT_S,
    LARGE_ANGLE_THRESHOLD_RAD,
    MIN_PARTICLE_COUNT,
    POST_FRAME_COUNT,
    PRE_FRAME_COUNT,
    PROJECTILE_MASS_AMU,
    PROJECTILE_Z,
    RENDER_FILL_FRACTION,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
    START_X_FRACTION,
    TARGET_Z,
)


@dataclass(frozen=True)
class SimulationParameters:
    """User parameters of one run.

    Attributes:
        particle_count: Number of simulated particles (>= 100 once run).
        beam_energy_J: Kinetic energy of each projectile [J].
        max_impact_parameter_m: Radius of the beam disk [m].
        bin_count: Number of angular histogram bins over [0°, 180°).
    """
    particle_count: int = 1000
    beam_energy_J: float = 0.0
    max_impact_parameter_m: float = 0.0
    bin_count: int = 18


@dataclass
class EngineConfig:
    """Tunable design constants of the engine.

    Attributes:
        projectile_z: Projectile charge number.
        target_z: Target nucleus charge number.
        projectile_mass_amu: Projectile mass [u].
        pre_frame_count: Points on the incoming straight segment.
        post_frame_count: Points on the outgoing straight segment.
        frame_dt_s: Time advanced per outgoing point [s].
        large_angle_threshold_rad: |θ| above which a particle is tagged large-angle.
        min_particle_count: Floor applied to the requested particle count.
        render_width_px: Width of the render surface [px].
        render_height_px: Height of the render surface [px].
        render_fill_fraction: Fraction of the height covered by 2·b_max.
        start_x_fraction: Start x as a fraction of the left half-width.
    """
    projectile_z: int = PROJECTILE_Z
    target_z: int = TARGET_Z
    projectile_mass_amu: float = PROJECTILE_MASS_AMU
    pre_frame_count: int = PRE_FRAME_COUNT
    post_frame_count: int = POST_FRAME_COUNT
    frame_dt_s: float = FRAME_DT_S
    large_angle_threshold_rad: float = LARGE_ANGLE_THRESHOLD_RAD
    min_particle_count: int = MIN_PARTICLE_COUNT
    render_width_px: int = RENDER_WIDTH_PX
    render_height_px: int = RENDER_HEIGHT_PX
    render_fill_fraction: float = RENDER_FILL_FRACTION
    start_x_fraction: float = START_X_FRACTION

    @property
    def trajectory_length(self) -> int:
        return self.pre_frame_count + self.post_frame_count


@dataclass(frozen=True)
class Position:
    """Point in the scattering plane [m], target plane at x = 0."""
    x: float = 0.0
    y: float = 0.0


class DisplayTag(Enum):
    """Presentation-only classification of a deflection."""
    SMALL_ANGLE = "small_angle"
    LARGE_ANGLE = "large_angle"


@dataclass(frozen=True)
class Particle:
    """One simulated projectile.

    Attributes:
        impact_parameter_m: Sampled impact parameter b [m].
        sign: Transverse side of the nucleus, +1 or -1.
        deflection_angle_rad: Unsigned deflection θ [radian, 0..π].
        trajectory: Discretized path [m].
        display_tag: Small/large angle classification.
    """
    impact_parameter_m: float = 0.0
    sign: int = 1
    deflection_angle_rad: float = 0.0
    trajectory: tuple[Position, ...] = ()
    display_tag: DisplayTag = DisplayTag.SMALL_ANGLE

    @property
    def signed_deflection_rad(self) -> float:
        return self.deflection_angle_rad if self.sign > 0 else -self.deflection_angle_rad


@dataclass(frozen=True)
class HistogramBin:
    """Angular bin with simulated and theoretical counts.

    Attributes:
        lower_deg: Lower edge [degree], inclusive.
        upper_deg: Upper edge [degree], exclusive.
        simulated_count: Particles whose θ falls in the bin.
        expected_count: Rutherford prediction normalized to the particle count.
    """
    lower_deg: float = 0.0
    upper_deg: float = 0.0
    simulated_count: int = 0
    expected_count: float = 0.0

    @property
    def center_deg(self) -> float:
        return 0.5 * (self.lower_deg + self.upper_deg)


@dataclass(frozen=True)
class SimulationResult:
    """Complete result of one engine run.

    Attributes:
        parameters: Parameters the run used (particle count after clamping).
        particles: All simulated particles, in sampling order.
        bins: Histogram bins covering [0°, 180°).
        pixels_per_meter: Render scale for the trajectories [px/m].
        initial_speed_m_s: Projectile speed before scattering [m/s].
        elapsed_seconds: Wall-clock duration of the run [s].
    """
    parameters: SimulationParameters = field(default_factory=SimulationParameters)
    particles: tuple[Particle, ...] = ()
    bins: tuple[HistogramBin, ...] = ()
    pixels_per_meter: float = 0.0
    initial_speed_m_s: float = 0.0
    elapsed_seconds: float = 0.0

    @property
    def particle_count(self) -> int:
        return len(self.particles)
