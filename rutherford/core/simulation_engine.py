"""Simulation engine — orchestrates one Monte Carlo scattering run.

Samples impact points, applies the Rutherford law, builds trajectories,
bins the angles and attaches the theoretical expectation. A run is a
single synchronous call that returns a fully materialized result.

All internal computations in core units: J, m, s, radian.
"""

from __future__ import annotations

import logging
import math
import numbers
import time
from typing import Callable

from rutherford.core.histogram import HistogramBuilder
from rutherford.core.impact_sampler import ImpactSampler
from rutherford.core.scattering_law import ScatteringLaw
from rutherford.core.theoretical_curve import TheoreticalCurve
from rutherford.core.trajectory import (
    TrajectoryGenerator,
    initial_speed,
    start_position_x,
)
from rutherford.core.units import amu_to_kg, compute_scale, to_si
from rutherford.models.simulation import (
    DisplayTag,
    EngineConfig,
    HistogramBin,
    Particle,
    SimulationParameters,
    SimulationResult,
)

logger = logging.getLogger(__name__)

# Progress is reported this many times per run at most
_PROGRESS_STEPS = 100


class InvalidParameterError(ValueError):
    """Raised when simulation parameters cannot be parsed or are out of domain."""


def _parse_number(text: str, name: str) -> float:
    try:
        value = float(str(text).strip())
    except ValueError:
        raise InvalidParameterError(f"{name}: not a number: {text!r}") from None
    if math.isnan(value):
        raise InvalidParameterError(f"{name}: not a number: {text!r}")
    return value


def _parse_integer(text: str, name: str) -> int:
    value = _parse_number(text, name)
    if not math.isfinite(value) or value != int(value):
        raise InvalidParameterError(f"{name}: not an integer: {text!r}")
    return int(value)


def _require_integer(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")


def parse_parameters(
    particle_count_text: str,
    energy_MeV_text: str,
    max_impact_angstrom_text: str,
    bin_count_text: str,
) -> SimulationParameters:
    """Build SimulationParameters from UI text fields.

    Args:
        particle_count_text: Particle count (integer).
        energy_MeV_text: Beam energy [MeV].
        max_impact_angstrom_text: Maximum impact parameter [Å].
        bin_count_text: Histogram bin count (integer).

    Returns:
        Parameters in SI units. The particle count is not clamped here.

    Raises:
        InvalidParameterError: If any field fails to parse.
    """
    particle_count = _parse_integer(particle_count_text, "particle count")
    energy_MeV = _parse_number(energy_MeV_text, "beam energy")
    b_max_angstrom = _parse_number(max_impact_angstrom_text, "max impact parameter")
    bin_count = _parse_integer(bin_count_text, "bin count")

    energy_J, b_max_m = to_si(energy_MeV, b_max_angstrom)
    return SimulationParameters(
        particle_count=particle_count,
        beam_energy_J=energy_J,
        max_impact_parameter_m=b_max_m,
        bin_count=bin_count,
    )


class SimulationEngine:
    """Runs Rutherford scattering simulations.

    Args:
        config: Design constants. Defaults to EngineConfig().
        sampler: Impact sampler; pass one with a seeded generator for
            reproducible runs.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        sampler: ImpactSampler | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._sampler = sampler or ImpactSampler()
        self._law = ScatteringLaw(self._config.projectile_z, self._config.target_z)
        self._histogram = HistogramBuilder()
        self._theory = TheoreticalCurve(self._law)
        self._trajectories = TrajectoryGenerator(
            self._config.pre_frame_count,
            self._config.post_frame_count,
            self._config.frame_dt_s,
        )

    def validate(self, params: SimulationParameters) -> SimulationParameters:
        """Check the domain and clamp the particle count.

        Returns:
            Parameters with particle_count raised to the configured floor.

        Raises:
            InvalidParameterError: On non-positive/non-finite energy,
                negative/non-finite b_max, non-integer counts, or
                bin_count < 1.
        """
        _require_integer(params.particle_count, "Particle count")
        _require_integer(params.bin_count, "Bin count")
        energy = params.beam_energy_J
        if not (math.isfinite(energy) and energy > 0.0):
            raise InvalidParameterError(f"Beam energy must be positive, got {energy!r} J")
        b_max = params.max_impact_parameter_m
        if not (math.isfinite(b_max) and b_max >= 0.0):
            raise InvalidParameterError(
                f"Max impact parameter must be >= 0, got {b_max!r} m"
            )
        if params.bin_count < 1:
            raise InvalidParameterError(f"Bin count must be >= 1, got {params.bin_count}")

        floor = self._config.min_particle_count
        if params.particle_count < floor:
            logger.debug("Particle count %d raised to %d", params.particle_count, floor)
            return SimulationParameters(
                particle_count=floor,
                beam_energy_J=energy,
                max_impact_parameter_m=b_max,
                bin_count=params.bin_count,
            )
        return params

    def run(
        self,
        params: SimulationParameters,
        progress_callback: Callable[[int], None] | None = None,
    ) -> SimulationResult:
        """Run one simulation.

        Args:
            params: User parameters in SI units.
            progress_callback: Optional, receives 0-100 while particles
                are generated.

        Returns:
            SimulationResult with every trajectory materialized.

        Raises:
            InvalidParameterError: If the parameters are out of domain.
        """
        t_start = time.perf_counter()
        params = self.validate(params)
        cfg = self._config

        n = params.particle_count
        energy = params.beam_energy_J
        b_max = params.max_impact_parameter_m

        pixels_per_meter = compute_scale(
            b_max, cfg.render_height_px, cfg.render_fill_fraction,
        )
        start_x = start_position_x(
            pixels_per_meter, cfg.render_width_px, cfg.start_x_fraction,
        )
        v0 = initial_speed(energy, amu_to_kg(cfg.projectile_mass_amu))

        report_every = max(1, n // _PROGRESS_STEPS)
        particles: list[Particle] = []
        for i in range(n):
            b, sign = self._sampler.sample(b_max)
            theta = self._law.deflection_angle(b, energy)
            theta_signed = self._law.signed_angle(theta, sign)
            tag = (
                DisplayTag.LARGE_ANGLE
                if abs(theta_signed) > cfg.large_angle_threshold_rad
                else DisplayTag.SMALL_ANGLE
            )
            particles.append(Particle(
                impact_parameter_m=b,
                sign=sign,
                deflection_angle_rad=theta,
                trajectory=self._trajectories.generate(b, sign, theta_signed, start_x, v0),
                display_tag=tag,
            ))
            if progress_callback and (i + 1) % report_every == 0:
                progress_callback(int(100 * (i + 1) / n))

        bins = self.build_bins(
            [p.deflection_angle_rad for p in particles], energy, params.bin_count,
        )

        elapsed = time.perf_counter() - t_start
        logger.info(
            "Simulated %d particles into %d bins in %.3f s", n, params.bin_count, elapsed,
        )
        if progress_callback:
            progress_callback(100)

        return SimulationResult(
            parameters=params,
            particles=tuple(particles),
            bins=bins,
            pixels_per_meter=pixels_per_meter,
            initial_speed_m_s=v0,
            elapsed_seconds=elapsed,
        )

    def build_bins(
        self, angles_rad: list[float], energy_J: float, bin_count: int,
    ) -> tuple[HistogramBin, ...]:
        """Combine simulated counts and the theoretical curve into bins."""
        counts = self._histogram.count(angles_rad, bin_count)
        expected = self._theory.expected_counts(energy_J, len(angles_rad), bin_count)
        return tuple(
            HistogramBin(
                lower_deg=lower,
                upper_deg=upper,
                simulated_count=int(counts[i]),
                expected_count=float(expected[i]),
            )
            for i, (lower, upper) in enumerate(self._histogram.bin_edges_deg(bin_count))
        )
