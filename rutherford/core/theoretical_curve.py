"""Theoretical Rutherford angular distribution per histogram bin.

Expected counts come from dσ/dΩ at each bin midpoint, weighted by the
solid-angle element 2π·sin θ·Δθ and normalized to the particle count.
"""

import math

import numpy as np

from rutherford.core.scattering_law import ScatteringLaw


class TheoreticalCurve:
    """Expected per-bin counts from the Rutherford cross-section.

    Args:
        law: Scattering law providing dσ/dΩ. Defaults to alpha on gold.
    """

    def __init__(self, law: ScatteringLaw | None = None) -> None:
        self._law = law or ScatteringLaw()

    @staticmethod
    def bin_midpoints_rad(bin_count: int) -> np.ndarray:
        """Angular midpoints (i + ½)·π / bin_count [radian]."""
        return (np.arange(bin_count) + 0.5) * math.pi / bin_count

    def angular_mass(self, bin_count: int) -> np.ndarray:
        """Unnormalized probability mass per bin.

        mass = 2π·sin(θ_mid)·Δθ / sin⁴(θ_mid/2)

        The (k·q₁·q₂ / 4E)² prefactor of dσ/dΩ cancels in the normalization
        and is left out.
        """
        d_theta = math.pi / bin_count
        masses = np.zeros(bin_count)
        for i, theta in enumerate(self.bin_midpoints_rad(bin_count)):
            shape = self._law.relative_cross_section(float(theta))
            masses[i] = shape * 2.0 * math.pi * math.sin(theta) * d_theta
        return masses

    def expected_counts(
        self, energy_J: float, particle_count: int, bin_count: int,
    ) -> np.ndarray:
        """Expected counts per bin, summing to particle_count.

        Args:
            energy_J: Projectile kinetic energy [J]. The normalized curve does
                not depend on it.
            particle_count: Total number of simulated particles.
            bin_count: Number of angular bins.

        Returns:
            Float array of length bin_count. All zeros if the total mass is 0.
        """
        masses = self.angular_mass(bin_count)
        total = float(np.sum(masses))
        if not total > 0.0:
            return np.zeros(bin_count)
        return masses / total * particle_count
