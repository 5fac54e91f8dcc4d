"""Impact-parameter sampling over the beam disk.

Impact points are uniform over the disk of radius b_max, so the radius
is drawn as b = b_max·√u. Uses numpy.random for reproducible RNG.

All lengths in m (core units).
"""

from __future__ import annotations

import numpy as np


class ImpactSampler:
    """Draws area-weighted impact parameters and a transverse side.

    Args:
        rng: numpy random Generator instance (for reproducibility in tests).
             If None, creates a default unseeded generator.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng or np.random.default_rng()

    def sample(self, max_impact_parameter_m: float) -> tuple[float, int]:
        """Sample a single impact point.

        Args:
            max_impact_parameter_m: Beam disk radius [m].

        Returns:
            (b, sign):
            - b: Impact parameter [m, 0..b_max].
            - sign: +1 or -1 with equal probability, independent of b.
        """
        u = self._rng.random()
        b = max_impact_parameter_m * float(np.sqrt(u))
        sign = 1 if self._rng.random() < 0.5 else -1
        return b, sign

    def sample_batch(
        self, max_impact_parameter_m: float, n: int,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Sample N impact points.

        Draws in the same order as repeated ``sample`` calls, so a seeded
        generator yields identical values either way.

        Args:
            max_impact_parameter_m: Beam disk radius [m].
            n: Number of samples.

        Returns:
            (b_values, signs) — numpy arrays of length n.
            b_values [m], signs (int, ±1).
        """
        b_values = np.empty(n)
        signs = np.empty(n, dtype=int)

        for i in range(n):
            b_values[i], signs[i] = self.sample(max_impact_parameter_m)

        return b_values, signs
