"""Angular histogram of simulated deflections.

Bins partition [0°, 180°) into equal-width intervals; an angle of
exactly 180° is counted in the last bin.
"""

import math

import numpy as np

from rutherford.core.units import rad_to_deg


class HistogramBuilder:
    """Fixed-width angular binning."""

    @staticmethod
    def bin_width_deg(bin_count: int) -> float:
        return 180.0 / bin_count

    def bin_edges_deg(self, bin_count: int) -> list[tuple[float, float]]:
        """(lower, upper) edges of every bin [degree].

        Upper edge of bin i and lower edge of bin i+1 are computed by the
        same expression, so neighbouring bins share their boundary exactly.
        """
        width = self.bin_width_deg(bin_count)
        return [(i * width, (i + 1) * width) for i in range(bin_count)]

    def bin_index(self, theta_rad: float, bin_count: int) -> int:
        """Bin holding a deflection angle, clamped to [0, bin_count - 1]."""
        degrees = rad_to_deg(theta_rad)
        index = math.floor(degrees / self.bin_width_deg(bin_count))
        return min(max(index, 0), bin_count - 1)

    def count(self, angles_rad, bin_count: int) -> np.ndarray:
        """Simulated count per bin.

        Args:
            angles_rad: Unsigned deflection angles [radian].
            bin_count: Number of bins (>= 1).

        Returns:
            Integer array of length bin_count; its sum equals len(angles_rad).
        """
        angles = np.asarray(angles_rad, dtype=np.float64)
        if angles.size == 0:
            return np.zeros(bin_count, dtype=np.int64)
        degrees = angles * (180.0 / math.pi)
        indices = np.floor(degrees / self.bin_width_deg(bin_count)).astype(np.int64)
        indices = np.clip(indices, 0, bin_count - 1)
        return np.bincount(indices, minlength=bin_count)
