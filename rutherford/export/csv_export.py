"""CSV export — deflection angles and trajectories.

Plain UTF-8 without BOM so the angles header reads exactly
``particle,theta_deg``.
"""

from __future__ import annotations

import csv
import io
import logging

from rutherford.core.units import rad_to_deg
from rutherford.models.simulation import SimulationResult

logger = logging.getLogger(__name__)

ANGLES_HEADER = ["particle", "theta_deg"]
TRAJECTORIES_HEADER = ["particle", "frame", "x_m", "y_m"]


class CsvExporter:
    """CSV file export operations."""

    def angle_rows(self, result: SimulationResult) -> list[tuple[int, float]]:
        """(index, deflection angle in degrees) for every particle."""
        return [
            (i, rad_to_deg(p.deflection_angle_rad))
            for i, p in enumerate(result.particles)
        ]

    def _write_angles(self, result: SimulationResult, stream) -> None:
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(ANGLES_HEADER)
        for index, theta_deg in self.angle_rows(result):
            writer.writerow([index, theta_deg])

    def angles_csv_text(self, result: SimulationResult) -> str:
        """Angles table as CSV text (header + one row per particle)."""
        buffer = io.StringIO()
        self._write_angles(result, buffer)
        return buffer.getvalue()

    def export_angles(self, result: SimulationResult, output_path: str) -> None:
        """Export deflection angles as CSV.

        Columns: particle, theta_deg.

        Args:
            result: Simulation result.
            output_path: Destination file path (.csv).
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            self._write_angles(result, f)
        logger.info("Exported %d angles to %s", result.particle_count, output_path)

    def export_trajectories(self, result: SimulationResult, output_path: str) -> None:
        """Export every trajectory point as CSV.

        Columns: particle, frame, x_m, y_m.

        Args:
            result: Simulation result.
            output_path: Destination file path (.csv).
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(TRAJECTORIES_HEADER)
            for i, particle in enumerate(result.particles):
                for frame, pos in enumerate(particle.trajectory):
                    writer.writerow([i, frame, f"{pos.x:.6e}", f"{pos.y:.6e}"])
        logger.info("Exported %d trajectories to %s", result.particle_count, output_path)
