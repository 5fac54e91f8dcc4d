"""Angular distribution chart — simulated histogram vs Rutherford curve.

Bars and curve are each scaled to their own maximum so the shapes can
be compared regardless of absolute counts.
"""

from __future__ import annotations

import numpy as np
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel

from rutherford.models.simulation import SimulationResult
from rutherford.ui.charts.base_chart import BaseChart
from rutherford.ui.styles.colors import SIMULATED_BAR, TEXT_SECONDARY, THEORY_CURVE


def normalized_series(
    result: SimulationResult,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(bin centers [degree], simulated heights, theoretical heights).

    Each series is divided by max(its maximum, 1).
    """
    centers = np.array([b.center_deg for b in result.bins])
    simulated = np.array([b.simulated_count for b in result.bins], dtype=np.float64)
    expected = np.array([b.expected_count for b in result.bins], dtype=np.float64)
    if centers.size == 0:
        return centers, simulated, expected
    return (
        centers,
        simulated / max(float(simulated.max()), 1.0),
        expected / max(float(expected.max()), 1.0),
    )


class HistogramChartWidget(QWidget):
    """Histogram of deflection angles with the theoretical overlay."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._info_label = QLabel("Run a simulation to see the angular distribution.")
        self._info_label.setStyleSheet(
            f"color: {TEXT_SECONDARY}; font-size: 9pt; padding: 4px;"
        )
        layout.addWidget(self._info_label)

        self._chart = BaseChart(
            title="Angular Distribution",
            x_label="θ (deg)",
            y_label="Relative count",
        )
        self._chart.plot_widget.setXRange(0.0, 180.0)
        layout.addWidget(self._chart)

    @property
    def chart(self) -> BaseChart:
        return self._chart

    def update_result(self, result: SimulationResult) -> None:
        """Redraw bars and curve from a simulation result."""
        self._chart.clear_curves()
        centers, simulated, expected = normalized_series(result)
        if centers.size == 0:
            self._info_label.setText("No bins to display.")
            return

        width = 180.0 / centers.size
        self._chart.add_bars(
            centers, simulated, width * 0.9,
            name="Simulated", color=SIMULATED_BAR,
        )
        self._chart.add_curve(
            centers, expected,
            name="Rutherford", color=THEORY_CURVE, width=2,
        )

        peak = max(result.bins, key=lambda b: b.simulated_count)
        self._info_label.setText(
            f"N = {result.particle_count} | bins = {len(result.bins)} | "
            f"peak {peak.lower_deg:.1f}–{peak.upper_deg:.1f}° "
            f"({peak.simulated_count} particles)"
        )
