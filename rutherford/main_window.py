"""Main window — experiment view, histogram chart and parameter panel.

Layout:
  Left:   ParameterPanel
  Center: ExperimentView (animated trajectories)
  Bottom: HistogramChartWidget
  Footer: QStatusBar

Holds the single current SimulationResult. It is replaced only in the
GUI thread when a worker finishes, and only one worker runs at a time.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import (
    QFileDialog, QHBoxLayout, QMainWindow, QVBoxLayout, QWidget,
)

from rutherford.constants import (
    APP_NAME, APP_VERSION, DEFAULT_ANGLES_FILENAME, DEFAULT_TRAJECTORIES_FILENAME,
    MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH, PLAYBACK_INTERVAL_MS,
)
from rutherford.core.playback import PlaybackState
from rutherford.core.simulation_engine import (
    InvalidParameterError, SimulationEngine, parse_parameters,
)
from rutherford.core.units import J_to_MeV, m_to_angstrom
from rutherford.export.csv_export import CsvExporter
from rutherford.models.simulation import SimulationResult
from rutherford.ui.canvas.experiment_view import ExperimentView
from rutherford.ui.charts.histogram_chart import HistogramChartWidget
from rutherford.ui.panels.parameter_panel import ParameterPanel
from rutherford.workers.simulation_worker import SimulationWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Application main window."""

    def __init__(self, engine: SimulationEngine | None = None):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        # Core services
        self._engine = engine or SimulationEngine()
        self._csv_exporter = CsvExporter()
        self._playback = PlaybackState()
        self._simulation_worker: SimulationWorker | None = None
        self._current_result: SimulationResult | None = None

        self._build_ui()
        self._connect_signals()

        self._timer = QTimer(self)
        self._timer.setInterval(PLAYBACK_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)
        self._timer.start()

    @property
    def current_result(self) -> SimulationResult | None:
        return self._current_result

    def _build_ui(self) -> None:
        central = QWidget()
        root = QVBoxLayout(central)

        top = QHBoxLayout()
        self._panel = ParameterPanel()
        top.addWidget(self._panel)
        self._view = ExperimentView(self._playback)
        top.addWidget(self._view, 1)
        root.addLayout(top)

        self._histogram = HistogramChartWidget()
        root.addWidget(self._histogram, 1)

        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        self._panel.simulate_requested.connect(self._run_simulation)
        self._panel.play_requested.connect(self._playback.play)
        self._panel.pause_requested.connect(self._playback.pause)
        self._panel.reset_requested.connect(self._on_reset)
        self._panel.speed_changed.connect(self._playback.set_speed)
        self._panel.export_angles_requested.connect(self._export_angles)
        self._panel.export_trajectories_requested.connect(self._export_trajectories)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _run_simulation(self) -> None:
        """Launch a simulation in a background thread."""
        if self._simulation_worker is not None and self._simulation_worker.isRunning():
            return

        try:
            params = parse_parameters(*self._panel.get_texts())
        except InvalidParameterError as e:
            self.statusBar().showMessage(f"Invalid input: {e}")
            return

        self.statusBar().showMessage("Starting simulation...")
        self._panel.set_running(True)

        worker = SimulationWorker(self._engine, self)
        worker.setup(params)
        worker.progress.connect(self._on_simulation_progress)
        worker.result_ready.connect(self._on_simulation_result)
        worker.error_occurred.connect(self._on_simulation_error)
        worker.finished.connect(self._on_simulation_finished)
        worker.finished.connect(worker.deleteLater)
        self._simulation_worker = worker
        worker.start()

    def _on_simulation_progress(self, pct: int) -> None:
        self.statusBar().showMessage(f"Simulation: {pct}%...")

    def _on_simulation_result(self, result: SimulationResult) -> None:
        """Install the new result as the current one."""
        self._current_result = result
        self._playback.frame = 0
        self._view.set_result(result)
        self._histogram.update_result(result)
        self._panel.set_particle_count(result.particle_count)

        params = result.parameters
        self.statusBar().showMessage(
            f"Simulation complete: N={params.particle_count}, "
            f"E={J_to_MeV(params.beam_energy_J):.2f} MeV, "
            f"b_max={m_to_angstrom(params.max_impact_parameter_m):.3g} Å, "
            f"t={result.elapsed_seconds:.2f}s"
        )

    def _on_simulation_error(self, error: str) -> None:
        logger.warning("Simulation failed: %s", error)
        self.statusBar().showMessage(f"Simulation error: {error}")

    def _on_simulation_finished(self) -> None:
        self._simulation_worker = None
        self._panel.set_running(False)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def _on_tick(self) -> None:
        self._playback.tick()
        self._view.update()

    def _on_reset(self) -> None:
        self._playback.reset()
        self._view.update()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def _export_angles(self) -> None:
        self._export(self._csv_exporter.export_angles, DEFAULT_ANGLES_FILENAME)

    def _export_trajectories(self) -> None:
        self._export(self._csv_exporter.export_trajectories, DEFAULT_TRAJECTORIES_FILENAME)

    def _export(self, export_fn, default_name: str) -> None:
        result = self._current_result
        if result is None:
            self.statusBar().showMessage("Nothing to export, run a simulation first.")
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Export CSV", default_name, "CSV (*.csv)",
        )
        if not path:
            return
        try:
            export_fn(result, path)
        except OSError as e:
            logger.warning("Export to %s failed: %s", path, e)
            self.statusBar().showMessage(f"Export failed: {e}")
            return
        self.statusBar().showMessage(f"Exported {path}")
