"""Simulation worker — background thread for a scattering run.

Runs SimulationEngine.run off the UI thread to prevent blocking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QThread, pyqtSignal

if TYPE_CHECKING:
    from rutherford.core.simulation_engine import SimulationEngine
    from rutherford.models.simulation import SimulationParameters


class SimulationWorker(QThread):
    """Background thread for one simulation run.

    Emits progress (0-100), result_ready on success,
    error_occurred on failure. A run cannot be cancelled.

    Usage:
        worker = SimulationWorker(engine)
        worker.setup(params)
        worker.progress.connect(on_progress)
        worker.result_ready.connect(on_result)
        worker.error_occurred.connect(on_error)
        worker.start()
    """

    progress = pyqtSignal(int)            # 0-100%
    result_ready = pyqtSignal(object)     # SimulationResult
    error_occurred = pyqtSignal(str)

    def __init__(
        self,
        engine: SimulationEngine,
        parent=None,
    ):
        super().__init__(parent)
        self._engine = engine
        self._params: SimulationParameters | None = None

    def setup(self, params: SimulationParameters) -> None:
        """Configure simulation parameters before starting.

        Must be called before start().
        """
        self._params = params

    def run(self) -> None:
        """Execute the simulation in the background thread."""
        try:
            if self._params is None:
                self.error_occurred.emit("Simulation parameters not set.")
                return

            result = self._engine.run(
                self._params,
                progress_callback=self.progress.emit,
            )
            self.result_ready.emit(result)

        except Exception as e:
            self.error_occurred.emit(str(e))
