"""Parameter panel — beam inputs, run/playback controls, export.

Inputs are free text; parsing and validation happen in the engine so a
malformed entry is reported instead of silently replaced.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QSlider, QVBoxLayout, QWidget,
)

from rutherford.constants import (
    DEFAULT_BIN_COUNT,
    DEFAULT_ENERGY_MEV,
    DEFAULT_MAX_IMPACT_ANGSTROM,
    DEFAULT_PARTICLE_COUNT,
    DEFAULT_PLAYBACK_SPEED,
    MAX_PLAYBACK_SPEED,
)
from rutherford.ui.styles.colors import TEXT_SECONDARY

# Slider ticks per unit of speed
_SPEED_STEPS = 10


class ParameterPanel(QWidget):
    """Input fields and control buttons for the simulator."""

    simulate_requested = pyqtSignal()
    play_requested = pyqtSignal()
    pause_requested = pyqtSignal()
    reset_requested = pyqtSignal()
    export_angles_requested = pyqtSignal()
    export_trajectories_requested = pyqtSignal()
    speed_changed = pyqtSignal(float)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)

        beam_group = QGroupBox("Beam")
        form = QFormLayout(beam_group)

        self._edit_count = QLineEdit(str(DEFAULT_PARTICLE_COUNT))
        form.addRow("Particles:", self._edit_count)
        self._edit_energy = QLineEdit(str(DEFAULT_ENERGY_MEV))
        form.addRow("Energy (MeV):", self._edit_energy)
        self._edit_bmax = QLineEdit(str(DEFAULT_MAX_IMPACT_ANGSTROM))
        form.addRow("b max (Å):", self._edit_bmax)
        self._edit_bins = QLineEdit(str(DEFAULT_BIN_COUNT))
        form.addRow("Bins:", self._edit_bins)
        layout.addWidget(beam_group)

        self._btn_simulate = QPushButton("Simulate")
        self._btn_simulate.clicked.connect(self.simulate_requested)
        layout.addWidget(self._btn_simulate)

        playback_group = QGroupBox("Playback")
        pb_layout = QVBoxLayout(playback_group)
        buttons = QHBoxLayout()
        for text, signal in (
            ("Play", self.play_requested),
            ("Pause", self.pause_requested),
            ("Reset", self.reset_requested),
        ):
            btn = QPushButton(text)
            btn.clicked.connect(signal)
            buttons.addWidget(btn)
        pb_layout.addLayout(buttons)

        self._speed_slider = QSlider(Qt.Orientation.Horizontal)
        self._speed_slider.setRange(0, int(MAX_PLAYBACK_SPEED * _SPEED_STEPS))
        self._speed_slider.setValue(int(DEFAULT_PLAYBACK_SPEED * _SPEED_STEPS))
        self._speed_slider.valueChanged.connect(self._on_speed_changed)
        self._speed_label = QLabel()
        self._update_speed_label(DEFAULT_PLAYBACK_SPEED)
        pb_layout.addWidget(self._speed_label)
        pb_layout.addWidget(self._speed_slider)
        layout.addWidget(playback_group)

        export_group = QGroupBox("Export")
        ex_layout = QVBoxLayout(export_group)
        self._btn_export_angles = QPushButton("Export Angles CSV")
        self._btn_export_angles.clicked.connect(self.export_angles_requested)
        ex_layout.addWidget(self._btn_export_angles)
        self._btn_export_traj = QPushButton("Export Trajectories CSV")
        self._btn_export_traj.clicked.connect(self.export_trajectories_requested)
        ex_layout.addWidget(self._btn_export_traj)
        layout.addWidget(export_group)

        self._stat_particles = QLabel("Particles: 0")
        self._stat_particles.setStyleSheet(f"color: {TEXT_SECONDARY};")
        layout.addWidget(self._stat_particles)
        layout.addStretch()

    def get_texts(self) -> tuple[str, str, str, str]:
        """(particle count, energy MeV, b max Å, bins) as entered."""
        return (
            self._edit_count.text(),
            self._edit_energy.text(),
            self._edit_bmax.text(),
            self._edit_bins.text(),
        )

    def speed(self) -> float:
        return self._speed_slider.value() / _SPEED_STEPS

    def set_running(self, running: bool) -> None:
        self._btn_simulate.setEnabled(not running)

    def set_particle_count(self, n: int) -> None:
        self._stat_particles.setText(f"Particles: {n}")

    def _on_speed_changed(self, value: int) -> None:
        speed = value / _SPEED_STEPS
        self._update_speed_label(speed)
        self.speed_changed.emit(speed)

    def _update_speed_label(self, speed: float) -> None:
        self._speed_label.setText(f"Speed: {speed:.1f}×")
