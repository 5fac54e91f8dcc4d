"""Experiment view — animated particles around the gold foil.

Draws the foil plane, the nucleus, a detector ring and every particle at
the trajectory index given by the playback state. Meters map to pixels
with the result's scale, origin at the canvas center, y pointing up.
"""

from __future__ import annotations

import math

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QWidget

from rutherford.constants import (
    DETECTOR_RADIUS_PX,
    FOIL_LENGTH_PX,
    NUCLEUS_RADIUS_PX,
    PARTICLE_DOT_RADIUS_PX,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
)
from rutherford.core.playback import PlaybackState
from rutherford.models.simulation import DisplayTag, Position, SimulationResult
from rutherford.ui.styles import colors

_TAG_COLORS: dict[DisplayTag, str] = {
    DisplayTag.SMALL_ANGLE: colors.SMALL_ANGLE_COLOR,
    DisplayTag.LARGE_ANGLE: colors.LARGE_ANGLE_COLOR,
}


def to_screen(
    pos: Position,
    pixels_per_meter: float,
    width: float = RENDER_WIDTH_PX,
    height: float = RENDER_HEIGHT_PX,
) -> tuple[float, float] | None:
    """Map a physical position to canvas pixels; None if not finite."""
    sx = width / 2.0 + pos.x * pixels_per_meter
    sy = height / 2.0 - pos.y * pixels_per_meter
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return sx, sy


class ExperimentView(QWidget):
    """Fixed-size canvas animating the current simulation result."""

    def __init__(self, playback: PlaybackState, parent: QWidget | None = None):
        super().__init__(parent)
        self._playback = playback
        self._result: SimulationResult | None = None
        self.setFixedSize(RENDER_WIDTH_PX, RENDER_HEIGHT_PX)

    def set_result(self, result: SimulationResult | None) -> None:
        """Replace the displayed result."""
        self._result = result
        self.update()

    def paintEvent(self, event) -> None:
        result = self._result  # one consistent reference per frame
        w, h = float(self.width()), float(self.height())

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(colors.CANVAS_BG))
        self._draw_apparatus(painter, w, h)

        if result is not None:
            for particle in result.particles:
                self._draw_particle(painter, particle, result.pixels_per_meter, w, h)

        painter.setPen(QColor(colors.TEXT_PRIMARY))
        painter.setFont(QFont("monospace", 9))
        painter.drawText(QPointF(12, h - 8), f"frame: {self._playback.frame}")
        painter.end()

    def _draw_apparatus(self, painter: QPainter, w: float, h: float) -> None:
        cx, cy = w / 2.0, h / 2.0

        painter.setPen(QPen(QColor(colors.FOIL), 4))
        painter.drawLine(
            QPointF(cx, cy - FOIL_LENGTH_PX / 2), QPointF(cx, cy + FOIL_LENGTH_PX / 2),
        )

        painter.setPen(QPen(QColor(colors.NUCLEUS_OUTLINE), 1))
        painter.setBrush(QBrush(QColor(colors.NUCLEUS_FILL)))
        painter.drawEllipse(QPointF(cx, cy), NUCLEUS_RADIUS_PX, NUCLEUS_RADIUS_PX)

        ring = QColor(colors.DETECTOR_RING)
        ring.setAlphaF(colors.DETECTOR_RING_ALPHA)
        painter.setPen(QPen(ring, 2))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(cx, cy), DETECTOR_RADIUS_PX, DETECTOR_RADIUS_PX)

        painter.setPen(QColor(colors.TEXT_PRIMARY))
        painter.setFont(QFont("sans-serif", 10))
        painter.drawText(QPointF(20, 26), "Alpha source (left)")

    def _draw_particle(
        self, painter: QPainter, particle, pixels_per_meter: float, w: float, h: float,
    ) -> None:
        trajectory = particle.trajectory
        if not trajectory:
            return
        color = QColor(_TAG_COLORS[particle.display_tag])

        path = QPainterPath()
        started = False
        for idx in self._playback.trail_range(len(trajectory)):
            point = to_screen(trajectory[idx], pixels_per_meter, w, h)
            if point is None:
                continue
            if started:
                path.lineTo(*point)
            else:
                path.moveTo(*point)
                started = True
        painter.setPen(QPen(color, 1.6))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

        head = to_screen(
            trajectory[self._playback.frame_index(len(trajectory))], pixels_per_meter, w, h,
        )
        if head is not None:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(color))
            painter.drawEllipse(QPointF(*head), PARTICLE_DOT_RADIUS_PX, PARTICLE_DOT_RADIUS_PX)
