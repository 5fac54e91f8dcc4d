"""Base chart widget — pyqtgraph-based with dark theme.

Common API for chart widgets: add_curve, add_bars, clear.
"""

import numpy as np
import pyqtgraph as pg
from PyQt6.QtWidgets import QWidget, QVBoxLayout

from rutherford.ui.styles.colors import BACKGROUND, PANEL_BG, TEXT_SECONDARY, BORDER


class BaseChart(QWidget):
    """pyqtgraph PlotWidget wrapper with dark theme and utility methods."""

    def __init__(
        self,
        title: str = "",
        x_label: str = "",
        y_label: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._items: list[pg.GraphicsObject] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground(BACKGROUND)
        self.plot_widget.showGrid(x=True, y=True, alpha=0.15)
        layout.addWidget(self.plot_widget)

        # Axis styling
        plot_item = self.plot_widget.getPlotItem()
        if title:
            plot_item.setTitle(title, color=TEXT_SECONDARY, size="10pt")
        if x_label:
            plot_item.setLabel("bottom", x_label, color=TEXT_SECONDARY)
        if y_label:
            plot_item.setLabel("left", y_label, color=TEXT_SECONDARY)

        for axis_name in ("bottom", "left", "top", "right"):
            axis = plot_item.getAxis(axis_name)
            axis.setPen(pg.mkPen(BORDER))
            axis.setTextPen(pg.mkPen(TEXT_SECONDARY))

        self._legend = plot_item.addLegend(
            offset=(10, 10),
            labelTextColor=TEXT_SECONDARY,
            brush=pg.mkBrush(PANEL_BG),
            pen=pg.mkPen(BORDER),
        )

    @property
    def items(self) -> list:
        return list(self._items)

    def add_curve(
        self,
        x: np.ndarray,
        y: np.ndarray,
        name: str = "",
        color: str = "#3B82F6",
        width: int = 2,
    ) -> pg.PlotDataItem:
        """Add a data curve to the plot."""
        pen = pg.mkPen(color=color, width=width)
        curve = self.plot_widget.plot(x, y, pen=pen, name=name)
        self._items.append(curve)
        return curve

    def add_bars(
        self,
        x: np.ndarray,
        heights: np.ndarray,
        width: float,
        name: str = "",
        color: str = "#94A3B8",
    ) -> pg.BarGraphItem:
        """Add a bar series centered on x."""
        bars = pg.BarGraphItem(
            x=x, height=heights, width=width,
            brush=pg.mkBrush(color), pen=pg.mkPen(None),
        )
        self.plot_widget.addItem(bars)
        if name and self._legend is not None:
            self._legend.addItem(bars, name)
        self._items.append(bars)
        return bars

    def clear_curves(self) -> None:
        """Remove all curves and bars."""
        for item in self._items:
            self.plot_widget.removeItem(item)
        self._items.clear()
        if self._legend is not None:
            self._legend.clear()
