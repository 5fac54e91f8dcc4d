"""Charts — pyqtgraph visualization widgets."""

from rutherford.ui.charts.base_chart import BaseChart
from rutherford.ui.charts.histogram_chart import HistogramChartWidget

__all__ = [
    "BaseChart",
    "HistogramChartWidget",
]
