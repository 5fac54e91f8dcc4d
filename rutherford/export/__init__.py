"""Export — CSV data export (angles, trajectories)."""

from rutherford.export.csv_export import CsvExporter

__all__ = [
    "CsvExporter",
]
