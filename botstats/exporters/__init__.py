"""Data exporters for chart series"""

from botstats.exporters.json_exporter import JSONExporter

__all__ = ["JSONExporter"]
