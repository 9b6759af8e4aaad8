"""Export functionality for built maps."""

from osm_build.export.base import BuildResult, BaseExporter
from osm_build.export.json_exporter import JSONExporter
from osm_build.export.csv_exporter import CSVExporter
from osm_build.export.shapefile_exporter import ShapefileExporter

__all__ = [
    'BuildResult', 'BaseExporter',
    'JSONExporter', 'CSVExporter', 'ShapefileExporter',
]
