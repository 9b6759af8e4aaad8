"""Main osmbuild API.

Provides the high-level OSMBuild class: convert an OSM text file into an
in-memory map and export it.
"""
import os
from typing import Any, Dict, Optional

from osm_build.builder.memory import MemoryMapBuilder
from osm_build.config import BuildOptions
from osm_build.export.base import BaseExporter, BuildResult
from osm_build.models.statistics import ConversionStats
from osm_build.parsing.text_reader import OSMTextReader


class OSMBuild:
    """Converts OSM text files into map records."""

    def __init__(self, options: Optional[BuildOptions] = None):
        """Initialize OSMBuild.

        Args:
            options: Conversion settings shared by every build
        """
        self.options = options or BuildOptions()

        # Processing statistics
        self.stats = {
            'files_processed': 0,
            'total_processing_time': 0.0,
            'lines_added': 0
        }

    def build(self, osm_file_path: str) -> BuildResult:
        """Convert one OSM file.

        Args:
            osm_file_path: Path to the OSM text file

        Returns:
            BuildResult with the filled map and the run statistics

        Raises:
            FileNotFoundError: If the file does not exist
            BuildMapError: If the conversion fails
        """
        if not os.path.exists(osm_file_path):
            raise FileNotFoundError(f"OSM file not found: {osm_file_path}")

        builder = MemoryMapBuilder()
        reader = OSMTextReader(builder, self.options)
        run_stats: ConversionStats = reader.read(osm_file_path)

        self.stats['files_processed'] += 1
        self.stats['total_processing_time'] += run_stats.total_time
        self.stats['lines_added'] += run_stats.lines_added

        return BuildResult(osm_file_path, builder, run_stats, self.options.classifier)

    def build_and_export(self, osm_file_path: str, output_file: str,
                         exporter: BaseExporter) -> Dict[str, Any]:
        """Convert a file and write it with an exporter.

        Returns:
            Exporter metadata
        """
        result = self.build(osm_file_path)
        return exporter.export(result, output_file)
