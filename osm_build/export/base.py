"""Base classes for export functionality.

Provides BuildResult, the finished conversion handed to exporters, and the
BaseExporter abstract class for format-specific exporters.
"""
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from osm_build.builder.memory import MemoryMapBuilder
from osm_build.filters.layer_rules import AttributeClassifier
from osm_build.models.elements import Coordinate
from osm_build.models.records import LineRecord
from osm_build.models.statistics import ConversionStats


@dataclass
class BuildResult:
    """A completed conversion."""
    osm_file_path: str
    builder: MemoryMapBuilder
    stats: ConversionStats
    classifier: AttributeClassifier
    _shape_cache: Optional[Dict[int, List[Tuple[int, Coordinate]]]] = field(
        default=None, init=False, repr=False
    )

    def line_street_names(self) -> Dict[int, str]:
        """Map line index -> street name, for lines registered as streets."""
        names = {}
        for rng in self.builder.ranges:
            street = self.builder.streets[rng.street]
            names[rng.line] = self.builder.street_name(street)
        return names

    def line_geometry(self, line: LineRecord) -> List[Tuple[float, float]]:
        """Coordinates of a line as (lon, lat) degrees, shape points included."""
        shapes = self._shapes_by_line().get(line.line_id, [])
        coords = [self.builder.point_coordinate(line.from_point)]
        coords.extend(coord for _, coord in sorted(shapes))
        coords.append(self.builder.point_coordinate(line.to_point))
        return [coord.to_degrees() for coord in coords]

    def _shapes_by_line(self) -> Dict[int, List[Tuple[int, Coordinate]]]:
        if self._shape_cache is None:
            by_line = defaultdict(list)
            for shape in self.builder.shapes:
                by_line[shape.line_id].append(
                    (shape.sequence, Coordinate(shape.lon, shape.lat))
                )
            self._shape_cache = dict(by_line)
        return self._shape_cache

    def layer_name(self, layer: int) -> Optional[str]:
        return self.classifier.layer_name(layer)

    def build_metadata(self, **extras) -> Dict[str, Any]:
        """Build common metadata structure.

        Args:
            **extras: Additional metadata fields

        Returns:
            Metadata dictionary
        """
        return {
            'file_path': self.osm_file_path,
            'processing_time_seconds': self.stats.total_time,
            'records': self.builder.summary(),
            **extras
        }


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, result: BuildResult, output_file: str) -> Dict[str, Any]:
        """Export a built map to file.

        Args:
            result: Completed conversion
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'json', 'csv').

        Returns:
            Format name string
        """
        pass
