"""JSON export functionality."""
import json
from typing import Any, Dict

from osm_build.export.base import BuildResult, BaseExporter


class JSONExporter(BaseExporter):
    """Export every record table of a built map to one JSON document."""

    def __init__(self, compact: bool = False):
        """Initialize JSON exporter.

        Args:
            compact: Write without indentation
        """
        self.compact = compact

    def get_format_name(self) -> str:
        return 'json'

    def to_document(self, result: BuildResult) -> Dict[str, Any]:
        """Build the JSON document for a conversion.

        Args:
            result: Completed conversion

        Returns:
            Dict with dictionaries, record tables, limits and metadata
        """
        builder = result.builder
        street_names = result.line_street_names()

        lines = []
        for index, line in enumerate(builder.lines):
            entry = line.to_dict()
            entry['layer_name'] = result.layer_name(line.layer)
            entry['street'] = street_names.get(index)
            lines.append(entry)

        return {
            'dictionaries': {
                name: list(dictionary)
                for name, dictionary in builder.dictionaries.items()
            },
            'points': [{'lon': p.lon, 'lat': p.lat} for p in builder.points],
            'lines': lines,
            'sorted_lines': [l.line_id for l in builder.sorted_lines]
                            if builder.is_sorted else [],
            'streets': [s.to_dict() for s in builder.streets],
            'ranges': [r.to_dict() for r in builder.ranges],
            'landmarks': [lm.to_dict() for lm in builder.landmarks],
            'polygons': [p.to_dict() for p in builder.polygons],
            'shapes': [s.to_dict() for s in builder.shapes],
            'cities': [c.to_dict() for c in builder.cities],
            'zips': [z.to_dict() for z in builder.zips],
            'limits': builder.limits,
            'metadata': result.build_metadata(
                format='json',
                layers=result.classifier.layers,
                stats=result.stats.to_dict()
            )
        }

    def export(self, result: BuildResult, output_file: str) -> Dict[str, Any]:
        """Export to JSON.

        Args:
            result: Completed conversion
            output_file: Output file path

        Returns:
            Result dict with metadata
        """
        document = self.to_document(result)

        with open(output_file, 'w', encoding='utf-8') as f:
            if self.compact:
                json.dump(document, f, separators=(',', ':'))
            else:
                json.dump(document, f, indent=2)

        return {'metadata': document['metadata']}
