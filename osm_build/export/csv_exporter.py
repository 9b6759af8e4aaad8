"""CSV export functionality.

One CSV file is written per record table: {basename}_{table}.csv.
"""
import csv
import os
from typing import Any, Dict, List

from osm_build.export.base import BuildResult, BaseExporter


class CSVExporter(BaseExporter):
    """Export record tables to CSV files."""

    def __init__(self, include_names: bool = True):
        """Initialize CSV exporter.

        Args:
            include_names: Add resolved dictionary strings next to indices
        """
        self.include_names = include_names

    def get_format_name(self) -> str:
        return 'csv'

    def export(self, result: BuildResult, output_file: str) -> Dict[str, Any]:
        """Export to CSV files.

        Args:
            result: Completed conversion
            output_file: Base output path (extension will be stripped)

        Returns:
            Result dict with metadata including paths to created files
        """
        base_path = os.path.splitext(output_file)[0]
        created_files = []

        for table, rows in self._tables(result).items():
            if not rows:
                continue
            path = f"{base_path}_{table}.csv"
            with open(path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
                writer.writeheader()
                writer.writerows(rows)
            created_files.append(path)

        return {
            'metadata': result.build_metadata(
                format='csv',
                files_created=created_files
            )
        }

    def _tables(self, result: BuildResult) -> Dict[str, List[Dict[str, Any]]]:
        builder = result.builder

        points = [{'index': i, 'lon': p.lon, 'lat': p.lat}
                  for i, p in enumerate(builder.points)]
        lines = [line.to_dict() for line in builder.lines]
        streets = [street.to_dict() for street in builder.streets]
        landmarks = [lm.to_dict() for lm in builder.landmarks]
        cities = [city.to_dict() for city in builder.cities]

        if self.include_names:
            for row, line in zip(lines, builder.lines):
                row['layer_name'] = result.layer_name(line.layer) or ''
            for row, street in zip(streets, builder.streets):
                row['street_name'] = builder.street_name(street)
            for row, landmark in zip(landmarks, builder.landmarks):
                row['landmark_name'] = builder.landmark_name(landmark)
            for row, city in zip(cities, builder.cities):
                row['city_name'] = builder.city_name(city)

        return {
            'points': points,
            'lines': lines,
            'streets': streets,
            'ranges': [r.to_dict() for r in builder.ranges],
            'landmarks': landmarks,
            'polygons': [p.to_dict() for p in builder.polygons],
            'shapes': [s.to_dict() for s in builder.shapes],
            'cities': cities,
            'zips': [z.to_dict() for z in builder.zips],
        }
