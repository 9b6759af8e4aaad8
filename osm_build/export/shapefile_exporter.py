"""Shapefile export functionality (pyshp).

Shapefiles require homogeneous geometry types, so output is split:
- {basename}_lines.shp for lines, shape points included
- {basename}_zips.shp for postal area points
"""
import os
from typing import Any, Dict

import shapefile

from osm_build.export.base import BuildResult, BaseExporter
from osm_build.models.elements import Coordinate


# WGS84 projection definition for .prj file
WGS84_PRJ = (
    'GEOGCS["GCS_WGS_1984",DATUM["D_WGS_1984",'
    'SPHEROID["WGS_1984",6378137,298.257223563]],'
    'PRIMEM["Greenwich",0],UNIT["Degree",0.017453292519943295]]'
)


class ShapefileExporter(BaseExporter):
    """Export to ESRI Shapefile format.

    Each shapefile includes .shp, .shx, .dbf and a WGS84 .prj file.
    """

    LINE_FIELDS = [
        ('line_id', 'N', 10, 0),
        ('layer', 'N', 4, 0),
        ('layername', 'C', 20, 0),
        ('name', 'C', 100, 0),
    ]

    ZIP_FIELDS = [
        ('code', 'N', 10, 0),
    ]

    def get_format_name(self) -> str:
        return 'shapefile'

    def export(self, result: BuildResult, output_file: str) -> Dict[str, Any]:
        """Export to Shapefile format.

        Args:
            result: Completed conversion
            output_file: Base output file path (extension will be stripped)

        Returns:
            Result dict with metadata including paths to created files
        """
        base_path = os.path.splitext(output_file)[0]
        created_files = []
        builder = result.builder

        if builder.lines:
            path = f"{base_path}_lines"
            self._write_lines(result, path)
            created_files.append(f"{path}.shp")

        if builder.zips:
            path = f"{base_path}_zips"
            self._write_zips(result, path)
            created_files.append(f"{path}.shp")

        return {
            'metadata': result.build_metadata(
                format='shapefile',
                files_created=created_files,
                lines_exported=len(builder.lines),
                zips_exported=len(builder.zips)
            )
        }

    def _write_lines(self, result: BuildResult, base_path: str) -> None:
        street_names = result.line_street_names()

        w = shapefile.Writer(base_path, shapeType=shapefile.POLYLINE)
        for name, ftype, size, decimal in self.LINE_FIELDS:
            w.field(name, ftype, size, decimal)

        for index, line in enumerate(result.builder.lines):
            coords = [list(c) for c in result.line_geometry(line)]
            w.line([coords])
            w.record(
                line_id=line.line_id,
                layer=line.layer,
                layername=result.layer_name(line.layer) or '',
                name=(street_names.get(index) or '')[:100],
            )

        w.close()
        self._write_prj(base_path)

    def _write_zips(self, result: BuildResult, base_path: str) -> None:
        w = shapefile.Writer(base_path, shapeType=shapefile.POINT)
        for name, ftype, size, decimal in self.ZIP_FIELDS:
            w.field(name, ftype, size, decimal)

        for record in result.builder.zips:
            lon, lat = Coordinate(record.lon, record.lat).to_degrees()
            w.point(lon, lat)
            w.record(code=record.code)

        w.close()
        self._write_prj(base_path)

    @staticmethod
    def _write_prj(base_path: str) -> None:
        with open(f"{base_path}.prj", 'w', encoding='utf-8') as prj:
            prj.write(WGS84_PRJ)
