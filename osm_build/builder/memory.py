"""In-memory map store."""
from typing import Dict, List, Optional

from osm_build.builder.base import MapBuilder, DICTIONARY_NAMES
from osm_build.builder.dictionary import Dictionary
from osm_build.models.elements import Coordinate
from osm_build.models.records import (
    LineRecord, StreetRecord, RangeRecord, LandmarkRecord, PolygonRecord,
    ShapePoint, CityRecord, ZipRecord
)


class MemoryMapBuilder(MapBuilder):
    """Keeps every record in lists, in the order it was added.

    Lines are sorted by (layer, from point, to point, line id); the sorted
    order is what shape points refer to.
    """

    def __init__(self):
        self.dictionaries: Dict[str, Dictionary] = {
            name: Dictionary(name) for name in DICTIONARY_NAMES
        }
        self.points: List[Coordinate] = []
        self.lines: List[LineRecord] = []
        self.streets: List[StreetRecord] = []
        self.ranges: List[RangeRecord] = []
        self.landmarks: List[LandmarkRecord] = []
        self.polygons: List[PolygonRecord] = []
        self.shapes: List[ShapePoint] = []
        self.cities: List[CityRecord] = []
        self.zips: List[ZipRecord] = []

        self._sorted_lines: Optional[List[LineRecord]] = None
        self._sorted_index: Dict[int, int] = {}

        # Coordinate envelope, None until the first adjust_limits()
        self.min_lon: Optional[int] = None
        self.max_lon: Optional[int] = None
        self.min_lat: Optional[int] = None
        self.max_lat: Optional[int] = None

    def dictionary(self, name: str) -> Dictionary:
        return self.dictionaries[name]

    # === Points ===

    def add_point(self, coord: Coordinate) -> int:
        self.points.append(coord)
        return len(self.points) - 1

    def point_coordinate(self, index: int) -> Coordinate:
        return self.points[index]

    # === Lines ===

    def add_line(self, line_id: int, layer: int,
                 from_point: int, to_point: int) -> int:
        self.lines.append(LineRecord(line_id, layer, from_point, to_point))
        self._sorted_lines = None
        return len(self.lines) - 1

    def sort_lines(self) -> None:
        self._sorted_lines = sorted(
            self.lines,
            key=lambda l: (l.layer, l.from_point, l.to_point, l.line_id)
        )
        self._sorted_index = {
            line.line_id: position
            for position, line in enumerate(self._sorted_lines)
        }

    @property
    def is_sorted(self) -> bool:
        return self._sorted_lines is not None

    @property
    def sorted_lines(self) -> List[LineRecord]:
        """Lines in sorted order.

        Raises:
            RuntimeError: If sort_lines() has not run since the last add
        """
        if self._sorted_lines is None:
            raise RuntimeError("lines are not sorted")
        return list(self._sorted_lines)

    def find_sorted_line(self, line_id: int) -> Optional[int]:
        if self._sorted_lines is None:
            raise RuntimeError("lines are not sorted")
        return self._sorted_index.get(line_id)

    # === Streets and polygons ===

    def add_street(self, layer: int, prefix: int, name: int,
                   street_type: int, suffix: int, line: int) -> int:
        self.streets.append(
            StreetRecord(layer, prefix, name, street_type, suffix, line)
        )
        return len(self.streets) - 1

    def add_range_no_address(self, line: int, street: int) -> None:
        self.ranges.append(RangeRecord(line, street))

    def add_landmark(self, polygon_id: int, layer: int, name: int) -> None:
        self.landmarks.append(LandmarkRecord(polygon_id, layer, name))

    def add_polygon(self, polygon_id: int, center_id: int, poly_id: int) -> None:
        self.polygons.append(PolygonRecord(polygon_id, center_id, poly_id))

    def add_shape(self, line_index: int, shape_id: int, line_id: int,
                  sequence: int, coord: Coordinate) -> None:
        self.shapes.append(ShapePoint(line_index, shape_id, line_id, sequence,
                                      coord.lon, coord.lat))

    # === Localities ===

    def add_city(self, fips: int, year: int, name: int) -> None:
        self.cities.append(CityRecord(fips, year, name))

    def add_zip(self, code: int, coord: Coordinate) -> None:
        self.zips.append(ZipRecord(code, coord.lon, coord.lat))

    def adjust_limits(self, coord: Coordinate) -> None:
        if self.min_lon is None:
            self.min_lon = self.max_lon = coord.lon
            self.min_lat = self.max_lat = coord.lat
            return
        self.min_lon = min(self.min_lon, coord.lon)
        self.max_lon = max(self.max_lon, coord.lon)
        self.min_lat = min(self.min_lat, coord.lat)
        self.max_lat = max(self.max_lat, coord.lat)

    # === Queries ===

    @property
    def limits(self) -> Optional[Dict[str, int]]:
        """Coordinate envelope of all line ways, None when empty."""
        if self.min_lon is None:
            return None
        return {
            'min_lon': self.min_lon,
            'max_lon': self.max_lon,
            'min_lat': self.min_lat,
            'max_lat': self.max_lat
        }

    def street_name(self, street: StreetRecord) -> str:
        return self.dictionaries['street'].get(street.name)

    def city_name(self, city: CityRecord) -> str:
        return self.dictionaries['city'].get(city.name)

    def landmark_name(self, landmark: LandmarkRecord) -> str:
        return self.dictionaries['street'].get(landmark.name)

    def summary(self) -> Dict[str, int]:
        """Record counts per table."""
        return {
            'points': len(self.points),
            'lines': len(self.lines),
            'streets': len(self.streets),
            'ranges': len(self.ranges),
            'polygons': len(self.polygons),
            'shapes': len(self.shapes),
            'cities': len(self.cities),
            'zips': len(self.zips)
        }
