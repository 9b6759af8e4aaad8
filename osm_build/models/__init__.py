"""Data models for parsing state, built records and statistics."""

from osm_build.models.elements import (
    Coordinate, WayAccumulator, NodeAccumulator, ShapeRecord, degrees_to_micro
)
from osm_build.models.records import (
    LineRecord, StreetRecord, RangeRecord, LandmarkRecord, PolygonRecord,
    ShapePoint, CityRecord, ZipRecord
)
from osm_build.models.statistics import ConversionStats

__all__ = [
    'Coordinate', 'WayAccumulator', 'NodeAccumulator', 'ShapeRecord',
    'degrees_to_micro',
    'LineRecord', 'StreetRecord', 'RangeRecord', 'LandmarkRecord',
    'PolygonRecord', 'ShapePoint', 'CityRecord', 'ZipRecord',
    'ConversionStats',
]
