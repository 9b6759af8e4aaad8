"""Records produced by a conversion and stored by the map builder."""
from dataclasses import dataclass, asdict
from typing import Any, Dict


class _Record:
    """Mixin giving every record a plain dict form for exporters."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LineRecord(_Record):
    """A segment between two point indices."""
    line_id: int
    layer: int
    from_point: int
    to_point: int


@dataclass(frozen=True)
class StreetRecord(_Record):
    """Street naming; all name parts are dictionary indices."""
    layer: int
    prefix: int
    name: int
    type: int
    suffix: int
    line: int


@dataclass(frozen=True)
class RangeRecord(_Record):
    """Association of a line with a street, without address numbers."""
    line: int
    street: int


@dataclass(frozen=True)
class LandmarkRecord(_Record):
    """Name and layer of a polygon."""
    polygon_id: int
    layer: int
    name: int


@dataclass(frozen=True)
class PolygonRecord(_Record):
    polygon_id: int
    center_id: int
    poly_id: int


@dataclass(frozen=True)
class ShapePoint(_Record):
    """An interior point of a line, keyed to the line's sorted position."""
    line_index: int
    shape_id: int
    line_id: int
    sequence: int
    lon: int
    lat: int


@dataclass(frozen=True)
class CityRecord(_Record):
    fips: int
    year: int
    name: int


@dataclass(frozen=True)
class ZipRecord(_Record):
    """A postal area anchored at a town node."""
    code: int
    lon: int
    lat: int
