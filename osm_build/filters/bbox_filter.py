"""Bounding box filter applied to nodes while the point table is built."""
from typing import Dict, Optional

from osm_build.models.elements import Coordinate, degrees_to_micro


class BoundingBoxFilter:
    """Four independently enabled limits, in micro-degrees.

    A limit left as None is disabled. Limits are inclusive: a coordinate
    lying exactly on an enabled bound is accepted.
    """

    def __init__(self, lon_min: Optional[int] = None,
                 lon_max: Optional[int] = None,
                 lat_min: Optional[int] = None,
                 lat_max: Optional[int] = None):
        """Initialize bounding box.

        Args:
            lon_min: Minimum longitude
            lon_max: Maximum longitude
            lat_min: Minimum latitude
            lat_max: Maximum latitude
        """
        self._lon_min = lon_min
        self._lon_max = lon_max
        self._lat_min = lat_min
        self._lat_max = lat_max

    @property
    def lon_min(self) -> Optional[int]:
        return self._lon_min

    @property
    def lon_max(self) -> Optional[int]:
        return self._lon_max

    @property
    def lat_min(self) -> Optional[int]:
        return self._lat_min

    @property
    def lat_max(self) -> Optional[int]:
        return self._lat_max

    @property
    def is_active(self) -> bool:
        """Check if at least one limit is enabled."""
        return any(v is not None for v in
                   (self._lon_min, self._lon_max, self._lat_min, self._lat_max))

    def accepts(self, coord: Coordinate) -> bool:
        """Check if a coordinate passes every enabled limit.

        Args:
            coord: Coordinate in micro-degrees

        Returns:
            True if the coordinate is inside the box
        """
        if self._lon_min is not None and coord.lon < self._lon_min:
            return False
        if self._lon_max is not None and coord.lon > self._lon_max:
            return False
        if self._lat_min is not None and coord.lat < self._lat_min:
            return False
        if self._lat_max is not None and coord.lat > self._lat_max:
            return False
        return True

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Convert to dictionary representation."""
        return {
            'lon_min': self._lon_min,
            'lon_max': self._lon_max,
            'lat_min': self._lat_min,
            'lat_max': self._lat_max
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Optional[int]]) -> 'BoundingBoxFilter':
        """Create from dictionary; missing keys leave the limit disabled."""
        return cls(d.get('lon_min'), d.get('lon_max'),
                   d.get('lat_min'), d.get('lat_max'))

    @classmethod
    def from_degrees(cls, top: Optional[float] = None,
                     left: Optional[float] = None,
                     bottom: Optional[float] = None,
                     right: Optional[float] = None) -> 'BoundingBoxFilter':
        """Create from limits in degrees, using the osmosis argument order.

        Limits are truncated toward zero like node coordinates.

        Args:
            top: Maximum latitude
            left: Minimum longitude
            bottom: Minimum latitude
            right: Maximum longitude
        """
        def micro(value: Optional[float]) -> Optional[int]:
            return None if value is None else degrees_to_micro(str(value))

        return cls(lon_min=micro(left), lon_max=micro(right),
                   lat_min=micro(bottom), lat_max=micro(top))

    def __repr__(self) -> str:
        return f"BoundingBoxFilter({self.to_dict()})"
