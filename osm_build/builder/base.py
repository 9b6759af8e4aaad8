"""Interface between the OSM text reader and the map store."""
from abc import ABC, abstractmethod
from typing import Optional

from osm_build.builder.dictionary import Dictionary
from osm_build.models.elements import Coordinate

DICTIONARY_NAMES = ('prefix', 'street', 'type', 'suffix', 'city')


class MapBuilder(ABC):
    """Abstract map store fed by the reader.

    Point, line and street calls return the index of the stored record.
    Lines must be sorted with sort_lines() before find_sorted_line() and
    add_shape() are used.
    """

    @abstractmethod
    def dictionary(self, name: str) -> Dictionary:
        """Get one of the named string tables (see DICTIONARY_NAMES)."""

    @abstractmethod
    def add_point(self, coord: Coordinate) -> int:
        pass

    @abstractmethod
    def point_coordinate(self, index: int) -> Coordinate:
        pass

    @abstractmethod
    def add_line(self, line_id: int, layer: int,
                 from_point: int, to_point: int) -> int:
        pass

    @abstractmethod
    def sort_lines(self) -> None:
        pass

    @abstractmethod
    def find_sorted_line(self, line_id: int) -> Optional[int]:
        """Get the sorted position of a line id, None if unknown."""

    @abstractmethod
    def add_street(self, layer: int, prefix: int, name: int,
                   street_type: int, suffix: int, line: int) -> int:
        pass

    @abstractmethod
    def add_range_no_address(self, line: int, street: int) -> None:
        pass

    @abstractmethod
    def add_landmark(self, polygon_id: int, layer: int, name: int) -> None:
        pass

    @abstractmethod
    def add_polygon(self, polygon_id: int, center_id: int, poly_id: int) -> None:
        pass

    @abstractmethod
    def add_shape(self, line_index: int, shape_id: int, line_id: int,
                  sequence: int, coord: Coordinate) -> None:
        pass

    @abstractmethod
    def add_city(self, fips: int, year: int, name: int) -> None:
        pass

    @abstractmethod
    def add_zip(self, code: int, coord: Coordinate) -> None:
        pass

    @abstractmethod
    def adjust_limits(self, coord: Coordinate) -> None:
        """Extend the map's coordinate envelope."""
