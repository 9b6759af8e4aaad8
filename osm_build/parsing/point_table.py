"""Mapping from external node ids to internal point indices."""
from typing import Dict, Optional

from osm_build.builder.base import MapBuilder
from osm_build.models.elements import Coordinate


class PointTable:
    """Append-only node id -> point index table backed by a map builder.

    Points are stored by the builder; the table only remembers which point
    index each node id received.
    """

    def __init__(self, builder: MapBuilder):
        self._builder = builder
        self._index: Dict[int, int] = {}

    def add(self, node_id: int, coord: Coordinate) -> int:
        """Insert a node.

        A node id seen before keeps its first point index.

        Args:
            node_id: External node id
            coord: Node coordinate

        Returns:
            Point index assigned by the builder
        """
        point = self._builder.add_point(coord)
        self._index.setdefault(node_id, point)
        return point

    def lookup(self, node_id: int) -> Optional[int]:
        """Get the point index of a node id, None if never inserted."""
        return self._index.get(node_id)

    def coordinate(self, point: int) -> Coordinate:
        return self._builder.point_coordinate(point)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index
