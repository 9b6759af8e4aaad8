"""Deferred shape points for line ways."""
import logging
from typing import Iterator, List, Sequence

from osm_build.builder.base import MapBuilder
from osm_build.models.elements import Coordinate, ShapeRecord

log = logging.getLogger(__name__)


class ShapeBuffer:
    """Holds the coordinates of every line way until lines are sorted.

    Shape points reference the sorted position of their line, which is only
    known once all ways have been read, so emission is a separate step.
    """

    def __init__(self):
        self._records: List[ShapeRecord] = []

    def add(self, line_id: int, coordinates: Sequence[Coordinate]) -> ShapeRecord:
        """Queue the coordinates of a line way.

        Args:
            line_id: Line id assigned to the way
            coordinates: Coordinates of all nodes, endpoints included

        Returns:
            The stored ShapeRecord
        """
        record = ShapeRecord(line_id, tuple(coordinates))
        self._records.append(record)
        return record

    def flush(self, builder: MapBuilder) -> dict:
        """Emit shape points for all queued records.

        The builder must have sorted its lines. Each record's position in
        the buffer is its shape id; records with two coordinates or fewer
        are straight lines and emit nothing.

        Args:
            builder: Map builder with sorted lines

        Returns:
            Dict with 'points' emitted and 'missing' records whose line was
            not found
        """
        points = 0
        missing = 0
        for shape_id, record in enumerate(self._records):
            if record.count <= 2:
                continue

            line_index = builder.find_sorted_line(record.line_id)
            if line_index is None:
                log.warning("shape %d: line %d not found after sorting",
                            shape_id, record.line_id)
                missing += 1
                continue

            for sequence, coord in enumerate(record.interior):
                builder.add_shape(line_index, shape_id, record.line_id,
                                  sequence, coord)
                points += 1

        return {'points': points, 'missing': missing}

    @property
    def records(self) -> List[ShapeRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ShapeRecord]:
        return iter(self._records)
