"""Per-run parser state."""
from dataclasses import dataclass, field
from typing import Optional

from osm_build.builder.base import MapBuilder
from osm_build.config import BuildOptions
from osm_build.errors import FatalParseError
from osm_build.models.elements import NodeAccumulator, WayAccumulator
from osm_build.models.statistics import ConversionStats
from osm_build.parsing.point_table import PointTable
from osm_build.parsing.shape_buffer import ShapeBuffer


@dataclass
class ParserContext:
    """Everything one conversion run mutates.

    A fresh context is built for each run, so two runs never share tables,
    accumulators or id counters.
    """
    builder: MapBuilder
    options: BuildOptions
    point_table: Optional[PointTable] = None
    shapes: ShapeBuffer = field(default_factory=ShapeBuffer)
    way: WayAccumulator = field(default_factory=WayAccumulator)
    node: NodeAccumulator = field(default_factory=NodeAccumulator)
    stats: ConversionStats = field(default_factory=ConversionStats)

    # Position in the input, for error messages
    pass_no: int = 0
    line_no: int = 0

    # Monotonic id counters; each holds the last id handed out
    last_line_id: int = 0
    last_polygon_id: int = 0
    last_center_id: int = 0
    last_city_id: int = 0

    def __post_init__(self):
        if self.point_table is None:
            self.point_table = PointTable(self.builder)
        self.last_city_id = self.options.city_id_base

    def next_line_id(self) -> int:
        self.last_line_id += 1
        return self.last_line_id

    def next_polygon_id(self) -> int:
        self.last_polygon_id += 1
        return self.last_polygon_id

    def next_center_id(self) -> int:
        self.last_center_id += 1
        return self.last_center_id

    def next_city_id(self) -> int:
        self.last_city_id += 1
        return self.last_city_id

    def fatal(self, message: str) -> FatalParseError:
        """Build a fatal error pointing at the current input line."""
        return FatalParseError(message, line_no=self.line_no, pass_no=self.pass_no)
