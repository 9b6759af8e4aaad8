"""Conversion statistics data model."""
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class ConversionStats:
    """Counters and timings collected during one conversion run."""
    # Input
    pass1_lines: int = 0
    pass2_lines: int = 0

    # Nodes
    nodes_read: int = 0
    nodes_rejected: int = 0
    points_added: int = 0
    cities_added: int = 0
    zips_added: int = 0

    # Ways
    ways_read: int = 0
    ways_invalid: int = 0
    ways_degenerate: int = 0
    areas_added: int = 0
    lines_added: int = 0
    streets_added: int = 0

    # Shapes
    shapes_buffered: int = 0
    shape_points_added: int = 0
    shapes_missing_line: int = 0

    # Timing (seconds)
    pass1_time: float = 0.0
    pass2_time: float = 0.0
    shape_time: float = 0.0

    @property
    def total_time(self) -> float:
        return self.pass1_time + self.pass2_time + self.shape_time

    @property
    def ways_dropped(self) -> int:
        """Ways that produced no records."""
        return self.ways_invalid + self.ways_degenerate

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary representation."""
        result = asdict(self)
        result['total_time'] = self.total_time
        return result
