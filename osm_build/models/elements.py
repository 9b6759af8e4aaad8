"""Parsing-time data models: coordinates and the per-element accumulators."""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import List, Optional, Tuple

MICRODEGREES = 1000000


def degrees_to_micro(text: str) -> int:
    """Convert a decimal-degree string to integer micro-degrees.

    The value is scaled with decimal arithmetic and truncated toward zero,
    so "3.0001" gives exactly 3000100.

    Args:
        text: Decimal degrees as found in the input, e.g. "50.4443626"

    Returns:
        Micro-degree integer

    Raises:
        ValueError: If the text is not a finite decimal number
    """
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"not a decimal number: {text!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a finite number: {text!r}")
    return int((value * MICRODEGREES).to_integral_value(rounding=ROUND_DOWN))


@dataclass(frozen=True)
class Coordinate:
    """A (longitude, latitude) pair in micro-degrees."""
    lon: int
    lat: int

    @classmethod
    def from_degrees(cls, lon: str, lat: str) -> 'Coordinate':
        """Build from decimal-degree strings."""
        return cls(degrees_to_micro(lon), degrees_to_micro(lat))

    def to_degrees(self) -> Tuple[float, float]:
        """Get (lon, lat) in floating point degrees."""
        return self.lon / MICRODEGREES, self.lat / MICRODEGREES


@dataclass
class WayAccumulator:
    """State of the way currently being parsed.

    Only one way is live at a time; the reader resets it when a way opens
    and again once the way has been finalized.
    """
    way_id: int = 0
    node_ids: List[int] = field(default_factory=list)
    layer: int = 0
    street_name: Optional[str] = None
    flags: int = 0
    invalid: bool = False

    @property
    def is_open(self) -> bool:
        """Check if a way is currently open."""
        return self.way_id != 0

    def reset(self, way_id: int = 0) -> None:
        """Clear all fields, optionally opening a new way."""
        self.way_id = way_id
        self.node_ids = []
        self.layer = 0
        self.street_name = None
        self.flags = 0
        self.invalid = False


@dataclass
class NodeAccumulator:
    """State of the node currently being parsed (pass 1)."""
    node_id: Optional[int] = None
    coordinate: Optional[Coordinate] = None
    accepted: bool = False
    place: Optional[str] = None
    town_name: Optional[str] = None
    postal_code: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.node_id is not None

    def reset(self) -> None:
        self.node_id = None
        self.coordinate = None
        self.accepted = False
        self.place = None
        self.town_name = None
        self.postal_code = None


@dataclass(frozen=True)
class ShapeRecord:
    """Coordinates of a finalized line way, kept until lines are sorted.

    All nodes of the way are stored, endpoints included; the endpoints are
    dropped when the shape points are emitted.
    """
    line_id: int
    coordinates: Tuple[Coordinate, ...]

    @property
    def count(self) -> int:
        return len(self.coordinates)

    @property
    def interior(self) -> Tuple[Coordinate, ...]:
        """Coordinates between the two endpoints."""
        return self.coordinates[1:-1]
