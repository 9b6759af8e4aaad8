"""Conversion settings."""
from dataclasses import dataclass, field
from typing import FrozenSet

from osm_build.filters.bbox_filter import BoundingBoxFilter
from osm_build.filters.layer_rules import AttributeClassifier

# Identifiers given to localities found in the input
CITY_ID_BASE = 32999 * 10000
CITY_YEAR = 2008


@dataclass(frozen=True)
class BuildOptions:
    """Settings fixed for the duration of one conversion.

    Attributes:
        bbox: Node filter; the default accepts everything
        classifier: Tag rule table; the default is the built-in table
        locality_kinds: 'place' values that produce city and zip records
        city_id_base: City ids count up from here (first id is base + 1)
        city_year: Year stamped on every city record
    """
    bbox: BoundingBoxFilter = field(default_factory=BoundingBoxFilter)
    classifier: AttributeClassifier = field(default_factory=AttributeClassifier.default)
    locality_kinds: FrozenSet[str] = frozenset({'town'})
    city_id_base: int = CITY_ID_BASE
    city_year: int = CITY_YEAR
