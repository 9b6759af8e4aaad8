"""
osmbuild - Build map records from OpenStreetMap text files.

The OSM text (XML) input is read in two passes: nodes become points,
ways become lines, streets, polygons and shape points, classified by a
configurable layer rule table.
"""

__version__ = "1.0.0"

# Data models
from osm_build.models.elements import Coordinate, ShapeRecord
from osm_build.models.statistics import ConversionStats

# Errors
from osm_build.errors import BuildMapError, FatalParseError, InputReadError, RuleTableError

# Filtering and classification
from osm_build.filters.bbox_filter import BoundingBoxFilter
from osm_build.filters.layer_rules import AttributeClassifier, FeatureFlag, LayerRule
from osm_build.config import BuildOptions

# Map stores
from osm_build.builder.base import MapBuilder
from osm_build.builder.memory import MemoryMapBuilder

# Parsing
from osm_build.parsing.text_reader import OSMTextReader

# Main API
from osm_build.api import OSMBuild

__all__ = [
    # Version
    '__version__',
    # Models
    'Coordinate', 'ShapeRecord', 'ConversionStats',
    # Errors
    'BuildMapError', 'FatalParseError', 'InputReadError', 'RuleTableError',
    # Filters
    'BoundingBoxFilter', 'AttributeClassifier', 'FeatureFlag', 'LayerRule',
    'BuildOptions',
    # Builders
    'MapBuilder', 'MemoryMapBuilder',
    # Parsing
    'OSMTextReader',
    # API
    'OSMBuild',
]
