"""Node filtering and tag classification."""

from osm_build.filters.bbox_filter import BoundingBoxFilter
from osm_build.filters.layer_rules import (
    AttributeClassifier, Classification, FeatureFlag, LayerRule
)

__all__ = [
    'BoundingBoxFilter',
    'AttributeClassifier', 'Classification', 'FeatureFlag', 'LayerRule',
]
