"""Built-in layer rule table.

Layer order defines layer numbers (first entry is layer 1). Rules can be
replaced wholesale with a JSON rule table passed on the command line.
"""
from typing import List

from osm_build.filters.layer_rules import FeatureFlag, LayerRule

AREA = FeatureFlag.AREA

DEFAULT_LAYERS: List[str] = [
    'freeways', 'ramps', 'highways', 'streets', 'trails',
    'railroads', 'rivers', 'canals', 'lakes', 'sea',
    'parks', 'hospitals', 'airports', 'stations', 'malls',
]


def _rules(category: str, layer: str, values, flags: int = 0) -> List[LayerRule]:
    return [LayerRule(category, value, flags, layer) for value in values]


DEFAULT_RULES: List[LayerRule] = [
    # Roads
    *_rules('highway', 'freeways', ['motorway']),
    *_rules('highway', 'ramps', ['motorway_link', 'trunk_link', 'primary_link',
                                 'secondary_link', 'tertiary_link']),
    *_rules('highway', 'highways', ['trunk', 'primary', 'secondary']),
    *_rules('highway', 'streets', ['tertiary', 'unclassified', 'residential',
                                   'living_street', 'service', 'road',
                                   'pedestrian']),
    *_rules('highway', 'trails', ['track', 'path', 'footway', 'cycleway',
                                  'bridleway', 'steps']),

    # Rail
    *_rules('railway', 'railroads', ['rail', 'light_rail', 'subway', 'tram',
                                     'narrow_gauge']),
    *_rules('railway', 'stations', ['station'], AREA),

    # Water
    *_rules('waterway', 'rivers', ['river', 'stream', 'drain']),
    *_rules('waterway', 'rivers', ['riverbank'], AREA),
    *_rules('waterway', 'canals', ['canal', 'ditch']),
    *_rules('natural', 'lakes', ['water'], AREA),
    *_rules('natural', 'sea', ['coastline']),
    *_rules('landuse', 'lakes', ['reservoir', 'basin'], AREA),

    # Green areas
    *_rules('natural', 'parks', ['wood'], AREA),
    *_rules('landuse', 'parks', ['forest', 'grass', 'meadow',
                                 'recreation_ground', 'cemetery'], AREA),
    *_rules('leisure', 'parks', ['park', 'garden', 'golf_course',
                                 'nature_reserve', 'pitch'], AREA),

    # Facilities
    *_rules('amenity', 'hospitals', ['hospital'], AREA),
    *_rules('aeroway', 'airports', ['aerodrome', 'apron', 'terminal'], AREA),
    *_rules('aeroway', 'airports', ['runway', 'taxiway']),
    *_rules('landuse', 'malls', ['retail', 'commercial'], AREA),
    *_rules('shop', 'malls', ['mall'], AREA),

    # Area marker without a layer of its own
    LayerRule('building', 'yes', AREA, None),
    LayerRule('area', 'yes', AREA, None),
]
