"""Map stores fed by the reader."""

from osm_build.builder.base import MapBuilder, DICTIONARY_NAMES
from osm_build.builder.dictionary import Dictionary
from osm_build.builder.memory import MemoryMapBuilder

__all__ = ['MapBuilder', 'DICTIONARY_NAMES', 'Dictionary', 'MemoryMapBuilder']
