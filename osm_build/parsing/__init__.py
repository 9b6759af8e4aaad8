"""OSM text parsing: tokenizer, point table, shape buffer and reader."""

from osm_build.parsing.context import ParserContext
from osm_build.parsing.point_table import PointTable
from osm_build.parsing.shape_buffer import ShapeBuffer
from osm_build.parsing.text_reader import OSMTextReader, parse_postal_code
from osm_build.parsing.tokens import Token, TokenKind, tokenize_line

__all__ = [
    'ParserContext', 'PointTable', 'ShapeBuffer', 'OSMTextReader',
    'parse_postal_code', 'Token', 'TokenKind', 'tokenize_line',
]
