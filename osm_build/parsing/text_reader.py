"""Two-pass reader for OSM text (XML) files.

This is a simplistic approach to parsing OSM text: the input is scanned
twice to cope with out of order information.

Pass 1 deals with node definitions only (points, towns, postal codes).
Pass 2 interprets ways and their tags; by then every node is known.
After pass 2 the builder sorts its lines and the shape points are emitted.

Example input:
    <node id="123295" lat="50.4443626" lon="3.6855288"/>
    <way id="75146">
      <nd ref="997466"/>
      <nd ref="997470"/>
      <tag k="highway" v="residential"/>
      <tag k="name" v="Rue de Thiribut"/>
    </way>
"""
import gzip
import io
import logging
import re
import time
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional, TextIO, Union

from osm_build.builder.base import MapBuilder
from osm_build.config import BuildOptions
from osm_build.errors import BuildMapError, InputReadError
from osm_build.models.elements import Coordinate
from osm_build.models.statistics import ConversionStats
from osm_build.parsing.context import ParserContext
from osm_build.parsing.tokens import Token, TokenKind, parse_int, tokenize_line
from osm_build.parsing.way_finalizer import finalize_way

log = logging.getLogger(__name__)

Source = Union[str, Path, TextIO]
Handler = Callable[[ParserContext, Token], None]

POSTAL_CODE_PATTERN = re.compile(r'\s*([+-]?\d+)')


def parse_postal_code(text: str) -> Optional[int]:
    """Get the leading integer of a postal code, None unless positive.

    Examples:
        >>> parse_postal_code("3020")
        3020
        >>> parse_postal_code("1234 AB")
        1234
        >>> parse_postal_code("B-3020") is None
        True
    """
    match = POSTAL_CODE_PATTERN.match(text)
    if not match:
        return None
    code = int(match.group(1))
    return code if code > 0 else None


# === Pass 1: nodes ===

def _node_open(ctx: ParserContext, token: Token) -> None:
    node_id = parse_int(token.get('id'))
    if node_id is None:
        raise ctx.fatal("node without a numeric id")

    lat = token.get('lat')
    lon = token.get('lon')
    if lat is None or lon is None:
        raise ctx.fatal(f"node {node_id}: lat and lon are required")
    try:
        coord = Coordinate.from_degrees(lon, lat)
    except ValueError as e:
        raise ctx.fatal(f"node {node_id}: {e}") from e

    node = ctx.node
    node.reset()
    node.node_id = node_id
    node.coordinate = coord
    ctx.stats.nodes_read += 1

    if ctx.options.bbox.accepts(coord):
        ctx.point_table.add(node_id, coord)
        node.accepted = True
        ctx.stats.points_added += 1
    else:
        ctx.stats.nodes_rejected += 1

    if token.self_closing:
        _node_close(ctx, token)


def _node_tag(ctx: ParserContext, token: Token) -> None:
    node = ctx.node
    if not node.is_open:
        return

    key = token.get('k')
    value = token.get('v')
    if value is None:
        return
    if key == 'postal_code':
        node.postal_code = value
    elif key == 'place':
        node.place = value
    elif key == 'name':
        node.town_name = value


def _node_close(ctx: ParserContext, token: Token) -> None:
    node = ctx.node
    try:
        if node.accepted and node.place in ctx.options.locality_kinds:
            _add_locality(ctx)
    finally:
        node.reset()


def _add_locality(ctx: ParserContext) -> None:
    node = ctx.node
    builder = ctx.builder

    if node.town_name and node.postal_code:
        log.debug("Node %d town %s postal %s",
                  node.node_id, node.town_name, node.postal_code)

    if node.town_name:
        name = builder.dictionary('city').add(node.town_name)
        builder.add_city(ctx.next_city_id(), ctx.options.city_year, name)
        ctx.stats.cities_added += 1

    if node.postal_code:
        code = parse_postal_code(node.postal_code)
        if code:
            builder.add_zip(code, node.coordinate)
            ctx.stats.zips_added += 1


# === Pass 2: ways ===

def _way_open(ctx: ParserContext, token: Token) -> None:
    way_id = parse_int(token.get('id'))
    if not way_id:
        raise ctx.fatal("way without a usable id")

    ctx.way.reset(way_id)
    ctx.stats.ways_read += 1

    if token.self_closing:
        finalize_way(ctx)


def _way_nd(ctx: ParserContext, token: Token) -> None:
    way = ctx.way
    if not way.is_open:
        raise ctx.fatal("nd outside of a way")

    node_id = parse_int(token.get('ref'))
    if node_id is None:
        raise ctx.fatal(f"way {way.way_id}: nd without a numeric ref")

    if ctx.point_table.lookup(node_id) is None:
        # Inconsistent file: this node is not defined (or was filtered out)
        way.invalid = True
        return
    way.node_ids.append(node_id)


def _way_tag(ctx: ParserContext, token: Token) -> None:
    way = ctx.way
    if not way.is_open:
        return

    key = token.get('k')
    value = token.get('v')
    if key is None or value is None:
        return

    if key == 'name':
        way.street_name = value
        return

    match = ctx.options.classifier.classify(key, value)
    if match is not None:
        way.flags = match.flags
        if match.layer:
            way.layer = match.layer


def _way_close(ctx: ParserContext, token: Token) -> None:
    if not ctx.way.is_open:
        raise ctx.fatal("/way without an open way")
    finalize_way(ctx)


PASS_HANDLERS: Dict[int, Dict[TokenKind, Handler]] = {
    1: {
        TokenKind.NODE: _node_open,
        TokenKind.NODE_END: _node_close,
        TokenKind.TAG: _node_tag,
    },
    2: {
        TokenKind.WAY: _way_open,
        TokenKind.ND: _way_nd,
        TokenKind.TAG: _way_tag,
        TokenKind.WAY_END: _way_close,
    },
}


class OSMTextReader:
    """Reads an OSM text file into a map builder.

    The source is read twice: a path is opened once per pass, a text stream
    must be seekable: each pass reads it from the start.
    """

    def __init__(self, builder: MapBuilder, options: Optional[BuildOptions] = None):
        """Initialize reader.

        Args:
            builder: Map store receiving the records
            options: Conversion settings (defaults to BuildOptions())
        """
        self.builder = builder
        self.options = options or BuildOptions()
        self.context: Optional[ParserContext] = None

    def read(self, source: Source) -> ConversionStats:
        """Convert one input.

        Args:
            source: Path to an .osm (or .osm.gz) file, or a seekable text
                stream (read from its start whatever its position)

        Returns:
            ConversionStats for the run

        Raises:
            FatalParseError: On malformed input; the run is abandoned
            InputReadError: If the input cannot be read
            BuildMapError: If a stream source cannot be rewound
        """
        self._check_rewindable(source)
        ctx = ParserContext(builder=self.builder, options=self.options)
        self.context = ctx
        stats = ctx.stats

        t0 = time.time()
        stats.pass1_lines = self._run_pass(ctx, source, 1)
        if ctx.node.is_open:
            log.warning("node %d is not closed at end of input", ctx.node.node_id)
            ctx.node.reset()
        t1 = time.time()
        stats.pass1_time = t1 - t0
        log.info("Pass 1 : %d lines read (%.2f seconds)", stats.pass1_lines,
                 stats.pass1_time)

        stats.pass2_lines = self._run_pass(ctx, source, 2)
        if ctx.way.is_open:
            log.warning("way %d is not closed at end of input", ctx.way.way_id)
            ctx.way.reset()
        t2 = time.time()
        stats.pass2_time = t2 - t1
        log.info("Pass 2 : %d lines read (%.2f seconds)", stats.pass2_lines,
                 stats.pass2_time)

        log.info("loading shape info (from %d ways) ...", len(ctx.shapes))
        self.builder.sort_lines()
        flushed = ctx.shapes.flush(self.builder)
        stats.shape_points_added = flushed['points']
        stats.shapes_missing_line = flushed['missing']
        stats.shape_time = time.time() - t2
        log.info("Shape info processed (%.2f seconds)", stats.shape_time)

        return stats

    def _run_pass(self, ctx: ParserContext, source: Source, pass_no: int) -> int:
        handlers = PASS_HANDLERS[pass_no]
        ctx.pass_no = pass_no
        ctx.line_no = 0

        for line in self._lines(source):
            ctx.line_no += 1
            try:
                token = tokenize_line(line)
            except ValueError as e:
                raise ctx.fatal(str(e)) from e
            if token is None:
                continue

            handler = handlers.get(token.kind)
            if handler is not None:
                handler(ctx, token)

        return ctx.line_no

    def _lines(self, source: Source) -> Iterator[str]:
        try:
            if isinstance(source, (str, Path)):
                with _open_text(source) as f:
                    yield from f
            else:
                source.seek(0)
                yield from source
        except (OSError, UnicodeDecodeError, EOFError) as e:
            raise InputReadError(f"cannot read input: {e}") from e

    @staticmethod
    def _check_rewindable(source: Source) -> None:
        if isinstance(source, (str, Path)):
            return
        seekable = getattr(source, 'seekable', None)
        if seekable is None or not seekable():
            raise BuildMapError("input stream cannot be rewound for the second pass")


def _open_text(path: Union[str, Path]) -> TextIO:
    if str(path).endswith('.gz'):
        return io.TextIOWrapper(gzip.open(path, 'rb'), encoding='utf-8')
    return open(path, 'r', encoding='utf-8')
