"""Turns a completed way into map records.

A closed way classified as an area becomes a polygon outlined by one line
per segment. Any other way becomes a single line from its first to its last
node, registered as a street, with the intermediate nodes kept as shape
points.
"""
import logging
from typing import List

from osm_build.filters.layer_rules import FeatureFlag
from osm_build.models.elements import WayAccumulator
from osm_build.parsing.context import ParserContext

log = logging.getLogger(__name__)


def finalize_way(ctx: ParserContext) -> None:
    """Emit the records for the way in ctx.way, then reset it.

    Invalid ways (a node that was never defined) and ways without any node
    are dropped without output. A single-node way yields a line from its
    point to itself.

    Args:
        ctx: Parser context holding the completed way
    """
    way = ctx.way
    try:
        if way.invalid:
            log.debug("way %d dropped: references an unknown node", way.way_id)
            ctx.stats.ways_invalid += 1
            return
        if not way.node_ids:
            log.debug("way %d dropped: no nodes", way.way_id)
            ctx.stats.ways_degenerate += 1
            return

        points = _resolve_points(ctx, way)
        first = ctx.point_table.coordinate(points[0])
        last = ctx.point_table.coordinate(points[-1])

        if way.flags & FeatureFlag.AREA and first == last:
            _add_area(ctx, way, points)
        else:
            _add_line(ctx, way, points)
    finally:
        way.reset()


def _resolve_points(ctx: ParserContext, way: WayAccumulator) -> List[int]:
    points = []
    for node_id in way.node_ids:
        point = ctx.point_table.lookup(node_id)
        if point is None:
            # nd handling marks such ways invalid before they get here
            raise ctx.fatal(f"way {way.way_id}: node {node_id} vanished")
        points.append(point)
    return points


def _add_area(ctx: ParserContext, way: WayAccumulator, points: List[int]) -> None:
    builder = ctx.builder
    polygon_id = ctx.next_polygon_id()
    center_id = ctx.next_center_id()

    name = builder.dictionary('street').add(way.street_name)
    builder.add_landmark(polygon_id, way.layer, name)
    builder.add_polygon(polygon_id, center_id, polygon_id)

    for previous, point in zip(points, points[1:]):
        builder.add_line(ctx.next_line_id(), way.layer, previous, point)
        ctx.stats.lines_added += 1

    ctx.stats.areas_added += 1


def _add_line(ctx: ParserContext, way: WayAccumulator, points: List[int]) -> None:
    builder = ctx.builder
    line_id = ctx.next_line_id()
    line = builder.add_line(line_id, way.layer, points[0], points[-1])
    ctx.stats.lines_added += 1

    prefix = builder.dictionary('prefix').add('')
    street_type = builder.dictionary('type').add('')
    suffix = builder.dictionary('suffix').add('')
    name = builder.dictionary('street').add(way.street_name)

    street = builder.add_street(way.layer, prefix, name, street_type, suffix, line)
    builder.add_range_no_address(line, street)
    ctx.stats.streets_added += 1

    coordinates = [ctx.point_table.coordinate(point) for point in points]
    for coord in coordinates:
        builder.adjust_limits(coord)

    ctx.shapes.add(line_id, coordinates)
    ctx.stats.shapes_buffered += 1
