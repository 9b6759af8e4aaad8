"""Build command - convert an OSM text file into map records."""
import argparse
import json
import os
import sys

from osm_build.api import OSMBuild
from osm_build.config import BuildOptions
from osm_build.errors import BuildMapError, FatalParseError, RuleTableError
from osm_build.filters.bbox_filter import BoundingBoxFilter
from osm_build.filters.layer_rules import AttributeClassifier

FORMAT_EXTENSIONS = {
    '.json': 'json',
    '.csv': 'csv',
    '.shp': 'shapefile',
}


def setup_parser(subparsers):
    """Setup the build subcommand parser."""
    parser = subparsers.add_parser(
        'build',
        help='Convert an OSM text file into map records',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description='Read an OSM text file twice (nodes, then ways) and '
                    'build points, lines, streets, polygons and shapes.',
        epilog='''
Examples:
  osmbuild build map.osm
  osmbuild build map.osm -o map.json
  osmbuild build --lat-min 39.1 --lat-max 39.95 map.osm -o island.csv
'''
    )

    parser.add_argument('input_file', help='Input OSM text file (.osm or .osm.gz)')
    parser.add_argument('-o', '--output', default=None,
                        help='Output file (no output: summary only)')

    output_group = parser.add_argument_group('output options')
    output_group.add_argument('-f', '--format',
                              choices=['json', 'csv', 'shapefile'],
                              help='Output format (default: from extension)')
    output_group.add_argument('--compact', action='store_true',
                              help='Compact JSON output')
    output_group.add_argument('--json', action='store_true',
                              help='Print the run summary as JSON')

    conv_group = parser.add_argument_group('conversion options')
    conv_group.add_argument('--rules', metavar='FILE',
                            help='JSON layer rule table (default: built-in)')
    conv_group.add_argument('--place', action='append', default=[],
                            metavar='KIND',
                            help='place=KIND nodes become cities (default: town)')
    _add_bbox_options(parser)

    parser.set_defaults(func=run)
    return parser


def _add_bbox_options(parser) -> None:
    """Add bounding box options; every limit is optional."""
    bbox_group = parser.add_argument_group('bounding box (degrees)')
    bbox_group.add_argument('--bbox', '--bounding-box', nargs=4, type=float,
                            metavar=('TOP', 'LEFT', 'BOTTOM', 'RIGHT'),
                            help='All four limits at once')
    bbox_group.add_argument('--lon-min', type=float, help='Minimum longitude')
    bbox_group.add_argument('--lon-max', type=float, help='Maximum longitude')
    bbox_group.add_argument('--lat-min', type=float, help='Minimum latitude')
    bbox_group.add_argument('--lat-max', type=float, help='Maximum latitude')


def bbox_from_args(args) -> BoundingBoxFilter:
    """Build the node filter from parsed arguments.

    Individual limits override the matching --bbox value.
    """
    top = left = bottom = right = None
    if getattr(args, 'bbox', None):
        top, left, bottom, right = args.bbox

    def pick(name, default):
        value = getattr(args, name, None)
        return default if value is None else value

    return BoundingBoxFilter.from_degrees(
        top=pick('lat_max', top),
        left=pick('lon_min', left),
        bottom=pick('lat_min', bottom),
        right=pick('lon_max', right),
    )


def options_from_args(args) -> BuildOptions:
    """Build conversion options from parsed arguments.

    Raises:
        RuleTableError: If the rule table cannot be loaded
    """
    rules = getattr(args, 'rules', None)
    classifier = (AttributeClassifier.load(rules) if rules
                  else AttributeClassifier.default())
    places = getattr(args, 'place', None) or ['town']
    return BuildOptions(
        bbox=bbox_from_args(args),
        classifier=classifier,
        locality_kinds=frozenset(places),
    )


def detect_format(output_file: str, explicit: str = None) -> str:
    if explicit:
        return explicit
    name = output_file.lower()
    for ext, fmt in FORMAT_EXTENSIONS.items():
        if name.endswith(ext):
            return fmt
    return 'json'


def _create_exporter(fmt: str, args):
    if fmt == 'csv':
        from osm_build.export.csv_exporter import CSVExporter
        return CSVExporter()
    if fmt == 'shapefile':
        from osm_build.export.shapefile_exporter import ShapefileExporter
        return ShapefileExporter()
    from osm_build.export.json_exporter import JSONExporter
    return JSONExporter(compact=getattr(args, 'compact', False))


def run(args):
    """Execute the build command."""
    input_file = args.input_file

    if not os.path.exists(input_file):
        print(f"osmbuild: error: File not found: {input_file}", file=sys.stderr)
        return 3

    try:
        options = options_from_args(args)
    except RuleTableError as e:
        print(f"osmbuild: error: {e}", file=sys.stderr)
        return 2

    try:
        result = OSMBuild(options).build(input_file)
    except FatalParseError as e:
        print(f"osmbuild: fatal: {input_file}: {e}", file=sys.stderr)
        return 2
    except BuildMapError as e:
        print(f"osmbuild: error: {e}", file=sys.stderr)
        return 2

    export_meta = None
    if args.output:
        fmt = detect_format(args.output, getattr(args, 'format', None))
        exporter = _create_exporter(fmt, args)
        try:
            export_meta = exporter.export(result, args.output)['metadata']
        except OSError as e:
            print(f"osmbuild: error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1

    summary = {
        'input': input_file,
        'records': result.builder.summary(),
        'stats': result.stats.to_dict(),
        'limits': result.builder.limits,
    }
    if export_meta is not None:
        summary['output'] = {
            'file': args.output,
            'format': export_meta.get('format'),
        }

    if getattr(args, 'json', False):
        print(json.dumps(summary, indent=2))
    elif not getattr(args, 'quiet', False):
        _print_summary(summary)

    return 0


def _print_summary(summary) -> None:
    stats = summary['stats']
    records = summary['records']
    print(f"Built {summary['input']}")
    print(f"  Nodes: {stats['nodes_read']:,} read, "
          f"{stats['nodes_rejected']:,} outside bounding box")
    print(f"  Ways:  {stats['ways_read']:,} read, "
          f"{stats['ways_invalid']:,} invalid, "
          f"{stats['ways_degenerate']:,} degenerate")
    for table, count in records.items():
        print(f"  {table:<9} {count:,}")
    print(f"  Time: {stats['total_time']:.2f}s")
    if 'output' in summary:
        print(f"Saved to: {summary['output']['file']} "
              f"({summary['output']['format']})")
