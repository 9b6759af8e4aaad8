"""Command-line interface for osmbuild.

`osmbuild build` converts an OSM text file and can export the result as
JSON, CSV or shapefiles; `osmbuild rules` shows the layer rule table.
The console script and `python -m osm_build.cli` both land in main().
"""

import sys
from osm_build.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main() -> int:
    """Run the CLI with sys.argv.

    Returns:
        Exit code; 130 when interrupted with Ctrl-C
    """
    try:
        return _main() or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
