"""Entry point for `python -m osm_build.cli build map.osm -o map.json`."""

import sys
from osm_build.cli import main

if __name__ == "__main__":
    sys.exit(main())
