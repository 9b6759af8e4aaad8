"""Entry point for `python -m osm_build`, same as the osmbuild script."""

import sys
from osm_build.cli import main

if __name__ == "__main__":
    sys.exit(main())
