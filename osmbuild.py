#!/usr/bin/env python3
"""
osmbuild - Build map records from OpenStreetMap text files

This is the CLI entry point. The implementation is in the osm_build package.

Usage:
    osmbuild build map.osm -o map.json
    osmbuild build --bbox 50.9 2.5 50.2 4.1 belgium.osm.gz -o hainaut.shp
    osmbuild rules --json > layers.json

For more information, run: osmbuild --help
"""
import sys

from osm_build import (
    __version__,
    BuildOptions,
    BoundingBoxFilter,
    AttributeClassifier,
    MemoryMapBuilder,
    OSMTextReader,
    OSMBuild,
)
from osm_build.cli.main import main


def cli_main():
    """CLI entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
