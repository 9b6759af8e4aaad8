"""Pytest fixtures for osmbuild tests."""
import textwrap

import pytest

OSM_HEADER = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="test">
  <bounds minlat="49.9" minlon="2.9" maxlat="50.1" maxlon="3.1"/>
'''
OSM_FOOTER = '</osm>\n'


@pytest.fixture
def write_osm(tmp_path):
    """Return a helper writing an OSM body (one element per line) to a file."""
    def _write(body, name="map.osm"):
        content = OSM_HEADER + textwrap.dedent(body).strip('\n') + '\n' + OSM_FOOTER
        file = tmp_path / name
        file.write_text(content, encoding='utf-8')
        return file
    return _write


@pytest.fixture
def convert():
    """Return a helper running a full conversion into a fresh builder."""
    from osm_build.builder.memory import MemoryMapBuilder
    from osm_build.parsing.text_reader import OSMTextReader

    def _convert(source, options=None):
        builder = MemoryMapBuilder()
        reader = OSMTextReader(builder, options)
        stats = reader.read(source)
        return builder, stats, reader
    return _convert


@pytest.fixture
def small_osm_file(write_osm):
    """Two nodes joined by a named street."""
    return write_osm('''
        <node id="1" lat="50.000000" lon="3.000000"/>
        <node id="2" lat="50.000100" lon="3.000100"/>
        <way id="10">
          <nd ref="1"/>
          <nd ref="2"/>
          <tag k="name" v="Test St"/>
        </way>
    ''', name="small.osm")


@pytest.fixture
def mixed_osm_file(write_osm):
    """A town, a closed building, a curved residential street and a broken way."""
    return write_osm('''
        <node id="1" lat="50.0000" lon="3.0000"/>
        <node id="2" lat="50.0000" lon="3.0010"/>
        <node id="3" lat="50.0010" lon="3.0010"/>
        <node id="4" lat="50.0010" lon="3.0000"/>
        <node id="5" lat="50.0020" lon="3.0020"/>
        <node id="6" lat="50.0025" lon="3.0030">
          <tag k="place" v="town"/>
          <tag k="name" v="Springtown"/>
          <tag k="postal_code" v="1000"/>
        </node>
        <way id="100">
          <nd ref="1"/>
          <nd ref="2"/>
          <nd ref="3"/>
          <nd ref="4"/>
          <nd ref="1"/>
          <tag k="building" v="yes"/>
          <tag k="name" v="Town Hall"/>
        </way>
        <way id="101">
          <nd ref="4"/>
          <nd ref="3"/>
          <nd ref="5"/>
          <nd ref="6"/>
          <tag k="highway" v="residential"/>
          <tag k="name" v="Main Street"/>
        </way>
        <way id="102">
          <nd ref="5"/>
          <nd ref="99"/>
          <tag k="highway" v="primary"/>
        </way>
        <relation id="500">
          <member type="way" ref="100" role="outer"/>
          <tag k="type" v="multipolygon"/>
        </relation>
    ''', name="mixed.osm")


@pytest.fixture
def builder():
    """Create empty MemoryMapBuilder."""
    from osm_build.builder.memory import MemoryMapBuilder
    return MemoryMapBuilder()


@pytest.fixture
def classifier():
    """Create the built-in AttributeClassifier."""
    from osm_build.filters.layer_rules import AttributeClassifier
    return AttributeClassifier.default()
