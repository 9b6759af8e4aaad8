"""End-to-end conversion tests on small OSM files."""
import gzip

import pytest

from osm_build.api import OSMBuild
from osm_build.config import BuildOptions, CITY_ID_BASE
from osm_build.errors import FatalParseError
from osm_build.filters.bbox_filter import BoundingBoxFilter
from osm_build.models.elements import Coordinate


class TestSmallFile:
    """Two nodes and one named way."""

    def test_records(self, convert, small_osm_file):
        builder, stats, _ = convert(small_osm_file)

        assert builder.points == [
            Coordinate(3000000, 50000000), Coordinate(3000100, 50000100)
        ]
        assert len(builder.lines) == 1
        line = builder.lines[0]
        assert (line.line_id, line.layer, line.from_point, line.to_point) == (1, 0, 0, 1)
        assert builder.street_name(builder.streets[0]) == "Test St"
        assert builder.shapes == []
        assert builder.polygons == []

    def test_stats(self, convert, small_osm_file):
        _, stats, _ = convert(small_osm_file)
        assert stats.nodes_read == 2
        assert stats.ways_read == 1
        assert stats.lines_added == 1
        assert stats.streets_added == 1
        assert stats.pass1_lines == stats.pass2_lines == 11

    def test_limits(self, convert, small_osm_file):
        builder, _, _ = convert(small_osm_file)
        assert builder.limits == {
            'min_lon': 3000000, 'max_lon': 3000100,
            'min_lat': 50000000, 'max_lat': 50000100,
        }


class TestMixedFile:
    """A town, a building, a curved street and a broken way."""

    def test_points(self, convert, mixed_osm_file):
        builder, _, reader = convert(mixed_osm_file)
        assert len(builder.points) == 6
        table = reader.context.point_table
        assert [table.lookup(n) for n in range(1, 7)] == [0, 1, 2, 3, 4, 5]

    def test_area_lines(self, convert, mixed_osm_file):
        builder, _, _ = convert(mixed_osm_file)
        area_lines = builder.lines[:4]
        assert [l.line_id for l in area_lines] == [1, 2, 3, 4]
        assert [(l.from_point, l.to_point) for l in area_lines] == [
            (0, 1), (1, 2), (2, 3), (3, 0)
        ]
        assert {l.layer for l in area_lines} == {0}

    def test_polygon_and_landmark(self, convert, mixed_osm_file):
        builder, stats, _ = convert(mixed_osm_file)
        assert len(builder.polygons) == 1
        assert builder.landmark_name(builder.landmarks[0]) == "Town Hall"
        assert stats.areas_added == 1

    def test_street(self, convert, mixed_osm_file, classifier):
        builder, _, _ = convert(mixed_osm_file)
        line = builder.lines[4]
        assert line.line_id == 5
        assert line.layer == classifier.layer_number('streets')
        assert (line.from_point, line.to_point) == (3, 5)

        assert len(builder.streets) == 1
        street = builder.streets[0]
        assert builder.street_name(street) == "Main Street"
        assert street.line == 4

    def test_shape_points(self, convert, mixed_osm_file):
        """Test intermediate nodes of the street become shape points."""
        builder, stats, _ = convert(mixed_osm_file)
        shapes = builder.shapes
        assert [(s.line_id, s.sequence) for s in shapes] == [(5, 0), (5, 1)]
        assert [(s.lon, s.lat) for s in shapes] == [
            (3001000, 50001000), (3002000, 50002000)
        ]
        assert {s.line_index for s in shapes} == {builder.find_sorted_line(5)}
        assert {s.shape_id for s in shapes} == {0}
        assert stats.shape_points_added == 2

    def test_locality(self, convert, mixed_osm_file):
        builder, _, _ = convert(mixed_osm_file)
        city = builder.cities[0]
        assert city.fips == CITY_ID_BASE + 1
        assert city.year == 2008
        assert builder.city_name(city) == "Springtown"
        zip_record = builder.zips[0]
        assert (zip_record.code, zip_record.lon, zip_record.lat) == (
            1000, 3003000, 50002500
        )

    def test_broken_way_dropped(self, convert, mixed_osm_file):
        builder, stats, _ = convert(mixed_osm_file)
        assert stats.ways_read == 3
        assert stats.ways_invalid == 1
        assert len(builder.lines) == 5

    def test_limits_from_streets_only(self, convert, mixed_osm_file):
        """Test limits span line ways but not area outlines."""
        builder, _, _ = convert(mixed_osm_file)
        assert builder.limits == {
            'min_lon': 3000000, 'max_lon': 3003000,
            'min_lat': 50001000, 'max_lat': 50002500,
        }

    def test_lines_sorted(self, convert, mixed_osm_file):
        builder, _, _ = convert(mixed_osm_file)
        assert builder.is_sorted
        assert [l.line_id for l in builder.sorted_lines] == [1, 2, 3, 4, 5]


class TestConversionOptions:
    """Tests for bounding box and rule options."""

    def test_bbox_drops_ways_outside(self, convert, mixed_osm_file):
        """Test ways touching rejected nodes are invalid."""
        options = BuildOptions(bbox=BoundingBoxFilter(lat_max=50001500))
        builder, stats, _ = convert(mixed_osm_file, options)
        assert stats.nodes_rejected == 2
        assert len(builder.points) == 4
        # the street and the broken way both touch nodes 5 or 6
        assert stats.ways_invalid == 2
        assert len(builder.polygons) == 1
        assert builder.streets == []
        assert builder.cities == []

    def test_custom_rules(self, convert, mixed_osm_file, tmp_path):
        from osm_build.filters.layer_rules import AttributeClassifier

        rules = tmp_path / "rules.json"
        rules.write_text('''{
            "layers": ["roads", "buildings"],
            "rules": [
                {"category": "highway", "value": "residential", "layer": "roads"},
                {"category": "building", "value": "yes", "layer": "buildings",
                 "flags": ["area"]}
            ]
        }''')
        options = BuildOptions(classifier=AttributeClassifier.load(rules))
        builder, _, _ = convert(mixed_osm_file, options)
        assert [l.layer for l in builder.lines] == [2, 2, 2, 2, 1]
        assert builder.landmarks[0].layer == 2


class TestInputVariants:
    """Tests for input formats and fatal errors."""

    def test_gzip_input(self, convert, small_osm_file, tmp_path):
        packed = tmp_path / "small.osm.gz"
        with gzip.open(packed, 'wb') as f:
            f.write(small_osm_file.read_bytes())
        builder, stats, _ = convert(packed)
        assert len(builder.lines) == 1
        assert stats.pass1_lines == 11

    def test_stream_input(self, convert, small_osm_file):
        with open(small_osm_file, encoding='utf-8') as f:
            builder, _, _ = convert(f)
        assert len(builder.lines) == 1

    def test_fatal_error_line_number(self, convert, write_osm):
        path = write_osm('''
            <node id="1" lat="50.0" lon="3.0"/>
            <node id="2" lon="3.0"/>
        ''')
        with pytest.raises(FatalParseError) as exc:
            convert(path)
        assert exc.value.line_no == 5
        assert exc.value.pass_no == 1
        assert "pass 1, line 5" in str(exc.value)

    def test_uppercase_elements(self, convert, write_osm):
        path = write_osm('''
            <NODE id="1" lat="50.0" lon="3.0"/>
            <Node id="2" lat="50.1" lon="3.0"/>
            <WAY id="3">
              <ND ref="1"/>
              <Nd ref="2"/>
            </Way>
        ''')
        builder, _, _ = convert(path)
        assert len(builder.lines) == 1

    def test_entities_decoded(self, convert, write_osm):
        path = write_osm('''
            <node id="1" lat="50.0" lon="3.0"/>
            <node id="2" lat="50.1" lon="3.0"/>
            <way id="3">
              <nd ref="1"/>
              <nd ref="2"/>
              <tag k="name" v='Rue d&apos;Arras &amp; Co'/>
            </way>
        ''')
        builder, _, _ = convert(path)
        assert builder.street_name(builder.streets[0]) == "Rue d'Arras & Co"


class TestOSMBuild:
    """Tests for the OSMBuild API."""

    def test_build(self, mixed_osm_file):
        result = OSMBuild().build(str(mixed_osm_file))
        assert result.osm_file_path == str(mixed_osm_file)
        assert len(result.builder.lines) == 5
        assert result.stats.lines_added == 5

    def test_build_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            OSMBuild().build(str(tmp_path / "nothing.osm"))

    def test_runs_are_independent(self, mixed_osm_file):
        osmbuild = OSMBuild()
        first = osmbuild.build(str(mixed_osm_file))
        second = osmbuild.build(str(mixed_osm_file))
        assert first.builder is not second.builder
        assert [c.fips for c in second.builder.cities] == [CITY_ID_BASE + 1]
        assert osmbuild.stats['files_processed'] == 2
        assert osmbuild.stats['lines_added'] == 10

    def test_line_geometry(self, mixed_osm_file):
        result = OSMBuild().build(str(mixed_osm_file))
        street_line = result.builder.lines[4]
        assert result.line_geometry(street_line) == [
            (3.0, 50.001), (3.001, 50.001), (3.002, 50.002), (3.003, 50.0025)
        ]
        assert result.line_street_names() == {4: "Main Street"}
