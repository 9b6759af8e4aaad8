"""Tests for the dictionary, point table and in-memory map builder."""
import pytest

from osm_build.builder.dictionary import Dictionary
from osm_build.builder.memory import MemoryMapBuilder
from osm_build.models.elements import Coordinate
from osm_build.parsing.point_table import PointTable


class TestDictionary:
    """Tests for Dictionary."""

    def test_interning(self):
        """Test equal strings share one index."""
        d = Dictionary('street')
        first = d.add("Main Street")
        second = d.add("High Street")
        assert first != second
        assert d.add("Main Street") == first
        assert len(d) == 2
        assert d.get(second) == "High Street"

    def test_none_is_empty_string(self):
        d = Dictionary('street')
        assert d.add(None) == d.add('')
        assert d.get(d.add(None)) == ''

    def test_find_and_contains(self):
        d = Dictionary('city')
        d.add("Springtown")
        assert d.find("Springtown") == 0
        assert d.find("Shelbyville") is None
        assert "Springtown" in d
        assert list(d) == ["Springtown"]


class TestPointTable:
    """Tests for PointTable."""

    def test_add_and_lookup(self, builder):
        table = PointTable(builder)
        index = table.add(123295, Coordinate(3685528, 50444362))
        assert table.lookup(123295) == index
        assert table.coordinate(index) == Coordinate(3685528, 50444362)
        assert 123295 in table
        assert len(table) == 1

    def test_unknown_id(self, builder):
        """Test lookup of an id never inserted."""
        table = PointTable(builder)
        table.add(1, Coordinate(0, 0))
        assert table.lookup(2) is None

    def test_dense_indices(self, builder):
        """Test indices follow insertion order regardless of id values."""
        table = PointTable(builder)
        ids = [900, 5, 77, 1]
        indices = [table.add(i, Coordinate(i, i)) for i in ids]
        assert indices == [0, 1, 2, 3]
        assert [table.lookup(i) for i in ids] == indices

    def test_duplicate_id_keeps_first(self, builder):
        table = PointTable(builder)
        first = table.add(7, Coordinate(1, 1))
        table.add(7, Coordinate(2, 2))
        assert table.lookup(7) == first
        assert table.coordinate(table.lookup(7)) == Coordinate(1, 1)


class TestMemoryMapBuilder:
    """Tests for MemoryMapBuilder."""

    def test_dictionaries(self, builder):
        for name in ('prefix', 'street', 'type', 'suffix', 'city'):
            assert builder.dictionary(name).name == name
        with pytest.raises(KeyError):
            builder.dictionary('country')

    def test_add_line_returns_index(self, builder):
        assert builder.add_line(1, 0, 0, 1) == 0
        assert builder.add_line(2, 0, 1, 2) == 1
        assert builder.lines[1].line_id == 2

    def test_sort_order(self, builder):
        """Test lines sort by layer, from point, to point, then id."""
        builder.add_line(1, 4, 5, 6)
        builder.add_line(2, 1, 9, 9)
        builder.add_line(3, 4, 2, 8)
        builder.add_line(4, 4, 2, 3)
        builder.sort_lines()
        assert [l.line_id for l in builder.sorted_lines] == [2, 4, 3, 1]
        assert builder.find_sorted_line(1) == 3
        assert builder.find_sorted_line(2) == 0
        assert builder.find_sorted_line(99) is None

    def test_unsorted_lookup_fails(self, builder):
        builder.add_line(1, 0, 0, 1)
        with pytest.raises(RuntimeError):
            builder.find_sorted_line(1)
        builder.sort_lines()
        builder.add_line(2, 0, 0, 1)
        assert builder.is_sorted is False
        with pytest.raises(RuntimeError):
            builder.sorted_lines

    def test_limits(self, builder):
        assert builder.limits is None
        builder.adjust_limits(Coordinate(10, 20))
        builder.adjust_limits(Coordinate(-5, 40))
        builder.adjust_limits(Coordinate(3, 30))
        assert builder.limits == {
            'min_lon': -5, 'max_lon': 10, 'min_lat': 20, 'max_lat': 40
        }

    def test_names_and_summary(self, builder):
        name = builder.dictionary('street').add("Test St")
        line = builder.add_line(1, 0, 0, 1)
        street = builder.add_street(0, 0, name, 0, 0, line)
        builder.add_range_no_address(line, street)
        builder.add_city(329990001, 2008, builder.dictionary('city').add("Springtown"))
        builder.add_zip(1000, Coordinate(1, 2))

        assert builder.street_name(builder.streets[street]) == "Test St"
        assert builder.city_name(builder.cities[0]) == "Springtown"
        assert builder.zips[0].to_dict() == {'code': 1000, 'lon': 1, 'lat': 2}
        summary = builder.summary()
        assert summary['lines'] == 1
        assert summary['streets'] == 1
        assert summary['ranges'] == 1
        assert summary['cities'] == 1
        assert summary['zips'] == 1
        assert summary['shapes'] == 0
