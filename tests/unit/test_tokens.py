"""Tests for the line tokenizer."""
import pytest

from osm_build.parsing.tokens import (
    TokenKind, parse_attributes, parse_int, tokenize_line
)


class TestTokenizeLine:
    """Tests for tokenize_line."""

    def test_blank_line(self):
        """Test blank and whitespace-only lines are skipped."""
        assert tokenize_line("") is None
        assert tokenize_line("   \t\n") is None
        assert tokenize_line("\r\n") is None

    @pytest.mark.parametrize("line", [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<osm version="0.6">',
        '</osm>',
        '<bounds minlat="1" minlon="2" maxlat="3" maxlon="4"/>',
        '<bound box="1,2,3,4" origin="test"/>',
        '<relation id="5">',
        '<member type="way" ref="1" role="outer"/>',
        '</relation>',
    ])
    def test_ignored_elements(self, line):
        """Test recognized elements without semantics."""
        token = tokenize_line(line)
        assert token.kind is TokenKind.IGNORED

    def test_node_open(self):
        """Test node element with attributes."""
        token = tokenize_line('  <node id="123295" lat="50.4443626" lon="3.6855288">\n')
        assert token.kind is TokenKind.NODE
        assert token.self_closing is False
        assert token.get('id') == "123295"
        assert token.get('lat') == "50.4443626"
        assert token.get('lon') == "3.6855288"

    def test_self_closing(self):
        """Test self-closing detection."""
        token = tokenize_line('<node id="1" lat="1" lon="2"/>')
        assert token.self_closing is True
        token = tokenize_line('<nd ref="997470" />')
        assert token.kind is TokenKind.ND
        assert token.self_closing is True

    def test_closing_elements(self):
        """Test closing tags map to their own kinds."""
        assert tokenize_line('</node>').kind is TokenKind.NODE_END
        assert tokenize_line('</way>').kind is TokenKind.WAY_END

    def test_case_insensitive(self):
        """Test element names are matched case-insensitively."""
        assert tokenize_line('<WAY id="7">').kind is TokenKind.WAY
        assert tokenize_line('<Tag k="a" v="b"/>').kind is TokenKind.TAG
        assert tokenize_line('</Node>').kind is TokenKind.NODE_END

    def test_space_after_bracket(self):
        """Test whitespace between '<' and the element name."""
        assert tokenize_line('<  way id="7">').kind is TokenKind.WAY

    def test_text_outside_element(self):
        """Test a line not starting with '<' is rejected."""
        with pytest.raises(ValueError, match="invalid XML"):
            tokenize_line('hello world')

    @pytest.mark.parametrize("line", [
        '<foo bar="1"/>',
        '<!-- comment -->',
        '</tag>',
        '<wayx id="1">',
        '<',
    ])
    def test_unknown_elements(self, line):
        """Test unknown elements are rejected."""
        with pytest.raises(ValueError):
            tokenize_line(line)


class TestParseAttributes:
    """Tests for attribute parsing."""

    def test_mixed_quotes(self):
        """Test both quote styles on one line."""
        attrs = parse_attributes('''node lon='3.5' id="7" lat='50.25'>''')
        assert attrs == {'lon': '3.5', 'id': '7', 'lat': '50.25'}

    def test_apostrophe_inside_double_quotes(self):
        """Test a single quote inside a double-quoted value."""
        attrs = parse_attributes('''tag k="name" v="Mary's Lane"/>''')
        assert attrs['v'] == "Mary's Lane"

    def test_entities_decoded(self):
        """Test XML entities in values."""
        attrs = parse_attributes('tag k="name" v="Rue d&apos;Arras &amp; Co"/>')
        assert attrs['v'] == "Rue d'Arras & Co"

    def test_namespaced_keys(self):
        """Test keys with colons."""
        attrs = parse_attributes('tag k="addr:street" v="High St"/>')
        assert attrs == {'k': 'addr:street', 'v': 'High St'}

    def test_spaces_around_equals(self):
        """Test whitespace around '='."""
        assert parse_attributes('nd ref = "42"/>') == {'ref': '42'}


class TestParseInt:
    """Tests for id parsing."""

    def test_valid(self):
        assert parse_int("42") == 42
        assert parse_int(" 7 ") == 7
        assert parse_int("-3") == -3

    def test_invalid(self):
        assert parse_int(None) is None
        assert parse_int("") is None
        assert parse_int("abc") is None
