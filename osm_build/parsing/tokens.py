"""Line tokenizer for the OSM text format.

The reader accepts a restricted, line-oriented subset of OSM XML: each
line holds at most one element, written as an XML open, close or
self-closing tag. Attribute values may use either quote style.
"""
import enum
import html
import re
from dataclasses import dataclass, field
from typing import Dict, Optional

ELEMENT_PATTERN = re.compile(r'<\s*(/?\??[A-Za-z_][\w:.\-]*)')
ATTRIBUTE_PATTERN = re.compile(
    r'''([A-Za-z_][\w:.\-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')'''
)


class TokenKind(enum.Enum):
    """Element kinds the reader dispatches on."""
    IGNORED = 'ignored'
    NODE = 'node'
    NODE_END = '/node'
    WAY = 'way'
    WAY_END = '/way'
    ND = 'nd'
    TAG = 'tag'


# Recognized but without semantics
IGNORED_ELEMENTS = frozenset({
    '?xml', 'osm', '/osm',
    'bounds', 'bound', '/bounds', '/bound',
    'relation', '/relation', 'member', '/member',
})

ELEMENT_KINDS: Dict[str, TokenKind] = {
    kind.value: kind for kind in TokenKind if kind is not TokenKind.IGNORED
}


@dataclass(frozen=True)
class Token:
    """One recognized element line."""
    kind: TokenKind
    name: str
    self_closing: bool = False
    attributes: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.attributes.get(key)


def parse_attributes(text: str) -> Dict[str, str]:
    """Extract key/value attributes, decoding XML entities in values.

    Args:
        text: Element text, e.g. 'tag k="name" v=\\'Rue d&apos;Arras\\'/>'

    Returns:
        Dict of attributes; a repeated key keeps its last value
    """
    attributes = {}
    for match in ATTRIBUTE_PATTERN.finditer(text):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attributes[match.group(1)] = html.unescape(value)
    return attributes


def tokenize_line(line: str) -> Optional[Token]:
    """Classify one input line.

    Args:
        line: Raw input line

    Returns:
        Token, or None for a blank line

    Raises:
        ValueError: If the line is not a recognized element
    """
    stripped = line.strip()
    if not stripped:
        return None
    if not stripped.startswith('<'):
        raise ValueError(f"invalid XML: {_excerpt(stripped)}")

    match = ELEMENT_PATTERN.match(stripped)
    if not match:
        raise ValueError(f"invalid XML token: {_excerpt(stripped)}")

    name = match.group(1).lower()
    if name in IGNORED_ELEMENTS:
        return Token(TokenKind.IGNORED, name)

    kind = ELEMENT_KINDS.get(name)
    if kind is None:
        raise ValueError(f"invalid XML token: {_excerpt(stripped)}")

    return Token(
        kind=kind,
        name=name,
        self_closing=stripped.endswith('/>'),
        attributes=parse_attributes(stripped[match.end():]),
    )


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an element id or reference, None when absent or not numeric."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _excerpt(text: str, limit: int = 60) -> str:
    return text if len(text) <= limit else text[:limit] + '...'
