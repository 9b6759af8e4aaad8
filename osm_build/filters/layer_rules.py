"""Tag classification against a layer rule table.

A rule table is an ordered list of (category, value) -> (flags, layer)
rules. Lookup is two-level: the tag key selects a category, the tag value
selects a rule within it. When a table defines the same (category, value)
twice, the later definition wins.
"""
import enum
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from osm_build.errors import RuleTableError


class FeatureFlag(enum.IntFlag):
    """Feature bits attached to a way by its classification."""
    AREA = 1


@dataclass(frozen=True)
class LayerRule:
    """One entry of the rule table.

    Attributes:
        category: Tag key, e.g. 'highway'
        value: Tag value, e.g. 'residential'
        flags: FeatureFlag bits set on a matching way
        layer: Layer name, or None to leave the way's layer unchanged
    """
    category: str
    value: str
    flags: int = 0
    layer: Optional[str] = None


@dataclass(frozen=True)
class Classification:
    """Result of classifying one tag; layer 0 means no layer."""
    flags: int
    layer: int

    @property
    def is_area(self) -> bool:
        return bool(self.flags & FeatureFlag.AREA)


class AttributeClassifier:
    """Resolves tag key/value pairs to layer numbers and feature flags."""

    def __init__(self, layers: Sequence[str], rules: Iterable[LayerRule]):
        """Build the lookup tables.

        Args:
            layers: Layer names; the first one is layer 1
            rules: Rules in priority order (later overrides earlier)

        Raises:
            RuleTableError: On duplicate layer names or unknown rule layers
        """
        self._layers: List[str] = list(layers)
        self._layer_numbers: Dict[str, int] = {}
        for number, name in enumerate(self._layers, start=1):
            if name in self._layer_numbers:
                raise RuleTableError(f"duplicate layer name: {name}")
            self._layer_numbers[name] = number

        self._rules: List[LayerRule] = []
        self._table: Dict[str, Dict[str, Classification]] = {}
        for rule in rules:
            self.add_rule(rule)

    def add_rule(self, rule: LayerRule) -> None:
        """Append a rule; it overrides any earlier rule for the same tag."""
        layer = 0
        if rule.layer is not None:
            layer = self.layer_number(rule.layer)
        self._rules.append(rule)
        self._table.setdefault(rule.category, {})[rule.value] = (
            Classification(flags=int(rule.flags), layer=layer)
        )

    def classify(self, key: str, value: str) -> Optional[Classification]:
        """Look up a tag.

        Args:
            key: Tag key (category)
            value: Tag value

        Returns:
            Classification, or None when no rule matches
        """
        values = self._table.get(key)
        if values is None:
            return None
        return values.get(value)

    def layer_number(self, name: str) -> int:
        """Get the number of a layer name.

        Raises:
            RuleTableError: If the layer is not declared
        """
        try:
            return self._layer_numbers[name]
        except KeyError:
            raise RuleTableError(f"unknown layer: {name}") from None

    def layer_name(self, number: int) -> Optional[str]:
        """Get the name of a layer number, None for 0 or out of range."""
        if 1 <= number <= len(self._layers):
            return self._layers[number - 1]
        return None

    @property
    def layers(self) -> List[str]:
        return list(self._layers)

    @property
    def rules(self) -> List[LayerRule]:
        return list(self._rules)

    @property
    def categories(self) -> List[str]:
        """Tag keys that have at least one rule."""
        return list(self._table)

    # === Serialization ===

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON rule table structure."""
        return {
            'layers': self.layers,
            'rules': [
                {
                    'category': rule.category,
                    'value': rule.value,
                    'layer': rule.layer,
                    'flags': [flag.name.lower() for flag in FeatureFlag
                              if rule.flags & flag],
                }
                for rule in self._rules
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AttributeClassifier':
        """Create from the JSON rule table structure.

        Args:
            data: Dict with 'layers' (list of names) and 'rules' (list of
                dicts with 'category', 'value' and optional 'layer' and
                'flags')

        Raises:
            RuleTableError: If the structure is malformed
        """
        if not isinstance(data, dict):
            raise RuleTableError("rule table must be a JSON object")
        layers = data.get('layers', [])
        entries = data.get('rules', [])
        if not isinstance(layers, list) or not isinstance(entries, list):
            raise RuleTableError("'layers' and 'rules' must be lists")
        if not all(isinstance(name, str) for name in layers):
            raise RuleTableError("layer names must be strings")

        rules = []
        for index, entry in enumerate(entries):
            try:
                category = entry['category']
                value = entry['value']
            except (KeyError, TypeError):
                raise RuleTableError(
                    f"rule {index}: 'category' and 'value' are required"
                ) from None
            layer = entry.get('layer')
            if layer is not None and not isinstance(layer, str):
                raise RuleTableError(f"rule {index}: 'layer' must be a string")
            rules.append(LayerRule(
                category=str(category),
                value=str(value),
                flags=_parse_flags(entry.get('flags', []), index),
                layer=layer,
            ))
        return cls(layers, rules)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'AttributeClassifier':
        """Load a rule table from a JSON file.

        Raises:
            RuleTableError: If the file is unreadable or malformed
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RuleTableError(f"cannot load rule table {path}: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def default(cls) -> 'AttributeClassifier':
        """Create the built-in rule table."""
        from osm_build.filters.default_rules import DEFAULT_LAYERS, DEFAULT_RULES
        return cls(DEFAULT_LAYERS, DEFAULT_RULES)


def _parse_flags(names: Any, index: int) -> int:
    if isinstance(names, str):
        names = [names]
    elif not isinstance(names, list):
        raise RuleTableError(f"rule {index}: 'flags' must be a name or a list")
    flags = 0
    for name in names:
        try:
            flags |= FeatureFlag[str(name).upper()]
        except KeyError:
            raise RuleTableError(f"rule {index}: unknown flag {name!r}") from None
    return flags
