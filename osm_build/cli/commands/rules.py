"""Rules command - show the effective layer rule table."""
import json
import sys

from osm_build.errors import RuleTableError
from osm_build.filters.layer_rules import AttributeClassifier


def setup_parser(subparsers):
    """Setup the rules subcommand parser."""
    parser = subparsers.add_parser(
        'rules',
        help='Show the layer rule table',
        description='Display the layers and tag rules used to classify ways'
    )

    parser.add_argument('--rules', metavar='FILE',
                        help='JSON rule table to show (default: built-in)')
    parser.add_argument('--json', action='store_true',
                        help='Output as JSON (usable as a --rules file)')

    parser.set_defaults(func=run)
    return parser


def run(args):
    """Execute the rules command."""
    try:
        classifier = (AttributeClassifier.load(args.rules) if args.rules
                      else AttributeClassifier.default())
    except RuleTableError as e:
        print(f"osmbuild: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(classifier.to_dict(), indent=2))
        return 0

    print("Layers:")
    for number, name in enumerate(classifier.layers, start=1):
        print(f"  {number:>3}  {name}")

    print("\nRules:")
    for entry in classifier.to_dict()['rules']:
        flags = ','.join(entry['flags']) or '-'
        layer = entry['layer'] or '-'
        print(f"  {entry['category']}={entry['value']:<20} "
              f"layer={layer:<10} flags={flags}")
    return 0
