"""CLI Argument Parsing"""

import argparse
import argcomplete

from gomoji import SCOPE_NAMES, __version__
from gomoji.catalog import CatalogError, load_bundled_catalog


def complete_codes(prefix: str, **kwargs) -> list[str]:
    """Tab-complete intent codes from the bundled catalog."""
    try:
        catalog = load_bundled_catalog()
    except (CatalogError, OSError):
        return []
    return [code for code in catalog.codes() if code.startswith(prefix)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gomoji',
        description='Compose an emoji-tagged commit message and commit it',
        epilog='Example: gomoji -e :bug: -s fix "corrige el login"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Message options
    parser.add_argument('subject', nargs='?', help='Commit subject (asked for when omitted)')
    parser.add_argument('-e', '--emoji', type=str, metavar='CODE',
                        help='Gitmoji code, e.g. :sparkles:').completer = complete_codes
    parser.add_argument('-s', '--scope', type=str, choices=SCOPE_NAMES, help='Commit scope')
    parser.add_argument('-m', '--message', type=str, action='append', default=[], metavar='LINE',
                        help='Body line (repeatable)')

    # Commit options
    parser.add_argument('-y', '--yes', action='store_true', help='Commit without asking for confirmation')
    parser.add_argument('--dry-run', action='store_true', help='Show the message only, do not commit')

    # Catalog options
    parser.add_argument('--catalog', type=str, metavar='FILE', help='Use this gitmoji catalog instead of the bundled one')
    parser.add_argument('--list', action='store_true', help='List gitmojis and scopes')
    parser.add_argument('--check', type=str, nargs='?', const='', default=None, metavar='FILE',
                        help='Validate a catalog document (default: the active catalog)')
    parser.add_argument('--locale', type=str, choices=['es', 'en'], help='Language for catalog diagnostics')

    # Output/setup
    parser.add_argument('--verbose', action='store_true', help='Show debug info (catalog source, entry count)')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
