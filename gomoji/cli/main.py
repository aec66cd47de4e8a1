"""CLI Main Entry Point"""

import os
import sys

from gomoji import SCOPE_NAMES
from gomoji.catalog import Catalog, CatalogError, load_bundled_catalog, load_catalog_file
from gomoji.config import Config, load_config
from gomoji.git import GitRunner, GitError
from gomoji.message import CommitMessage, MessageError, compose_message, draw_ruler, get_intents, \
    scope_labels, validate_subject
from gomoji.output import Colors, bold, dim, error, success, print_error, print_section, colorize_header

from gomoji.cli.args import parse_args
from gomoji.cli.commands import check_catalog, display_config, list_catalog, run_install_completion
from gomoji.cli.utils import confirm, read_lines, select_option


def _report(err: Exception) -> None:
    print_error("Ha ocurrido un error:", f"  {err}", "Por favor inténtalo de nuevo")


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def _resolve_settings(args, config: Config):
    """Resolve locale and catalog path from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    locale = args.locale or os.environ.get('GOMOJI_LOCALE') or config.locale
    catalog_path = args.catalog or os.environ.get('GOMOJI_CATALOG') or config.catalog_path
    return locale, catalog_path


def _load_catalog(catalog_path: str | None, locale: str, verbose: bool) -> Catalog | None:
    """Load the active catalog once. Prints the diagnostic and returns None on failure."""
    try:
        if catalog_path:
            catalog = load_catalog_file(catalog_path, locale)
        else:
            catalog = load_bundled_catalog(locale)
    except (CatalogError, OSError) as e:
        _report(e)
        return None

    if verbose:
        print(dim(f"  Catalog: {catalog_path or 'bundled'} ({len(catalog)} gitmojis)"))
    if catalog.is_empty:
        _report(MessageError("el catálogo de gitmojis está vacío"))
        return None
    return catalog


def _choose_intent(args, catalog: Catalog, interactive: bool) -> str | None:
    if args.emoji:
        return args.emoji
    if not interactive:
        raise MessageError("falta el código de emoji (--emoji)")
    intents = get_intents(catalog)
    idx = select_option("Emoji", intents.labels)
    return None if idx is None else intents.codes[idx]


def _choose_scope(args, interactive: bool) -> str | None:
    if args.scope:
        return args.scope
    if not interactive:
        raise MessageError("falta el ámbito (--scope)")
    idx = select_option("Scope", scope_labels(), page_size=8)
    return None if idx is None else SCOPE_NAMES[idx]


def _ask_subject(args, config: Config, interactive: bool) -> str | None:
    if args.subject is not None:
        return args.subject
    if not interactive:
        raise MessageError("falta el asunto")

    print(f"\n{bold('Asunto:')}")
    print(draw_ruler(config.ruler_width))
    while True:
        try:
            subject = input().strip()
        except (KeyboardInterrupt, EOFError):
            return None
        try:
            return validate_subject(subject, config.min_subject_length, config.max_subject_length)
        except MessageError as e:
            print(error(str(e)))


def _ask_body(args, interactive: bool) -> list[str]:
    if args.message or not interactive:
        return args.message
    if confirm("¿Desea incluir un mensaje más detallado?"):
        return read_lines("Mensaje")
    return []


def _display_message(message: CommitMessage) -> None:
    print()
    lines = colorize_header(str(message)).split('\n')
    print_section("Previsualización", lines, color=Colors.GREEN)


def _commit(message: CommitMessage) -> int:
    try:
        result = GitRunner().commit(message.git_args())
    except GitError as e:
        print_error(str(e))
        return 1

    if not result.ok:
        print(error(result.stderr.strip()))
        return 1
    print(success(result.stdout.rstrip()))
    print("Commit creado")
    return 0


def _compose_flow(args, config: Config, catalog: Catalog) -> int:
    interactive = sys.stdin.isatty()

    try:
        code = _choose_intent(args, catalog, interactive)
        if code is None:
            print(dim("Cancelled."))
            return 0
        scope = _choose_scope(args, interactive)
        if scope is None:
            print(dim("Cancelled."))
            return 0
        subject = _ask_subject(args, config, interactive)
        if subject is None:
            print(dim("Cancelled."))
            return 0
        body = _ask_body(args, interactive)
        message = compose_message(catalog, code, scope, subject, body,
                                  config.min_subject_length, config.max_subject_length)
    except MessageError as e:
        _report(e)
        return 1

    _display_message(message)

    if args.dry_run:
        return 0
    if not args.yes and not (interactive and confirm("¿Crear commit?")):
        print(dim("Commit no creado."))
        return 0
    return _commit(message)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    locale, catalog_path = _resolve_settings(args, config)

    if args.check is not None:
        return check_catalog(args.check or catalog_path, locale)

    catalog = _load_catalog(catalog_path, locale, args.verbose)
    if catalog is None:
        return 1

    if args.list:
        return list_catalog(catalog)

    return _compose_flow(args, config, catalog)
