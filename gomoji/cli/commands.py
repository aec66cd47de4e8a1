"""CLI Commands"""

import os
import sys

from gomoji import SCOPES
from gomoji.catalog import BUNDLED_CATALOG_PATH, CatalogError, load_catalog_file
from gomoji.catalog.models import Catalog
from gomoji.config import load_config, get_config_path
from gomoji.output import bold, dim, info, warning, print_success, print_error


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gomojirc found)")

    env_locale = os.environ.get('GOMOJI_LOCALE')
    env_catalog = os.environ.get('GOMOJI_CATALOG')
    if env_locale or env_catalog:
        print(f"  {dim('Environment overrides:')}")
        if env_locale:
            print(f"    GOMOJI_LOCALE={env_locale}")
        if env_catalog:
            print(f"    GOMOJI_CATALOG={env_catalog}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    locale:             {info(config.locale)}")
    print(f"    catalog_path:       {info(config.catalog_path or 'bundled')}")
    print(f"    min_subject_length: {info(str(config.min_subject_length))}")
    print(f"    max_subject_length: {info(str(config.max_subject_length))}")
    print(f"    ruler_width:        {info(str(config.ruler_width))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gomojirc (in current directory)")
    print(f"    Global: ~/.gomojirc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        line = 'eval "$(register-python-argcomplete gomoji)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gomoji | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete gomoji)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gomoji | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags and gitmoji codes.')}")
    return 0


def list_catalog(catalog: Catalog) -> int:
    """Print every gitmoji and scope."""
    print(f"\n{bold('Gitmojis')}\n")
    for entry in catalog:
        bump = entry.semver.bump
        suffix = f" {dim(f'({bump})')}" if bump else ""
        print(f"  {entry.emoji}  {info(entry.code)} {entry.desc_es}{suffix}")

    print(f"\n{bold('Scopes')}\n")
    for name, desc in SCOPES.items():
        print(f"  {info(name)} - {desc}")
    print()
    return 0


def check_catalog(path: str | None, locale: str) -> int:
    """Validate a catalog document and report duplicate codes."""
    target = path or str(BUNDLED_CATALOG_PATH)
    try:
        catalog = load_catalog_file(target, locale)
    except CatalogError as e:
        location = e.diagnostic.path or (f"offset {e.diagnostic.offset}" if e.diagnostic.offset is not None else "")
        print_error(f"{target}: {e}", *([location] if location else []))
        return 1
    except OSError as e:
        print_error(f"Could not read {target}: {e}")
        return 1

    duplicates = catalog.duplicate_codes()
    if duplicates:
        print(f"{warning('!')} Duplicate codes: {', '.join(duplicates)}")
        return 1

    if catalog.is_empty:
        print(f"{warning('!')} {target} contains no gitmojis")
        return 1

    print_success(f"{target}: {len(catalog)} gitmojis")
    return 0
